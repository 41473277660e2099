"""Domain Types — verifies enum values and limits.

Tests:
    - ArticleState has exactly three states and serializes to its name
    - NewType wrappers are transparent at runtime
"""

from blogcart.core.domain_types import (
    ArticleId, ArticleState, UserId, MAX_INCLUDE_DEPTH,
    ARTICLE_TITLE_MAX_LENGTH, ARTICLE_CONTENT_MAX_LENGTH, MAX_ID,
)


def test_article_state_has_three_states():
    assert {s.value for s in ArticleState} == {"DRAFT", "PUBLISHED", "ARCHIVED"}


def test_article_state_is_str_enum():
    assert ArticleState.PUBLISHED == "PUBLISHED"


def test_identity_types_wrap_int():
    assert UserId(3) == 3
    assert ArticleId(4) == 4


def test_limits():
    assert ARTICLE_TITLE_MAX_LENGTH == 100
    assert ARTICLE_CONTENT_MAX_LENGTH == 500
    assert MAX_INCLUDE_DEPTH == 2
    assert MAX_ID == 2**31 - 1
