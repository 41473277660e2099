"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Entity ids are integers generated by the store
    - ArticleState values are the only states an article row may hold
    - Include paths never exceed MAX_INCLUDE_DEPTH relation hops

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
ArticleId = NewType("ArticleId", int)


# ─── Enums ───────────────────────────────────────────────────────

class ArticleState(str, Enum):
    """Article lifecycle states — maps to DB `state` column."""
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"


# ─── Limits ──────────────────────────────────────────────────────

ARTICLE_TITLE_MAX_LENGTH = 100
ARTICLE_CONTENT_MAX_LENGTH = 500

# Integer primary keys are signed 32-bit on PostgreSQL
MAX_ID = 2**31 - 1

# Article -> User -> Profile is the deepest expansion any route needs
MAX_INCLUDE_DEPTH = 2
