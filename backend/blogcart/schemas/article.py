"""Article Schemas — write contracts and response shapes for articles.

Invariants:
    - ArticleCreate: title <= 100 chars, content <= 500 chars, state in ArticleState
    - userId, when present, is a strict integer (no "5" -> 5 coercion)
    - ArticleUpdate: every field optional, but title/content/state never null
    - Unknown keys are rejected (id, createdAt, typos)

Design Decisions:
    - Both write schemas are consumed only through core.validate_article — routes
      take raw JSON so a batch can be validated as a whole before persistence
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from blogcart.core.domain_types import (
    ArticleState, ARTICLE_TITLE_MAX_LENGTH, ARTICLE_CONTENT_MAX_LENGTH,
)
from blogcart.schemas.common import OrmResponse, wire_field
from blogcart.schemas.user import UserWithProfileResponse


class ArticleCreate(BaseModel):
    """Article creation payload."""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(max_length=ARTICLE_TITLE_MAX_LENGTH)
    content: str = Field(max_length=ARTICLE_CONTENT_MAX_LENGTH)
    state: ArticleState = ArticleState.DRAFT
    user_id: StrictInt | None = wire_field("userId", "user_id", None)


class ArticleUpdate(BaseModel):
    """Partial article payload — only supplied keys are merged."""
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(None, max_length=ARTICLE_TITLE_MAX_LENGTH)
    content: str | None = Field(None, max_length=ARTICLE_CONTENT_MAX_LENGTH)
    state: ArticleState | None = None
    user_id: StrictInt | None = wire_field("userId", "user_id", None)

    @field_validator("title", "content", "state")
    @classmethod
    def reject_null(cls, v):
        # Runs only for keys the client sent; omitted keys keep the default
        if v is None:
            raise ValueError("cannot be null")
        return v


class ArticleResponse(OrmResponse):
    """Article as stored."""
    id: int
    title: str
    content: str
    state: ArticleState
    user_id: int | None = wire_field("userId", "user_id", None)


class ArticleWithAuthorResponse(ArticleResponse):
    """Article with its author and the author's profile expanded."""
    user: UserWithProfileResponse | None = None


class ArticleCountResponse(BaseModel):
    """All articles plus the published count, read in one transaction."""
    article_count: list[ArticleResponse] = wire_field("articleCount", "article_count")
    published_article_count: int = wire_field(
        "publishedArticleCount", "published_article_count",
    )
