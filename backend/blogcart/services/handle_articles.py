"""Article Handlers — create, read, update, delete and count articles.

Invariants:
    - Writes go through ValidatedArticleWriter; reads use the gateway directly
    - A single bad item in a batch create rejects the whole request
    - GET collections return [] when empty, never 404
    - Nested user routes check the parent user first: missing user -> 404
    - count_articles reads the list and the published count in one transaction
    - create_for_user surfaces the raw database message on persistence faults

Design Decisions:
    - Handlers return response models; routes only pick the status code
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from blogcart.config import get_settings
from blogcart.core.domain_types import ArticleId, ArticleState, UserId
from blogcart.infrastructure.database import run_batch, transaction, translate_db_errors
from blogcart.infrastructure.gateway import EntityGateway
from blogcart.models.article import Article
from blogcart.models.user import User
from blogcart.schemas.article import (
    ArticleCountResponse, ArticleResponse, ArticleWithAuthorResponse,
)
from blogcart.schemas.common import CountResponse
from blogcart.services.article_writes import ValidatedArticleWriter

logger = logging.getLogger(__name__)

# Article -> author -> author's profile
AUTHOR_INCLUDE = ("user.profile",)


def _as_list(body: Any) -> list[Any]:
    return body if isinstance(body, list) else [body]


class ArticleHandlers:
    """Article CRUD plus the user-scoped article routes."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.articles = EntityGateway(db, Article)
        self.users = EntityGateway(db, User)
        self.writer = ValidatedArticleWriter(db)

    async def create_articles(self, body: Any) -> CountResponse:
        """Create one article or a batch; validated as a whole."""
        payloads = _as_list(body)
        with translate_db_errors("create article"):
            async with transaction(self.db):
                result = await self.writer.create_many(payloads)
        logger.info(f"Created {result['count']} article(s)", extra={"count": result["count"]})
        return CountResponse(**result)

    async def list_articles(self) -> list[ArticleWithAuthorResponse]:
        with translate_db_errors("fetch articles"):
            rows = await self.articles.find_many(include=AUTHOR_INCLUDE)
        return [ArticleWithAuthorResponse.model_validate(a) for a in rows]

    async def get_article(self, article_id: ArticleId) -> ArticleResponse:
        with translate_db_errors("fetch article"):
            article = await self.articles.find_unique_or_throw(article_id)
        return ArticleResponse.model_validate(article)

    async def list_published(self) -> list[ArticleResponse]:
        with translate_db_errors("fetch published articles"):
            rows = await self.articles.find_many(
                {"state": ArticleState.PUBLISHED.value},
            )
        return [ArticleResponse.model_validate(a) for a in rows]

    async def paginate(self, skip: int, take: int | None) -> list[ArticleResponse]:
        """One page ordered by id. take defaults to, and is capped by, settings."""
        settings = get_settings()
        page_size = min(take or settings.default_page_size, settings.max_page_size)
        with translate_db_errors("fetch paginated articles"):
            rows = await self.articles.find_many(skip=skip, take=page_size)
        return [ArticleResponse.model_validate(a) for a in rows]

    async def update_article(self, article_id: ArticleId, body: Any) -> ArticleResponse:
        with translate_db_errors("update article"):
            async with transaction(self.db):
                article = await self.writer.update_one(article_id, body)
        return ArticleResponse.model_validate(article)

    async def update_articles(self, article_ids: list[ArticleId], body: Any) -> CountResponse:
        with translate_db_errors("update articles"):
            async with transaction(self.db):
                result = await self.writer.update_many(article_ids, body)
        logger.info(
            f"Updated {result['count']} of {len(article_ids)} requested article(s)",
            extra={"count": result["count"]},
        )
        return CountResponse(**result)

    async def delete_article(self, article_id: ArticleId) -> ArticleResponse:
        with translate_db_errors("delete article"):
            async with transaction(self.db):
                article = await self.articles.delete_one(article_id)
        return ArticleResponse.model_validate(article)

    async def delete_articles(self, article_ids: list[ArticleId]) -> CountResponse:
        with translate_db_errors("delete articles"):
            async with transaction(self.db):
                result = await self.articles.delete_many(article_ids)
        logger.info(
            f"Deleted {result['count']} of {len(article_ids)} requested article(s)",
            extra={"count": result["count"]},
        )
        return CountResponse(**result)

    async def count_articles(self) -> ArticleCountResponse:
        """All articles and the published count from one transaction."""
        with translate_db_errors("count articles"):
            rows, published = await run_batch(
                self.db,
                lambda: self.articles.find_many(),
                lambda: self.articles.count({"state": ArticleState.PUBLISHED.value}),
            )
        return ArticleCountResponse(
            article_count=[ArticleResponse.model_validate(a) for a in rows],
            published_article_count=published,
        )

    # ─── User-scoped ────────────────────────────────────────────

    async def create_for_user(self, user_id: UserId, body: Any) -> CountResponse:
        """Create articles authored by an existing user."""
        payloads = _as_list(body)
        with translate_db_errors("create articles for user", expose_detail=True):
            async with transaction(self.db):
                await self.users.find_unique_or_throw(user_id)
                result = await self.writer.create_many(payloads, owner_id=user_id)
        return CountResponse(**result)

    async def list_for_user(self, user_id: UserId) -> list[ArticleResponse]:
        with translate_db_errors("fetch articles for user"):
            await self.users.find_unique_or_throw(user_id)
            rows = await self.articles.find_many({"user_id": user_id})
        return [ArticleResponse.model_validate(a) for a in rows]
