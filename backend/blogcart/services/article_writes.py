"""Validated Article Writes — the only path from a client payload to an article row.

Invariants:
    - Every article mutation (create one, create many, update one, update many)
      validates before the gateway is called; a failure persists nothing
    - owner_id, when given, overrides any userId in the payload (nested routes)

Design Decisions:
    - Wrapper around EntityGateway[Article] instead of per-route checks: no
      handler can reach the article gateway for writes without validation
"""

from collections.abc import Sequence
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from blogcart.core.domain_types import ArticleId, UserId
from blogcart.core.validate_article import validate_article, validate_articles
from blogcart.infrastructure.gateway import EntityGateway
from blogcart.models.article import Article


class ValidatedArticleWriter:
    """Article writes behind the validation gate."""

    def __init__(self, db: AsyncSession):
        self._articles = EntityGateway(db, Article)

    async def create_one(self, payload: Any, owner_id: UserId | None = None) -> Article:
        fields = validate_article(payload)
        if owner_id is not None:
            fields["user_id"] = owner_id
        return await self._articles.create_one(fields)

    async def create_many(
        self, payloads: Sequence[Any], owner_id: UserId | None = None,
    ) -> dict[str, int]:
        items = validate_articles(list(payloads))
        if owner_id is not None:
            for fields in items:
                fields["user_id"] = owner_id
        return await self._articles.create_many(items)

    async def update_one(self, article_id: ArticleId, payload: Any) -> Article:
        fields = validate_article(payload, partial=True)
        return await self._articles.update_one(article_id, fields)

    async def update_many(
        self, article_ids: Sequence[ArticleId], payload: Any,
    ) -> dict[str, int]:
        fields = validate_article(payload, partial=True)
        return await self._articles.update_many(article_ids, fields)
