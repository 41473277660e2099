"""Article Routes — /articles collection, /article/{id} item, bulk by id list.

Invariants:
    - Path ids are parsed before the handler runs; a bad id -> 400, no DB call
    - /articles/{ids} takes a comma-joined list ("1,2,99")
    - Bodies are taken as raw JSON so the validation gate sees the whole batch

Design Decisions:
    - Fixed paths (/articles/published, /count, /paginated) are GET-only and
      /articles/{ids} is PUT/DELETE-only, so they never shadow each other
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from blogcart.core.domain_types import MAX_ID
from blogcart.core.parse_ids import parse_id, parse_id_list
from blogcart.infrastructure.database import get_db
from blogcart.schemas.article import (
    ArticleCountResponse, ArticleResponse, ArticleWithAuthorResponse,
)
from blogcart.schemas.common import CountResponse
from blogcart.services.handle_articles import ArticleHandlers

logger = logging.getLogger(__name__)
router = APIRouter(tags=["articles"])


@router.post(
    "/articles", response_model=CountResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_articles(
    body: Any = Body(...), db: AsyncSession = Depends(get_db),
):
    """Create one article or a list of articles."""
    return await ArticleHandlers(db).create_articles(body)


@router.get("/articles", response_model=list[ArticleWithAuthorResponse])
async def list_articles(db: AsyncSession = Depends(get_db)):
    """All articles with author and author profile."""
    return await ArticleHandlers(db).list_articles()


@router.get("/articles/published", response_model=list[ArticleResponse])
async def list_published_articles(db: AsyncSession = Depends(get_db)):
    return await ArticleHandlers(db).list_published()


@router.get("/articles/count", response_model=ArticleCountResponse)
async def count_articles(db: AsyncSession = Depends(get_db)):
    return await ArticleHandlers(db).count_articles()


@router.get("/articles/paginated", response_model=list[ArticleResponse])
async def paginate_articles(
    skip: int = Query(0, ge=0, le=MAX_ID),
    take: int | None = Query(None, ge=1, le=MAX_ID),
    db: AsyncSession = Depends(get_db),
):
    return await ArticleHandlers(db).paginate(skip, take)


@router.put("/articles/{ids}", response_model=CountResponse)
async def update_articles(
    ids: str, body: Any = Body(...), db: AsyncSession = Depends(get_db),
):
    """Apply the same partial update to every listed article that exists."""
    article_ids = parse_id_list(ids)
    return await ArticleHandlers(db).update_articles(article_ids, body)


@router.delete("/articles/{ids}", response_model=CountResponse)
async def delete_articles(ids: str, db: AsyncSession = Depends(get_db)):
    article_ids = parse_id_list(ids)
    return await ArticleHandlers(db).delete_articles(article_ids)


@router.get("/article/{article_id}", response_model=ArticleResponse)
async def get_article(article_id: str, db: AsyncSession = Depends(get_db)):
    return await ArticleHandlers(db).get_article(parse_id(article_id))


@router.put("/article/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: str, body: Any = Body(...), db: AsyncSession = Depends(get_db),
):
    return await ArticleHandlers(db).update_article(parse_id(article_id), body)


@router.delete("/article/{article_id}", response_model=ArticleResponse)
async def delete_article(article_id: str, db: AsyncSession = Depends(get_db)):
    return await ArticleHandlers(db).delete_article(parse_id(article_id))
