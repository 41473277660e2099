"""User Routes — users, profiles and user-scoped articles.

Invariants:
    - Path ids are parsed before the handler runs; a bad id -> 400, no DB call
    - POST /user creates user and profile atomically
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from blogcart.core.parse_ids import parse_id
from blogcart.infrastructure.database import get_db
from blogcart.schemas.article import ArticleResponse
from blogcart.schemas.common import CountResponse
from blogcart.schemas.user import (
    ProfileCreate, ProfileResponse, UserCreate, UserProfileCreatedResponse,
    UserResponse, UserWithProfileCreate, UserWithProfileResponse,
)
from blogcart.services.handle_articles import ArticleHandlers
from blogcart.services.handle_users import UserHandlers

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])


@router.post(
    "/user", response_model=UserProfileCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user_with_profile(
    body: UserWithProfileCreate, db: AsyncSession = Depends(get_db),
):
    """Create a user and its profile in one transaction."""
    return await UserHandlers(db).create_user_with_profile(body)


@router.post(
    "/users", response_model=CountResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_users(
    body: UserCreate | list[UserCreate], db: AsyncSession = Depends(get_db),
):
    return await UserHandlers(db).create_users(body)


@router.get("/users", response_model=list[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    return await UserHandlers(db).list_users()


@router.get("/user/{user_id}", response_model=UserWithProfileResponse)
async def get_user(user_id: str, db: AsyncSession = Depends(get_db)):
    return await UserHandlers(db).get_user(parse_id(user_id))


@router.delete("/user/{user_id}", response_model=UserResponse)
async def delete_user(user_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a user. Profile and cart are removed; articles are kept anonymous."""
    return await UserHandlers(db).delete_user(parse_id(user_id))


@router.post(
    "/user/{user_id}/profile", response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_profile(
    user_id: str, body: ProfileCreate, db: AsyncSession = Depends(get_db),
):
    return await UserHandlers(db).create_profile(parse_id(user_id), body)


@router.get("/user/{user_id}/profiles", response_model=list[ProfileResponse])
async def list_profiles(user_id: str, db: AsyncSession = Depends(get_db)):
    return await UserHandlers(db).list_profiles(parse_id(user_id))


@router.post(
    "/user/{user_id}/articles", response_model=CountResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user_articles(
    user_id: str, body: Any = Body(...), db: AsyncSession = Depends(get_db),
):
    """Create one or more articles authored by the user."""
    return await ArticleHandlers(db).create_for_user(parse_id(user_id), body)


@router.get("/user/{user_id}/articles", response_model=list[ArticleResponse])
async def list_user_articles(user_id: str, db: AsyncSession = Depends(get_db)):
    return await ArticleHandlers(db).list_for_user(parse_id(user_id))
