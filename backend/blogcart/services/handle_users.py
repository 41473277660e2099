"""User Handlers — users, profiles and the user+profile creation transaction.

Invariants:
    - create_user_with_profile is all-or-nothing: a duplicate email leaves no
      User and no Profile behind
    - Duplicate email -> 400 "User with this email already exists", whether
      caught by the pre-check or by the unique constraint
    - One profile per user: a second profile -> 400
    - Missing parent user on nested routes -> 404

Design Decisions:
    - Email pre-check is a fast path only. Two concurrent requests can both pass
      it; the users.email unique constraint decides, and the loser gets the same
      400 through the gateway's ConstraintViolationError (ADR: store is authoritative)
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from blogcart.core.domain_types import UserId
from blogcart.core.errors import ConstraintViolationError
from blogcart.infrastructure.database import transaction, translate_db_errors
from blogcart.infrastructure.gateway import EntityGateway
from blogcart.models.profile import Profile
from blogcart.models.user import User
from blogcart.schemas.common import CountResponse
from blogcart.schemas.user import (
    ProfileCreate, ProfileResponse, UserCreate, UserProfileCreatedResponse,
    UserResponse, UserWithProfileCreate, UserWithProfileResponse,
)

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "User with this email already exists"
DUPLICATE_PROFILE_MESSAGE = "Profile for this user already exists"


class UserHandlers:
    """User and profile CRUD."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.users = EntityGateway(db, User)
        self.profiles = EntityGateway(db, Profile)

    async def create_user_with_profile(
        self, body: UserWithProfileCreate,
    ) -> UserProfileCreatedResponse:
        """Interactive transaction: check email, create user, create profile."""
        with translate_db_errors("create user"):
            async with transaction(self.db):
                existing = await self.users.find_first({"email": body.email})
                if existing is not None:
                    raise ConstraintViolationError("User", DUPLICATE_EMAIL_MESSAGE)
                user = await self.users.create_one(
                    {"email": body.email},
                    conflict_message=DUPLICATE_EMAIL_MESSAGE,
                )
                profile = await self.profiles.create_one({
                    "name": body.name,
                    "address": body.address,
                    "phone": body.phone,
                    "user_id": user.id,
                })
        logger.info(f"Created user {user.id} with profile {profile.id}")
        return UserProfileCreatedResponse(
            user=UserResponse.model_validate(user),
            profile=ProfileResponse.model_validate(profile),
        )

    async def create_users(self, body: UserCreate | list[UserCreate]) -> CountResponse:
        items = body if isinstance(body, list) else [body]
        with translate_db_errors("create users"):
            async with transaction(self.db):
                result = await self.users.create_many(
                    [{"email": item.email} for item in items],
                    conflict_message=DUPLICATE_EMAIL_MESSAGE,
                )
        return CountResponse(**result)

    async def list_users(self) -> list[UserResponse]:
        with translate_db_errors("fetch users"):
            rows = await self.users.find_many()
        return [UserResponse.model_validate(u) for u in rows]

    async def get_user(self, user_id: UserId) -> UserWithProfileResponse:
        with translate_db_errors("fetch user"):
            user = await self.users.find_unique_or_throw(user_id, include=("profile",))
        return UserWithProfileResponse.model_validate(user)

    async def delete_user(self, user_id: UserId) -> UserResponse:
        """Delete a user; profile and cart go with it, articles become anonymous."""
        with translate_db_errors("delete user"):
            async with transaction(self.db):
                user = await self.users.delete_one(user_id)
        logger.info(f"Deleted user {user_id}")
        return UserResponse.model_validate(user)

    async def create_profile(self, user_id: UserId, body: ProfileCreate) -> ProfileResponse:
        with translate_db_errors("create profile"):
            async with transaction(self.db):
                await self.users.find_unique_or_throw(user_id)
                profile = await self.profiles.create_one(
                    {**body.model_dump(), "user_id": user_id},
                    conflict_message=DUPLICATE_PROFILE_MESSAGE,
                )
        return ProfileResponse.model_validate(profile)

    async def list_profiles(self, user_id: UserId) -> list[ProfileResponse]:
        with translate_db_errors("fetch profiles"):
            rows = await self.profiles.find_many({"user_id": user_id})
        return [ProfileResponse.model_validate(p) for p in rows]
