"""User & Profile Schemas — request/response models for users and profiles.

Invariants:
    - email: 3-320 chars, stripped
    - One profile per user (enforced by the store, not here)
"""

from pydantic import BaseModel, Field, field_validator

from blogcart.schemas.common import OrmResponse, wire_field


class UserCreate(BaseModel):
    """Bare user creation (POST /users)."""
    email: str = Field(min_length=3, max_length=320)

    @field_validator("email")
    @classmethod
    def strip_email(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("email cannot be empty or whitespace")
        return v


class ProfileCreate(BaseModel):
    """Profile fields for an existing user."""
    name: str = Field(min_length=1, max_length=200)
    address: str = Field(max_length=500)
    phone: str = Field(max_length=50)


class UserWithProfileCreate(UserCreate, ProfileCreate):
    """User and profile created together in one transaction (POST /user)."""


class ProfileResponse(OrmResponse):
    id: int
    name: str
    address: str
    phone: str
    user_id: int = wire_field("userId", "user_id")


class UserResponse(OrmResponse):
    id: int
    email: str


class UserWithProfileResponse(UserResponse):
    profile: ProfileResponse | None = None


class UserProfileCreatedResponse(BaseModel):
    user: UserResponse
    profile: ProfileResponse
