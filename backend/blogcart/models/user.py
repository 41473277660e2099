"""User ORM — account identity; owns profile, articles and cart items.

Invariants:
    - email is unique at the database level (authoritative duplicate guard)
    - Deleting a user deletes its profile and cart items (ORM + FK cascade)
    - Deleting a user keeps its articles, which become anonymous (user_id NULL)

Design Decisions:
    - lazy="raise" on every relationship: relations are loaded only through an
      explicit include, never implicitly inside async code
    - passive_deletes=True: child rows are removed or orphaned by the FK
      ON DELETE rules, so deleting a user never loads its collections
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blogcart.db.base import Base


class User(Base):
    """User aggregate root."""
    __tablename__ = "users"
    __resource__ = "User"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)

    profile: Mapped["Profile | None"] = relationship(
        "Profile", back_populates="user", uselist=False,
        cascade="all, delete-orphan", passive_deletes=True, lazy="raise",
    )
    articles: Mapped[list["Article"]] = relationship(
        "Article", back_populates="user", passive_deletes=True, lazy="raise",
    )
    cart_items: Mapped[list["CartItem"]] = relationship(
        "CartItem", back_populates="user",
        cascade="all, delete-orphan", passive_deletes=True, lazy="raise",
    )
