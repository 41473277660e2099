"""Profile ORM — contact details, exactly one per user.

Invariants:
    - user_id is unique (1:1 with User) and non-nullable
    - Removed together with its user (ON DELETE CASCADE)
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blogcart.db.base import Base


class Profile(Base):
    __tablename__ = "profiles"
    __resource__ = "Profile"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )

    user: Mapped["User"] = relationship(
        "User", back_populates="profile", lazy="raise",
    )
