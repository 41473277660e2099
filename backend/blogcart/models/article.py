"""Article ORM — authored or anonymous text with a publication state.

Invariants:
    - title <= 100 chars, content <= 500 chars (column sizes mirror validation)
    - state is one of ArticleState (CHECK constraint backs the validation gate)
    - user_id is optional; set to NULL when the author is deleted
    - Deletion is physical (no soft-delete flag)

Design Decisions:
    - state and user_id indexed: both are filter keys for bulk reads
"""

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blogcart.core.domain_types import (
    ArticleState, ARTICLE_TITLE_MAX_LENGTH, ARTICLE_CONTENT_MAX_LENGTH,
)
from blogcart.db.base import Base

_STATES = ", ".join(f"'{s.value}'" for s in ArticleState)


class Article(Base):
    __tablename__ = "articles"
    __resource__ = "Article"
    __table_args__ = (
        CheckConstraint(f"state IN ({_STATES})", name="ck_articles_state"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(
        String(ARTICLE_TITLE_MAX_LENGTH), nullable=False,
    )
    content: Mapped[str] = mapped_column(
        String(ARTICLE_CONTENT_MAX_LENGTH), nullable=False,
    )
    state: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ArticleState.DRAFT.value, index=True,
    )
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True, index=True,
    )

    user: Mapped["User | None"] = relationship(
        "User", back_populates="articles", lazy="raise",
    )
