"""Tag ORM — label shared by many products."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blogcart.db.base import Base
from blogcart.models.product import product_tags


class Tag(Base):
    __tablename__ = "tags"
    __resource__ = "Tag"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    products: Mapped[list["Product"]] = relationship(
        "Product", secondary=product_tags, back_populates="tags",
        passive_deletes=True, lazy="raise",
    )
