"""Product ORM — priced catalog entry, tagged many-to-many.

Invariants:
    - price >= 0
    - product_tags rows vanish with either side (ON DELETE CASCADE)
"""

from sqlalchemy import Column, Float, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blogcart.db.base import Base

product_tags = Table(
    "product_tags",
    Base.metadata,
    Column(
        "product_id", Integer,
        ForeignKey("products.id", ondelete="CASCADE"), primary_key=True,
    ),
    Column(
        "tag_id", Integer,
        ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True,
    ),
)


class Product(Base):
    __tablename__ = "products"
    __resource__ = "Product"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)

    tags: Mapped[list["Tag"]] = relationship(
        "Tag", secondary=product_tags, back_populates="products",
        passive_deletes=True, lazy="raise",
    )
    cart_items: Mapped[list["CartItem"]] = relationship(
        "CartItem", back_populates="product",
        cascade="all, delete-orphan", passive_deletes=True, lazy="raise",
    )
