"""CartItem ORM — one line in a user's cart.

Invariants:
    - quantity > 0 (CHECK constraint)
    - Always belongs to a User and a Product; removed with either
    - No order aggregate: the cart is the set of a user's CartItem rows
"""

from sqlalchemy import CheckConstraint, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blogcart.db.base import Base


class CartItem(Base):
    __tablename__ = "cart_items"
    __resource__ = "Cart item"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_cart_items_quantity_positive"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    user: Mapped["User"] = relationship(
        "User", back_populates="cart_items", lazy="raise",
    )
    product: Mapped["Product"] = relationship(
        "Product", back_populates="cart_items", lazy="raise",
    )
