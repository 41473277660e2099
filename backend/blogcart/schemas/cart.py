"""Cart Schemas — line items in a user's cart.

Invariants:
    - quantity is a positive integer
    - No order aggregate exists; a cart is just the user's CartItem rows
"""

from pydantic import BaseModel, Field

from blogcart.schemas.catalog import ProductResponse
from blogcart.schemas.common import OrmResponse, wire_field


class CartItemCreate(BaseModel):
    product_id: int = wire_field("productId", "product_id")
    quantity: int = Field(gt=0)


class CartItemResponse(OrmResponse):
    id: int
    user_id: int = wire_field("userId", "user_id")
    product_id: int = wire_field("productId", "product_id")
    quantity: int


class CartItemWithProductResponse(CartItemResponse):
    product: ProductResponse
