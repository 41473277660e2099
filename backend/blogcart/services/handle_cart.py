"""Cart Handlers — line items in a user's cart.

Invariants:
    - Both the user and the product must exist before an item is added (404 otherwise)
    - Listing a missing user's cart -> 404; an empty cart -> []
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from blogcart.core.domain_types import UserId
from blogcart.infrastructure.database import transaction, translate_db_errors
from blogcart.infrastructure.gateway import EntityGateway
from blogcart.models.cart_item import CartItem
from blogcart.models.product import Product
from blogcart.models.user import User
from blogcart.schemas.cart import (
    CartItemCreate, CartItemResponse, CartItemWithProductResponse,
)

logger = logging.getLogger(__name__)


class CartHandlers:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.items = EntityGateway(db, CartItem)
        self.users = EntityGateway(db, User)
        self.products = EntityGateway(db, Product)

    async def add_item(self, user_id: UserId, body: CartItemCreate) -> CartItemResponse:
        with translate_db_errors("add item to cart"):
            async with transaction(self.db):
                await self.users.find_unique_or_throw(user_id)
                await self.products.find_unique_or_throw(body.product_id)
                item = await self.items.create_one({
                    "user_id": user_id,
                    "product_id": body.product_id,
                    "quantity": body.quantity,
                })
        return CartItemResponse.model_validate(item)

    async def list_items(self, user_id: UserId) -> list[CartItemWithProductResponse]:
        with translate_db_errors("fetch cart"):
            await self.users.find_unique_or_throw(user_id)
            rows = await self.items.find_many({"user_id": user_id}, include=("product",))
        return [CartItemWithProductResponse.model_validate(i) for i in rows]
