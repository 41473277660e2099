"""Cart Routes — /users/{user_id}/cart."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from blogcart.core.parse_ids import parse_id
from blogcart.infrastructure.database import get_db
from blogcart.schemas.cart import (
    CartItemCreate, CartItemResponse, CartItemWithProductResponse,
)
from blogcart.services.handle_cart import CartHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users/{user_id}/cart", tags=["cart"])


@router.post(
    "", response_model=CartItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_cart_item(
    user_id: str, body: CartItemCreate, db: AsyncSession = Depends(get_db),
):
    return await CartHandlers(db).add_item(parse_id(user_id, "userId"), body)


@router.get("", response_model=list[CartItemWithProductResponse])
async def list_cart_items(user_id: str, db: AsyncSession = Depends(get_db)):
    return await CartHandlers(db).list_items(parse_id(user_id, "userId"))
