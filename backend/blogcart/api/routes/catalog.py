"""Catalog Routes — products and tags."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from blogcart.infrastructure.database import get_db
from blogcart.schemas.catalog import (
    ProductCreate, ProductWithTagsResponse, TagCreate, TagResponse,
    TagWithProductsResponse,
)
from blogcart.services.handle_catalog import CatalogHandlers

logger = logging.getLogger(__name__)
router = APIRouter(tags=["catalog"])


@router.post(
    "/products", response_model=ProductWithTagsResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(body: ProductCreate, db: AsyncSession = Depends(get_db)):
    """Create a product, optionally connected to an existing tag (tagID)."""
    return await CatalogHandlers(db).create_product(body)


@router.get("/products", response_model=list[ProductWithTagsResponse])
async def list_products(db: AsyncSession = Depends(get_db)):
    return await CatalogHandlers(db).list_products()


@router.post(
    "/tags", response_model=TagResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_tag(body: TagCreate, db: AsyncSession = Depends(get_db)):
    return await CatalogHandlers(db).create_tag(body)


@router.get("/tags", response_model=list[TagWithProductsResponse])
async def list_tags(db: AsyncSession = Depends(get_db)):
    """All tags with their products."""
    return await CatalogHandlers(db).list_tags()
