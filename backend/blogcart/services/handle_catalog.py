"""Catalog Handlers — products and tags.

Invariants:
    - A product created with tagID is connected to that existing tag; an
      unknown tagID -> 404 and no product is created
    - Tag names are unique: a duplicate -> 400
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from blogcart.infrastructure.database import transaction, translate_db_errors
from blogcart.infrastructure.gateway import EntityGateway
from blogcart.models.product import Product
from blogcart.models.tag import Tag
from blogcart.schemas.catalog import (
    ProductCreate, ProductWithTagsResponse, TagCreate, TagResponse,
    TagWithProductsResponse,
)

logger = logging.getLogger(__name__)


class CatalogHandlers:
    """Product and tag CRUD."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.products = EntityGateway(db, Product)
        self.tags = EntityGateway(db, Tag)

    async def create_product(self, body: ProductCreate) -> ProductWithTagsResponse:
        with translate_db_errors("create product"):
            async with transaction(self.db):
                tags = []
                if body.tag_id is not None:
                    tags.append(await self.tags.find_unique_or_throw(body.tag_id))
                product = await self.products.create_one({
                    "name": body.name,
                    "price": body.price,
                    "tags": tags,
                })
        return ProductWithTagsResponse.model_validate(product)

    async def list_products(self) -> list[ProductWithTagsResponse]:
        with translate_db_errors("fetch products"):
            rows = await self.products.find_many(include=("tags",))
        return [ProductWithTagsResponse.model_validate(p) for p in rows]

    async def create_tag(self, body: TagCreate) -> TagResponse:
        with translate_db_errors("create tag"):
            async with transaction(self.db):
                tag = await self.tags.create_one(
                    {"name": body.name},
                    conflict_message="Tag with this name already exists",
                )
        return TagResponse.model_validate(tag)

    async def list_tags(self) -> list[TagWithProductsResponse]:
        with translate_db_errors("fetch tags"):
            rows = await self.tags.find_many(include=("products",))
        return [TagWithProductsResponse.model_validate(t) for t in rows]
