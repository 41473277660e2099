"""Catalog Schemas — products and tags (many-to-many)."""

from pydantic import BaseModel, Field

from blogcart.schemas.common import OrmResponse, wire_field


class TagCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)


class ProductCreate(BaseModel):
    """Product with an optional tag to connect on creation."""
    name: str = Field(min_length=1, max_length=200)
    price: float = Field(ge=0)
    tag_id: int | None = wire_field("tagID", "tag_id", None)


class TagResponse(OrmResponse):
    id: int
    name: str


class ProductResponse(OrmResponse):
    id: int
    name: str
    price: float


class ProductWithTagsResponse(ProductResponse):
    tags: list[TagResponse] = []


class TagWithProductsResponse(TagResponse):
    products: list[ProductResponse] = []
