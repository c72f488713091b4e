"""
Product model for the brand catalog.
"""
from enum import Enum
from pydantic import Field

from localstyle.models.base import Entity, UtcDatetime

MAX_PRODUCT_IMAGES = 5


class ProductStatus(str, Enum):
    """Catalog publication status."""
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class Product(Entity):
    """Catalog item. ``category`` is free text, not a category id."""

    name: str
    description: str = ""
    price: float = Field(..., ge=0)
    is_price_visible: bool = True
    sku: str
    category: str = ""
    colors: list[str] = Field(default_factory=list)
    sizes: list[str] = Field(default_factory=list)
    status: ProductStatus = ProductStatus.DRAFT
    tags: list[str] = Field(default_factory=list)
    image_urls: list[str] = Field(default_factory=list, max_length=MAX_PRODUCT_IMAGES)
    date_added: UtcDatetime

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, sku={self.sku}, status={self.status.value})>"
