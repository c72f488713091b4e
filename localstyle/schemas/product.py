"""
Pydantic schemas for Product requests.
"""
from typing import Optional
from pydantic import Field, field_validator

from localstyle.models.base import Base
from localstyle.models.product import MAX_PRODUCT_IMAGES, ProductStatus


def unique_strings(values: Optional[list[str]]) -> Optional[list[str]]:
    """Drop blank and repeated entries while keeping first-seen order."""
    if values is None:
        return None
    seen = []
    for value in values:
        value = value.strip()
        if value and value not in seen:
            seen.append(value)
    return seen


class ProductBase(Base):
    """Base product schema."""
    name: str = Field(..., min_length=1, max_length=500)
    description: str = ""
    price: float = Field(..., ge=0)
    is_price_visible: bool = True
    sku: str = Field(..., min_length=1, max_length=100)
    category: str = ""
    colors: list[str] = Field(default_factory=list)
    sizes: list[str] = Field(default_factory=list)
    status: ProductStatus = ProductStatus.DRAFT
    tags: list[str] = Field(default_factory=list)
    image_urls: list[str] = Field(default_factory=list, max_length=MAX_PRODUCT_IMAGES)

    @field_validator("colors", "sizes", "tags")
    @classmethod
    def dedupe(cls, values: list[str]) -> list[str]:
        return unique_strings(values)


class ProductCreate(ProductBase):
    """Schema for creating a product: a full product minus id and dateAdded."""


class ProductUpdate(Base):
    """Schema for updating a product. Only provided fields are applied."""
    name: Optional[str] = Field(None, min_length=1, max_length=500)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    is_price_visible: Optional[bool] = None
    sku: Optional[str] = Field(None, min_length=1, max_length=100)
    category: Optional[str] = None
    colors: Optional[list[str]] = None
    sizes: Optional[list[str]] = None
    status: Optional[ProductStatus] = None
    tags: Optional[list[str]] = None
    image_urls: Optional[list[str]] = Field(None, max_length=MAX_PRODUCT_IMAGES)

    @field_validator("colors", "sizes", "tags")
    @classmethod
    def dedupe(cls, values: Optional[list[str]]) -> Optional[list[str]]:
        return unique_strings(values)
