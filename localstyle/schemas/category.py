"""
Pydantic schemas for Category requests.
"""
from typing import Optional
from pydantic import Field, field_validator

from localstyle.models.base import Base


def blank_to_none(value: Optional[str]) -> Optional[str]:
    """A blank parent id from a "no parent" select means root."""
    if value is None or not value.strip():
        return None
    return value


class CategoryCreate(Base):
    """Schema for creating a category."""
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    parent_id: Optional[str] = None
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None
    image_url: Optional[str] = None
    meta_title: Optional[str] = Field(None, max_length=255)
    meta_description: Optional[str] = None

    @field_validator("parent_id")
    @classmethod
    def blank_parent_is_root(cls, value: Optional[str]) -> Optional[str]:
        return blank_to_none(value)


class CategoryUpdate(Base):
    """
    Schema for updating a category.

    Only fields present in the request are applied; an explicit
    ``parentId`` of ``null`` or ``""`` moves the category to the root.
    """
    id: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    parent_id: Optional[str] = None
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None
    image_url: Optional[str] = None
    meta_title: Optional[str] = Field(None, max_length=255)
    meta_description: Optional[str] = None
    product_count: Optional[int] = Field(None, ge=0)

    @field_validator("parent_id")
    @classmethod
    def blank_parent_is_root(cls, value: Optional[str]) -> Optional[str]:
        return blank_to_none(value)
