"""
Category model for the two-level product taxonomy.
"""
from typing import Optional
from pydantic import Field

from localstyle.models.base import Entity, UtcDatetime


class Category(Entity):
    """Category node. ``level`` is 0 for roots, parent level + 1 otherwise."""

    name: str
    description: str = ""
    slug: str
    parent_id: Optional[str] = None
    level: int = Field(default=0, ge=0)
    is_active: bool = True
    sort_order: int = 1
    image_url: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    created_at: UtcDatetime
    updated_at: UtcDatetime
    product_count: int = Field(default=0, ge=0)

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, slug={self.slug}, level={self.level})>"


class CategoryWithChildren(Category):
    """Category with its direct children, computed at read time."""
    children: list[Category] = Field(default_factory=list)


class CategoryTreeNode(Category):
    """Recursive tree view of a category and all of its descendants."""
    children: list["CategoryTreeNode"] = Field(default_factory=list)
    depth: int = 0
