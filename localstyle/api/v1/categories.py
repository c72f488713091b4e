"""
Categories API endpoints for the product taxonomy.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from localstyle.api.deps import PageParams, get_category_service
from localstyle.models.category import Category, CategoryTreeNode, CategoryWithChildren
from localstyle.schemas.category import CategoryCreate, CategoryUpdate
from localstyle.schemas.common import MessageResponse
from localstyle.services.categories import CategoryService
from localstyle.services.result import unwrap

router = APIRouter(prefix="/categories", tags=["Categories"])


# Items carry `children` only when includeChildren is set
@router.get("", response_model=None)
async def list_categories(
    parent_id: Optional[str] = Query(None, alias="parentId"),
    include_children: bool = Query(False, alias="includeChildren"),
    paging: PageParams = Depends(),
    service: CategoryService = Depends(get_category_service)
):
    """
    List categories.

    - **parentId**: Children of this category; `null` or empty for root categories only
    - **includeChildren**: Attach each category's direct children
    - **page** / **limit**: Pagination
    """
    return service.list_categories(
        parent_id=parent_id,
        include_children=include_children,
        page=paging.page,
        limit=paging.limit
    )


@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_data: CategoryCreate,
    service: CategoryService = Depends(get_category_service)
):
    """
    Create a new category.

    - **name**: Category name; the slug is derived from it
    - **parentId**: Optional parent; the level follows the parent
    """
    return unwrap(service.create(category_data))


@router.get("/tree", response_model=list[CategoryTreeNode])
async def get_category_tree(service: CategoryService = Depends(get_category_service)):
    """Full category forest, ordered by sort order then name."""
    return service.tree()


@router.get("/{category_id}", response_model=CategoryWithChildren)
async def get_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service)
):
    """Get a category with its direct children."""
    return unwrap(service.get(category_id))


@router.put("/{category_id}", response_model=Category)
async def update_category(
    category_id: str,
    category_data: CategoryUpdate,
    service: CategoryService = Depends(get_category_service)
):
    """
    Update a category.

    Renaming recomputes the slug; sending `parentId` (including `null`)
    moves the category and recomputes its level and its descendants' levels.
    """
    return unwrap(service.update(category_id, category_data))


@router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service)
):
    """Delete a category without subcategories or products."""
    unwrap(service.delete(category_id))
    return MessageResponse(message="Category deleted successfully")
