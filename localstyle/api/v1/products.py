"""
Products API endpoints for the brand catalog.
"""
from typing import Optional
from fastapi import APIRouter, Depends, status

from localstyle.api.deps import PageParams, get_product_service
from localstyle.models.product import Product, ProductStatus
from localstyle.schemas.common import MessageResponse, Page
from localstyle.schemas.product import ProductCreate, ProductUpdate
from localstyle.services.products import ProductService
from localstyle.services.result import unwrap

router = APIRouter(prefix="/products", tags=["Products"])


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_data: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product.

    - **sku**: Product SKU
    - **name**: Product name
    - **price**: Non-negative price
    - **imageUrls**: Up to 5 image URLs
    """
    return unwrap(service.create(product_data))


@router.get("", response_model=Page[Product])
async def list_products(
    search: Optional[str] = None,
    status: Optional[ProductStatus] = None,
    category: Optional[str] = None,
    paging: PageParams = Depends(),
    service: ProductService = Depends(get_product_service)
):
    """
    List products with pagination and filtering.

    - **search**: Search by name, SKU, description or tag
    - **status**: draft, published or archived
    - **category**: Filter by category name
    - **page** / **limit**: Pagination
    """
    return service.list_products(
        search=search,
        status=status,
        category=category,
        page=paging.page,
        limit=paging.limit
    )


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    """Get a specific product by ID."""
    return unwrap(service.get(product_id))


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    product_data: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    """Update a product. Only provided fields are changed."""
    return unwrap(service.update(product_id, product_data))


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    """Delete a product."""
    unwrap(service.delete(product_id))
    return MessageResponse(message="Product deleted successfully")
