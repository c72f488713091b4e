"""
Product catalog operations.
"""
from typing import Optional

from localstyle.error_handlers import ResourceNotFoundError
from localstyle.logging_config import get_logger
from localstyle.models.base import utcnow
from localstyle.models.product import Product, ProductStatus
from localstyle.repositories import Repository
from localstyle.schemas.common import Page, paginate
from localstyle.schemas.product import ProductCreate, ProductUpdate
from localstyle.services.result import Err, Ok, Result

logger = get_logger("products")


class ProductService:
    def __init__(self, repository: Repository[Product]):
        self.repository = repository

    def list_products(
        self,
        search: Optional[str] = None,
        status: Optional[ProductStatus] = None,
        category: Optional[str] = None,
        page: int = 1,
        limit: int = 10
    ) -> Page:
        """
        Filter the catalog.

        ``search`` matches name, SKU, description or tags (case-insensitive);
        ``category`` is compared case-insensitively against the free-text category.
        """
        products = self.repository.find_all()
        if search:
            needle = search.lower()
            products = [
                p for p in products
                if needle in p.name.lower()
                or needle in p.sku.lower()
                or needle in p.description.lower()
                or any(needle in tag.lower() for tag in p.tags)
            ]
        if status:
            products = [p for p in products if p.status == status]
        if category:
            products = [p for p in products if p.category.lower() == category.lower()]

        items, total = paginate(products, page, limit)
        return Page(items=items, total=total, page=page, limit=limit)

    def get(self, product_id: str) -> Result[Product]:
        product = self.repository.find_by_id(product_id)
        if product is None:
            return Err(ResourceNotFoundError("Product", product_id))
        return Ok(product)

    def create(self, request: ProductCreate) -> Result[Product]:
        product = Product(
            id=self.repository.next_id(),
            date_added=utcnow(),
            **request.model_dump()
        )
        self.repository.insert(product)
        logger.info(f"Created product {product.id} (SKU: {product.sku})")
        return Ok(product)

    def update(self, product_id: str, request: ProductUpdate) -> Result[Product]:
        existing = self.repository.find_by_id(product_id)
        if existing is None:
            return Err(ResourceNotFoundError("Product", product_id))

        changes = {k: v for k, v in request.model_dump(exclude_unset=True).items() if v is not None}
        updated = existing.model_copy(update=changes)
        self.repository.update(updated)
        logger.info(f"Updated product {product_id}: {sorted(changes)}")
        return Ok(updated)

    def delete(self, product_id: str) -> Result[Product]:
        existing = self.repository.find_by_id(product_id)
        if existing is None:
            return Err(ResourceNotFoundError("Product", product_id))
        self.repository.delete(product_id)
        logger.info(f"Deleted product {product_id}")
        return Ok(existing)
