"""
FastAPI dependencies wiring the collection stores into the domain services.

The stores and notifier live on ``app.state`` so each application instance
(and each test client) owns its own data.
"""
from fastapi import Depends, Query, Request

from localstyle.core.config import settings
from localstyle.repositories import Collections
from localstyle.services.categories import CategoryService
from localstyle.services.notifications import EmailNotifier
from localstyle.services.products import ProductService
from localstyle.services.staff import StaffService


def get_collections(request: Request) -> Collections:
    return request.app.state.collections


def get_notifier(request: Request) -> EmailNotifier:
    return request.app.state.notifier


def get_category_service(collections: Collections = Depends(get_collections)) -> CategoryService:
    return CategoryService(collections.categories)


def get_product_service(collections: Collections = Depends(get_collections)) -> ProductService:
    return ProductService(collections.products)


def get_staff_service(
    collections: Collections = Depends(get_collections),
    notifier: EmailNotifier = Depends(get_notifier)
) -> StaffService:
    return StaffService(collections.staff, collections.invites, notifier)


class PageParams:
    """``page``/``limit`` query parameters shared by the list endpoints."""

    def __init__(
        self,
        page: int = Query(1, ge=1, description="Page number (starts at 1)"),
        limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size)
    ):
        self.page = page
        self.limit = limit
