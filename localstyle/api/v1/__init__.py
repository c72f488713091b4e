"""API v1 Router."""
from fastapi import APIRouter

from localstyle.api.v1 import auth, brand, roles, products, categories, invites, staff
from localstyle.core.config import settings

api_router = APIRouter(prefix=settings.api_prefix)

# Include all route modules; invites before staff so /staff/invites is not read as a staff id
api_router.include_router(auth.router)
api_router.include_router(brand.router)
api_router.include_router(roles.router)
api_router.include_router(products.router)
api_router.include_router(categories.router)
api_router.include_router(invites.router)
api_router.include_router(staff.router)

__all__ = ["api_router"]
