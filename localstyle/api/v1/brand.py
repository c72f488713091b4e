"""
Brand profile endpoint.
"""
from fastapi import APIRouter

from localstyle.models.user import Brand
from localstyle.seed import BRAND

router = APIRouter(prefix="/brand", tags=["Brand"])


@router.get("", response_model=Brand)
async def get_brand():
    """Get the static profile of the current brand."""
    return BRAND
