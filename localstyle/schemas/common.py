"""
Shared response envelopes.
"""
from typing import Generic, Optional, TypeVar

from localstyle.models.base import Base

T = TypeVar("T")


class Page(Base, Generic[T]):
    """Paginated list envelope. ``total`` counts the filtered set before paging."""
    items: list[T]
    total: int
    page: int
    limit: int


class MessageResponse(Base):
    message: str


class HealthCheck(Base):
    status: str = "ok"
    timestamp: str
    version: Optional[str] = None


def paginate(items: list, page: int, limit: int) -> tuple[list, int]:
    """Slice ``items`` for 1-based ``page`` and return the slice with the full count."""
    start = (page - 1) * limit
    return items[start:start + limit], len(items)
