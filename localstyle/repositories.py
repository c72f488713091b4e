"""
Collection stores standing in for a database.

Domain services only talk to the ``Repository`` protocol, so a real store can
replace ``InMemoryRepository`` without touching role, category or staff logic.
The in-memory store lives for the lifetime of the process, keeps insertion
order and is not thread-safe.
"""
import re
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, Optional, Protocol, TypeVar

from pydantic import BaseModel

from localstyle.models.category import Category
from localstyle.models.product import Product
from localstyle.models.staff import StaffInvite, StaffProfile

T = TypeVar("T", bound=BaseModel)


class Repository(Protocol[T]):
    """Minimal persistence contract used by the domain services."""

    def find_by_id(self, entity_id: str) -> Optional[T]: ...

    def find_all(self, predicate: Optional[Callable[[T], bool]] = None) -> list[T]: ...

    def insert(self, entity: T) -> T: ...

    def update(self, entity: T) -> Optional[T]: ...

    def delete(self, entity_id: str) -> bool: ...

    def count(self) -> int: ...

    def next_id(self) -> str: ...


class InMemoryRepository(Generic[T]):
    """Ordered list of entities addressed by their string ``id``."""

    def __init__(self, prefix: str = "", width: int = 3, items: Iterable[T] = ()):
        self.prefix = prefix
        self.width = width
        self._items: list[T] = []
        self._sequence = 0
        for item in items:
            self.insert(item)

    def _index_of(self, entity_id: str) -> int:
        for index, item in enumerate(self._items):
            if item.id == entity_id:
                return index
        return -1

    def _track_sequence(self, entity_id: str) -> None:
        match = re.search(r"(\d+)$", entity_id)
        if match:
            self._sequence = max(self._sequence, int(match.group(1)))

    def find_by_id(self, entity_id: str) -> Optional[T]:
        index = self._index_of(entity_id)
        return self._items[index] if index >= 0 else None

    def find_all(self, predicate: Optional[Callable[[T], bool]] = None) -> list[T]:
        if predicate is None:
            return list(self._items)
        return [item for item in self._items if predicate(item)]

    def insert(self, entity: T) -> T:
        self._items.append(entity)
        self._track_sequence(entity.id)
        return entity

    def update(self, entity: T) -> Optional[T]:
        index = self._index_of(entity.id)
        if index < 0:
            return None
        self._items[index] = entity
        return entity

    def delete(self, entity_id: str) -> bool:
        index = self._index_of(entity_id)
        if index < 0:
            return False
        del self._items[index]
        return True

    def count(self) -> int:
        return len(self._items)

    def next_id(self) -> str:
        """
        Allocate the next sequential id.

        The counter only moves forward, so ids freed by deletes are never reused.
        """
        self._sequence += 1
        if self.width:
            return f"{self.prefix}{self._sequence:0{self.width}d}"
        return f"{self.prefix}{self._sequence}"


@dataclass
class Collections:
    """The per-process set of entity stores."""
    categories: Repository[Category] = field(
        default_factory=lambda: InMemoryRepository(prefix="", width=0)
    )
    staff: Repository[StaffProfile] = field(
        default_factory=lambda: InMemoryRepository(prefix="staff_")
    )
    invites: Repository[StaffInvite] = field(
        default_factory=lambda: InMemoryRepository(prefix="invite_")
    )
    products: Repository[Product] = field(
        default_factory=lambda: InMemoryRepository(prefix="prod_")
    )
