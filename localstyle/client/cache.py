"""
Query cache for API reads.

Entries are keyed by ``(collection, kind, params)`` so one collection can
hold list pages, detail entries and aggregates side by side, and mutations
can drop exactly the kinds they affect.
"""
import json
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

from localstyle.core.config import settings
from localstyle.logging_config import get_logger

logger = get_logger("client.cache")

V = TypeVar("V")
CacheKey = tuple[str, str, str]


def cache_key(collection: str, kind: str, params: Optional[dict[str, Any]] = None) -> CacheKey:
    """Key with params serialized in sorted order, so equal filters share an entry."""
    return collection, kind, json.dumps(params or {}, sort_keys=True, default=str)


@dataclass
class CacheEntry:
    value: Any
    stored_at: float


class QueryCache:
    def __init__(self, stale_seconds: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        self.stale_seconds = settings.cache_stale_seconds if stale_seconds is None else stale_seconds
        self.clock = clock
        self._entries: dict[CacheKey, CacheEntry] = {}

    def __contains__(self, key: CacheKey) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: CacheKey) -> Optional[Any]:
        """Fresh value for ``key``, or None when missing or stale. Stale entries are dropped."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self.clock() - entry.stored_at > self.stale_seconds:
            del self._entries[key]
            return None
        return entry.value

    def set(self, key: CacheKey, value: Any) -> None:
        self._entries[key] = CacheEntry(value=value, stored_at=self.clock())

    def fetch(self, key: CacheKey, loader: Callable[[], V]) -> V:
        """Return the fresh cached value or call ``loader`` and store its result."""
        cached = self.get(key)
        if cached is not None:
            return cached
        value = loader()
        self.set(key, value)
        return value

    def discard(self, key: CacheKey) -> None:
        self._entries.pop(key, None)

    def invalidate(self, collection: str, kind: Optional[str] = None) -> int:
        """Drop every entry of a collection, or only those of one kind. Returns the count dropped."""
        stale = [
            key for key in self._entries
            if key[0] == collection and (kind is None or key[1] == kind)
        ]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug(f"Invalidated {len(stale)} cache entries for {collection}/{kind or '*'}")
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()
