"""Query Cache — request-descriptor keyed cache with tag-based invalidation.

Invariants:
    - A QueryKey is (path, normalized params); equal requests map to equal keys
    - Every entry carries a frozen set of invalidation tags
    - invalidate(tag) drops every entry carrying that tag, nothing else
    - fetch() never caches a failed load or an absent (None) result

Design Decisions:
    - Owned by a client instance, not module-level state: two clients never
      share or clobber each other's cache
    - Tags instead of key-prefix matching: a mutation names exactly what it
      makes stale (the list tag, plus the item tag for updates/deletes)
"""

import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class QueryKey:
    """Hashable request descriptor."""
    path: str
    params: tuple[tuple[str, str], ...] = ()

    @classmethod
    def of(cls, path: str, params: Mapping[str, Any] | None = None) -> "QueryKey":
        """Build a key, dropping None params and flattening list values."""
        pairs = []
        for name, value in (params or {}).items():
            if value is None:
                continue
            values = value if isinstance(value, (list, tuple)) else [value]
            pairs.extend((name, _param_text(v)) for v in values)
        return cls(path, tuple(sorted(pairs)))


def _param_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass
class CacheEntry:
    value: Any
    tags: frozenset[str] = field(default_factory=frozenset)


class QueryCache:
    """In-process cache from QueryKey to value, invalidated by tag."""

    def __init__(self):
        self._entries: dict[QueryKey, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: QueryKey) -> bool:
        return key in self._entries

    def get(self, key: QueryKey, default: Any = None) -> Any:
        entry = self._entries.get(key)
        return entry.value if entry is not None else default

    def set(self, key: QueryKey, value: Any, tags: Iterable[str] = ()) -> None:
        self._entries[key] = CacheEntry(value, frozenset(tags))

    async def fetch(
        self,
        key: QueryKey,
        loader: Callable[[], Awaitable[T]],
        tags: Iterable[str] = (),
    ) -> T:
        """Return the cached value for key, loading and caching it on a miss."""
        entry = self._entries.get(key)
        if entry is not None:
            return entry.value
        value = await loader()
        if value is not None:
            self.set(key, value, tags)
        return value

    def invalidate(self, *tags: str) -> int:
        """Drop every entry carrying any of tags. Returns the number dropped."""
        wanted = set(tags)
        stale = [k for k, e in self._entries.items() if e.tags & wanted]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug(
                f"Invalidated {len(stale)} cache entries for {sorted(wanted)}",
            )
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()
