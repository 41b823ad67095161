"""Keyed query cache with staleness windows and prefix invalidation."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Hashable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

CacheKey = tuple[Hashable, ...]


@dataclass
class CacheEntry:
    """A cached query result and the time it was fetched."""

    value: Any
    fetched_at: float

    def is_stale(self, stale_after: float, now: float) -> bool:
        return now - self.fetched_at >= stale_after


class QueryCache:
    """Cache of query results keyed by ``(kind, *params)`` tuples.

    A fresh entry is returned without calling the loader. Once an entry is
    older than its staleness window the next read fetches it again. Stale
    reads between a remote change and the next refetch are accepted.

    A load that is overtaken by ``invalidate`` or ``clear`` returns its
    result to the caller but does not store it.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._entries: dict[CacheKey, CacheEntry] = {}
        self._clock = clock
        self._lock = threading.RLock()
        self._generation = 0

    def __contains__(self, key: CacheKey) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def keys(self) -> list[CacheKey]:
        with self._lock:
            return list(self._entries)

    def get(self, key: CacheKey, stale_after: float) -> tuple[bool, Any]:
        """Return ``(hit, value)``; a stale or missing entry is a miss."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or entry.is_stale(stale_after, self._clock()):
                return False, None
            return True, entry.value

    def set(self, key: CacheKey, value: Any) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(value, self._clock())

    def fetch(self, key: CacheKey, loader: Callable[[], T], stale_after: float) -> T:
        """Return the cached value for ``key`` or load and cache it.

        If ``loader`` raises, the cache is left untouched and the error
        propagates to the caller.
        """
        with self._lock:
            hit, value = self.get(key, stale_after)
            if hit:
                return value
            generation = self._generation

        value = loader()

        with self._lock:
            if self._generation != generation:
                logger.debug(f"Discarding load of {key!r} overtaken by invalidation")
                return value
            self.set(key, value)
        return value

    def invalidate(self, *prefix: Hashable) -> int:
        """Drop every entry whose key starts with ``prefix``.

        Returns the number of entries removed.
        """
        size = len(prefix)
        with self._lock:
            self._generation += 1
            doomed = [key for key in self._entries if key[:size] == prefix]
            for key in doomed:
                del self._entries[key]
        if doomed:
            logger.debug(f"Invalidated {len(doomed)} cache entries for {prefix!r}")
        return len(doomed)

    def clear(self) -> None:
        with self._lock:
            self._generation += 1
            self._entries.clear()
