"""In-memory TTL cache with single-flight population.

Entries expire ``ttl_seconds`` after they were stored and are removed lazily
the next time their key is read. There is no size-based eviction: keys are
content slugs and date strings, a small and finite set.

``get_or_set`` is the cache-aside entry point. Concurrent misses on the same
key are serialised on a per-key lock so the factory runs once; callers that
were waiting read the freshly stored value.
"""

from __future__ import annotations

import threading
import time
from typing import TYPE_CHECKING, Generic, TypeVar

from folio.models.cache import CacheEntry

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 5 * 60


class TTLCache(Generic[T]):
    """String-keyed cache whose entries go stale after a fixed TTL."""

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if ttl_seconds < 0:
            raise ValueError("ttl_seconds must be >= 0")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry[T]] = {}
        self._lock = threading.Lock()
        self._key_locks: dict[str, threading.Lock] = {}

    # ------------------------------------------------------------------
    # Basic operations
    # ------------------------------------------------------------------

    def _lookup(self, key: str) -> CacheEntry[T] | None:
        """Return the fresh entry for *key*, dropping it if expired. Caller holds _lock."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock(), self.ttl_seconds):
            del self._entries[key]
            return None
        return entry

    def get(self, key: str) -> T | None:
        """Return the cached value, or ``None`` on a miss or expired entry.

        A cached ``None`` is indistinguishable from a miss here; use ``has``
        or ``get_or_set`` when ``None`` is a meaningful value.
        """
        with self._lock:
            entry = self._lookup(key)
        return None if entry is None else entry.value

    def set(self, key: str, value: T) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(value=value, stored_at=self._clock())

    def has(self, key: str) -> bool:
        """True if *key* holds an unexpired entry. Does not remove expired entries."""
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and not entry.is_expired(self._clock(), self.ttl_seconds)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._key_locks.clear()

    @property
    def size(self) -> int:
        """Number of stored entries, including expired ones not yet removed."""
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.size

    # ------------------------------------------------------------------
    # Cache-aside
    # ------------------------------------------------------------------

    def _key_lock(self, key: str) -> threading.Lock:
        with self._lock:
            lock = self._key_locks.get(key)
            if lock is None:
                lock = self._key_locks[key] = threading.Lock()
            return lock

    def get_or_set(self, key: str, factory: Callable[[], T]) -> T:
        """Return the cached value for *key*, computing and storing it on a miss.

        The factory result is stored even when it is empty or ``None``. If the
        factory raises, nothing is stored and the exception propagates.
        """
        with self._lock:
            entry = self._lookup(key)
        if entry is not None:
            return entry.value

        with self._key_lock(key):
            # Another thread may have filled the key while we waited.
            with self._lock:
                entry = self._lookup(key)
            if entry is not None:
                return entry.value

            value = factory()
            self.set(key, value)
            return value
