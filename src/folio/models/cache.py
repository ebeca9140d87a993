from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class CacheEntry(BaseModel, Generic[T]):
    """A cached value and the clock reading at which it was stored."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    value: T
    stored_at: float  # Seconds, as returned by the owning cache's clock

    def is_expired(self, now: float, ttl_seconds: float) -> bool:
        return now - self.stored_at > ttl_seconds
