"""Cache-aside access to project content for the presentation layer."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

import structlog

from folio.dates import parse_date

if TYPE_CHECKING:
    from collections.abc import Iterable

    from folio.cache import TTLCache
    from folio.models.content import ContentRecord

log = structlog.get_logger()

ALL_PROJECTS_KEY = "all-projects"
PROJECT_BY_SLUG_KEY_PREFIX = "project-by-slug:"


class RecordSource(Protocol):
    def load_all(self) -> list[ContentRecord]: ...


class ContentService:
    """Serves content records, reading from disk only on a cache miss."""

    def __init__(
        self,
        loader: RecordSource,
        records_cache: TTLCache[tuple[ContentRecord, ...]],
        slug_cache: TTLCache[ContentRecord | None],
    ) -> None:
        self._loader = loader
        self._records_cache = records_cache
        self._slug_cache = slug_cache

    def _load_all(self) -> tuple[ContentRecord, ...]:
        log.debug("content_cache_miss", key=ALL_PROJECTS_KEY)
        return tuple(self._loader.load_all())

    def get_all(self) -> tuple[ContentRecord, ...]:
        """All loaded records in enumeration order. An empty result is cached too.

        The tuple is shared by every caller until the entry expires.
        """
        return self._records_cache.get_or_set(ALL_PROJECTS_KEY, self._load_all)

    def get_by_slug(self, slug: str) -> ContentRecord | None:
        """The record for *slug*, or ``None``. Misses are cached as ``None``."""

        def find() -> ContentRecord | None:
            log.debug("content_cache_miss", key=PROJECT_BY_SLUG_KEY_PREFIX + slug)
            return next((r for r in self.get_all() if r.slug == slug), None)

        return self._slug_cache.get_or_set(PROJECT_BY_SLUG_KEY_PREFIX + slug, find)

    def list_slugs(self) -> list[str]:
        """Slugs of every loaded record, for static path generation."""
        return [record.slug for record in self.get_all()]

    def invalidate_all(self) -> None:
        self._records_cache.clear()
        self._slug_cache.clear()
        log.info("content_cache_invalidated")

    def invalidate_one(self, slug: str) -> None:
        """Drop *slug* and the aggregate listing, which may now be stale too."""
        self._slug_cache.delete(PROJECT_BY_SLUG_KEY_PREFIX + slug)
        self._records_cache.delete(ALL_PROJECTS_KEY)
        log.info("content_cache_invalidated", slug=slug)


def _sort_key(record: ContentRecord) -> datetime:
    parsed = parse_date(record.metadata.published_at)
    return parsed if parsed is not None else datetime.min


def sort_projects_by_date(records: Iterable[ContentRecord]) -> list[ContentRecord]:
    """Most recent first; ties keep their input order.

    Records whose ``publishedAt`` cannot be parsed sort last.
    """
    return sorted(records, key=_sort_key, reverse=True)
