"""Composition root: wires settings into loader, caches, service and formatter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from folio.cache import TTLCache
from folio.dates import DateFormatter
from folio.loader import ContentLoader
from folio.logging_setup import configure_logging
from folio.service import ContentService

if TYPE_CHECKING:
    from folio.config import Settings
    from folio.models.content import ContentRecord


@dataclass
class AppState:
    """Everything a render needs. One instance per process (or per test)."""

    settings: Settings
    loader: ContentLoader
    records_cache: TTLCache[tuple[ContentRecord, ...]]
    slug_cache: TTLCache[ContentRecord | None]
    date_cache: TTLCache[str]
    content: ContentService
    dates: DateFormatter


def build_state(settings: Settings) -> AppState:
    configure_logging(settings.logging)
    loader = ContentLoader(settings.content.directory, settings.content.extension)
    records_cache: TTLCache[tuple[ContentRecord, ...]] = TTLCache(
        settings.cache.content_ttl_seconds
    )
    slug_cache: TTLCache[ContentRecord | None] = TTLCache(settings.cache.content_ttl_seconds)
    date_cache: TTLCache[str] = TTLCache(settings.cache.date_ttl_seconds)

    return AppState(
        settings=settings,
        loader=loader,
        records_cache=records_cache,
        slug_cache=slug_cache,
        date_cache=date_cache,
        content=ContentService(loader, records_cache, slug_cache),
        dates=DateFormatter(date_cache),
    )
