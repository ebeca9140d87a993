from __future__ import annotations

from folio.models.cache import CacheEntry
from folio.models.content import ContentMetadata, ContentRecord, ParsedContent

__all__ = [
    # content
    "ContentMetadata",
    "ContentRecord",
    "ParsedContent",
    # cache
    "CacheEntry",
]
