"""Content loading, caching and date formatting for a static portfolio site."""

from __future__ import annotations

from folio.cache import TTLCache
from folio.config import Settings
from folio.dates import DateFormatter, format_date
from folio.errors import DirectoryError, ErrorCode, FolioError, LoadError, ParseError
from folio.frontmatter import parse_frontmatter
from folio.loader import ContentLoader, list_content_files, load_all, load_one
from folio.logging_setup import configure_logging
from folio.models import ContentMetadata, ContentRecord
from folio.service import ContentService, sort_projects_by_date
from folio.state import AppState, build_state

__all__ = [
    "AppState",
    "build_state",
    "Settings",
    "configure_logging",
    # content
    "ContentMetadata",
    "ContentRecord",
    "ContentLoader",
    "ContentService",
    "parse_frontmatter",
    "list_content_files",
    "load_one",
    "load_all",
    "sort_projects_by_date",
    # cache
    "TTLCache",
    # dates
    "DateFormatter",
    "format_date",
    # errors
    "ErrorCode",
    "FolioError",
    "ParseError",
    "LoadError",
    "DirectoryError",
]
