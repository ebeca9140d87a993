"""Display formatting for ``publishedAt`` dates.

The relative suffix compares calendar fields one at a time (years, then
months, then days) instead of measuring elapsed time. Near month or year
boundaries this gives results such as ``"1y ago"`` for Dec 31 -> Jan 1, and a
date later in the current month than today reports ``"Today"``.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

    from folio.cache import TTLCache

log = structlog.get_logger()

FORMAT_CACHE_KEY_PREFIX = "date-format:"
_MIDNIGHT = "T00:00:00"


def parse_date(date_text: str) -> datetime | None:
    """Parse an ISO-8601 date or date-time into naive local time.

    Date-only values are pinned to local midnight. Returns ``None`` if the
    text is not a valid date.
    """
    text = date_text.strip()
    if "T" not in text:
        text += _MIDNIGHT
    try:
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is not None:
            # An offset near year 1 or 9999 can push local time out of range.
            parsed = parsed.astimezone().replace(tzinfo=None)
    except (ValueError, OverflowError):
        return None
    return parsed


def compute_relative(parsed: datetime, now: datetime) -> str:
    years_ago = now.year - parsed.year
    months_ago = now.month - parsed.month
    days_ago = now.day - parsed.day

    if years_ago > 0:
        return f"{years_ago}y ago"
    if months_ago > 0:
        return f"{months_ago}mo ago"
    if days_ago > 0:
        return f"{days_ago}d ago"
    return "Today"


def format_date(date_text: str, include_relative: bool = False, now: datetime | None = None) -> str:
    """Format *date_text* as ``"January 1, 2023"``, optionally with ``" (14d ago)"``.

    Raises:
        ValueError: If *date_text* is not a valid date.
    """
    parsed = parse_date(date_text)
    if parsed is None:
        raise ValueError(f"Invalid date: {date_text}")

    full_date = f"{parsed:%B} {parsed.day}, {parsed.year}"
    if not include_relative:
        return full_date
    return f"{full_date} ({compute_relative(parsed, now or datetime.now())})"


class DateFormatter:
    """Cached, never-failing wrapper around ``format_date``.

    Cached strings embed the relative suffix, so the cache TTL should stay in
    minutes; an hour-long TTL can keep serving "Today" after midnight.
    """

    def __init__(
        self,
        cache: TTLCache[str],
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._cache = cache
        self._clock = clock

    def format(self, date_text: str, include_relative: bool = False) -> str:
        """Formatted date, or *date_text* unchanged if it cannot be parsed."""
        cache_key = f"{FORMAT_CACHE_KEY_PREFIX}{date_text}:{include_relative}"
        cached = self._cache.get(cache_key)
        if cached is not None:
            return cached

        try:
            result = format_date(date_text, include_relative, now=self._clock())
        except (ValueError, OverflowError, TypeError, AttributeError) as exc:
            log.error("date_format_error", date=date_text, error=str(exc))
            return date_text

        self._cache.set(cache_key, result)
        return result
