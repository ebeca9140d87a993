"""Front-matter parser for project content files.

A content file starts with a header block bounded by two ``---`` lines. Each
header line is a ``key: value`` pair; everything after the closing delimiter
is the body::

    ---
    title: Redis clone
    publishedAt: '2023-01-01'
    summary: "A toy key-value store"
    ---

    Body text...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError

from folio.errors import ParseError
from folio.models.content import ContentMetadata, ParsedContent

if TYPE_CHECKING:
    from collections.abc import Iterable

DELIMITER = "---"
_SEPARATOR = ": "
_QUOTES = ("'", '"')
_BOM = "\ufeff"
REQUIRED_FIELDS = ("title", "publishedAt", "summary")


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


def _split_header(raw_text: str) -> tuple[list[str], str] | None:
    """Return (header lines, body) or None if there is no delimited header."""
    lines = raw_text.removeprefix(_BOM).splitlines()
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    if start == len(lines) or lines[start].strip() != DELIMITER:
        return None

    for end in range(start + 1, len(lines)):
        if lines[end].strip() == DELIMITER:
            return lines[start + 1 : end], "\n".join(lines[end + 1 :])
    return None


def parse_header_lines(lines: Iterable[str]) -> dict[str, str]:
    """Turn ``key: value`` lines into a dict; lines without a separator are ignored."""
    data: dict[str, str] = {}
    for line in lines:
        line = line.strip()
        if not line:
            continue
        if _SEPARATOR in line:
            key, value = line.split(_SEPARATOR, 1)
        elif line.endswith(":"):
            key, value = line[:-1], ""
        else:
            continue
        key = key.strip()
        if key:
            data[key] = _strip_quotes(value.strip())
    return data


def parse_frontmatter(raw_text: str, file_path: str | None = None) -> ParsedContent:
    """Split *raw_text* into validated metadata and trimmed body content.

    Raises:
        ParseError: If the header block is missing or unterminated, or any of
            ``title``, ``publishedAt``, ``summary`` is absent or empty.
    """
    split = _split_header(raw_text)
    if split is None:
        raise ParseError("Failed to parse frontmatter: missing '---' header block", file_path)
    header_lines, body = split

    data = parse_header_lines(header_lines)
    missing = [name for name in REQUIRED_FIELDS if not data.get(name, "").strip()]
    if missing:
        raise ParseError(
            "Failed to parse frontmatter: missing required fields " + ", ".join(missing),
            file_path,
        )

    try:
        metadata = ContentMetadata.model_validate(data)
    except ValidationError as exc:
        raise ParseError(f"Failed to parse frontmatter: {exc}", file_path) from exc

    return ParsedContent(metadata=metadata, content=body.strip())
