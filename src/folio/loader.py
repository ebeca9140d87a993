"""Content discovery and loading.

Directory and per-file failures are contained here: a missing directory yields
an empty list and a malformed file is skipped, so one bad project never takes
the whole listing down. Both cases are logged.
"""

from __future__ import annotations

import os
from pathlib import Path

import structlog

from folio.errors import DirectoryError, FolioError, LoadError
from folio.frontmatter import parse_frontmatter
from folio.models.content import ContentRecord

log = structlog.get_logger()

DEFAULT_EXTENSION = ".mdx"


def slug_from_filename(filename: str) -> str:
    """``redis-clone.mdx`` -> ``redis-clone``."""
    return Path(filename).stem


def list_content_files(
    directory: str | os.PathLike[str], extension: str = DEFAULT_EXTENSION
) -> list[str]:
    """Return filenames in *directory* with the content extension.

    An unreadable or missing directory is logged and treated as empty.
    """
    try:
        with os.scandir(directory) as entries:
            return [
                entry.name
                for entry in entries
                if entry.is_file() and os.path.splitext(entry.name)[1] == extension
            ]
    except OSError as exc:
        err = DirectoryError(f"Error reading directory: {exc}", str(directory))
        log.error(
            "content_directory_error",
            directory=err.directory,
            code=err.code,
            error=err.message,
        )
        return []


def load_one(path: str | os.PathLike[str]) -> ContentRecord:
    """Read and parse a single content file.

    Raises:
        LoadError: The file could not be read or is not valid UTF-8.
        ParseError: The header block is malformed; ``file_path`` is set.
    """
    file_path = str(path)
    try:
        raw = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"Failed to read content file {file_path}: {exc}", file_path) from exc

    parsed = parse_frontmatter(raw, file_path)

    return ContentRecord(
        metadata=parsed.metadata,
        slug=slug_from_filename(file_path),
        content=parsed.content,
    )


def load_all(
    directory: str | os.PathLike[str], extension: str = DEFAULT_EXTENSION
) -> list[ContentRecord]:
    """Load every content file in *directory*, skipping the ones that fail.

    Records come back in directory enumeration order, which is not stable
    across platforms; use ``sort_projects_by_date`` for display order. When two
    files map to the same slug the first one loaded wins.
    """
    records: list[ContentRecord] = []
    seen: dict[str, str] = {}

    for filename in list_content_files(directory, extension):
        file_path = os.path.join(directory, filename)
        try:
            record = load_one(file_path)
        except FolioError as exc:
            log.warning(
                "content_file_skipped",
                file=filename,
                code=exc.code,
                error=str(exc),
            )
            continue

        if record.slug in seen:
            log.warning(
                "duplicate_slug",
                slug=record.slug,
                kept=seen[record.slug],
                skipped=filename,
            )
            continue

        seen[record.slug] = filename
        records.append(record)

    log.debug("content_loaded", directory=str(directory), count=len(records))
    return records


class ContentLoader:
    """Binds a content directory so the service can reload it on demand."""

    def __init__(
        self, directory: str | os.PathLike[str], extension: str = DEFAULT_EXTENSION
    ) -> None:
        self.directory = directory
        self.extension = extension

    def list_files(self) -> list[str]:
        return list_content_files(self.directory, self.extension)

    def load_all(self) -> list[ContentRecord]:
        return load_all(self.directory, self.extension)
