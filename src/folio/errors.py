"""Error types raised by the content core.

Every error carries an ``ErrorCode`` and a ``recoverable`` flag so callers can
decide whether retrying (for example after fixing a content file) makes sense.
The loader contains these errors at its boundary; they only reach the
presentation layer when a caller invokes ``load_one`` or ``parse_frontmatter``
directly.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    PARSE_ERROR = "PARSE_ERROR"
    LOAD_ERROR = "LOAD_ERROR"
    DIRECTORY_ERROR = "DIRECTORY_ERROR"


class FolioError(Exception):
    """Base class for all content-core errors."""

    def __init__(self, code: ErrorCode, message: str, recoverable: bool = False) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recoverable = recoverable


class ParseError(FolioError):
    """Malformed or incomplete front-matter header block."""

    def __init__(self, message: str, file_path: str | None = None) -> None:
        super().__init__(ErrorCode.PARSE_ERROR, message)
        self.file_path = file_path

    def __str__(self) -> str:
        if self.file_path:
            return f"{self.message} ({self.file_path})"
        return self.message


class LoadError(FolioError):
    """I/O or decoding failure while reading a content file."""

    def __init__(self, message: str, file_path: str) -> None:
        super().__init__(ErrorCode.LOAD_ERROR, message, recoverable=True)
        self.file_path = file_path


class DirectoryError(FolioError):
    """The content directory could not be enumerated."""

    def __init__(self, message: str, directory: str) -> None:
        super().__init__(ErrorCode.DIRECTORY_ERROR, message, recoverable=True)
        self.directory = directory
