from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContentMetadata(BaseModel):
    """Front-matter metadata of a single project file.

    The three required fields are validated; any other header keys are kept
    as extra fields rather than rejected.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    title: str
    published_at: str = Field(alias="publishedAt")
    summary: str
    image: str | None = None

    @field_validator("title", "published_at", "summary")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @property
    def extras(self) -> dict[str, Any]:
        """Header keys outside the known field set."""
        return dict(self.model_extra or {})


class ParsedContent(BaseModel):
    """Output of the front-matter parser: metadata plus the trimmed body."""

    metadata: ContentMetadata
    content: str


class ContentRecord(BaseModel):
    """A loaded project: parsed metadata, slug derived from the filename, body."""

    model_config = ConfigDict(frozen=True)

    metadata: ContentMetadata
    slug: str
    content: str
