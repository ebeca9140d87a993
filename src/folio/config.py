"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Constructor arguments
  2. Environment variables  (FOLIO__CACHE__CONTENT_TTL_SECONDS=60)
  3. folio.yaml             (searched in cwd, then the platform user config dir)
  4. Hardcoded defaults

The config file is optional; every field has a default.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_DEFAULT_CONFIG_DIR = platformdirs.user_config_dir("folio")


def _find_config_file() -> str | None:
    """Return the path of the first folio.yaml found, or None."""
    candidates = [
        Path("folio.yaml"),
        Path(_DEFAULT_CONFIG_DIR) / "folio.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class ContentSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    directory: str = "app/portfolio/projects"
    extension: str = ".mdx"


class CacheSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    content_ttl_seconds: float = Field(default=5 * 60, ge=0)
    # Formatted dates embed "Today"/"3d ago"; keep this well under a day.
    date_ttl_seconds: float = Field(default=5 * 60, ge=0)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: FOLIO__CONTENT__DIRECTORY=projects
        env_prefix="FOLIO__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
        extra="forbid",
    )

    content: ContentSettings = ContentSettings()
    cache: CacheSettings = CacheSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
