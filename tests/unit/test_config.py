"""Unit tests for configuration loading and validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import platformdirs
import pytest
from pydantic import ValidationError

from folio.config import _DEFAULT_CONFIG_DIR, CacheSettings, Settings

if TYPE_CHECKING:
    from pathlib import Path


class TestDefaults:
    def test_default_config_dir_matches_platformdirs(self) -> None:
        assert platformdirs.user_config_dir("folio") == _DEFAULT_CONFIG_DIR

    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.content.directory == "app/portfolio/projects"
        assert settings.content.extension == ".mdx"
        assert settings.cache.content_ttl_seconds == 300
        assert settings.cache.date_ttl_seconds == 300
        assert settings.logging.level == "INFO"


class TestSources:
    def test_env_overrides_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FOLIO__CACHE__CONTENT_TTL_SECONDS", "30")
        monkeypatch.setenv("FOLIO__CONTENT__DIRECTORY", "/srv/projects")
        settings = Settings()
        assert settings.cache.content_ttl_seconds == 30
        assert settings.content.directory == "/srv/projects"

    def test_init_overrides_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FOLIO__LOGGING__LEVEL", "DEBUG")
        settings = Settings(logging={"level": "ERROR"})
        assert settings.logging.level == "ERROR"

    def test_yaml_file(self, tmp_path: Path) -> None:
        config = tmp_path / "folio.yaml"
        config.write_text("content:\n  directory: content/work\n", encoding="utf-8")

        class FileSettings(Settings):
            model_config = {**Settings.model_config, "yaml_file": str(config)}

        assert FileSettings().content.directory == "content/work"


class TestValidation:
    def test_wrong_type_raises(self) -> None:
        with pytest.raises(ValidationError):
            Settings(cache={"content_ttl_seconds": "soon"})  # type: ignore[arg-type]

    def test_negative_ttl_raises(self) -> None:
        with pytest.raises(ValidationError):
            CacheSettings(date_ttl_seconds=-5)

    def test_unknown_log_level_raises(self) -> None:
        with pytest.raises(ValidationError):
            Settings(logging={"level": "TRACE"})  # type: ignore[arg-type]

    def test_unknown_top_level_field_raises(self) -> None:
        with pytest.raises(ValidationError):
            Settings(cach={})  # type: ignore[call-arg]

    def test_unknown_nested_field_raises(self) -> None:
        with pytest.raises(ValidationError):
            CacheSettings(content_ttl=10)  # type: ignore[call-arg]
