"""Shared fixtures: a controllable clock and an on-disk content directory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

from tests.helpers import FakeClock, make_project

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def content_dir(tmp_path: Path) -> Path:
    """Directory with three well-formed projects and one non-content file."""
    directory = tmp_path / "projects"
    directory.mkdir()
    (directory / "redis-clone.mdx").write_text(
        make_project("Redis clone", "2023-01-01"), encoding="utf-8"
    )
    (directory / "raft.mdx").write_text(make_project("Raft", "2022-06-15"), encoding="utf-8")
    (directory / "compiler.mdx").write_text(
        make_project("Compiler", "2024-03-02", image="/images/compiler.png"), encoding="utf-8"
    )
    (directory / "notes.txt").write_text("not content", encoding="utf-8")
    return directory


@pytest.fixture(autouse=True)
def _reset_structlog():
    """build_state configures structlog globally; undo it after each test."""
    yield
    structlog.reset_defaults()
