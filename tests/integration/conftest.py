"""Integration test fixtures.

Provides a fully wired AppState pointed at a tmp_path content directory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from folio.config import Settings
from folio.state import AppState, build_state

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def app_state(content_dir: Path) -> AppState:
    return build_state(Settings(content={"directory": str(content_dir)}))
