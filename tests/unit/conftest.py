"""Unit-specific fixtures (no I/O beyond tmp_path)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from folio.cache import TTLCache

if TYPE_CHECKING:
    from tests.helpers import FakeClock


@pytest.fixture()
def cache(clock: FakeClock) -> TTLCache[str]:
    """Fresh 60-second cache driven by the fake clock."""
    return TTLCache(60, clock=clock)
