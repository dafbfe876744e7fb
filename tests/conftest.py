from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.header_builder import HeaderBuilder


@pytest.fixture
def header_builder(tmp_path: Path) -> HeaderBuilder:
    """Provide a reusable header builder rooted at the pytest tmp_path."""
    return HeaderBuilder(tmp_path)
