"""Test setup for pasteit."""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from pasteit.schemas import HostBlock  # noqa: E402


@pytest.fixture
def host() -> AsyncMock:
    """Host document API positioned on an empty block."""
    mock = AsyncMock()
    mock.get_current_block.return_value = HostBlock(uuid="block-1", content="")
    return mock


@pytest.fixture
def article_html() -> str:
    """Clipboard HTML copied from a web article."""
    return (
        "<h1>Guide</h1>"
        "<p>Intro paragraph.</p>"
        "<ul><li>First step</li><li>Second step</li></ul>"
        "<h2>Details</h2>"
        "<p>More text.</p>"
    )
