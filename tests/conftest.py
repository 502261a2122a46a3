"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`bonsai_wire` package without requiring an editable install in CI.
"""

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Keep ``BONSAI_WIRE_*`` variables from the host out of the tests."""

    from bonsai_wire.config import get_settings

    for name in ("BONSAI_WIRE_WIRE_INDENT", "BONSAI_WIRE_STRICT_DECODING"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
