import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from satchel.config import ENV_MAX_DEPTH  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_depth_override(monkeypatch):
    """Keep a developer's SATCHEL_MAX_DEPTH from leaking into tests."""
    monkeypatch.delenv(ENV_MAX_DEPTH, raising=False)
