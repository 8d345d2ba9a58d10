"""Root test configuration — environment isolation and shared settings fixtures"""

import pytest

from valdiff.config import Settings
from valdiff.core.models import TerminalEncoding


_ENV_VARS = [
    "VALDIFF_DIFF_ENABLED", "VALDIFF_TERMINAL_ENCODING", "VALDIFF_TERMINAL_WIDTH",
    "NO_COLOR", "COLORTERM", "TERM",
]


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory with no valdiff or terminal env vars set."""
    monkeypatch.chdir(tmp_path)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(name="text_settings")
def text_settings_fixture():
    return Settings(terminal_encoding=TerminalEncoding.none, terminal_width=80)


@pytest.fixture(name="make_settings")
def make_settings_fixture():
    """Factory for Settings with an explicit encoding and width (never detected)."""
    def _make(encoding=TerminalEncoding.none, width=80, diff_enabled=True) -> Settings:
        return Settings(terminal_encoding=encoding, terminal_width=width, diff_enabled=diff_enabled)
    return _make
