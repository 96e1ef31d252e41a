import io
from datetime import datetime, timedelta, timezone

import pytest
from rich.console import Console

EASTERN = timezone(timedelta(hours=-4), "EDT")

# Renders as "10/19/2026, 3:04:05 PM"
FIXED_NOW = datetime(2026, 10, 19, 15, 4, 5, tzinfo=EASTERN)
FIXED_TIMESTAMP = "10/19/2026, 3:04:05 PM"


@pytest.fixture(autouse=True)
def terminal_env(monkeypatch):
    """Keep Rich's color and terminal detection independent of the CI shell."""
    monkeypatch.setenv("TERM", "xterm-256color")
    for var in ("NO_COLOR", "FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def term_console():
    """A Console that behaves like a color terminal but writes to a StringIO."""
    return Console(file=io.StringIO(), force_terminal=True, color_system="standard", width=200)


@pytest.fixture
def pipe_console():
    """A Console writing to a StringIO that is not a terminal (no colors, no cursor codes)."""
    return Console(file=io.StringIO(), force_terminal=False, color_system=None, width=200)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def fixed_timestamp():
    return FIXED_TIMESTAMP
