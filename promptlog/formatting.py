"""
Line composition and file routing for promptlog.

Everything here is pure: given a message, its options and a clock reading,
these helpers decide what the line says, how it is colored on the terminal,
what plain text reaches disk and which file it lands in. `DisplayManager`
owns the side effects.

The plain line is built once. The colored terminal rendering is derived from
it, so the text written to disk never depends on how colors are encoded.
"""

import re
from datetime import datetime

from rich.text import Text

from .log_types import LogOptions

DEFAULT_ROUTING_KEY = "system"

# CSI and OSC escape sequences, same shape as rich.ansi's decoder pattern.
# Control characters such as \r and \t are left alone.
_ANSI_ESCAPE = re.compile(r"(?:\x1b\].*?(?:\x1b\\|\x07))|(?:\x1b(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~]))")

_WHITESPACE = re.compile(r"\s+")
_PATH_SEPARATORS = re.compile(r"[\\/]")


def format_timestamp(moment: datetime) -> str:
    """Render a clock reading the way a US operator reads a wall clock.

    Example: ``10/19/2026, 3:04:05 PM``. Meant for people watching a terminal,
    not for parsing.
    """
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return (
        f"{moment.month}/{moment.day}/{moment.year}, "
        f"{hour}:{moment.minute:02d}:{moment.second:02d} {meridiem}"
    )


def compose_line(message: str, options: LogOptions | None, timestamp: str) -> str:
    """Build ``[timestamp] [source] [account] [symbol] message``.

    Tags whose field is missing or empty are left out entirely, so there is
    never an empty bracket pair or a doubled space.
    """
    options = options or {}
    parts = [f"[{timestamp}]"]
    for key in ("source", "account", "symbol"):
        value = options.get(key)
        if value:
            parts.append(f"[{value}]")
    parts.append(message)
    return " ".join(parts)


def style_for(log_type: str | None) -> str | None:
    """Terminal style for a log type: red errors, yellow warnings, else none."""
    if log_type == "error":
        return "red"
    if log_type == "warn":
        return "yellow"
    return None


def render_line(line: str, log_type: str | None) -> Text:
    """Colorize a composed line for the terminal.

    The style covers the whole line. The line is not run through an ANSI
    decoder, so a carriage return inside the message cannot swallow the
    timestamp and tags.
    """
    return Text(line, style=style_for(log_type) or "")


def strip_ansi(text: str) -> str:
    """Remove terminal escape sequences, leaving the visible text."""
    return _ANSI_ESCAPE.sub("", text)


def routing_key(options: LogOptions | None) -> str | None:
    """Pick the file a line is persisted to, or None for terminal-only lines.

    A symbol always routes to its own file. Without one, the line is only
    persisted when ``log_to_file`` is set, keyed by the lower-cased,
    hyphenated source (``"Feed Manager"`` -> ``"feed-manager"``) or
    ``"system"``.
    """
    options = options or {}
    symbol = options.get("symbol")
    if symbol:
        return _PATH_SEPARATORS.sub("-", str(symbol))
    if not options.get("log_to_file"):
        return None
    source = options.get("source")
    if not source:
        return DEFAULT_ROUTING_KEY
    key = _WHITESPACE.sub("-", str(source).lower())
    return _PATH_SEPARATORS.sub("-", key)


def log_filename(key: str, moment: datetime) -> str:
    """``{key}-{YYYY}-{MM}-{DD}.log`` for the civil date of ``moment``."""
    return f"{key}-{moment.year:04d}-{moment.month:02d}-{moment.day:02d}.log"
