"""
The console/file log coordinator.

`DisplayManager` is the only thing in the process that writes to the terminal
while an interactive prompt is showing. It remembers the prompt text, and for
every log call it runs one log transaction:

  1. erase the current line (the drawn prompt) and return to column 0
  2. read the clock once and format the timestamp
  3. compose the plain line: [timestamp] [source] [account] [symbol] message
  4. color it for the terminal (red errors, yellow warnings)
  5. print it
  6. append the plain text to today's file for its routing key, if any
  7. redraw the prompt, without a newline

A single lock covers all seven steps, so log calls from different threads
never interleave on the terminal and the prompt is always redrawn as it was
when the transaction started.

File persistence never raises. If the log directory or the file cannot be
written, a one-line diagnostic goes straight to the console's stream. It does
not go back through `log`, since the file system it would try to use is the
thing that just failed.

Usage:
    from promptlog import get_display_manager

    display = get_display_manager()
    display.set_prompt("> ")
    display.log("Order filled", {"symbol": "AAPL", "account": "paper"})
"""

import threading
from collections.abc import Callable
from datetime import datetime
from functools import partial
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from rich.console import Console
from rich.control import Control, ControlType

from . import config
from .console import console as shared_console
from .formatting import (
    compose_line,
    format_timestamp,
    log_filename,
    render_line,
    routing_key,
    strip_ansi,
)
from .log_types import LogOptions

FALLBACK_TIMEZONE = "America/New_York"


def resolve_timezone(name: str, console: Console | None = None) -> ZoneInfo:
    """Look up an IANA timezone, falling back to New York with a warning."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        (console or shared_console).print(
            f"[yellow]Warning: Unknown timezone {name!r}, using {FALLBACK_TIMEZONE}[/yellow]"
        )
        return ZoneInfo(FALLBACK_TIMEZONE)


class DisplayManager:
    """Owns the terminal cursor and the current prompt text."""

    def __init__(
        self,
        console: Console | None = None,
        log_dir: str | Path | None = None,
        timezone: str | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.console = console or shared_console
        self.log_dir = Path(log_dir) if log_dir is not None else config.LOG_DIR
        if clock is None:
            zone = resolve_timezone(timezone or config.TIMEZONE, self.console)
            clock = partial(datetime.now, zone)
        self._clock = clock
        self._prompt_text = ""
        self._lock = threading.Lock()

    @property
    def prompt_text(self) -> str:
        return self._prompt_text

    def set_prompt(self, text: str) -> None:
        """Remember the prompt to redraw after every log line."""
        with self._lock:
            self._prompt_text = text

    def log(self, message: str, options: LogOptions | None = None) -> None:
        """Print a log line above the prompt and persist it when routed."""
        options = options or {}
        with self._lock:
            self._erase_line()

            now = self._clock()
            line = compose_line(message, options, format_timestamp(now))

            self.console.print(render_line(line, options.get("type")), soft_wrap=True)

            key = routing_key(options)
            if key is not None:
                kind = "symbol" if options.get("symbol") else "generic"
                self._write_file(key, now, strip_ansi(line), kind)

            self._write_prompt()

    def clear_prompt(self) -> None:
        """Erase the prompt line without printing or redrawing anything."""
        with self._lock:
            self._erase_line()

    def restore_prompt(self) -> None:
        """Redraw the stored prompt, e.g. after `clear_prompt`."""
        with self._lock:
            self._write_prompt()

    def _erase_line(self) -> None:
        # Only meaningful on a real terminal; piped output stays clean.
        if self.console.is_terminal:
            self.console.control(
                Control((ControlType.ERASE_IN_LINE, 2)),
                Control.move_to_column(0),
            )

    def _write_prompt(self) -> None:
        self.console.out(self._prompt_text, end="", highlight=False)

    def _write_file(self, key: str, moment: datetime, text: str, kind: str) -> None:
        path = self.log_dir / log_filename(key, moment)
        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "a", encoding="utf-8") as f:
                f.write(text + "\n")
        except Exception as e:
            self._report_failure(f"Error writing to {kind} log file: {e}")

    def _report_failure(self, text: str) -> None:
        # Raw write to the underlying stream: no Rich rendering, no log().
        stream = self.console.file
        stream.write(text + "\n")
        stream.flush()


_instance: DisplayManager | None = None
_instance_lock = threading.Lock()


def get_display_manager() -> DisplayManager:
    """Return the process-wide coordinator, creating it on first use."""
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = DisplayManager()
        return _instance


def reset_display_manager() -> None:
    """Forget the process-wide coordinator; the next access builds a new one."""
    global _instance
    with _instance_lock:
        _instance = None
