"""
Interactive demo console.

Reads lines at a prompt while a background heartbeat logs on its own thread,
so log lines visibly land above the prompt instead of through it. Slash
commands (see commands.py) exercise each log type and both file routes.

Every branch of `handle_input` leaves the prompt drawn: log calls redraw it
themselves, and anything printed directly is wrapped in clear_prompt /
restore_prompt.
"""

import atexit
import readline
import threading
from importlib.metadata import PackageNotFoundError, version

from rich import box
from rich.panel import Panel

from .commands import find_command, get_help_text
from .config import HEARTBEAT_SECONDS, HISTORY_FILE, PROMPT, ensure_promptlog_dir
from .console import console
from .display import DisplayManager, get_display_manager

CONSOLE_SOURCE = "Console"


def get_version() -> str:
    """Installed package version, or "dev" when running from a source checkout."""
    try:
        return version("promptlog")
    except PackageNotFoundError:
        return "dev"


def print_header(display: DisplayManager | None = None):
    """Print the welcome banner"""
    display = display or get_display_manager()
    display.console.print(
        Panel(
            f"[bold]promptlog[/bold] v{get_version()}\n"
            f"Log directory: [cyan]{display.log_dir}[/cyan]\n"
            "Type [green]/help[/green] for commands.",
            box=box.ROUNDED,
            border_style="cyan",
            expand=False,
        )
    )


def setup_readline():
    """Setup command history and persistent storage"""
    try:
        ensure_promptlog_dir()
        if HISTORY_FILE.exists():
            readline.read_history_file(str(HISTORY_FILE))

        # Save history on exit
        atexit.register(readline.write_history_file, str(HISTORY_FILE))
    except Exception as e:
        console.print(f"[yellow]Warning: Could not setup command history: {e}[/yellow]")


class Heartbeat:
    """Log a line every `interval` seconds from a daemon thread."""

    def __init__(self, display: DisplayManager, interval: float, source: str = "Heartbeat"):
        self.display = display
        self.interval = interval
        self.source = source
        self.beats = 0
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def tick(self) -> None:
        self.beats += 1
        self.display.log(f"heartbeat #{self.beats}", {"source": self.source})

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            self.tick()

    def start(self) -> None:
        self._thread = threading.Thread(target=self._run, name="promptlog-heartbeat", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None


def handle_input(display: DisplayManager, line: str) -> bool:
    """Act on one line of input. Returns False when the user asked to quit."""
    text = line.strip()
    if not text:
        display.restore_prompt()
        return True

    if not text.startswith("/"):
        display.log(text, {"source": CONSOLE_SOURCE})
        return True

    trigger, _, rest = text.partition(" ")
    rest = rest.strip()
    cmd = find_command(trigger)
    if cmd is None:
        display.log(f"Unknown command: {trigger} (try /help)", {"type": "warn", "source": CONSOLE_SOURCE})
        return True

    primary = cmd["triggers"][0]
    if primary == "/quit":
        return False

    if primary == "/help":
        display.clear_prompt()
        display.console.print(get_help_text())
        display.restore_prompt()
    elif primary == "/prompt":
        # Keep the trailing space users expect after a prompt
        display.set_prompt(f"{rest} " if rest else PROMPT)
        display.restore_prompt()
    elif primary == "/clear":
        display.clear_prompt()
        display.restore_prompt()
    elif primary in ("/warn", "/error"):
        display.log(rest, {"type": primary[1:], "source": CONSOLE_SOURCE})  # type: ignore[typeddict-item]
    elif primary == "/file":
        display.log(rest, {"source": CONSOLE_SOURCE, "log_to_file": True})
    elif primary == "/symbol":
        symbol, _, message = rest.partition(" ")
        if not symbol:
            display.log("Usage: /symbol <SYMBOL> <message>", {"type": "warn", "source": CONSOLE_SOURCE})
        else:
            display.log(message.strip(), {"source": CONSOLE_SOURCE, "symbol": symbol.upper()})
    return True


def main():
    display = get_display_manager()
    display.set_prompt(PROMPT)

    print_header(display)
    setup_readline()

    heartbeat = None
    if HEARTBEAT_SECONDS > 0:
        heartbeat = Heartbeat(display, HEARTBEAT_SECONDS)
        heartbeat.start()

    display.restore_prompt()
    try:
        while True:
            try:
                # The prompt is drawn by the display, not by input()
                line = input()
            except (EOFError, KeyboardInterrupt):
                console.print()
                break
            if not handle_input(display, line):
                break
    finally:
        if heartbeat is not None:
            heartbeat.stop()
    console.print("[bold green]Goodbye![/bold green]")


if __name__ == "__main__":
    main()
