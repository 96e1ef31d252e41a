"""
Shared Rich Console singleton for terminal output.

Every byte promptlog puts on the terminal goes through this one Console: log
lines, the prompt redraw, cursor control sequences and the demo banner. Rich's
Console tracks terminal state (width, color support) and serializes its own
writes, so sharing one instance keeps output from different call sites from
interleaving mid-line.

Tests can patch `promptlog.console.console`, or hand a Console writing to a
StringIO straight to `DisplayManager`.

Usage:
    from .console import console
    console.print("[yellow]Warning[/yellow]")
"""

from rich.console import Console

# Log lines belong on stdout, next to the prompt they are drawn above.
console = Console()
