"""
Command registry for the promptlog demo console.

The single list of slash commands the console understands. The handlers live
in main.py's `handle_input`; this module only holds the metadata, so /help
and the dispatcher cannot drift apart.
"""

from typing import TypedDict


class CommandInfo(TypedDict):
    """One entry in the command registry."""

    triggers: list[str]  # Command triggers (e.g., ["/help"] or ["/quit", "/exit"])
    description: str  # Short one-line description for /help display
    usage: str  # Argument synopsis, empty when the command takes none


COMMANDS: list[CommandInfo] = [
    {
        "triggers": ["/help"],
        "description": "Show all available commands",
        "usage": "",
    },
    {
        "triggers": ["/quit", "/exit"],
        "description": "Stop the heartbeat and exit",
        "usage": "",
    },
    {
        "triggers": ["/prompt"],
        "description": "Change the prompt redrawn after every log line",
        "usage": "<text>",
    },
    {
        "triggers": ["/warn"],
        "description": "Log a yellow warning line",
        "usage": "<message>",
    },
    {
        "triggers": ["/error"],
        "description": "Log a red error line",
        "usage": "<message>",
    },
    {
        "triggers": ["/symbol"],
        "description": "Log a line tagged with a symbol (written to its daily file)",
        "usage": "<SYMBOL> <message>",
    },
    {
        "triggers": ["/file"],
        "description": "Log a line and persist it to the console's daily file",
        "usage": "<message>",
    },
    {
        "triggers": ["/clear"],
        "description": "Erase the prompt line and redraw it",
        "usage": "",
    },
]


def find_command(trigger: str) -> CommandInfo | None:
    """Look up a registry entry by any of its triggers."""
    for cmd in COMMANDS:
        if trigger in cmd["triggers"]:
            return cmd
    return None


def get_help_text() -> str:
    """Generate Rich-formatted help text for the /help command."""
    lines = ["\n[bold cyan]Available Commands:[/bold cyan]"]
    for cmd in COMMANDS:
        trigger_str = ", ".join(cmd["triggers"])
        if cmd["usage"]:
            trigger_str = f"{trigger_str} {cmd['usage']}"
        lines.append(f"  [green]{trigger_str:<28}[/green] - {cmd['description']}")
    lines.append("\nAnything else is logged as a plain \\[Console] line.")
    return "\n".join(lines)
