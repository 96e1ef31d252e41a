"""Types shared by the coordinator, the facade and the logging handler."""

from typing import Any, Literal, TypedDict

# Only "warn" and "error" change the terminal color; the rest render plain.
LogType = Literal["plain", "info", "debug", "warn", "error", "major", "table", "system", "cost"]


class LogOptions(TypedDict, total=False):
    """Per-call options for `DisplayManager.log`.

    Every key is optional. `source`, `account` and `symbol` become bracketed
    tags on the line; `symbol` also routes the line to a per-symbol file, and
    `log_to_file` opts a symbol-less line into the per-source file.
    `metadata` is carried for callers and never rendered.
    """

    type: LogType
    source: str
    account: str
    symbol: str
    log_to_file: bool
    metadata: dict[str, Any]


# Context keys the facade and the logging handler lift into LogOptions.
OPTION_KEYS = ("type", "source", "account", "symbol", "log_to_file")
