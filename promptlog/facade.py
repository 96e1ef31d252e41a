"""
Pluggable leveled logger.

Call sites that only want error/warn/info/debug use `get_logger()` and never
see the coordinator. By default the backend is `DisplayLogger`, which turns
each call into a `DisplayManager.log` with the matching type. Any object with
the four methods can replace it via `set_logger`, e.g. a bridge to another
logging library, and `reset_logger` puts the default back.

Usage:
    from promptlog import get_logger

    logger = get_logger()
    logger.warn("Rate limit approaching", {"source": "Feed", "remaining": 10})
    logger.error("Order rejected", {"symbol": "AAPL", "account": "live"})
"""

from collections.abc import Mapping
from typing import Any, Protocol

from .display import DisplayManager, get_display_manager
from .log_types import OPTION_KEYS, LogOptions, LogType

DEFAULT_OPTIONS: LogOptions = {"source": "Server", "type": "info"}


class Logger(Protocol):
    def error(self, message: str, context: Any = None) -> None: ...

    def warn(self, message: str, context: Any = None) -> None: ...

    def info(self, message: str, context: Any = None) -> None: ...

    def debug(self, message: str, context: Any = None) -> None: ...


def normalize_context(context: Any) -> dict[str, Any] | None:
    """Coerce whatever a caller passed as context into a dict.

    None stays None, exceptions become ``{"error": {"message", "name"}}``,
    mappings are copied, anything else is wrapped as ``{"value": context}``.
    """
    if context is None:
        return None
    if isinstance(context, BaseException):
        return {"error": {"message": str(context), "name": type(context).__name__}}
    if isinstance(context, Mapping):
        return dict(context)
    return {"value": context}


def _describe(value: Any) -> str:
    if isinstance(value, Mapping) and set(value) == {"message", "name"}:
        return f"{value['name']}: {value['message']}"
    return str(value)


class DisplayLogger:
    """Default backend: route leveled calls into the coordinator.

    Context keys that name a log option (source, account, symbol,
    log_to_file) become options, tags as strings and log_to_file only when it
    is literally True; everything else is appended to the message as
    ``key=value``.
    """

    def __init__(self, display: DisplayManager | None = None):
        self._display = display

    @property
    def display(self) -> DisplayManager:
        return self._display or get_display_manager()

    def _emit(self, log_type: LogType, message: str, context: Any) -> None:
        options: LogOptions = {"type": log_type}
        extras = []
        for key, value in (normalize_context(context) or {}).items():
            if key == "log_to_file":
                options["log_to_file"] = value is True
            elif key in OPTION_KEYS and key != "type":
                if value is not None:
                    options[key] = str(value)  # type: ignore[literal-required]
            else:
                extras.append(f"{key}={_describe(value)}")
        if extras:
            message = f"{message} {' '.join(extras)}"
        self.display.log(message, options)

    def error(self, message: str, context: Any = None) -> None:
        self._emit("error", message, context)

    def warn(self, message: str, context: Any = None) -> None:
        self._emit("warn", message, context)

    def info(self, message: str, context: Any = None) -> None:
        self._emit("info", message, context)

    def debug(self, message: str, context: Any = None) -> None:
        self._emit("debug", message, context)


_default_logger: Logger = DisplayLogger()
_current_logger: Logger = _default_logger


def set_logger(logger: Logger) -> None:
    """Replace the backend used by `get_logger()`."""
    global _current_logger
    _current_logger = logger


def get_logger() -> Logger:
    """Return the current leveled logger."""
    return _current_logger


def reset_logger() -> None:
    """Restore the default coordinator-backed logger."""
    global _current_logger
    _current_logger = _default_logger


def log(message: str, options: LogOptions | None = None) -> None:
    """Log through the process-wide coordinator.

    Without options the line is tagged ``[Server]`` and rendered plain.
    """
    get_display_manager().log(message, DEFAULT_OPTIONS if options is None else options)
