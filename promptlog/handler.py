"""Bridge from the standard library's `logging` module into the coordinator."""

import logging

from .display import DisplayManager, get_display_manager
from .log_types import LogOptions, LogType


def level_to_type(levelno: int) -> LogType:
    if levelno >= logging.ERROR:
        return "error"
    if levelno >= logging.WARNING:
        return "warn"
    if levelno >= logging.INFO:
        return "info"
    return "debug"


class PromptLogHandler(logging.Handler):
    """Send `logging` records through a `DisplayManager`.

    The record's logger name becomes the source tag unless the call passes
    its own via ``extra``; ``extra`` may also carry ``symbol``, ``account``
    and ``log_to_file``:

        logger.warning("Spread widened", extra={"symbol": "AAPL"})
    """

    def __init__(self, display: DisplayManager | None = None, level=logging.NOTSET):
        super().__init__(level)
        self._display = display

    @property
    def display(self) -> DisplayManager:
        return self._display or get_display_manager()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            options: LogOptions = {
                "type": level_to_type(record.levelno),
                "source": str(getattr(record, "source", None) or record.name),
            }
            for key in ("account", "symbol"):
                value = getattr(record, key, None)
                if value:
                    options[key] = str(value)  # type: ignore[literal-required]
            if getattr(record, "log_to_file", False) is True:
                options["log_to_file"] = True
            self.display.log(message, options)
        except Exception:
            self.handleError(record)
