"""promptlog - Prompt-safe console logging with per-symbol daily log files"""

from .config import (
    CONFIG_FILE,
    DEFAULT_CONFIG,
    HISTORY_FILE,
    LOG_DIR,
    PROMPTLOG_DIR,
    TIMEZONE,
    get_float_setting,
    get_setting,
    load_config,
)
from .console import console
from .display import DisplayManager, get_display_manager, reset_display_manager
from .facade import DisplayLogger, Logger, get_logger, log, normalize_context, reset_logger, set_logger
from .formatting import compose_line, format_timestamp, log_filename, routing_key, strip_ansi
from .handler import PromptLogHandler
from .log_types import LogOptions, LogType

__all__ = [
    # Config
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "HISTORY_FILE",
    "LOG_DIR",
    "PROMPTLOG_DIR",
    "TIMEZONE",
    "get_float_setting",
    "get_setting",
    "load_config",
    # Console
    "console",
    # Coordinator
    "DisplayManager",
    "get_display_manager",
    "reset_display_manager",
    # Facade
    "DisplayLogger",
    "Logger",
    "get_logger",
    "log",
    "normalize_context",
    "reset_logger",
    "set_logger",
    # Formatting
    "compose_line",
    "format_timestamp",
    "log_filename",
    "routing_key",
    "strip_ansi",
    # stdlib logging bridge
    "PromptLogHandler",
    # Types
    "LogOptions",
    "LogType",
]
