"""
Settings for the coordinator and the demo console.

Each value is resolved from the environment first (a local ``.env`` is
honoured), then from ``config.json`` under the promptlog directory, then from
DEFAULT_CONFIG. The JSON file is read once when this module is imported.
"""

import json
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .console import console

load_dotenv()

DEFAULT_CONFIG = {
    "PROMPTLOG_LOG_DIR": "logs",
    "PROMPTLOG_TIMEZONE": "America/New_York",
    "PROMPTLOG_PROMPT": "> ",
    "PROMPTLOG_HEARTBEAT_SECONDS": "0",
}

PROMPTLOG_DIR = Path(os.getenv("PROMPTLOG_DIR", str(Path.home() / ".promptlog")))
CONFIG_FILE = Path(os.getenv("PROMPTLOG_CONFIG_FILE", str(PROMPTLOG_DIR / "config.json")))
# readline history for `promptlog demo`
HISTORY_FILE = Path(os.getenv("PROMPTLOG_HISTORY_FILE", str(PROMPTLOG_DIR / "history")))


def ensure_promptlog_dir():
    """Create PROMPTLOG_DIR if missing; a failure is only a warning."""
    if not PROMPTLOG_DIR.exists():
        try:
            PROMPTLOG_DIR.mkdir(parents=True, exist_ok=True)
        except Exception as e:
            console.print(f"[yellow]Warning: Could not create directory {PROMPTLOG_DIR}: {e}[/yellow]")


def load_config() -> dict[str, Any]:
    """Read CONFIG_FILE as a flat JSON object; missing or unreadable gives {}."""
    if CONFIG_FILE.exists():
        try:
            with open(CONFIG_FILE) as f:
                config: dict[str, Any] = json.load(f)
                return config
        except Exception as e:
            console.print(f"[yellow]Warning: Could not load config file: {e}[/yellow]")
    return {}


def get_setting(key: str, default: str, config: dict[str, Any] | None = None) -> str:
    """Resolve a PROMPTLOG_* value.

    An empty environment variable counts as unset. Pass an already loaded
    `config` to avoid re-reading CONFIG_FILE.
    """
    env_val = os.getenv(key)
    if env_val:
        return env_val

    if config is None:
        config = load_config()
    if key in config:
        return str(config[key])

    return default


def get_float_setting(key: str, default: float, config: dict[str, Any] | None = None) -> float:
    value = get_setting(key, str(default), config)
    try:
        return float(value)
    except ValueError:
        console.print(
            f"[yellow]Warning: Invalid float value for {key}: {value}, using default {default}[/yellow]"
        )
        return default


_file_config = load_config()

# Coordinator
LOG_DIR = Path(get_setting("PROMPTLOG_LOG_DIR", DEFAULT_CONFIG["PROMPTLOG_LOG_DIR"], _file_config))
TIMEZONE = get_setting("PROMPTLOG_TIMEZONE", DEFAULT_CONFIG["PROMPTLOG_TIMEZONE"], _file_config).strip()

# Demo console
PROMPT = get_setting("PROMPTLOG_PROMPT", DEFAULT_CONFIG["PROMPTLOG_PROMPT"], _file_config)
HEARTBEAT_SECONDS = get_float_setting(
    "PROMPTLOG_HEARTBEAT_SECONDS", float(DEFAULT_CONFIG["PROMPTLOG_HEARTBEAT_SECONDS"]), _file_config
)
