"""Centralized logger for SalonSync.

Log lines go to stderr so they never mix with the terminal screens:

    14:02:11.532 INFO  [store] Appointment created | appointment_id=Xk3...
"""

import os
from datetime import datetime
from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
LEVEL_STYLES = {"debug": "dim", "info": "cyan", "warn": "yellow", "error": "red bold"}
MAX_VALUE_LENGTH = 150

_current_level = LEVELS.get(os.getenv("LOG_LEVEL", "info").lower(), LEVELS["info"])


def set_level(level: str) -> None:
    """Changes the minimum level at runtime (console --verbose)."""
    global _current_level
    _current_level = LEVELS.get(level.lower(), _current_level)


def is_enabled(level: str) -> bool:
    return LEVELS.get(level, 0) >= _current_level


def _format_data(data: dict[str, Any]) -> str:
    if not data:
        return ""
    parts = []
    for key, value in data.items():
        text = "None" if value is None else str(value)
        if len(text) > MAX_VALUE_LENGTH:
            text = text[:MAX_VALUE_LENGTH] + "..."
        parts.append(f"{key}={text}")
    return " | " + ", ".join(parts)


def log(level: str, context: str, message: str, **data):
    if not is_enabled(level):
        return

    style = LEVEL_STYLES.get(level, "white")
    stamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
    console.print(
        f"[dim]{stamp}[/dim] [{style}]{level.upper():<5}[/{style}] "
        f"[blue]\\[{escape(context)}][/blue] {escape(message + _format_data(data))}",
        highlight=False,
        soft_wrap=True,
    )


def debug(context: str, message: str, **data):
    log("debug", context, message, **data)


def info(context: str, message: str, **data):
    log("info", context, message, **data)


def warn(context: str, message: str, **data):
    log("warn", context, message, **data)


def error(context: str, message: str, **data):
    log("error", context, message, **data)
