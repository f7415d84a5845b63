# Area: Shared
"""
number_guess.logging_formatters — Logging formatters and filters
================================================================

Terminal and file formatters for the ``number_guess`` logger, plus the
play mode switch that keeps log lines off the terminal while the
operator is answering prompts.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

_play_mode_enabled = False


class PlayModeFilter(logging.Filter):
    """Drops every record while a game is prompting the operator."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not _play_mode_enabled


class TerminalFormatter(logging.Formatter):
    """Prefixes the level name with an ANSI color."""

    COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Color a copy so the file handler still sees the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelno, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """One JSON object per line; game errors also carry their error_type."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        error_type = getattr(record, "error_type", None)
        if error_type is not None:
            log_data["error_type"] = error_type
        return json.dumps(log_data)


def enable_play_mode() -> None:
    """Mute terminal logging while the game prompts; the JSON file keeps logging."""
    global _play_mode_enabled
    _play_mode_enabled = True


def disable_play_mode() -> None:
    """Resume terminal logging once the game is over."""
    global _play_mode_enabled
    _play_mode_enabled = False


def is_play_mode_enabled() -> bool:
    return _play_mode_enabled
