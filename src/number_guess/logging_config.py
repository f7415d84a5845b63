# Area: Shared
"""
number_guess.logging_config — Structured logging setup
======================================================

Configures dual logging: terminal (colored) + file (JSON).
Provides structured error logging.
Play mode suppresses standard logs on the terminal.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Union

from .logging_formatters import (
    JSONFormatter,
    PlayModeFilter,
    TerminalFormatter,
)

if TYPE_CHECKING:
    from .errors import NumberGuessError

# Package logger
logger = logging.getLogger("number_guess")


def setup_logging(
    log_file_path: str = "number_guess.log",
    level: Union[int, str] = logging.WARNING,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str
        Path to the log file. Defaults to 'number_guess.log' in current dir.
    level : int or str
        Logging level. Defaults to WARNING so the terminal stays quiet.
    """
    pkg_logger = logging.getLogger("number_guess")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    # Terminal handler with colors; stderr keeps stdout for the game itself
    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(PlayModeFilter())
    pkg_logger.addHandler(terminal_handler)

    # File handler with JSON
    try:
        log_path = Path(log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(JSONFormatter())
        pkg_logger.addHandler(file_handler)
    except OSError as e:
        pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_game_error(error: "NumberGuessError") -> None:
    """
    Log a game error in the structured format.

    Parameters
    ----------
    error : NumberGuessError
        The error to log.
    """
    error_block = error.format_error_log()

    # Print to terminal (bypassing logger for exact formatting)
    print(error_block, file=sys.stderr)

    # Before setup_logging the block above is the only report
    if not logger.handlers:
        return

    logger.error(
        f"Game error: {error.__class__.__name__}: {error}",
        extra={"error_type": error.error_type},
    )

