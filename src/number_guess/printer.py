# Area: Game
"""Outcome messages shown to the operator at the end of a game."""

from __future__ import annotations
import logging
from typing import Optional

from .console import Console

logger = logging.getLogger("number_guess.printer")

SUCCESS_TEMPLATE = "{player} guessed correctly!"
FAILURE_TEMPLATE = "{player} guessed incorrectly! The answer was {answer}"


def format_result(player: str, result: bool, answer: int) -> str:
    """Build the single outcome line for a finished game."""
    if result:
        return SUCCESS_TEMPLATE.format(player=player)
    return FAILURE_TEMPLATE.format(player=player, answer=answer)


def print_result(
    player: str,
    result: bool,
    answer: int,
    console: Optional[Console] = None,
) -> None:
    """Write exactly one outcome line to the console."""
    console = console if console is not None else Console()
    console.write_line(format_result(player, result, answer))
    logger.info(f"Outcome for {player}: {'correct' if result else 'incorrect'}")
