# Area: Game
"""
number_guess.rules — Pure game rules
=====================================

The answer range, the answer generator, the validity predicate and
the result calculator. Nothing here touches the console.
"""

from __future__ import annotations
import logging
import random
from typing import Optional

logger = logging.getLogger("number_guess.rules")

# Closed range shared by the answer and every accepted guess
MIN_NUMBER = 1
MAX_NUMBER = 10


def generate_answer(rng: Optional[random.Random] = None) -> int:
    """
    Pick the answer uniformly from [MIN_NUMBER, MAX_NUMBER].

    Parameters
    ----------
    rng : random.Random, optional
        Random source. Defaults to the process-wide generator of the
        ``random`` module.
    """
    source = rng if rng is not None else random
    answer = source.randint(MIN_NUMBER, MAX_NUMBER)
    logger.debug(f"Answer generated: {answer}")
    return answer


def is_valid_guess(number: int) -> bool:
    """Check whether a candidate lies in the closed answer range."""
    return MIN_NUMBER <= number <= MAX_NUMBER


def calculate_result(guess: int, answer: int) -> bool:
    """Return True when the guess matches the answer."""
    return guess == answer
