# Area: Game
"""
number_guess.guess_loop — Guess acquisition
============================================

Prompts the operator until an entry passes the validity predicate.

Each entry goes through two checks:
1. Parse — decimal integer text, surrounding whitespace ignored
2. Range — ``rules.is_valid_guess``

A failed check prints INVALID_ENTRY_MESSAGE and prompts again. Retries
are unbounded unless ``max_attempts`` is given. Unparsable text counts
as an invalid entry under the REPROMPT policy and is fatal under STRICT.
"""

from __future__ import annotations
import logging
import re
from enum import Enum
from typing import List, Optional, Union

from .console import Console
from .errors import (
    AttemptsExhaustedError,
    InvalidGuessError,
    NonNumericInputError,
)
from .rules import MAX_NUMBER, MIN_NUMBER, is_valid_guess

logger = logging.getLogger("number_guess.guess_loop")

PROMPT = f"Guess a number between {MIN_NUMBER} and {MAX_NUMBER}: "
INVALID_ENTRY_MESSAGE = "Invalid entry, please try again."

# Optional sign followed by ASCII digits only ("5.0", "٥" and "1_0" are rejected)
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Digits (leading zeros dropped) of the widest in-range magnitude
_MAX_DIGITS = max(len(str(abs(MIN_NUMBER))), len(str(abs(MAX_NUMBER))))


class NonNumericPolicy(str, Enum):
    """What to do with an entry that is not a whole number."""
    REPROMPT = "reprompt"    # Treat as an invalid entry and ask again
    STRICT = "strict"        # Raise NonNumericInputError to the caller


def parse_guess(raw_input: str) -> int:
    """
    Convert one line of operator text to an integer.

    Raises
    ------
    NonNumericInputError
        If the text is not a decimal integer.
    InvalidGuessError
        If the integer has too many digits to lie in the answer range.
    """
    text = raw_input.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise NonNumericInputError(raw_input)
    # Long digit strings are out of range; int() refuses very long ones
    if len(text.lstrip("+-").lstrip("0")) > _MAX_DIGITS:
        raise InvalidGuessError(
            raw_input, f"too many digits to lie in {MIN_NUMBER}..{MAX_NUMBER}"
        )
    return int(text)


def check_guess(raw_input: str) -> int:
    """
    Parse an entry and apply the validity predicate.

    Raises
    ------
    NonNumericInputError
        If the text is not a decimal integer.
    InvalidGuessError
        If the number lies outside the answer range.
    """
    number = parse_guess(raw_input)
    if not is_valid_guess(number):
        raise InvalidGuessError(
            raw_input, f"{number} is outside {MIN_NUMBER}..{MAX_NUMBER}"
        )
    return number


def acquire_guess(
    console: Console,
    max_attempts: Optional[int] = None,
    policy: Union[NonNumericPolicy, str] = NonNumericPolicy.REPROMPT,
    rejected: Optional[List[str]] = None,
) -> int:
    """
    Prompt until a valid guess is entered and return it.

    Parameters
    ----------
    console : Console
        Where the prompt and invalid-entry messages go, and where
        entries come from.
    max_attempts : int, optional
        Number of rejected entries after which to give up. None means
        retry forever.
    policy : NonNumericPolicy or str
        Handling of unparsable entries.
    rejected : list, optional
        Receives every rejected raw entry, in order.

    Returns
    -------
    int
        The accepted guess.

    Raises
    ------
    NonNumericInputError
        On unparsable text under the STRICT policy.
    AttemptsExhaustedError
        When ``max_attempts`` entries were rejected.
    InputClosedError
        When the console runs out of input.
    """
    policy = NonNumericPolicy(policy)
    if rejected is None:
        rejected = []

    while True:
        raw_input = console.prompt(PROMPT)
        try:
            guess = check_guess(raw_input)
        except NonNumericInputError:
            if policy is NonNumericPolicy.STRICT:
                logger.error(f"Non-numeric entry {raw_input!r} under strict policy")
                raise
            logger.info(f"Rejected entry {raw_input!r}: not a whole number")
        except InvalidGuessError as e:
            logger.info(f"Rejected entry {raw_input!r}: {e.reason}")
        else:
            logger.info(f"Accepted guess {guess} after {len(rejected)} rejected entries")
            return guess

        rejected.append(raw_input)
        console.write_line(INVALID_ENTRY_MESSAGE)

        if max_attempts is not None and len(rejected) >= max_attempts:
            logger.warning(f"Giving up after {len(rejected)} rejected entries")
            raise AttemptsExhaustedError(max_attempts, rejected)
