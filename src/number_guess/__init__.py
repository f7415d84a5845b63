"""
number_guess — Console Number-Guessing Game
============================================

Guess a secret number between 1 and 10. Invalid entries are rejected
and asked again; the outcome is printed and returned as a bool.

Quick Start:
    from number_guess import play
    won = play("Alice")

Deterministic play (tests, scripted runs):
    import random
    from number_guess import GuessingGame, ScriptedConsole

    game = GuessingGame("Alice", rng=random.Random(1),
                        console=ScriptedConsole(["0", "11", "5"]))
    game.run()

Building blocks:
    generate_answer, is_valid_guess, calculate_result  (rules)
    acquire_guess                                      (guess_loop)
    print_result                                       (printer)
"""

from .game import GuessingGame, play
from .rules import (
    MIN_NUMBER,
    MAX_NUMBER,
    generate_answer,
    is_valid_guess,
    calculate_result,
)
from .guess_loop import (
    PROMPT,
    INVALID_ENTRY_MESSAGE,
    NonNumericPolicy,
    acquire_guess,
)
from .printer import print_result
from .console import Console, ScriptedConsole
from .config import GameSettings, load_settings
from .state import GamePhase, GameState
from .logging_config import setup_logging
from .errors import (
    NumberGuessError,
    InvalidGuessError,
    NonNumericInputError,
    AttemptsExhaustedError,
    InputClosedError,
    ConfigurationError,
)

__all__ = [
    # Main entry points
    "play",
    "GuessingGame",
    # Rules
    "MIN_NUMBER",
    "MAX_NUMBER",
    "generate_answer",
    "is_valid_guess",
    "calculate_result",
    # Guess acquisition
    "PROMPT",
    "INVALID_ENTRY_MESSAGE",
    "NonNumericPolicy",
    "acquire_guess",
    # Output
    "print_result",
    "Console",
    "ScriptedConsole",
    # Settings and state
    "GameSettings",
    "load_settings",
    "GamePhase",
    "GameState",
    "setup_logging",
    # Errors
    "NumberGuessError",
    "InvalidGuessError",
    "NonNumericInputError",
    "AttemptsExhaustedError",
    "InputClosedError",
    "ConfigurationError",
]
__version__ = "1.0.0"
