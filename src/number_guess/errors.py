# Area: Shared
"""
number_guess.errors — Custom exception classes
===============================================

Defines the exception hierarchy for the guessing game.
Each exception stores its context for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from .error_formatter import format_error_block


class NumberGuessError(Exception):
    """Base exception for all number_guess package errors."""

    error_type = "NUMBER_GUESS_ERROR"

    def details(self) -> Dict[str, Any]:
        return {}

    def reasons(self) -> Optional[List[str]]:
        return None

    def format_error_log(self) -> str:
        return format_error_block(
            error_type=self.error_type,
            message=str(self),
            details=self.details(),
            reasons=self.reasons(),
        )


class InvalidGuessError(NumberGuessError):
    """Raised when an entry fails validation (out of range)."""

    error_type = "INVALID_GUESS"

    def __init__(self, raw_input: str, reason: str):
        self.raw_input = raw_input
        self.reason = reason
        super().__init__(f"Invalid guess {raw_input!r}: {reason}")

    def details(self) -> Dict[str, Any]:
        return {"raw_input": self.raw_input}

    def reasons(self) -> Optional[List[str]]:
        return [self.reason]


class NonNumericInputError(InvalidGuessError):
    """Raised when an entry cannot be read as an integer."""

    error_type = "NON_NUMERIC_INPUT"

    def __init__(self, raw_input: str):
        super().__init__(raw_input, "not a whole number")


class AttemptsExhaustedError(NumberGuessError):
    """Raised when the configured number of rejected entries is reached."""

    error_type = "ATTEMPTS_EXHAUSTED"

    def __init__(self, max_attempts: int, rejected_inputs: List[str]):
        self.max_attempts = max_attempts
        self.rejected_inputs = list(rejected_inputs)
        super().__init__(
            f"No valid guess after {max_attempts} attempt(s)"
        )

    def details(self) -> Dict[str, Any]:
        return {
            "max_attempts": self.max_attempts,
            "rejected_inputs": self.rejected_inputs,
        }


class InputClosedError(NumberGuessError):
    """Raised when the input stream ends before a valid guess arrives."""

    error_type = "INPUT_CLOSED"

    def __init__(self, message: str = "Input stream closed before a valid guess"):
        super().__init__(message)


class ConfigurationError(NumberGuessError):
    """Raised when game settings are missing or invalid."""

    error_type = "CONFIGURATION_ERROR"

    def __init__(self, message: str, validation_errors: Optional[List[str]] = None):
        self.validation_errors = validation_errors or []
        super().__init__(message)

    def reasons(self) -> Optional[List[str]]:
        return self.validation_errors or None
