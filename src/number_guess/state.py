# Area: Game
"""
number_guess.state — Game state tracker
========================================

Tracks a single game from answer generation to the printed outcome.
A GameState belongs to exactly one game and is never reused.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import logging

logger = logging.getLogger("number_guess.state")


class GamePhase(Enum):
    """Current phase of a single game."""
    IDLE            = "idle"             # Nothing generated yet
    ANSWER_SET      = "answer_set"       # Answer generated, no entry read
    GUESSING        = "guessing"         # Prompting for a valid guess
    GUESS_ACCEPTED  = "guess_accepted"   # Valid guess in hand
    FINISHED        = "finished"         # Outcome printed


@dataclass
class GameState:
    """Full state of one game."""
    player_name: str
    phase: GamePhase = GamePhase.IDLE
    answer: Optional[int] = None
    guess: Optional[int] = None
    result: Optional[bool] = None
    rejected_inputs: List[str] = field(default_factory=list)

    def advance(self, phase: GamePhase) -> None:
        logger.debug(f"Phase {self.phase.value} -> {phase.value}")
        self.phase = phase

    @property
    def rejected_count(self) -> int:
        return len(self.rejected_inputs)

    @property
    def is_finished(self) -> bool:
        return self.phase is GamePhase.FINISHED
