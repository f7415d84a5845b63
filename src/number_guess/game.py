# Area: Game
"""
number_guess.game — Game orchestrator
======================================

Runs one game in a fixed order:
    generate answer → acquire valid guess → compare → print outcome

Quick Start:
    from number_guess import play

    if play("Alice"):
        ...

With injected dependencies (deterministic, no terminal):
    import random
    from number_guess import GuessingGame, ScriptedConsole

    game = GuessingGame(
        player_name="Alice",
        rng=random.Random(7),
        console=ScriptedConsole(["0", "11", "5"]),
    )
    won = game.run()
"""

from __future__ import annotations
import logging
import random
from typing import Optional, Union

from .config import DEFAULT_PLAYER_NAME, GameSettings
from .console import Console
from .guess_loop import NonNumericPolicy, acquire_guess
from .printer import print_result
from .rules import calculate_result, generate_answer
from .state import GamePhase, GameState

logger = logging.getLogger("number_guess.game")


class GuessingGame:
    """
    One round of the guessing game.

    The random source and console are injected; by default the game
    uses the process-wide ``random`` generator and the real terminal.
    Each instance plays once; the outcome stays available on ``state``.
    """

    def __init__(
        self,
        player_name: str = DEFAULT_PLAYER_NAME,
        rng: Optional[random.Random] = None,
        console: Optional[Console] = None,
        max_attempts: Optional[int] = None,
        policy: Union[NonNumericPolicy, str] = NonNumericPolicy.REPROMPT,
    ):
        self.rng = rng
        self.console = console if console is not None else Console()
        self.max_attempts = max_attempts
        self.policy = NonNumericPolicy(policy)
        self.state = GameState(player_name=player_name)

    @classmethod
    def from_settings(
        cls,
        settings: GameSettings,
        console: Optional[Console] = None,
        rng: Optional[random.Random] = None,
    ) -> "GuessingGame":
        """Build a game from validated settings."""
        return cls(
            player_name=settings.player_name,
            rng=rng if rng is not None else settings.make_rng(),
            console=console,
            max_attempts=settings.max_attempts,
            policy=settings.non_numeric_policy,
        )

    def run(self) -> bool:
        """
        Play the game and return whether the guess was correct.

        Raises
        ------
        RuntimeError
            If this game has already been played.
        NonNumericInputError, AttemptsExhaustedError, InputClosedError
            Propagated from guess acquisition.
        """
        state = self.state
        if state.phase is not GamePhase.IDLE:
            raise RuntimeError("A GuessingGame instance can only be played once")

        logger.info(f"Game started for {state.player_name}")

        state.answer = generate_answer(self.rng)
        state.advance(GamePhase.ANSWER_SET)

        state.advance(GamePhase.GUESSING)
        state.guess = acquire_guess(
            self.console,
            max_attempts=self.max_attempts,
            policy=self.policy,
            rejected=state.rejected_inputs,
        )
        state.advance(GamePhase.GUESS_ACCEPTED)

        state.result = calculate_result(state.guess, state.answer)
        print_result(state.player_name, state.result, state.answer, self.console)
        state.advance(GamePhase.FINISHED)

        logger.info(
            f"Game finished for {state.player_name}: "
            f"result={state.result} rejected={state.rejected_count}"
        )
        return state.result


def play(
    player_name: str = DEFAULT_PLAYER_NAME,
    rng: Optional[random.Random] = None,
    console: Optional[Console] = None,
    max_attempts: Optional[int] = None,
    policy: Union[NonNumericPolicy, str] = NonNumericPolicy.REPROMPT,
) -> bool:
    """Play a single game and return True if the guess was correct."""
    game = GuessingGame(
        player_name=player_name,
        rng=rng,
        console=console,
        max_attempts=max_attempts,
        policy=policy,
    )
    return game.run()
