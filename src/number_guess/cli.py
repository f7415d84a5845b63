# Area: Shared
"""
number_guess.cli — Command-line interface
==========================================

Provides CLI entry point for playing a game.

Usage:
    python -m number_guess                          # Play as "Player"
    python -m number_guess --player Alice           # Named player
    python -m number_guess --guesses 0,11,5 --seed 3  # Scripted entries

Settings can also come from a JSON config file (--config) or from
NUMBER_GUESS_* environment variables (a .env file is honoured).
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from .config import GameSettings, load_settings
from .console import Console, ScriptedConsole
from .errors import NumberGuessError
from .game import GuessingGame
from .logging_config import log_game_error, setup_logging
from .logging_formatters import disable_play_mode, enable_play_mode

logger = logging.getLogger("number_guess.cli")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="number-guess",
        description="Guess the secret number between 1 and 10",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m number_guess
  python -m number_guess --player Alice
  python -m number_guess --max-attempts 3 --strict
  python -m number_guess --guesses 0,11,5 --seed 3
  NUMBER_GUESS_PLAYER=Alice python -m number_guess
        """,
    )

    parser.add_argument(
        "--player",
        type=str,
        help="Name shown in the outcome message (default: Player)",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--max-attempts",
        type=int,
        help="Give up after this many invalid entries (default: unlimited)",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Stop with an error on non-numeric input instead of asking again",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Seed the random source for a reproducible answer",
    )

    parser.add_argument(
        "--guesses",
        type=str,
        help="Comma-separated entries to play instead of reading stdin",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Path to the JSON log file (default: number_guess.log)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level",
    )

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def collect_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Map CLI flags onto settings keys; unset flags are left out."""
    overrides: Dict[str, Any] = {
        "player_name": args.player,
        "max_attempts": args.max_attempts,
        "seed": args.seed,
        "log_file": args.log_file,
    }
    if args.strict:
        overrides["non_numeric_policy"] = "strict"
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return overrides


def get_console(args: argparse.Namespace) -> Console:
    """Real terminal, or scripted entries when --guesses is given."""
    if args.guesses is not None:
        entries = [entry.strip() for entry in args.guesses.split(",")]
        return ScriptedConsole(entries, echo=True)
    return Console()


def run_game(settings: GameSettings, console: Console) -> bool:
    """Play one game with terminal logging muted while prompting."""
    game = GuessingGame.from_settings(settings, console=console)
    enable_play_mode()
    try:
        return game.run()
    finally:
        disable_play_mode()


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        settings = load_settings(args.config, overrides=collect_overrides(args))
    except NumberGuessError as e:
        log_game_error(e)
        return EXIT_ERROR

    setup_logging(log_file_path=settings.log_file, level=settings.log_level)

    try:
        run_game(settings, get_console(args))
    except KeyboardInterrupt:
        print("\nGame cancelled.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except NumberGuessError as e:
        log_game_error(e)
        return EXIT_ERROR

    return EXIT_OK
