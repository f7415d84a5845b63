# Area: CLI Tests
"""Tests for the command-line interface."""

import io
import json
import logging
import os
import random
from unittest.mock import patch

import pytest

from number_guess.cli import (
    EXIT_ERROR,
    EXIT_INTERRUPTED,
    EXIT_OK,
    collect_overrides,
    get_console,
    main,
    parse_args,
)
from number_guess.console import Console, ScriptedConsole
from number_guess.guess_loop import INVALID_ENTRY_MESSAGE
from number_guess.logging_formatters import is_play_mode_enabled


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """Run in a temp dir with no NUMBER_GUESS_* env and a clean logger."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("NUMBER_GUESS_"):
            monkeypatch.delenv(key)
    yield
    pkg_logger = logging.getLogger("number_guess")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.propagate = True
    pkg_logger.setLevel(logging.NOTSET)


def seeded_answer(seed):
    return random.Random(seed).randint(1, 10)


class TestParseArgs:
    """Tests for argument parsing and mapping."""

    def test_defaults(self):
        args = parse_args([])
        assert args.player is None
        assert args.strict is False
        assert args.guesses is None

    def test_overrides_from_flags(self):
        args = parse_args(["--player", "Alice", "--max-attempts", "3", "--strict", "--seed", "4", "--verbose"])
        overrides = collect_overrides(args)
        assert overrides["player_name"] == "Alice"
        assert overrides["max_attempts"] == 3
        assert overrides["non_numeric_policy"] == "strict"
        assert overrides["seed"] == 4
        assert overrides["log_level"] == "DEBUG"

    def test_unset_flags_leave_policy_alone(self):
        overrides = collect_overrides(parse_args([]))
        assert "non_numeric_policy" not in overrides
        assert "log_level" not in overrides

    def test_get_console(self):
        assert isinstance(get_console(parse_args(["--guesses", "1, 2"])), ScriptedConsole)
        assert type(get_console(parse_args([]))) is Console


class TestMain:
    """End-to-end CLI runs with scripted entries."""

    def test_correct_guess(self, capsys):
        answer = seeded_answer(3)
        code = main(["--player", "Alice", "--seed", "3", "--guesses", f"0,11,{answer}"])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert out.count(INVALID_ENTRY_MESSAGE) == 2
        assert out.rstrip("\n").endswith("Alice guessed correctly!")

    def test_incorrect_guess_still_exits_ok(self, capsys):
        answer = seeded_answer(8)
        wrong = 1 if answer != 1 else 2
        code = main(["--seed", "8", "--guesses", str(wrong)])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert f"Player guessed incorrectly! The answer was {answer}" in out

    def test_strict_non_numeric_is_an_error(self, capsys):
        code = main(["--strict", "--guesses", "abc,5"])
        assert code == EXIT_ERROR
        assert "NON_NUMERIC_INPUT" in capsys.readouterr().err

    def test_attempts_exhausted_is_an_error(self, capsys):
        code = main(["--max-attempts", "2", "--guesses", "0,0,5"])
        assert code == EXIT_ERROR
        assert "ATTEMPTS_EXHAUSTED" in capsys.readouterr().err

    def test_running_out_of_entries_is_an_error(self, capsys):
        code = main(["--guesses", "0"])
        assert code == EXIT_ERROR
        assert "INPUT_CLOSED" in capsys.readouterr().err

    def test_reads_stdin_without_guesses(self, capsys):
        answer = seeded_answer(5)
        with patch("sys.stdin", io.StringIO(f"x\n{answer}\n")):
            code = main(["--seed", "5"])
        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "Player guessed correctly!" in out

    def test_very_long_number_is_an_invalid_entry(self, capsys):
        answer = seeded_answer(6)
        code = main(["--seed", "6", "--guesses", "9" * 5000 + f",{answer}"])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert out.count(INVALID_ENTRY_MESSAGE) == 1
        assert "Player guessed correctly!" in out

    def test_invalid_settings(self, capsys):
        code = main(["--max-attempts", "0"])
        assert code == EXIT_ERROR
        assert "CONFIGURATION_ERROR" in capsys.readouterr().err

    def test_config_file(self, tmp_path, capsys):
        answer = seeded_answer(12)
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"player_name": "Dana", "seed": 12}))

        code = main(["--config", str(config), "--guesses", str(answer)])

        assert code == EXIT_OK
        assert "Dana guessed correctly!" in capsys.readouterr().out

    def test_log_file_written(self, tmp_path):
        log_file = tmp_path / "out" / "game.log"
        main(["--log-file", str(log_file), "--guesses", "4"])
        assert log_file.exists()

    def test_keyboard_interrupt(self, capsys):
        with patch("number_guess.cli.run_game", side_effect=KeyboardInterrupt):
            code = main(["--guesses", "1"])
        assert code == EXIT_INTERRUPTED
        assert "Game cancelled." in capsys.readouterr().err

    def test_play_mode_restored_after_game(self):
        main(["--guesses", "1"])
        assert is_play_mode_enabled() is False
