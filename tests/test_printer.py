# Area: Game Tests
"""Tests for the outcome printer."""

from number_guess.console import ScriptedConsole
from number_guess.printer import format_result, print_result


class TestPrintResult:
    """Tests that exactly one fixed-format line is emitted."""

    def test_correct_guess_message(self):
        console = ScriptedConsole([])
        print_result("Alice", True, 7, console)
        assert console.output == ["Alice guessed correctly!"]

    def test_incorrect_guess_message_reveals_answer(self):
        console = ScriptedConsole([])
        print_result("Alice", False, 7, console)
        assert console.output == ["Alice guessed incorrectly! The answer was 7"]

    def test_returns_none(self):
        assert print_result("Bob", True, 1, ScriptedConsole([])) is None

    def test_default_console_writes_to_stdout(self, capsys):
        print_result("Alice", False, 7)
        captured = capsys.readouterr()
        assert captured.out == "Alice guessed incorrectly! The answer was 7\n"
        assert captured.err == ""


class TestFormatResult:
    """Tests for building the outcome line."""

    def test_success_does_not_mention_answer(self):
        assert format_result("Player", True, 3) == "Player guessed correctly!"

    def test_failure_uses_player_and_answer(self):
        assert format_result("Zed", False, 10) == "Zed guessed incorrectly! The answer was 10"
