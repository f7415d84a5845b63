# Area: Console Tests
"""Tests for the console abstraction."""

import io

import pytest

from number_guess.console import Console, ScriptedConsole
from number_guess.errors import InputClosedError


class TestConsole:
    """Tests for the stream-backed console."""

    def test_write_line(self):
        out = io.StringIO()
        Console(stdout=out).write_line("hello")
        assert out.getvalue() == "hello\n"

    def test_prompt_reads_one_line(self):
        out = io.StringIO()
        console = Console(stdin=io.StringIO("5\n6\n"), stdout=out)

        assert console.prompt("> ") == "5"
        assert out.getvalue() == "> "

    def test_prompt_strips_line_endings_only(self):
        console = Console(stdin=io.StringIO("  7 \r\n"), stdout=io.StringIO())
        assert console.prompt("> ") == "  7 "

    def test_empty_line_is_not_end_of_input(self):
        console = Console(stdin=io.StringIO("\n"), stdout=io.StringIO())
        assert console.prompt("> ") == ""

    def test_end_of_input_raises(self):
        console = Console(stdin=io.StringIO(""), stdout=io.StringIO())
        with pytest.raises(InputClosedError):
            console.prompt("> ")

    def test_defaults_to_process_streams(self, capsys):
        Console().write_line("on stdout")
        assert capsys.readouterr().out == "on stdout\n"


class TestScriptedConsole:
    """Tests for the scripted console."""

    def test_entries_returned_in_order(self):
        console = ScriptedConsole(["a", "b"])
        assert console.prompt("1: ") == "a"
        assert console.prompt("2: ") == "b"
        assert console.prompts == ["1: ", "2: "]

    def test_records_output(self):
        console = ScriptedConsole(["x"])
        console.prompt("? ")
        console.write_line("done")
        assert console.output == ["? ", "done"]
        assert console.lines == ["done"]

    def test_exhausted_entries_raise(self):
        console = ScriptedConsole([])
        with pytest.raises(InputClosedError):
            console.prompt("? ")

    def test_echo_writes_to_stdout(self, capsys):
        console = ScriptedConsole(["3"], echo=True)
        console.prompt("Guess: ")
        console.write_line("ok")
        assert capsys.readouterr().out == "Guess: 3\nok\n"

    def test_silent_by_default(self, capsys):
        console = ScriptedConsole(["3"])
        console.prompt("Guess: ")
        console.write_line("ok")
        assert capsys.readouterr().out == ""
