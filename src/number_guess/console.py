# Area: Console
"""
number_guess.console — Operator-facing text I/O
================================================

The game never calls ``input()`` or ``print()`` directly. It talks to a
console object instead, so the same code drives a real terminal and a
scripted sequence of entries.

Usage:
    from number_guess.console import ScriptedConsole

    console = ScriptedConsole(["0", "11", "5"])
    ...
    console.output   # every line the game wrote
"""

from __future__ import annotations
import sys
from typing import IO, Iterable, List, Optional

from .errors import InputClosedError


class Console:
    """Console backed by text streams (stdin/stdout by default)."""

    def __init__(self, stdin: Optional[IO[str]] = None, stdout: Optional[IO[str]] = None):
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> IO[str]:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> IO[str]:
        return self._stdout if self._stdout is not None else sys.stdout

    def write_line(self, text: str) -> None:
        """Write one line of text."""
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def prompt(self, text: str) -> str:
        """
        Show a prompt and read one line of text.

        Raises
        ------
        InputClosedError
            If the input stream is exhausted.
        """
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise InputClosedError()
        return line.rstrip("\r\n")


class ScriptedConsole(Console):
    """
    Console that answers prompts from a fixed list of entries.

    Every prompt and line is recorded in ``output`` in order; the
    prompts alone go to ``prompts`` and written lines to ``lines``.
    """

    def __init__(self, entries: Iterable[str], echo: bool = False):
        super().__init__()
        self._entries = iter(list(entries))
        self._echo = echo
        self.output: List[str] = []
        self.prompts: List[str] = []
        self.lines: List[str] = []

    def write_line(self, text: str) -> None:
        self.output.append(text)
        self.lines.append(text)
        if self._echo:
            super().write_line(text)

    def prompt(self, text: str) -> str:
        self.prompts.append(text)
        self.output.append(text)
        try:
            entry = next(self._entries)
        except StopIteration:
            raise InputClosedError("Scripted entries exhausted before a valid guess")
        if self._echo:
            super().write_line(text + entry)
        return entry

