"""Interactive console adapter backed by standard input and output."""

from __future__ import annotations

import sys
from typing import TextIO

from ..interfaces import PromptIO


class TerminalIO(PromptIO):
    """Read answers from ``stdin`` and print messages to ``stdout``/``stderr``."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._stderr = stderr if stderr is not None else sys.stderr

    def ask(self, prompt: str) -> str:
        self._stdout.write(prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        # A closed stream answers every remaining question with its default.
        return line.rstrip("\r\n")

    def say(self, message: str = "") -> None:
        print(message, file=self._stdout)

    def warn(self, message: str) -> None:
        print(message, file=self._stderr)


__all__ = ["TerminalIO"]
