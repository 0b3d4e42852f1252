"""Non-interactive console adapter replaying pre-recorded answers."""

from __future__ import annotations

from collections import deque
from typing import Iterable

from ..interfaces import PromptIO


class ScriptedIO(PromptIO):
    """Answer prompts from a fixed list and keep a transcript of the session.

    Once the scripted answers are exhausted every further question receives an
    empty answer, which makes the collector fall back to defaults.
    """

    def __init__(self, answers: Iterable[str] = ()) -> None:
        self._answers = deque(answers)
        self.prompts: list[str] = []
        self.messages: list[str] = []
        self.warnings: list[str] = []

    @property
    def remaining(self) -> int:
        """Number of scripted answers not consumed yet."""

        return len(self._answers)

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            return ""
        return self._answers.popleft()

    def say(self, message: str = "") -> None:
        self.messages.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)


__all__ = ["ScriptedIO"]
