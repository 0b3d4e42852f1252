"""Abstract console interface used by the prompt collector and CLI."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PromptIO(ABC):
    """Line based conversation with the person running the scaffolder."""

    @abstractmethod
    def ask(self, prompt: str) -> str:
        """Show ``prompt`` and return the answer without its trailing newline."""

    @abstractmethod
    def say(self, message: str = "") -> None:
        """Display an informational line."""

    @abstractmethod
    def warn(self, message: str) -> None:
        """Display a warning or error line."""


__all__ = ["PromptIO"]
