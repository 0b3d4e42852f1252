"""Concrete :class:`~express_scaffold.io.interfaces.PromptIO` implementations."""

from .scripted import ScriptedIO
from .terminal import TerminalIO

__all__ = ["ScriptedIO", "TerminalIO"]
