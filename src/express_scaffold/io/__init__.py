"""Console I/O abstractions for the scaffolder."""

from .adapters import ScriptedIO, TerminalIO
from .interfaces import PromptIO

__all__ = ["PromptIO", "ScriptedIO", "TerminalIO"]
