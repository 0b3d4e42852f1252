"""Custom exception types raised while scaffolding a project."""

from __future__ import annotations


class ScaffoldError(RuntimeError):
    """Base class for errors raised by the scaffolder."""


class MissingProjectNameError(ScaffoldError, ValueError):
    """Raised when the user does not provide a project name."""

    def __init__(self, message: str = "Project name is required!") -> None:
        super().__init__(message)


class LayoutError(ScaffoldError):
    """Raised when a file would be written outside the planned directories."""


__all__ = ["LayoutError", "MissingProjectNameError", "ScaffoldError"]
