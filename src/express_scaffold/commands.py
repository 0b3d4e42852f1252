"""Best-effort execution of external tools inside the generated project."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

__all__ = ["CommandRunner", "StepResult"]


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StepResult:
    """Outcome of a best-effort step such as ``git init`` or an install."""

    name: str
    ok: bool
    commands: tuple[str, ...] = ()
    error: str | None = None


class CommandRunner:
    """Run command sequences with ``subprocess`` and report failures as results.

    Output of the child processes is not captured so that package manager
    progress stays visible in the terminal.
    """

    def run(self, argv: Sequence[str], cwd: Path) -> None:
        """Run ``argv`` in ``cwd`` and raise when it fails."""

        subprocess.run(list(argv), cwd=cwd, check=True)

    def run_step(self, name: str, commands: Sequence[Sequence[str]], cwd: Path) -> StepResult:
        """Run ``commands`` in order, stopping at the first failure.

        Failures never propagate: a missing executable or a non-zero exit code
        is logged and returned as an unsuccessful :class:`StepResult`.
        """

        executed: list[str] = []
        for argv in commands:
            display = " ".join(argv)
            executed.append(display)
            LOGGER.info("running %s in %s", display, cwd)
            try:
                self.run(argv, cwd)
            except subprocess.CalledProcessError as exc:
                LOGGER.error("%s exited with status %s", display, exc.returncode)
                return StepResult(
                    name=name,
                    ok=False,
                    commands=tuple(executed),
                    error=f"Error executing: {display} (exit status {exc.returncode})",
                )
            except OSError as exc:
                LOGGER.error("%s could not be started: %s", display, exc)
                return StepResult(
                    name=name,
                    ok=False,
                    commands=tuple(executed),
                    error=f"Error executing: {display} ({exc})",
                )
        return StepResult(name=name, ok=True, commands=tuple(executed))
