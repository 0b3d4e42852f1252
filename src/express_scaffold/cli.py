"""Command line entry points for the Express project generators."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Sequence

from .assembler import AssemblyReport, ProjectAssembler
from .commands import CommandRunner
from .config import ProjectSpec
from .errors import MissingProjectNameError
from .io import PromptIO, TerminalIO
from .layout import FULL, QUICK, FeatureSet
from .prompts import PromptCollector

LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "EXPRESS_SCAFFOLD_LOG_LEVEL"
_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _default_log_level() -> str:
    level = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    return level if level in _LOG_LEVELS else "WARNING"


def build_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path.cwd(),
        help="Directory in which the project folder is created",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        default=_default_log_level(),
        help=f"Diagnostic log level (defaults to ${LOG_LEVEL_ENV} or WARNING)",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level if level in _LOG_LEVELS else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _print_banner(io: PromptIO, title: str) -> None:
    io.say(title)
    io.say("=" * len(title))
    io.say()


def _print_summary(io: PromptIO, spec: ProjectSpec, report: AssemblyReport) -> None:
    for path in report.files:
        io.say(f"Created file: {path.relative_to(report.project_path).as_posix()}")

    if report.git is not None:
        if report.git.ok:
            io.say("Initialized Git repository")
        else:
            io.warn(report.git.error or "Git initialization failed")

    if report.install is not None:
        if report.install.ok:
            io.say("Dependencies installed successfully!")
        else:
            io.warn(report.install.error or "Dependency installation failed")

    manager = spec.package_manager
    steps = [f"cd {spec.name}"]
    if not report.dependencies_installed:
        steps.append(" ".join(manager.install_command))
    steps.append(manager.run("dev"))

    io.say()
    io.say(f'Project "{spec.name}" created successfully at {report.project_path}')
    io.say()
    io.say("Next steps:")
    for number, step in enumerate(steps, start=1):
        io.say(f"{number}. {step}")


def _run(
    features: FeatureSet,
    title: str,
    argv: Sequence[str] | None,
    io: PromptIO | None,
    runner: CommandRunner | None,
) -> int:
    parser = build_parser(title)
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    console = io or TerminalIO()
    _print_banner(console, title)

    try:
        spec = PromptCollector(console, features).collect()
        console.say()
        console.say("Creating project...")
        report = ProjectAssembler(features, runner).create(spec, args.directory)
    except MissingProjectNameError as exc:
        console.warn(str(exc))
        return 1
    except KeyboardInterrupt:
        console.say()
        console.say("Setup cancelled by user")
        return 0
    except Exception as exc:
        LOGGER.debug("scaffolding failed", exc_info=True)
        console.warn("An error occurred:")
        console.warn(str(exc))
        return 1

    _print_summary(console, spec, report)
    return 0


def main(
    argv: Sequence[str] | None = None,
    io: PromptIO | None = None,
    runner: CommandRunner | None = None,
) -> int:
    """Run the full generator with auth, middleware and optional examples."""

    return _run(FULL, "Express Project Generator", argv, io, runner)


def quick_main(
    argv: Sequence[str] | None = None,
    io: PromptIO | None = None,
    runner: CommandRunner | None = None,
) -> int:
    """Run the minimal generator: an entry point and tool configuration only."""

    return _run(QUICK, "Express Quick Setup", argv, io, runner)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
