"""Project assembly: directories, files and the optional follow-up steps."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .commands import CommandRunner, StepResult
from .config import ProjectSpec
from .layout import FULL, FeatureSet, ScaffoldPlan, build_plan

__all__ = ["AssemblyReport", "ProjectAssembler", "GIT_COMMANDS"]


LOGGER = logging.getLogger(__name__)

GIT_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("git", "init"),
    ("git", "add", "."),
    ("git", "commit", "-m", "Initial commit"),
)


@dataclass(frozen=True, slots=True)
class AssemblyReport:
    """What a single :meth:`ProjectAssembler.create` call produced."""

    project_path: Path
    directories: tuple[Path, ...]
    files: tuple[Path, ...]
    git: StepResult | None = None
    install: StepResult | None = None

    @property
    def dependencies_installed(self) -> bool:
        return self.install is not None and self.install.ok


class ProjectAssembler:
    """Create an Express project skeleton described by a :class:`ProjectSpec`."""

    def __init__(self, features: FeatureSet = FULL, runner: CommandRunner | None = None) -> None:
        self.features = features
        self.runner = runner or CommandRunner()

    def plan(self, spec: ProjectSpec) -> ScaffoldPlan:
        """Return the directories and rendered files for ``spec``."""

        return build_plan(spec, self.features)

    def create(self, spec: ProjectSpec, parent_dir: str | Path) -> AssemblyReport:
        """Materialise ``spec`` as ``parent_dir / spec.name``.

        All directories are created before the first file is written. Existing
        directories are reused and existing files with the same name are
        overwritten. Git initialisation and dependency installation are
        best-effort; their outcome is part of the returned report.
        """

        plan = self.plan(spec)
        project_path = Path(parent_dir).expanduser().resolve() / spec.name

        directories = [project_path]
        directories.extend(project_path / relative for relative in plan.directories)
        for directory in directories:
            if directory.is_dir():
                LOGGER.debug("directory %s already exists", directory)
                continue
            directory.mkdir(parents=True, exist_ok=True)
            LOGGER.debug("created directory %s", directory)

        written: list[Path] = []
        for entry in plan.files:
            destination = project_path / entry.path
            destination.write_text(entry.content, encoding="utf-8")
            LOGGER.debug("wrote %s", destination)
            written.append(destination)

        LOGGER.info(
            "scaffolded %s project %s with %d files", self.features.name, project_path, len(written)
        )

        git_result = None
        if spec.init_git:
            git_result = self.runner.run_step("git", GIT_COMMANDS, project_path)

        install_result = None
        if spec.install_dependencies:
            install_result = self.runner.run_step(
                "install", (spec.package_manager.install_command,), project_path
            )

        return AssemblyReport(
            project_path=project_path,
            directories=tuple(directories),
            files=tuple(written),
            git=git_result,
            install=install_result,
        )
