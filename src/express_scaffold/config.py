"""Configuration models shared by the prompt collector, registry and assembler."""

from __future__ import annotations

from enum import Enum
from pathlib import PureWindowsPath

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .naming import npm_package_name

__all__ = [
    "DEFAULT_PACKAGE_MANAGER",
    "Language",
    "PackageManager",
    "ProjectSpec",
]


class Language(str, Enum):
    """Source language of the generated project."""

    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"

    @property
    def extension(self) -> str:
        return "ts" if self is Language.TYPESCRIPT else "js"


class PackageManager(str, Enum):
    """Package managers the generated project can be set up with."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    @classmethod
    def parse(cls, value: str) -> PackageManager | None:
        """Return the manager named by ``value`` or ``None`` when unknown."""

        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    @property
    def install_command(self) -> list[str]:
        return [self.value, "install"]

    def run(self, script: str) -> str:
        """Return the shell command that runs ``script`` from the manifest."""

        if script == "start":
            return f"{self.value} start"
        return f"{self.value} run {script}"


DEFAULT_PACKAGE_MANAGER = PackageManager.NPM


class ProjectSpec(BaseModel):
    """Resolved user choices driving a single scaffold run.

    The model is frozen: it is built once from the prompt answers and handed
    unchanged to the template registry and the assembler.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Project name, also used as the directory name.")
    language: Language = Field(default=Language.TYPESCRIPT, description="Language variant of the generated sources.")
    package_manager: PackageManager = Field(default=DEFAULT_PACKAGE_MANAGER, description="Package manager used for install and run commands.")
    include_readme: bool = Field(default=True, description="Emit a README.md usage document.")
    include_examples: bool = Field(default=True, description="Emit the example controller and model.")
    install_dependencies: bool = Field(default=True, description="Run the package manager install after scaffolding.")
    init_git: bool = Field(default=True, description="Initialise a git repository with an initial commit.")

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("project name must not be empty")
        # The name becomes a directory below the target directory. Windows
        # parsing treats both separators and drive letters as path syntax.
        path = PureWindowsPath(cleaned)
        if path.anchor:
            raise ValueError(f"project name {cleaned!r} must be a relative name, not an absolute path")
        if ".." in path.parts:
            raise ValueError(f"project name {cleaned!r} must not contain '..' segments")
        return cleaned

    @property
    def typescript(self) -> bool:
        return self.language is Language.TYPESCRIPT

    @property
    def extension(self) -> str:
        return self.language.extension

    @property
    def package_name(self) -> str:
        """Name written to the ``name`` field of ``package.json``."""

        return npm_package_name(self.name)
