"""Interactive collection of the answers that make up a :class:`ProjectSpec`."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import DEFAULT_PACKAGE_MANAGER, Language, PackageManager, ProjectSpec
from .errors import MissingProjectNameError
from .io import PromptIO
from .layout import FULL, FeatureSet

__all__ = ["Confirm", "PromptCollector", "parse_confirm", "parse_package_manager"]


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Confirm:
    """A yes/no question bound to one boolean toggle of the spec."""

    field: str
    label: str
    default: bool = True

    @property
    def prompt(self) -> str:
        return f"{self.label}? ({'Y/n' if self.default else 'y/N'}): "


_TOGGLES = (
    Confirm("include_readme", "Include README.md"),
    Confirm("include_examples", "Include example controllers/models"),
    Confirm("install_dependencies", "Install dependencies automatically"),
    Confirm("init_git", "Initialize Git repository"),
)


def parse_confirm(answer: str, default: bool) -> bool:
    """Interpret a yes/no ``answer``.

    An empty answer yields ``default``. With a "yes" default anything other
    than ``n`` counts as yes; with a "no" default only ``y`` counts as yes.
    """

    cleaned = answer.strip().lower()
    if not cleaned:
        return default
    if default:
        return cleaned != "n"
    return cleaned == "y"


def parse_package_manager(answer: str) -> tuple[PackageManager, bool]:
    """Return the chosen manager and whether the answer was recognised."""

    if not answer.strip():
        return DEFAULT_PACKAGE_MANAGER, True
    manager = PackageManager.parse(answer)
    if manager is None:
        return DEFAULT_PACKAGE_MANAGER, False
    return manager, True


class PromptCollector:
    """Ask the questions of a feature set and build a :class:`ProjectSpec`."""

    def __init__(self, io: PromptIO, features: FeatureSet = FULL) -> None:
        self.io = io
        self.features = features

    def ask_name(self) -> str:
        name = self.io.ask("Project name: ").strip()
        if not name:
            raise MissingProjectNameError()
        return name

    def ask_language(self) -> Language:
        question = Confirm("typescript", "Use TypeScript", default=self.features.typescript_by_default)
        typescript = parse_confirm(self.io.ask(question.prompt), question.default)
        return Language.TYPESCRIPT if typescript else Language.JAVASCRIPT

    def ask_package_manager(self) -> PackageManager:
        answer = self.io.ask(f"Package manager (npm/yarn/pnpm) [{DEFAULT_PACKAGE_MANAGER.value}]: ")
        manager, recognised = parse_package_manager(answer)
        if not recognised:
            LOGGER.warning("unknown package manager %r, falling back to %s", answer, manager.value)
            self.io.warn(f"Invalid package manager! Using {manager.value} instead.")
        return manager

    def collect(self) -> ProjectSpec:
        """Run the question sequence.

        Raises
        ------
        MissingProjectNameError
            When the project name answer is empty. Nothing has been written at
            that point.
        """

        name = self.ask_name()
        language = self.ask_language()
        package_manager = self.ask_package_manager()

        toggles = dict(self.features.defaults)
        for question in _TOGGLES:
            if question.field in self.features.prompts:
                toggles[question.field] = parse_confirm(self.io.ask(question.prompt), question.default)

        return ProjectSpec(
            name=name,
            language=language,
            package_manager=package_manager,
            **toggles,
        )
