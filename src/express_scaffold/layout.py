"""Feature sets and the directory/file plan derived from a project spec."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath

from .config import ProjectSpec
from .errors import LayoutError
from .registry import TemplateKey, render, target_path

__all__ = [
    "FULL",
    "QUICK",
    "FeatureSet",
    "FileEntry",
    "ScaffoldPlan",
    "build_plan",
    "directory_set",
]


@dataclass(frozen=True, slots=True)
class FeatureSet:
    """Describe which directories, files, prompts and steps a scaffold uses.

    Attributes
    ----------
    name:
        Identifier used in log messages.
    directories:
        Relative directories created for every project.
    example_directories:
        Directories only created when examples are requested.
    templates:
        Files emitted for every project, in write order.
    example_templates:
        Files emitted only when examples are requested.
    typescript_only:
        Members of ``templates`` that are skipped for JavaScript projects.
    readme_template:
        Usage document emitted when the README toggle is on, if any.
    prompts:
        Names of the optional questions asked by the prompt collector.
    defaults:
        (field, value) pairs for toggles that are not asked.
    typescript_by_default:
        Default answer of the TypeScript question.
    """

    name: str
    directories: tuple[str, ...]
    templates: tuple[TemplateKey, ...]
    example_directories: tuple[str, ...] = ()
    example_templates: tuple[TemplateKey, ...] = ()
    typescript_only: frozenset[TemplateKey] = frozenset()
    readme_template: TemplateKey | None = None
    prompts: frozenset[str] = frozenset()
    defaults: tuple[tuple[str, bool], ...] = ()
    typescript_by_default: bool = True


FULL = FeatureSet(
    name="full",
    directories=(
        "src",
        "src/config",
        "src/controllers",
        "src/middlewares",
        "src/routes",
        "src/utils",
    ),
    templates=(
        TemplateKey.PACKAGE_MANIFEST,
        TemplateKey.ENTRY_POINT,
        TemplateKey.APP,
        TemplateKey.TSCONFIG,
        TemplateKey.WATCH_CONFIG,
        TemplateKey.DATABASE_CONFIG,
        TemplateKey.AUTH_MIDDLEWARE,
        TemplateKey.ERROR_HANDLER,
        TemplateKey.LOGGER,
        TemplateKey.HEALTH_ROUTES,
        TemplateKey.AUTH_ROUTES,
        TemplateKey.ENV_FILE,
        TemplateKey.IGNORE_FILE,
    ),
    example_directories=("src/models",),
    example_templates=(TemplateKey.EXAMPLE_CONTROLLER, TemplateKey.EXAMPLE_MODEL),
    typescript_only=frozenset({TemplateKey.TSCONFIG}),
    readme_template=TemplateKey.README,
    prompts=frozenset({"include_readme", "include_examples", "install_dependencies", "init_git"}),
)

QUICK = FeatureSet(
    name="quick",
    directories=("src", "src/routes", "src/controllers", "src/models", "public"),
    templates=(
        TemplateKey.QUICK_MANIFEST,
        TemplateKey.QUICK_ENTRY_POINT,
        TemplateKey.QUICK_TSCONFIG,
        TemplateKey.QUICK_WATCH_CONFIG,
        TemplateKey.QUICK_ENV_FILE,
        TemplateKey.QUICK_IGNORE_FILE,
    ),
    typescript_only=frozenset({TemplateKey.QUICK_TSCONFIG, TemplateKey.QUICK_WATCH_CONFIG}),
    defaults=(
        ("include_readme", False),
        ("include_examples", False),
        ("install_dependencies", False),
        ("init_git", False),
    ),
    typescript_by_default=False,
)


@dataclass(frozen=True, slots=True)
class FileEntry:
    """A generated file: its path relative to the project root and its text."""

    path: str
    key: TemplateKey
    content: str


@dataclass(frozen=True, slots=True)
class ScaffoldPlan:
    """Ordered directories and files to materialise for one project."""

    directories: tuple[str, ...]
    files: tuple[FileEntry, ...]

    def __post_init__(self) -> None:
        known = set(self.directories)
        for entry in self.files:
            parent = PurePosixPath(entry.path).parent
            if parent != PurePosixPath(".") and str(parent) not in known:
                raise LayoutError(f"{entry.path} is outside the planned directories")


def directory_set(spec: ProjectSpec, features: FeatureSet = FULL) -> tuple[str, ...]:
    """Return the directories to create before any file is written."""

    directories = list(features.directories)
    if spec.include_examples:
        directories.extend(features.example_directories)
    return tuple(directories)


def _template_keys(spec: ProjectSpec, features: FeatureSet) -> list[TemplateKey]:
    keys = [
        key
        for key in features.templates
        if spec.typescript or key not in features.typescript_only
    ]
    if spec.include_examples:
        keys.extend(features.example_templates)
    if spec.include_readme and features.readme_template is not None:
        keys.append(features.readme_template)
    return keys


def build_plan(spec: ProjectSpec, features: FeatureSet = FULL) -> ScaffoldPlan:
    """Render every file required by ``spec`` under ``features``."""

    files = tuple(
        FileEntry(path=target_path(key, spec), key=key, content=render(key, spec))
        for key in _template_keys(spec, features)
    )
    return ScaffoldPlan(directories=directory_set(spec, features), files=files)
