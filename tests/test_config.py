from __future__ import annotations

import pytest
from pydantic import ValidationError

from express_scaffold.config import DEFAULT_PACKAGE_MANAGER, Language, PackageManager, ProjectSpec


def test_defaults_match_interactive_defaults():
    spec = ProjectSpec(name="Demo")
    assert spec.language is Language.TYPESCRIPT
    assert spec.package_manager is DEFAULT_PACKAGE_MANAGER is PackageManager.NPM
    assert spec.include_readme and spec.include_examples
    assert spec.install_dependencies and spec.init_git


def test_name_is_trimmed_and_required():
    assert ProjectSpec(name="  api  ").name == "api"
    with pytest.raises(ValidationError):
        ProjectSpec(name="   ")


@pytest.mark.parametrize("name", ["/tmp/outside", "C:\\outside", "\\outside", "../outside", "api/../../outside"])
def test_name_must_stay_below_target_directory(name: str):
    with pytest.raises(ValidationError):
        ProjectSpec(name=name)


def test_nested_relative_name_is_allowed():
    assert ProjectSpec(name="apps/api").name == "apps/api"


def test_spec_is_frozen():
    spec = ProjectSpec(name="Demo")
    with pytest.raises(ValidationError):
        spec.name = "Other"


def test_unknown_fields_are_rejected():
    with pytest.raises(ValidationError):
        ProjectSpec(name="Demo", database="mongo")


def test_derived_properties():
    spec = ProjectSpec(name="My Service", language="javascript", package_manager="pnpm")
    assert not spec.typescript
    assert spec.extension == "js"
    assert spec.package_name == "my-service"
    assert spec.package_manager is PackageManager.PNPM


@pytest.mark.parametrize(
    "answer, expected",
    [("npm", PackageManager.NPM), (" Yarn ", PackageManager.YARN), ("PNPM", PackageManager.PNPM), ("bun", None)],
)
def test_package_manager_parse(answer, expected):
    assert PackageManager.parse(answer) is expected


def test_package_manager_commands():
    assert PackageManager.YARN.install_command == ["yarn", "install"]
    assert PackageManager.PNPM.run("dev") == "pnpm run dev"
    assert PackageManager.NPM.run("start") == "npm start"
