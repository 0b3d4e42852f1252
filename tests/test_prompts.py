from __future__ import annotations

import pytest

from express_scaffold.config import Language, PackageManager
from express_scaffold.errors import MissingProjectNameError
from express_scaffold.io import ScriptedIO
from express_scaffold.layout import FULL, QUICK
from express_scaffold.prompts import PromptCollector, parse_confirm, parse_package_manager


@pytest.mark.parametrize(
    "answer, default, expected",
    [
        ("", True, True),
        ("n", True, False),
        ("N", True, False),
        ("no", True, True),
        ("y", True, True),
        ("", False, False),
        ("y", False, True),
        ("Y", False, True),
        ("yes", False, False),
    ],
)
def test_parse_confirm(answer, default, expected):
    assert parse_confirm(answer, default) is expected


def test_parse_package_manager():
    assert parse_package_manager("") == (PackageManager.NPM, True)
    assert parse_package_manager("Yarn") == (PackageManager.YARN, True)
    assert parse_package_manager("bun") == (PackageManager.NPM, False)


def test_full_collector_defaults():
    io = ScriptedIO(["shop-api"])
    spec = PromptCollector(io, FULL).collect()

    assert spec.name == "shop-api"
    assert spec.language is Language.TYPESCRIPT
    assert spec.package_manager is PackageManager.NPM
    assert spec.include_readme and spec.include_examples
    assert spec.install_dependencies and spec.init_git
    assert len(io.prompts) == 7
    assert io.prompts[0] == "Project name: "


def test_full_collector_answers():
    io = ScriptedIO(["shop-api", "n", "pnpm", "n", "n", "n", "n"])
    spec = PromptCollector(io, FULL).collect()

    assert spec.language is Language.JAVASCRIPT
    assert spec.package_manager is PackageManager.PNPM
    assert not spec.include_readme
    assert not spec.include_examples
    assert not spec.install_dependencies
    assert not spec.init_git
    assert io.remaining == 0


def test_unknown_package_manager_falls_back_with_warning():
    io = ScriptedIO(["shop-api", "", "bun"])
    spec = PromptCollector(io, FULL).collect()

    assert spec.package_manager is PackageManager.NPM
    assert io.warnings == ["Invalid package manager! Using npm instead."]


def test_empty_name_raises_before_other_questions():
    io = ScriptedIO(["   ", "n"])
    with pytest.raises(MissingProjectNameError):
        PromptCollector(io, FULL).collect()
    assert io.prompts == ["Project name: "]


def test_quick_collector_asks_three_questions():
    io = ScriptedIO(["tiny", "", "yarn", "extra"])
    spec = PromptCollector(io, QUICK).collect()

    assert io.prompts[1] == "Use TypeScript? (y/N): "
    assert len(io.prompts) == 3
    assert spec.language is Language.JAVASCRIPT
    assert spec.package_manager is PackageManager.YARN
    assert not (spec.include_readme or spec.include_examples or spec.install_dependencies or spec.init_git)
