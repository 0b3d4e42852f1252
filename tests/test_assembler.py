from __future__ import annotations

from pathlib import Path

import pytest

from express_scaffold.assembler import GIT_COMMANDS, ProjectAssembler
from express_scaffold.config import Language, PackageManager, ProjectSpec
from express_scaffold.layout import FULL, QUICK
from tests.fixtures.runner import RecordingRunner


@pytest.fixture()
def offline_spec() -> ProjectSpec:
    return ProjectSpec(name="demo-api", install_dependencies=False, init_git=False)


def test_create_writes_full_project(tmp_path: Path, offline_spec: ProjectSpec, runner: RecordingRunner):
    report = ProjectAssembler(FULL, runner).create(offline_spec, tmp_path)

    project = tmp_path.resolve() / "demo-api"
    assert report.project_path == project
    for relative in ("package.json", "tsconfig.json", "src/app.ts", "src/models/User.ts", "README.md"):
        assert (project / relative).is_file(), relative
    assert (project / "src" / "controllers").is_dir()
    assert len(report.files) == 16
    assert runner.calls == []
    assert report.git is None and report.install is None


def test_directories_exist_before_first_file_write(
    tmp_path: Path, offline_spec: ProjectSpec, monkeypatch: pytest.MonkeyPatch
):
    expected = [tmp_path.resolve() / "demo-api" / d for d in ProjectAssembler().plan(offline_spec).directories]
    original_write_text = Path.write_text
    checked: list[Path] = []

    def guarded_write_text(self: Path, *args, **kwargs):
        assert all(directory.is_dir() for directory in expected)
        checked.append(self)
        return original_write_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "write_text", guarded_write_text)
    ProjectAssembler(FULL, RecordingRunner()).create(offline_spec, tmp_path)
    assert checked


def test_rerun_overwrites_existing_files(tmp_path: Path, offline_spec: ProjectSpec):
    assembler = ProjectAssembler(FULL, RecordingRunner())
    assembler.create(offline_spec, tmp_path)
    manifest = tmp_path / "demo-api" / "package.json"
    manifest.write_text("{}", encoding="utf-8")
    (tmp_path / "demo-api" / "notes.txt").write_text("keep me", encoding="utf-8")

    assembler.create(offline_spec, tmp_path)

    assert '"name": "demo-api"' in manifest.read_text(encoding="utf-8")
    assert (tmp_path / "demo-api" / "notes.txt").read_text(encoding="utf-8") == "keep me"


def test_javascript_project_has_no_compiler_config(tmp_path: Path):
    spec = ProjectSpec(name="js-api", language=Language.JAVASCRIPT, install_dependencies=False, init_git=False)
    ProjectAssembler(FULL, RecordingRunner()).create(spec, tmp_path)

    project = tmp_path / "js-api"
    assert not (project / "tsconfig.json").exists()
    assert (project / "index.js").is_file()
    assert not list(project.rglob("*.ts"))


def test_git_then_install_run_in_project(tmp_path: Path, runner: RecordingRunner):
    spec = ProjectSpec(name="demo-api", package_manager=PackageManager.PNPM)
    report = ProjectAssembler(FULL, runner).create(spec, tmp_path)

    assert runner.commands == [*GIT_COMMANDS, ("pnpm", "install")]
    assert {cwd for _, cwd in runner.calls} == {tmp_path.resolve() / "demo-api"}
    assert report.git is not None and report.git.ok
    assert report.dependencies_installed


def test_failing_steps_do_not_abort(tmp_path: Path):
    runner = RecordingRunner(missing={"git"}, fail={"npm"})
    spec = ProjectSpec(name="demo-api")
    report = ProjectAssembler(FULL, runner).create(spec, tmp_path)

    assert report.git is not None and not report.git.ok
    assert report.install is not None and not report.install.ok
    assert not report.dependencies_installed
    assert runner.commands == [("git", "init"), ("npm", "install")]
    assert (tmp_path / "demo-api" / "package.json").is_file()


def test_quick_project_layout(tmp_path: Path, runner: RecordingRunner):
    spec = ProjectSpec(
        name="tiny",
        language=Language.JAVASCRIPT,
        include_readme=False,
        include_examples=False,
        install_dependencies=False,
        init_git=False,
    )
    report = ProjectAssembler(QUICK, runner).create(spec, tmp_path)

    project = tmp_path / "tiny"
    assert (project / "public").is_dir()
    assert (project / "src" / "models").is_dir()
    assert sorted(path.name for path in report.files) == [".env", ".gitignore", "index.js", "package.json"]
