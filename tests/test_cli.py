from __future__ import annotations

import json
from pathlib import Path

from express_scaffold.cli import build_parser, main, quick_main
from express_scaffold.io import ScriptedIO
from tests.fixtures.runner import RecordingRunner


class InterruptingIO(ScriptedIO):
    def ask(self, prompt: str) -> str:
        if len(self.prompts) == 2:
            raise KeyboardInterrupt
        return super().ask(prompt)


def test_empty_name_exits_with_error_and_writes_nothing(tmp_path: Path):
    io = ScriptedIO([""])
    runner = RecordingRunner()
    exit_code = main(["--directory", str(tmp_path)], io=io, runner=runner)

    assert exit_code == 1
    assert io.warnings == ["Project name is required!"]
    assert list(tmp_path.iterdir()) == []
    assert runner.calls == []


def test_absolute_name_is_rejected_before_writing(tmp_path: Path):
    parent = tmp_path / "parent"
    parent.mkdir()
    outside = tmp_path / "outside"
    io = ScriptedIO([str(outside), "", "", "", "", "n", "n"])
    exit_code = main(["--directory", str(parent)], io=io, runner=RecordingRunner())

    assert exit_code == 1
    assert io.warnings[0] == "An error occurred:"
    assert not outside.exists()
    assert list(parent.iterdir()) == []


def test_full_generator_creates_project(tmp_path: Path):
    io = ScriptedIO(["shop", "", "yarn", "", "", "", ""])
    runner = RecordingRunner()
    exit_code = main(["--directory", str(tmp_path)], io=io, runner=runner)

    project = tmp_path / "shop"
    assert exit_code == 0
    assert (project / "src" / "routes" / "auth.ts").is_file()
    assert json.loads((project / "package.json").read_text(encoding="utf-8"))["name"] == "shop"
    assert ("yarn", "install") in runner.commands
    assert io.messages[0] == "Express Project Generator"
    assert "Initialized Git repository" in io.messages
    assert io.messages[-3:] == ["Next steps:", "1. cd shop", "2. yarn run dev"]


def test_failed_install_is_reported_but_not_fatal(tmp_path: Path):
    io = ScriptedIO(["shop", "n", "npm", "n", "n", "", "n"])
    runner = RecordingRunner(fail={"npm"})
    exit_code = main(["--directory", str(tmp_path)], io=io, runner=runner)

    assert exit_code == 0
    assert (tmp_path / "shop" / "index.js").is_file()
    assert any(warning.startswith("Error executing: npm install") for warning in io.warnings)
    assert io.messages[-3:] == ["1. cd shop", "2. npm install", "3. npm run dev"]


def test_unknown_package_manager_still_scaffolds(tmp_path: Path):
    io = ScriptedIO(["shop", "", "bun", "", "", "n", "n"])
    exit_code = main(["--directory", str(tmp_path)], io=io, runner=RecordingRunner())

    assert exit_code == 0
    assert "Invalid package manager! Using npm instead." in io.warnings
    assert (tmp_path / "shop" / "README.md").is_file()
    assert "npm install" in (tmp_path / "shop" / "README.md").read_text(encoding="utf-8")


def test_interrupt_exits_cleanly(tmp_path: Path):
    io = InterruptingIO(["shop", "y"])
    exit_code = main(["--directory", str(tmp_path)], io=io, runner=RecordingRunner())

    assert exit_code == 0
    assert io.messages[-1] == "Setup cancelled by user"
    assert list(tmp_path.iterdir()) == []


def test_filesystem_error_exits_with_error(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    io = ScriptedIO(["shop", "", "", "", "", "n", "n"])
    exit_code = main(["--directory", str(blocker)], io=io, runner=RecordingRunner())

    assert exit_code == 1
    assert io.warnings[0] == "An error occurred:"


def test_quick_generator(tmp_path: Path):
    io = ScriptedIO(["tiny", "y", "pnpm"])
    runner = RecordingRunner()
    exit_code = quick_main(["--directory", str(tmp_path)], io=io, runner=runner)

    project = tmp_path / "tiny"
    assert exit_code == 0
    assert (project / "tsconfig.json").is_file()
    assert (project / "public").is_dir()
    assert not (project / "README.md").exists()
    assert runner.calls == []
    assert io.messages[-3:] == ["1. cd tiny", "2. pnpm install", "3. pnpm run dev"]


def test_log_level_option(monkeypatch):
    monkeypatch.setenv("EXPRESS_SCAFFOLD_LOG_LEVEL", "info")
    args = build_parser("test").parse_args([])
    assert args.log_level == "INFO"
    assert build_parser("test").parse_args(["--log-level", "debug"]).log_level == "DEBUG"


def test_unknown_log_level_in_environment_falls_back_to_warning(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("EXPRESS_SCAFFOLD_LOG_LEVEL", "BASIC_FORMAT")
    assert build_parser("test").parse_args([]).log_level == "WARNING"

    io = ScriptedIO([""])
    assert main(["--directory", str(tmp_path)], io=io, runner=RecordingRunner()) == 1
    assert io.warnings == ["Project name is required!"]
