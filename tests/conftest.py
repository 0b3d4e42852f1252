from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from express_scaffold.config import Language, PackageManager, ProjectSpec  # noqa: E402
from tests.fixtures.runner import RecordingRunner  # noqa: E402


@pytest.fixture()
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture()
def ts_spec() -> ProjectSpec:
    return ProjectSpec(name="demo-api", language=Language.TYPESCRIPT)


@pytest.fixture()
def js_spec() -> ProjectSpec:
    return ProjectSpec(
        name="demo-api",
        language=Language.JAVASCRIPT,
        package_manager=PackageManager.YARN,
    )
