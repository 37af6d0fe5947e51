"""Pytest configuration and shared fixtures."""

import io
from pathlib import Path

import pytest

from devprep.config import DevprepConfig
from devprep.runtime import CompatibilityRange, Version
from devprep.utils.console import Console
from tests.helpers.fakes import FakeRunner


@pytest.fixture
def compat_range() -> CompatibilityRange:
    """The default supported range, [3.8.0, 3.13.0)."""
    return CompatibilityRange(Version.parse("3.8.0"), Version.parse("3.13.0"))


@pytest.fixture
def fallback_version() -> Version:
    return Version.parse("3.11.9")


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def console_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(console_output: io.StringIO) -> Console:
    """Console writing uncolored lines to ``console_output``."""
    return Console(stream=console_output, color=False)


@pytest.fixture
def consumer_project(tmp_path: Path) -> Path:
    """Create a project root with the layout devprep expects.

    Creates:
        project/
            app/
            conf/default.yml
            requirements.txt
            README.md
    """
    project_root = tmp_path / "project"
    (project_root / "app").mkdir(parents=True)
    (project_root / "conf").mkdir()
    (project_root / "requirements.txt").write_text("aiohttp\njinja2\npyyaml\ncryptography\n")
    (project_root / "README.md").write_text("# Consumer\n")
    (project_root / "conf" / "default.yml").write_text(
        "port: 8888\n"
        "plugins:\n"
        "- access\n"
        "- debrief\n"
        "- sandcat\n"
    )
    return project_root


@pytest.fixture
def project_config(consumer_project: Path) -> DevprepConfig:
    return DevprepConfig(project_root=consumer_project)
