"""Dependency installation and verification inside the virtual environment."""

import logging
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from ..utils.commands import CommandRunner
from .errors import InstallError

logger = logging.getLogger(__name__)


def _pip(
    runner: CommandRunner,
    python: Path,
    args: Sequence[str],
    env: Optional[Mapping[str, str]] = None,
) -> None:
    result = runner.run([str(python), "-m", "pip", *args], env=env)
    if not result.ok:
        raise InstallError(
            f"pip {' '.join(args)} failed (exit status {result.returncode}): "
            f"{result.stderr.strip()[:200]}"
        )


def upgrade_build_tools(
    runner: CommandRunner,
    python: Path,
    tools: Sequence[str],
    env: Optional[Mapping[str, str]] = None,
) -> None:
    """Upgrade pip and the packaging toolchain.

    Raises:
        InstallError: If pip failed
    """
    if not tools:
        return
    _pip(runner, python, ["install", "--upgrade", *tools], env=env)


def install_requirements(
    runner: CommandRunner,
    python: Path,
    requirements_file: Path,
    env: Optional[Mapping[str, str]] = None,
) -> None:
    """Install a requirements file with the environment's pip.

    Raises:
        InstallError: If the file is missing or pip failed
    """
    if not requirements_file.is_file():
        raise InstallError(f"{requirements_file.name} not found in {requirements_file.parent}")

    logger.info("Installing %s", requirements_file)
    _pip(runner, python, ["install", "-r", str(requirements_file)], env=env)


def check_python_package(runner: CommandRunner, python: Path, module: str) -> bool:
    """Check if a module is importable by a specific interpreter."""
    result = runner.run([str(python), "-c", f"import {module}"])
    return result.ok


def find_missing_imports(
    runner: CommandRunner,
    python: Path,
    modules: Sequence[str],
) -> List[str]:
    """Modules the interpreter cannot import."""
    return [module for module in modules if not check_python_package(runner, python, module)]


def pip_version(runner: CommandRunner, python: Path) -> Optional[str]:
    """First line of ``pip --version`` for the interpreter."""
    result = runner.run([str(python), "-m", "pip", "--version"])
    if not result.ok:
        return None
    return result.stdout.strip().split("\n")[0] or None
