"""Virtual environment creation and process environment preparation."""

import logging
import os
import shutil
from pathlib import Path
from typing import Callable, List, MutableMapping, Optional, Sequence

from ..utils.commands import CommandRunner
from .errors import InstallError, ProjectLayoutError

logger = logging.getLogger(__name__)

PROXY_VARIABLES = (
    "http_proxy",
    "HTTP_PROXY",
    "https_proxy",
    "HTTPS_PROXY",
    "ftp_proxy",
    "FTP_PROXY",
    "all_proxy",
    "ALL_PROXY",
)


def check_project_layout(project_root: Path, required_paths: Sequence[str]) -> None:
    """Make sure the project root holds the expected files and directories.

    Raises:
        ProjectLayoutError: If any required path is missing
    """
    missing = [name for name in required_paths if not (project_root / name).exists()]
    if missing:
        raise ProjectLayoutError(str(project_root), missing, required_paths)


def venv_python(venv_dir: Path) -> Path:
    """Interpreter inside a virtual environment."""
    if os.name == "nt":
        return venv_dir / "Scripts" / "python.exe"
    return venv_dir / "bin" / "python"


def create_virtualenv(
    runner: CommandRunner,
    python: str,
    venv_dir: Path,
    confirm_recreate: Callable[[], bool],
) -> bool:
    """Create a virtual environment with ``python -m venv``.

    Args:
        runner: Command runner
        python: Interpreter the environment is built from
        venv_dir: Target directory
        confirm_recreate: Asked when ``venv_dir`` already exists

    Returns:
        True if an environment was created, False if the existing one is reused

    Raises:
        InstallError: If ``venv`` failed
    """
    if venv_dir.exists():
        if not confirm_recreate():
            logger.info("Reusing virtual environment at %s", venv_dir)
            return False
        logger.info("Removing virtual environment at %s", venv_dir)
        shutil.rmtree(venv_dir)

    result = runner.run([python, "-m", "venv", str(venv_dir)])
    if not result.ok:
        raise InstallError(
            f"Failed to create virtual environment at {venv_dir}: "
            f"{result.stderr.strip()[:200]}"
        )
    return True


def clear_proxy_settings(environ: Optional[MutableMapping[str, str]] = None) -> List[str]:
    """Remove proxy variables so pip talks to the index directly.

    Args:
        environ: Environment to edit, the process environment by default

    Returns:
        Names of the variables that were removed
    """
    if environ is None:
        environ = os.environ

    removed = []
    for name in PROXY_VARIABLES:
        if name in environ:
            del environ[name]
            removed.append(name)

    if removed:
        logger.debug("Cleared proxy variables: %s", ", ".join(removed))
    return removed
