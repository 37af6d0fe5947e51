"""Provisioning backends that can install a pinned Python version.

Each backend wraps one external tool. To support a new tool, subclass
ProvisioningBackend and register it in BACKENDS.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Type

from ..utils.commands import CommandRunner, is_command_available
from .errors import InstallationFailedError
from .types import Version

logger = logging.getLogger(__name__)


class ProvisioningBackend(ABC):
    """A tool able to install a specific interpreter version on demand."""

    name: str = ""
    executable: str = ""
    install_hint: str = ""

    def __init__(self, runner: CommandRunner, timeout: Optional[float] = None):
        self.runner = runner
        self.timeout = timeout

    def is_available(self) -> bool:
        """Check whether the backend's tool is on the search path."""
        return is_command_available(self.runner, self.executable)

    @abstractmethod
    def install_command(self, version: Version) -> List[str]:
        """Command line that installs ``version``."""

    @abstractmethod
    def candidate_paths(self, version: Version) -> List[Path]:
        """Locations where the installed interpreter may live, in order."""

    def install(self, version: Version) -> None:
        """Install ``version``, blocking until the tool exits.

        Raises:
            InstallationFailedError: If the tool failed or timed out
        """
        command = self.install_command(version)
        logger.info("Installing Python %s via %s", version, self.name)

        try:
            result = self.runner.run(command, timeout=self.timeout)
        except subprocess.TimeoutExpired:
            raise InstallationFailedError(
                self.name, str(version), f"timed out after {self.timeout}s"
            )

        if not result.ok:
            detail = result.stderr.strip()[:200] or f"exit status {result.returncode}"
            raise InstallationFailedError(self.name, str(version), detail)

    def locate(self, version: Version) -> Optional[Path]:
        """Return the installed interpreter for ``version``, if present."""
        for candidate in self.candidate_paths(version):
            if candidate.is_file():
                logger.debug("Found %s interpreter at %s", self.name, candidate)
                return candidate
        return None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class HomebrewBackend(ProvisioningBackend):
    """Installs ``python@X.Y`` formulae with Homebrew.

    Homebrew pins only the major.minor series; the patch level is whatever
    the formula currently ships.
    """

    name = "brew"
    executable = "brew"
    install_hint = (
        '/bin/bash -c "$(curl -fsSL '
        'https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh)"'
    )

    # Intel and Apple Silicon install prefixes
    DEFAULT_PREFIXES = ("/usr/local", "/opt/homebrew")

    def __init__(
        self,
        runner: CommandRunner,
        timeout: Optional[float] = None,
        prefixes: Sequence[str] = DEFAULT_PREFIXES,
    ):
        super().__init__(runner, timeout)
        self.prefixes = list(prefixes)

    @staticmethod
    def formula(version: Version) -> str:
        return f"python@{version.series}"

    def install_command(self, version: Version) -> List[str]:
        return [self.executable, "install", self.formula(version)]

    def candidate_paths(self, version: Version) -> List[Path]:
        return [
            Path(prefix) / "opt" / self.formula(version) / "bin" / f"python{version.series}"
            for prefix in self.prefixes
        ]


class PyenvBackend(ProvisioningBackend):
    """Installs exact versions with pyenv."""

    name = "pyenv"
    executable = "pyenv"
    install_hint = "curl https://pyenv.run | bash"

    def install_command(self, version: Version) -> List[str]:
        return [self.executable, "install", str(version)]

    def root(self) -> Path:
        """The pyenv root directory as reported by ``pyenv root``."""
        result = self.runner.run([self.executable, "root"])
        if result.ok and result.stdout.strip():
            return Path(result.stdout.strip())
        logger.debug("pyenv root failed, assuming ~/.pyenv")
        return Path("~/.pyenv").expanduser()

    def candidate_paths(self, version: Version) -> List[Path]:
        return [self.root() / "versions" / str(version) / "bin" / "python3"]


# Known backends by configuration name
BACKENDS: Dict[str, Type[ProvisioningBackend]] = {
    "brew": HomebrewBackend,
    "pyenv": PyenvBackend,
}


def get_backend_class(name: str) -> Type[ProvisioningBackend]:
    """Get the backend class registered under ``name``.

    Raises:
        ValueError: If the backend is not supported
    """
    if name not in BACKENDS:
        supported = ", ".join(BACKENDS.keys())
        raise ValueError(
            f"Backend '{name}' not supported. Supported backends: {supported}"
        )
    return BACKENDS[name]


def build_backends(
    names: Sequence[str],
    runner: CommandRunner,
    timeout: Optional[float] = None,
) -> List[ProvisioningBackend]:
    """Instantiate backends in priority order."""
    return [get_backend_class(name)(runner, timeout=timeout) for name in names]
