"""Errors raised by the environment setup steps."""

from typing import List, Sequence


class BootstrapError(Exception):
    """Base class for failed setup steps."""

    exit_code = 1


class ProjectLayoutError(BootstrapError):
    """The working directory is not the consumer project's root."""

    def __init__(self, project_root: str, missing: Sequence[str], expected: Sequence[str]):
        self.project_root = project_root
        self.missing: List[str] = list(missing)
        self.expected: List[str] = list(expected)
        super().__init__(
            f"Must run from the project root directory ({project_root})\n"
            f"Expected files/directories: {', '.join(self.expected)}"
        )


class InstallError(BootstrapError):
    """A virtual environment or package installation step failed."""


class PluginConfigError(BootstrapError):
    """The plugin configuration file could not be read."""


class VerificationError(BootstrapError):
    """Core dependencies cannot be imported after installation."""

    def __init__(self, missing: Sequence[str]):
        self.missing = list(missing)
        super().__init__(f"Missing dependencies: {', '.join(self.missing)}")
