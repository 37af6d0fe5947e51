"""Errors raised while resolving the Python runtime.

Every error here is terminal: nothing is retried, and the CLI maps each
of them to a non-zero exit status.
"""

from typing import List, Optional, Sequence, Tuple


class RuntimeResolutionError(Exception):
    """Base class for failed runtime resolution."""

    exit_code = 1

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class RuntimeNotFoundError(RuntimeResolutionError):
    """No interpreter was found on the search path."""


class VersionParseError(RuntimeResolutionError):
    """Version text did not contain a major.minor pair."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Could not parse a Python version from {text!r}")


class BelowMinimumError(RuntimeResolutionError):
    """The interpreter is older than the supported minimum."""

    def __init__(self, minimum: str, found: str):
        self.minimum = minimum
        self.found = found
        super().__init__(f"Python {minimum} or higher is required (found: {found})")


class NoBackendAvailableError(RuntimeResolutionError):
    """No provisioning tool is installed on the host."""

    def __init__(self, install_hints: Sequence[Tuple[str, str]]):
        self.install_hints = list(install_hints)
        super().__init__(self._format_message(self.install_hints))

    @staticmethod
    def _format_message(install_hints: List[Tuple[str, str]]) -> str:
        names = " nor ".join(name for name, _ in install_hints)
        if len(install_hints) == 1:
            lines = [f"{names} not found. Please install it first:"]
        elif len(install_hints) == 2:
            lines = [f"Neither {names} found. Please install one of them first:"]
        else:
            lines = ["No provisioning backend found. Please install one of them first:"]

        for name, hint in install_hints:
            lines.append(f"  • {name}: {hint}")
        return "\n".join(lines)


class InstallationFailedError(RuntimeResolutionError):
    """A provisioning backend ran but reported failure."""

    def __init__(self, backend: str, version: str, detail: Optional[str] = None):
        self.backend = backend
        self.version = version
        self.detail = detail
        message = f"Failed to install Python {version} via {backend}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class ProvisioningVerificationError(RuntimeResolutionError):
    """Installation reported success but the interpreter is missing."""

    def __init__(self, backend: str, version: str, expected: Sequence[str]):
        self.backend = backend
        self.version = version
        self.expected = list(expected)
        where = ", ".join(self.expected) if self.expected else "any known location"
        super().__init__(
            f"Python {version} installation failed - executable not found at {where}"
        )
