"""Python runtime resolver.

Decides whether the interpreter on the host can be used as-is, must be
rejected, or must be replaced by a pinned interpreter installed through a
provisioning backend.
"""

import logging
from typing import List, Optional, Sequence

from ..utils.commands import CommandRunner
from .backends import BACKENDS, ProvisioningBackend
from .errors import (
    NoBackendAvailableError,
    ProvisioningVerificationError,
    RuntimeNotFoundError,
)
from .types import (
    CompatibilityRange,
    Rejected,
    ResolutionOutcome,
    RuntimeInfo,
    UseCurrent,
    UseProvisioned,
    Version,
)

logger = logging.getLogger(__name__)

BELOW_MINIMUM = "below minimum"


class RuntimeResolver:
    """Resolve the interpreter to use against a compatibility range.

    Only interpreters that are too new are remediated automatically; an
    interpreter below the minimum is rejected and left to the user.
    """

    def __init__(
        self,
        compat_range: CompatibilityRange,
        fallback_version: Version,
        backends: Sequence[ProvisioningBackend],
    ):
        """Initialize resolver.

        Args:
            compat_range: Supported interpreter versions
            fallback_version: Version provisioned when the current one is too new
            backends: Provisioning backends in priority order
        """
        self.compat_range = compat_range
        self.fallback_version = fallback_version
        self.backends: List[ProvisioningBackend] = list(backends)

    def resolve(self, current_version_text: str, current_path: str) -> ResolutionOutcome:
        """Resolve the runtime for the interpreter at ``current_path``.

        Args:
            current_version_text: Output of the interpreter's ``--version``
            current_path: Path of the interpreter that reported it

        Returns:
            UseCurrent, UseProvisioned or Rejected

        Raises:
            VersionParseError: If the version text is malformed
            NoBackendAvailableError: If provisioning is needed but impossible
            InstallationFailedError: If the selected backend failed
            ProvisioningVerificationError: If the installed binary is missing
        """
        version = Version.parse(current_version_text)
        logger.debug("Parsed %r as %s, range %s", current_version_text, version, self.compat_range)

        if version < self.compat_range.minimum:
            return Rejected(reason=BELOW_MINIMUM, version=version)

        if version in self.compat_range:
            return UseCurrent(path=current_path, version=version)

        return self._provision()

    def select_backend(self) -> ProvisioningBackend:
        """First available backend in priority order.

        Raises:
            NoBackendAvailableError: If none of the backends is installed
        """
        for backend in self.backends:
            if backend.is_available():
                return backend
            logger.debug("Backend %s not available", backend.name)

        hints = [(backend.name, backend.install_hint) for backend in self.backends]
        if not hints:
            # Nothing configured; point at every known backend
            hints = [(name, cls.install_hint) for name, cls in BACKENDS.items()]
        raise NoBackendAvailableError(hints)

    def _provision(self) -> UseProvisioned:
        backend = self.select_backend()
        version = self.fallback_version

        path = backend.locate(version)
        if path is not None:
            logger.info("Python %s already provisioned by %s at %s", version, backend.name, path)
            return UseProvisioned(path=str(path), version=version, backend=backend.name)

        backend.install(version)

        path = backend.locate(version)
        if path is None:
            raise ProvisioningVerificationError(
                backend.name,
                str(version),
                [str(candidate) for candidate in backend.candidate_paths(version)],
            )

        return UseProvisioned(path=str(path), version=version, backend=backend.name)


def query_version(runner: CommandRunner, executable: str) -> Optional[str]:
    """Get the ``--version`` text of an interpreter, or None if it cannot run."""
    result = runner.run([executable, "--version"])
    if not result.ok:
        return None

    # Python 2 printed its version to stderr
    output = result.output.strip()
    return output or None


def detect_system_runtime(
    runner: CommandRunner,
    commands: Sequence[str] = ("python3",),
) -> RuntimeInfo:
    """Find the interpreter on the search path.

    Args:
        runner: Command runner
        commands: Interpreter names to try, in order

    Returns:
        RuntimeInfo for the first command that answers ``--version``

    Raises:
        RuntimeNotFoundError: If none of the commands is usable
    """
    for cmd in commands:
        path = runner.which(cmd)
        if not path:
            continue

        version_text = query_version(runner, path)
        if version_text:
            return RuntimeInfo(path=path, source="system", version_text=version_text)

    raise RuntimeNotFoundError("Python 3 is not installed")
