"""Python runtime detection, resolution and provisioning."""

from .backends import (
    BACKENDS,
    HomebrewBackend,
    ProvisioningBackend,
    PyenvBackend,
    build_backends,
    get_backend_class,
)
from .errors import (
    BelowMinimumError,
    InstallationFailedError,
    NoBackendAvailableError,
    ProvisioningVerificationError,
    RuntimeNotFoundError,
    RuntimeResolutionError,
    VersionParseError,
)
from .resolver import RuntimeResolver, detect_system_runtime, query_version
from .types import (
    CompatibilityRange,
    Rejected,
    ResolutionOutcome,
    RuntimeInfo,
    UseCurrent,
    UseProvisioned,
    Version,
)

__all__ = [
    "BACKENDS",
    "HomebrewBackend",
    "ProvisioningBackend",
    "PyenvBackend",
    "build_backends",
    "get_backend_class",
    "BelowMinimumError",
    "InstallationFailedError",
    "NoBackendAvailableError",
    "ProvisioningVerificationError",
    "RuntimeNotFoundError",
    "RuntimeResolutionError",
    "VersionParseError",
    "RuntimeResolver",
    "detect_system_runtime",
    "query_version",
    "CompatibilityRange",
    "Rejected",
    "ResolutionOutcome",
    "RuntimeInfo",
    "UseCurrent",
    "UseProvisioned",
    "Version",
]
