"""Data types for runtime resolution."""

import functools
import re
from dataclasses import dataclass
from typing import Literal, Optional, Union

import semver

from .errors import VersionParseError

# First major.minor[.patch] group in free-form text ("Python 3.11.5", "3.13")
_VERSION_PATTERN = re.compile(r"(?<![\d.])(\d+)\.(\d+)(?:\.(\d+))?")


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """Interpreter version with an optional patch component.

    Ordering and equality treat a missing patch as 0, so "3.13" == "3.13.0".
    """

    major: int
    minor: int
    patch: Optional[int] = None

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse version text as reported by ``python --version``.

        Raises:
            VersionParseError: If no major.minor pair is present
        """
        match = _VERSION_PATTERN.search(text or "")
        if not match:
            raise VersionParseError(text)

        major, minor, patch = match.groups()
        return cls(
            major=int(major),
            minor=int(minor),
            patch=int(patch) if patch is not None else None,
        )

    @property
    def as_semver(self) -> semver.Version:
        return semver.Version(self.major, self.minor, self.patch or 0)

    @property
    def series(self) -> str:
        """The major.minor series, e.g. "3.11"."""
        return f"{self.major}.{self.minor}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.as_semver == other.as_semver

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.as_semver < other.as_semver

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch or 0))

    def __str__(self) -> str:
        if self.patch is None:
            return self.series
        return f"{self.series}.{self.patch}"


@dataclass(frozen=True)
class CompatibilityRange:
    """Supported interpreters: minimum inclusive, maximum exclusive."""

    minimum: Version
    maximum_exclusive: Version

    def __post_init__(self) -> None:
        if not self.minimum < self.maximum_exclusive:
            raise ValueError(
                f"Empty compatibility range: [{self.minimum}, {self.maximum_exclusive})"
            )

    def __contains__(self, version: Version) -> bool:
        return self.minimum <= version < self.maximum_exclusive

    def __str__(self) -> str:
        return f"[{self.minimum}, {self.maximum_exclusive})"


@dataclass
class RuntimeInfo:
    """Information about a detected interpreter.

    Attributes:
        path: Absolute path to the interpreter executable
        source: How the interpreter was found ("system", "brew", "pyenv")
        version_text: Raw output of ``--version``
    """

    path: str
    source: str
    version_text: str

    def __repr__(self) -> str:
        return f"<RuntimeInfo {self.version_text.strip()} @ {self.path} ({self.source})>"


@dataclass(frozen=True)
class UseCurrent:
    """The detected interpreter is inside the supported range."""

    path: str
    version: Version
    kind: Literal["use_current"] = "use_current"


@dataclass(frozen=True)
class UseProvisioned:
    """A pinned interpreter was provisioned (or found already provisioned)."""

    path: str
    version: Version
    backend: str
    kind: Literal["use_provisioned"] = "use_provisioned"


@dataclass(frozen=True)
class Rejected:
    """The detected interpreter cannot be used and is not remediated."""

    reason: str
    version: Version
    kind: Literal["rejected"] = "rejected"


# Union of all resolution outcomes
ResolutionOutcome = Union[UseCurrent, UseProvisioned, Rejected]
