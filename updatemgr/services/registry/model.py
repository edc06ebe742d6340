from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from updatemgr.services.registry.semver import SemVer, parse_version


@dataclass(frozen=True, slots=True)
class VersionEntry:
    """One stored version of a component."""

    semver: SemVer
    path: Path

    @classmethod
    def parse(cls, version_number: str, path: Path) -> VersionEntry:
        """Build an entry from a canonical version string.

        Raises:
            ValueError: if ``version_number`` is not a valid semantic version.
        """
        semver = parse_version(version_number)
        if semver is None:
            raise ValueError(f"invalid version: {version_number!r}")
        return cls(semver=semver, path=path)

    @property
    def version_number(self) -> str:
        return self.semver.version_number

    @property
    def channel(self) -> str:
        """Prerelease tag; empty for stable versions."""
        return self.semver.prerelease

    @property
    def is_stable(self) -> bool:
        return self.semver.is_stable


@dataclass(frozen=True, slots=True)
class ReleasedComponent:
    """Read-only snapshot of a component and its versions, highest first."""

    identifier: str
    versions: tuple[VersionEntry, ...]
