from __future__ import annotations

import re
from dataclasses import dataclass


_VERSION_RE = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)
# Version as embedded in a file name: 1-2-3 or 1-2-3-beta.
_FILE_VERSION_RE = re.compile(r"^(0|[1-9]\d*)-(0|[1-9]\d*)-(0|[1-9]\d*)(?:-([0-9A-Za-z]+))?$")


@dataclass(frozen=True, slots=True)
class SemVer:
    major: int
    minor: int
    patch: int
    prerelease: str = ""

    @property
    def version_number(self) -> str:
        """Canonical form, e.g. ``1.5.0-beta``."""
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            return f"{base}-{self.prerelease}"
        return base

    @property
    def is_stable(self) -> bool:
        return not self.prerelease

    def precedence_key(self) -> tuple[int, int, int, int, tuple[tuple[int, int, str], ...]]:
        """Sort key following semver 2.0 precedence.

        A release ranks above any of its prereleases. Prerelease identifiers
        compare numerically when numeric, lexically otherwise, and numeric
        identifiers rank below alphanumeric ones.
        """
        if not self.prerelease:
            return (self.major, self.minor, self.patch, 1, ())
        ids: list[tuple[int, int, str]] = []
        for part in self.prerelease.split("."):
            if part.isdigit():
                ids.append((0, int(part), ""))
            else:
                ids.append((1, 0, part))
        return (self.major, self.minor, self.patch, 0, tuple(ids))

    def __str__(self) -> str:
        return self.version_number


def parse_version(text: str) -> SemVer | None:
    m = _VERSION_RE.match(text.strip())
    if m is None:
        return None
    return SemVer(int(m.group(1)), int(m.group(2)), int(m.group(3)), m.group(4) or "")


def parse_file_version(text: str) -> SemVer | None:
    """Parse the dash-separated version used in file names (``0-9-2-beta``)."""
    m = _FILE_VERSION_RE.match(text)
    if m is None:
        return None
    return SemVer(int(m.group(1)), int(m.group(2)), int(m.group(3)), m.group(4) or "")
