"""Filesystem registry of versioned distribution files.

Versioned files are named ``<stem>_v<major>-<minor>-<patch>[-<tag>]<ext>``,
for example ``linux_amd64/core/portmaster-core_v0-9-2-beta.zip``. The
component identifier is the same path with the version removed
(``linux_amd64/core/portmaster-core.zip``). Anything else in the storage
root, including published ``<channel>.json`` indexes, is ignored.
"""

from __future__ import annotations

import re
from pathlib import Path

from updatemgr.core.result import Err, Ok, Result
from updatemgr.services.errors import UpdateError
from updatemgr.services.registry.model import ReleasedComponent, VersionEntry
from updatemgr.services.registry.semver import SemVer, parse_file_version

__all__ = ["Registry", "load_registry", "split_versioned_name"]

_VERSIONED_NAME_RE = re.compile(
    r"^(?P<stem>.+?)_v(?P<version>\d+-\d+-\d+(?:-[0-9A-Za-z]+)?)(?P<ext>\..*)?$"
)


def split_versioned_name(name: str) -> tuple[str, SemVer] | None:
    """Split a file name into (unversioned name, version).

    Returns None if the name carries no parseable version.
    """
    m = _VERSIONED_NAME_RE.match(name)
    if m is None:
        return None
    semver = parse_file_version(m.group("version"))
    if semver is None:
        return None
    return m.group("stem") + (m.group("ext") or ""), semver


class Registry:
    """Components found under a storage root.

    ``select_versions`` must run before ``export``: it orders every
    component's versions by precedence, highest first.
    """

    def __init__(self) -> None:
        self._versions: dict[str, list[VersionEntry]] = {}
        self._selected = False

    def add(self, identifier: str, entry: VersionEntry) -> None:
        self._versions.setdefault(identifier, []).append(entry)
        self._selected = False

    def select_versions(self) -> None:
        for entries in self._versions.values():
            entries.sort(key=lambda e: e.semver.precedence_key(), reverse=True)
        self._selected = True

    def export(self) -> tuple[ReleasedComponent, ...]:
        if not self._selected:
            raise RuntimeError("select_versions() must be called before export()")
        return tuple(
            ReleasedComponent(identifier=identifier, versions=tuple(self._versions[identifier]))
            for identifier in sorted(self._versions)
        )

    def __len__(self) -> int:
        return len(self._versions)


def _raise(error: OSError) -> None:
    raise error


def load_registry(storage_dir: Path) -> Result[Registry, UpdateError]:
    """Scan ``storage_dir`` recursively, skipping hidden files and directories."""
    if not storage_dir.is_dir():
        return Err(
            UpdateError(
                kind="registry_failed",
                message=f"storage directory not found: {storage_dir}",
                hint="check paths.storage in updatemgr.toml",
            )
        )

    registry = Registry()
    try:
        for dirpath, dirnames, filenames in storage_dir.walk(on_error=_raise):
            dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
            rel_dir = dirpath.relative_to(storage_dir)
            for name in sorted(filenames):
                if name.startswith("."):
                    continue
                split = split_versioned_name(name)
                if split is None:
                    continue
                unversioned, semver = split
                identifier = (rel_dir / unversioned).as_posix()
                registry.add(identifier, VersionEntry(semver=semver, path=dirpath / name))
    except OSError as e:
        return Err(
            UpdateError(
                kind="registry_failed",
                message=f"failed to scan storage directory: {e}",
                hint=str(storage_dir),
            )
        )

    return Ok(registry)
