"""Per-channel version selection.

For each component the versions are scanned highest first:

- a version tagged with the requested channel is selected and the scan stops;
- a stable version ends the scan with no selection, so pre-release tags older
  than the newest stable are never staged again;
- any other pre-release tag is skipped.

Requesting the stable channel (``""``) therefore selects the newest stable
version, since a stable entry always matches before the stop rule applies.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto

from updatemgr.services.registry.model import ReleasedComponent, VersionEntry

__all__ = ["STABLE_CHANNEL", "ChannelSelection", "ResolveMode", "select_channel_versions"]

STABLE_CHANNEL = ""

ChannelSelection = dict[str, str]


class ResolveMode(Enum):
    VERSION_NUMBER = auto()  # publish: identifier -> "1.5.0-beta"
    STORAGE_PATH = auto()  # prune: identifier -> file path


def _resolve(entry: VersionEntry, mode: ResolveMode) -> str:
    match mode:
        case ResolveMode.VERSION_NUMBER:
            return entry.version_number
        case ResolveMode.STORAGE_PATH:
            return str(entry.path)


def select_channel_versions(
    components: Iterable[ReleasedComponent],
    *,
    channel: str,
    mode: ResolveMode,
) -> ChannelSelection:
    """Map each component to its highest version in ``channel``.

    ``components`` must already be in precedence order (see
    ``Registry.select_versions``). Components without an eligible version are
    left out of the result.
    """
    selection: ChannelSelection = {}
    for component in components:
        for entry in component.versions:
            if entry.channel != channel:
                # Stop at the first stable version, nothing beyond it is eligible.
                if entry.is_stable:
                    break
                continue

            selection[component.identifier] = _resolve(entry, mode)
            break

    return selection
