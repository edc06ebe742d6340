"""Release and pre-release workflows.

Each run sorts the registry, selects one version per component for the
channel and hands the selection to either the index writer or the pruner.
One action per invocation, no state kept between runs.
"""

from __future__ import annotations

from pathlib import Path

from updatemgr.core.result import Err, Ok, Result
from updatemgr.output.console import ConsoleProtocol
from updatemgr.services.confirm import ConfirmGate
from updatemgr.services.errors import UpdateError
from updatemgr.services.index import publish_index
from updatemgr.services.outcome import Outcome
from updatemgr.services.prune import prune_files
from updatemgr.services.registry.scan import Registry
from updatemgr.services.selector import (
    STABLE_CHANNEL,
    ChannelSelection,
    ResolveMode,
    select_channel_versions,
)

__all__ = [
    "STABLE_INDEX_NAME",
    "channel_selection",
    "run_prerelease",
    "run_release",
    "validate_channel",
]

STABLE_INDEX_NAME = "stable"


def channel_selection(registry: Registry, *, channel: str, mode: ResolveMode) -> ChannelSelection:
    registry.select_versions()
    return select_channel_versions(registry.export(), channel=channel, mode=mode)


def validate_channel(channel: str) -> Result[str, UpdateError]:
    """Check a pre-release channel name; it doubles as the index file name."""
    name = channel.strip()
    if not name:
        return Err(UpdateError(kind="invalid_input", message="channel name is empty"))
    if name == STABLE_INDEX_NAME:
        return Err(
            UpdateError(
                kind="invalid_input",
                message="'stable' is not a pre-release channel",
                hint="use `updatemgr release` to publish the stable index",
            )
        )
    if "/" in name or "\\" in name or name.startswith("."):
        return Err(
            UpdateError(
                kind="invalid_input",
                message=f"invalid channel name: {channel!r}",
                hint="channel names must not contain path separators or start with '.'",
            )
        )
    return Ok(name)


def run_release(
    *,
    registry: Registry,
    index_dir: Path,
    console: ConsoleProtocol,
    gate: ConfirmGate,
) -> Result[Outcome, UpdateError]:
    """Publish the stable index (newest untagged version per component)."""
    versions = channel_selection(
        registry, channel=STABLE_CHANNEL, mode=ResolveMode.VERSION_NUMBER
    )
    return publish_index(
        index_dir=index_dir,
        channel=STABLE_INDEX_NAME,
        selection=versions,
        console=console,
        gate=gate,
    )


def run_prerelease(
    *,
    registry: Registry,
    index_dir: Path,
    channel: str,
    reset: bool,
    console: ConsoleProtocol,
    gate: ConfirmGate,
) -> Result[Outcome, UpdateError]:
    """Publish the ``channel`` index, or with ``reset`` delete its staged files."""
    checked = validate_channel(channel)
    if isinstance(checked, Err):
        return checked
    name = checked.value

    if reset:
        paths = channel_selection(registry, channel=name, mode=ResolveMode.STORAGE_PATH)
        return prune_files(selection=paths, console=console, gate=gate)

    versions = channel_selection(registry, channel=name, mode=ResolveMode.VERSION_NUMBER)
    if not versions:
        console.warning(f"no versions found for channel '{name}'")
    return publish_index(
        index_dir=index_dir,
        channel=name,
        selection=versions,
        console=console,
        gate=gate,
    )
