"""Deleting staged pre-release files.

Deletion is not transactional: the first failure stops the batch and
files removed before it stay removed. The error hint lists them.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from updatemgr.core.result import Err, Ok, Result
from updatemgr.output.console import ConsoleProtocol, Style
from updatemgr.services.confirm import ConfirmGate
from updatemgr.services.errors import UpdateError
from updatemgr.services.outcome import Outcome

__all__ = ["prune_files"]

DELETE_PROMPT = "Do you want to delete these files?"


def _partial_hint(deleted: list[Path]) -> str:
    if not deleted:
        return "no files were deleted"
    lines = [f"{len(deleted)} file(s) already deleted:"]
    lines.extend(str(p) for p in deleted)
    return "\n".join(lines)


def prune_files(
    *,
    selection: Mapping[str, str],
    console: ConsoleProtocol,
    gate: ConfirmGate,
) -> Result[Outcome, UpdateError]:
    """List the storage paths in ``selection`` and delete them once confirmed."""
    if not selection:
        console.print("nothing to delete", Style.DIM)
        return Ok(Outcome.UNCHANGED)

    paths = [Path(p) for p in selection.values()]

    console.print("To be deleted:", Style.HEADER)
    console.block("\n".join(str(p) for p in paths))
    console.newline()

    if not gate.confirm(DELETE_PROMPT):
        console.print("aborted...", Style.WARNING)
        return Ok(Outcome.ABORTED)

    deleted: list[Path] = []
    for path in paths:
        try:
            path.unlink()
        except OSError as e:
            return Err(
                UpdateError(
                    kind="delete_failed",
                    message=f"failed to delete {path}: {e.strerror or e}",
                    hint=_partial_hint(deleted),
                )
            )
        deleted.append(path)

    console.success("deleted")
    return Ok(Outcome.DELETED)
