"""Publishing and reading channel index files.

An index is a JSON object mapping component identifiers to the version
selected for one channel, written as ``<index_dir>/<channel>.json``. Each
publish replaces the whole file.

The file ends with a newline, unlike indexes written by the previous Go
tool. Readers parse both the same way; only the bytes differ.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from updatemgr.core.result import Err, Ok, Result
from updatemgr.core.structured import as_str_map
from updatemgr.output.console import ConsoleProtocol, Style
from updatemgr.platform.files import INDEX_FILE_MODE, atomic_write_text
from updatemgr.services.confirm import ConfirmGate
from updatemgr.services.errors import UpdateError
from updatemgr.services.outcome import Outcome

__all__ = ["index_path", "publish_index", "read_index", "render_index"]

WRITE_PROMPT = "Do you want to write this index?"


def index_path(index_dir: Path, channel: str) -> Path:
    return index_dir / f"{channel}.json"


def render_index(selection: Mapping[str, str]) -> Result[str, UpdateError]:
    """Serialize a selection: one-space indent, sorted keys, trailing newline."""
    try:
        text = json.dumps(dict(selection), indent=1, sort_keys=True, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        return Err(
            UpdateError(
                kind="serialize_failed",
                message=f"failed to serialize index: {e}",
            )
        )
    return Ok(text + "\n")


def publish_index(
    *,
    index_dir: Path,
    channel: str,
    selection: Mapping[str, str],
    console: ConsoleProtocol,
    gate: ConfirmGate,
) -> Result[Outcome, UpdateError]:
    """Preview the index for ``channel`` and write it once confirmed."""
    rendered = render_index(selection)
    if isinstance(rendered, Err):
        return rendered
    data = rendered.value

    path = index_path(index_dir, channel)

    console.print(f"{channel} ({path}):", Style.HEADER)
    console.block(data.rstrip("\n"))
    console.newline()

    if not gate.confirm(WRITE_PROMPT):
        console.print("aborted...", Style.WARNING)
        return Ok(Outcome.ABORTED)

    try:
        atomic_write_text(path, data, encoding="utf-8", mode=INDEX_FILE_MODE)
    except OSError as e:
        return Err(
            UpdateError(
                kind="write_failed",
                message=f"failed to write index: {e}",
                hint=str(path),
            )
        )

    console.success(f"written {path}")
    return Ok(Outcome.WRITTEN)


def read_index(path: Path) -> Result[dict[str, str], UpdateError]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        return Err(
            UpdateError(
                kind="read_failed",
                message=f"failed to read index: {e}",
                hint=str(path),
            )
        )

    try:
        obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(
            UpdateError(
                kind="read_failed",
                message=f"invalid JSON in index: {e}",
                hint=str(path),
            )
        )

    versions = as_str_map(obj)
    if versions is None:
        return Err(
            UpdateError(
                kind="read_failed",
                message="index root must be a JSON object of strings",
                hint=str(path),
            )
        )
    return Ok(versions)
