"""Error presentation and exit code mapping for service errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from updatemgr.core.errors import ErrorCode
from updatemgr.output.console import Style
from updatemgr.services.errors import UpdateError

if TYPE_CHECKING:
    from updatemgr.output.console import ConsoleProtocol

__all__ = ["print_update_error", "update_error_exit_code"]


def print_update_error(error: UpdateError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    if not error.hint:
        return
    first, *rest = error.hint.splitlines()
    console.print(f"hint: {first}", Style.DIM)
    for line in rest:
        console.print(f"  {line}", Style.DIM)


def update_error_exit_code(error: UpdateError) -> int:
    match error.kind:
        case "invalid_input":
            return int(ErrorCode.USER_ERROR)
        case "config_invalid":
            return int(ErrorCode.CONFIG_ERROR)
        case "registry_failed":
            return int(ErrorCode.REGISTRY_ERROR)
        case "serialize_failed":
            return int(ErrorCode.SERIALIZE_ERROR)
        case "write_failed" | "delete_failed" | "read_failed":
            return int(ErrorCode.IO_ERROR)
    # Fallback for exhaustiveness
    return int(ErrorCode.IO_ERROR)
