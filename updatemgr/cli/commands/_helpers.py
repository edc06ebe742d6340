"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from updatemgr.core.result import Err, Result
from updatemgr.output.errors import print_update_error, update_error_exit_code
from updatemgr.services.errors import UpdateError

if TYPE_CHECKING:
    from updatemgr.output.console import ConsoleProtocol

T = TypeVar("T")


def exit_on_error(result: Result[T, UpdateError], console: ConsoleProtocol) -> T:
    """Return the Ok value, or print the error and exit with its code."""
    if isinstance(result, Err):
        print_update_error(result.error, console)
        raise typer.Exit(code=update_error_exit_code(result.error))
    return result.value
