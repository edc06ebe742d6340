from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from updatemgr.cli.commands._helpers import exit_on_error
from updatemgr.core.distribution import Distribution, detect_distribution
from updatemgr.core.result import Err, Ok, Result
from updatemgr.output.console import ConsoleProtocol
from updatemgr.services.confirm import ConfirmGate
from updatemgr.services.errors import UpdateError


@dataclass(frozen=True, slots=True)
class AppDeps:
    """Collaborators chosen when the app is built, shared by all commands."""

    console: ConsoleProtocol
    gate: ConfirmGate
    directory: Path | None = None


@dataclass(frozen=True, slots=True)
class CLIContext:
    distribution: Distribution
    console: ConsoleProtocol
    gate: ConfirmGate


def app_deps(ctx: typer.Context) -> AppDeps:
    deps = ctx.find_object(AppDeps)
    if deps is None:
        raise RuntimeError("updatemgr commands must run through build_app()")
    return deps


def resolve_distribution(directory: Path | None) -> Result[Distribution, UpdateError]:
    result = detect_distribution(directory)
    if isinstance(result, Err):
        return Err(
            UpdateError(
                kind="config_invalid",
                message=result.error.message,
                hint=result.error.hint,
            )
        )
    return Ok(result.value)


def build_context(ctx: typer.Context) -> CLIContext:
    deps = app_deps(ctx)
    distribution = exit_on_error(resolve_distribution(deps.directory), deps.console)
    return CLIContext(distribution=distribution, console=deps.console, gate=deps.gate)
