from __future__ import annotations

import typer

from updatemgr.cli.commands._helpers import exit_on_error
from updatemgr.cli.context import CLIContext, build_context
from updatemgr.services.index import index_path, read_index
from updatemgr.services.registry.scan import Registry, load_registry
from updatemgr.services.workflow import (
    STABLE_INDEX_NAME,
    run_prerelease,
    run_release,
    validate_channel,
)


def _registry(cli: CLIContext) -> Registry:
    return exit_on_error(load_registry(cli.distribution.storage_dir), cli.console)


def release(ctx: typer.Context) -> None:
    """Scan the distribution directory and publish the stable index."""
    cli = build_context(ctx)
    exit_on_error(
        run_release(
            registry=_registry(cli),
            index_dir=cli.distribution.index_dir,
            console=cli.console,
            gate=cli.gate,
        ),
        cli.console,
    )


def prerelease(
    ctx: typer.Context,
    channel: str = typer.Argument(..., help="Pre-release channel, e.g. beta."),
    reset: bool = typer.Option(
        False,
        "--reset",
        help="Delete the staged files of this channel instead of publishing an index.",
    ),
) -> None:
    """Publish an index of the newest versions tagged with CHANNEL.

    Versions older than a component's newest stable version are never selected.
    """
    cli = build_context(ctx)
    exit_on_error(
        run_prerelease(
            registry=_registry(cli),
            index_dir=cli.distribution.index_dir,
            channel=channel,
            reset=reset,
            console=cli.console,
            gate=cli.gate,
        ),
        cli.console,
    )


def show(
    ctx: typer.Context,
    channel: str = typer.Argument(STABLE_INDEX_NAME, help="Channel index to print."),
) -> None:
    """Print a published channel index."""
    cli = build_context(ctx)
    if channel != STABLE_INDEX_NAME:
        channel = exit_on_error(validate_channel(channel), cli.console)

    path = index_path(cli.distribution.index_dir, channel)
    versions = exit_on_error(read_index(path), cli.console)

    cli.console.header(f"{channel} ({path})")
    if not versions:
        cli.console.print("(empty)")
        return
    width = max(len(k) for k in versions)
    for identifier in sorted(versions):
        cli.console.print(f"{identifier:<{width}}  {versions[identifier]}")
