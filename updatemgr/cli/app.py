from __future__ import annotations

from pathlib import Path

import typer

from updatemgr import __version__
from updatemgr.cli.commands.release_cmd import prerelease, release, show
from updatemgr.cli.context import AppDeps
from updatemgr.output.console import ConsoleProtocol, RichConsole
from updatemgr.services.confirm import ConfirmGate, PromptConfirm


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def build_app(
    *,
    console: ConsoleProtocol | None = None,
    gate: ConfirmGate | None = None,
) -> typer.Typer:
    """Build the command tree.

    Nothing is registered at import time; every call returns a fresh app
    bound to the given console and confirmation gate.
    """
    app = typer.Typer(
        add_completion=False,
        no_args_is_help=True,
        help="Publish channel indexes for a versioned distribution directory.",
    )

    @app.callback()
    def _main(  # pyright: ignore[reportUnusedFunction]
        ctx: typer.Context,
        version: bool = typer.Option(
            False,
            "--version",
            help="Show version and exit.",
            callback=_print_version,
            is_eager=True,
        ),
        directory: Path | None = typer.Option(
            None,
            "--dir",
            help="Distribution directory (default: $UPDATEMGR_DIR or the current directory).",
        ),
    ) -> None:
        ctx.obj = AppDeps(
            console=console if console is not None else RichConsole(),
            gate=gate if gate is not None else PromptConfirm(),
            directory=directory,
        )

    app.command()(release)
    app.command()(prerelease)
    app.command()(show)
    return app


def main() -> None:
    build_app()()
