"""Typer application and dispatcher.

Subcommands are listed in the static `COMMANDS` table and attached by
`build_app`; nothing registers itself at import time.
"""

from __future__ import annotations

import importlib
import sys
from typing import Annotated, Callable, Mapping

import typer
from pydantic import ValidationError
from rich.console import Console

from cli import config_cmd, doctor
from cli.ui_components import print_banner
from core.config import VERSION, AppSettings
from core.logging_utils import configure_logging

_console = Console()
_err_console = Console(stderr=True)

# typer re-exports Abort/Exit/BadParameter but not their base class; take it
# from whichever click (bundled or standalone) typer raises.
ClickException = importlib.import_module(typer.BadParameter.__module__).ClickException


def _help(ctx: typer.Context) -> None:
    """Show the available commands and options."""

    parent = ctx.parent or ctx
    # Rich-formatted help is printed directly and leaves nothing to echo.
    help_text = parent.get_help()
    if help_text:
        typer.echo(help_text)


COMMANDS: Mapping[str, Callable[..., None]] = {
    "config": config_cmd.run,
    "doctor": doctor.run,
    "help": _help,
}


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"🎯 GitFx version: {VERSION}")
        raise typer.Exit()


def _root(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=_version_callback,
            is_eager=True,
            help="Show the GitFx version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option("--verbose", count=True, help="Increase log verbosity (repeatable)."),
    ] = 0,
) -> None:
    """GitFx - A friendlier Git CLI.

    Use 'gix help' to explore available commands and options.
    """

    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    configure_logging(verbosity=verbose, level=settings.log_level)

    if ctx.invoked_subcommand is None:
        print_banner(_console, show_art=settings.show_banner)


def build_app(commands: Mapping[str, Callable[..., None]] = COMMANDS) -> typer.Typer:
    app = typer.Typer(
        name="gix",
        help="GitFx - A friendlier Git CLI.",
        add_completion=False,
        pretty_exceptions_enable=False,
    )
    app.callback(invoke_without_command=True)(_root)
    for name, handler in commands.items():
        app.command(name=name)(handler)
    return app


def run(argv: list[str] | None = None) -> None:
    """Execute the CLI; dispatch failures go to stderr with exit status 1."""

    # Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8).
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    app = build_app()
    try:
        code = app(args=argv, prog_name="gix", standalone_mode=False)
    except typer.Exit as exc:
        code = exc.exit_code
    except ClickException as exc:
        _err_console.print(f"Error: {exc.format_message()}", markup=False, highlight=False)
        sys.exit(1)
    except typer.Abort:
        _err_console.print("Aborted.", markup=False)
        sys.exit(1)

    if isinstance(code, int) and code:
        sys.exit(code)
