"""Doctor command for environment diagnostics."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from adapters.git_runner import SubprocessGitRunner
from cli.ui_components import build_doctor_table
from core.config import AppSettings
from core.domain.models import IDENTITY_KEYS
from core.errors import GitCommandError

_console = Console()


def run() -> None:
    """Check the git executable and show the effective identity (read-only)."""

    settings = AppSettings()
    runner = SubprocessGitRunner(settings)
    table = build_doctor_table()

    try:
        version = runner.version()
    except GitCommandError as exc:
        table.add_row("git executable", "FAIL", Text(str(exc)))
        _console.print(table)
        _console.print(
            f"\n[yellow]Note:[/yellow] install git or point GITFX_GIT_EXECUTABLE at it "
            f"(currently {settings.git_executable!r})."
        )
        return
    table.add_row("git executable", "OK", Text(version))

    if runner.is_inside_repository():
        table.add_row("working tree", "OK", "inside")
    else:
        table.add_row("working tree", "OPTIONAL", "outside")

    for key, _label in IDENTITY_KEYS:
        value = runner.get_setting(key)
        if value:
            table.add_row(key, "OK", Text(value))
        else:
            table.add_row(key, "MISSING", "not set")

    _console.print(table)
