"""Terminal implementation of `IdentityPrompter`.

Menu rendering uses Rich; input goes through `typer.prompt` so that
Ctrl+C and EOF arrive as `typer.Abort`, which is turned into a
cancellation (None) instead of a program-level exception.
"""

from __future__ import annotations

import typer
from rich.console import Console

from core.domain.models import Scope

SCOPE_TITLE = "Choose Git config scope"


class TerminalPrompter:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def select_scope(self) -> Scope | None:
        """Numbered single-select menu; option 1 (Global) is the default.

        Out-of-range numbers are rejected and the menu asks again.
        """

        options = [scope.option for scope in Scope]
        self.console.print(f"[bold]? {SCOPE_TITLE}[/bold]")
        for index, option in enumerate(options, start=1):
            self.console.print(f"  {index}) {option}")

        while True:
            try:
                choice = typer.prompt("Select", default=1, type=int, show_default=True)
            except typer.Abort:
                return None
            if 1 <= choice <= len(options):
                return Scope.from_option(options[choice - 1])
            self.console.print(
                f"Error: {choice} is not in the range 1-{len(options)}.",
                style="red",
                markup=False,
            )

    def prompt_value(self, label: str, default: str = "") -> str | None:
        try:
            value = typer.prompt(label, default=default, show_default=bool(default))
        except typer.Abort:
            return None
        return str(value).strip()
