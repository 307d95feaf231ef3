"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets `config` and the bare `gix` call share the same printing helpers.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.models import ConfigOutcome, FieldStatus, FlowStatus

BANNER_ART = r"""
 $$$$$$\  $$\   $$\     $$$$$$$$\
$$  __$$\ \__|  $$ |    $$  _____|
$$ /  \__|$$\ $$$$$$\   $$ |  $$\   $$\
$$ |$$$$\ $$ |\_$$  _|  $$$$$\\$$\ $$  |
$$ |\_$$ |$$ |  $$ |    $$  __|\$$$$  /
$$ |  $$ |$$ |  $$ |$$\ $$ |   $$  $$<
\$$$$$$  |$$ |  \$$$$  |$$ |  $$  /\$$\
 \______/ \__|   \____/ \__|  \__/  \__|
"""

CONFIG_HEADER = "🔧 GitFx Config Mode — Set your Git identity"


def say(console: Console, message: str, style: str | None = None) -> None:
    """Print literal text: no markup, no emoji codes, no hard wrapping.

    User-supplied values go through here so brackets or colons in a name
    are printed as typed.
    """

    console.print(message, style=style, markup=False, emoji=False, highlight=False, soft_wrap=True)


def print_banner(console: Console, *, show_art: bool = True) -> None:
    """Print the welcome banner and the usage hints."""

    if show_art:
        console.print(Text(BANNER_ART, style="color(208)"), soft_wrap=True)
    say(console, "Welcome to GitFx — a modern, friendlier Git CLI.")
    say(console, "Type 'gix help' to view available commands and options.")


def render_outcome(console: Console, outcome: ConfigOutcome) -> None:
    """Print the user-facing messages for a finished configuration flow."""

    if outcome.status is FlowStatus.CANCELLED:
        say(console, "❌ Configuration cancelled.", "red")
        return

    if outcome.status is FlowStatus.NOT_IN_REPOSITORY:
        say(
            console,
            "❌ You are not inside a Git repository. "
            "Local Git configuration requires an initialized repository.",
            "red",
        )
        say(console, "💡 Tip: Run `git init` first if you want to use local config here.")
        return

    if outcome.status is FlowStatus.NOTHING_ENTERED:
        say(console, "⚠️  No values entered. Git config was not changed.", "yellow")
        return

    for field in outcome.results:
        if field.status is FieldStatus.SET:
            say(console, f"✅ Set {field.key} = {field.value}", "green")
        elif field.status is FieldStatus.FAILED:
            say(console, f"❌ Failed to set {field.key}: {field.error}", "red")
        else:
            say(console, f"⚠️  Skipped setting {field.key}", "yellow")

    if outcome.any_set and outcome.scope is not None:
        say(console, f"✅ Git identity updated using {outcome.scope.label} scope.", "green")
        say(console, f"🔍 You can verify with: git config {outcome.scope.flag} --list")


def build_doctor_table() -> Table:
    table = Table(title="GitFx Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
