"""`gix config`: interactive git identity setup."""

from __future__ import annotations

from rich.console import Console

from adapters.git_runner import SubprocessGitRunner
from cli.prompts import TerminalPrompter
from cli.ui_components import CONFIG_HEADER, render_outcome, say
from core.config import AppSettings
from core.services.identity_config import configure_identity

_console = Console()


def run() -> None:
    """Configure your Git identity (name and email) interactively.

    Scopes:

      * Global - affects all repositories for the current user

      * Local  - affects only the current repository

      * System - affects all users on the system (rarely used)
    """

    say(_console, CONFIG_HEADER)
    runner = SubprocessGitRunner(AppSettings())
    outcome = configure_identity(TerminalPrompter(_console), runner)
    render_outcome(_console, outcome)
