"""Contract for the git command runner.

Why Protocol:
- The configuration flow only needs "probe" and "apply"; how git is
  executed (subprocess, fake, remote) stays an adapter detail.
- Tests substitute a recording fake without touching subprocess.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Scope


@runtime_checkable
class GitRunner(Protocol):
    """Minimal surface the core needs from git.

    Design rules:
    - `is_inside_repository` never raises; failures degrade to False.
    - `apply_setting` raises `GitCommandError` and never retries.
    """

    def is_inside_repository(self) -> bool:
        ...

    def apply_setting(self, scope: Scope, key: str, value: str) -> None:
        ...
