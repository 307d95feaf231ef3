"""Contract for interactive input."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Scope


@runtime_checkable
class IdentityPrompter(Protocol):
    """Asks the user for a scope and for single-line values.

    Both operations return None when the user cancels (Ctrl+C, EOF).
    """

    def select_scope(self) -> Scope | None:
        ...

    def prompt_value(self, label: str, default: str = "") -> str | None:
        ...
