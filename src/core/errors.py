"""Custom exception types used across GitFx.

Explicit error classes let the CLI tell user-facing git failures apart
from unexpected bugs.
"""

from __future__ import annotations

from typing import Sequence


class GitFxError(Exception):
    """Base class for all GitFx specific errors."""


class GitCommandError(GitFxError):
    """Raised when a git invocation cannot run or exits non-zero."""

    def __init__(
        self,
        args: Sequence[str],
        *,
        returncode: int | None = None,
        stderr: str = "",
        reason: str | None = None,
    ) -> None:
        self.command = list(args)
        self.returncode = returncode
        self.stderr = stderr.strip()

        message = reason or f"`{' '.join(self.command)}` exited with status {returncode}"
        if self.stderr:
            message = f"{message}: {self.stderr}"
        super().__init__(message)
