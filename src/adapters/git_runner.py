"""Subprocess-backed git runner.

Why a wrapper:
- Every git invocation goes through one place, so logging and error
  translation are consistent.
- Easy to test: `subprocess.run` can be monkeypatched, or the whole runner
  replaced by a fake implementing `core.interfaces.git.GitRunner`.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from core.config import AppSettings
from core.domain.models import CommandResult, Scope
from core.errors import GitCommandError

LOG = logging.getLogger(__name__)


class SubprocessGitRunner:
    """Runs the git executable in the current working directory."""

    def __init__(self, settings: AppSettings | None = None, *, cwd: str | None = None) -> None:
        settings = settings or AppSettings()
        self.executable = settings.git_executable
        self.cwd = cwd

    def run(self, args: Sequence[str]) -> CommandResult:
        """Run git and return its result; only a missing executable raises."""

        cmd = [self.executable, *args]
        LOG.debug("Running git command: %s", " ".join(cmd))
        try:
            completed = subprocess.run(
                cmd,
                cwd=self.cwd,
                check=False,
                text=True,
                capture_output=True,
            )
        except OSError as exc:
            raise GitCommandError(cmd, reason=f"failed to execute {self.executable}: {exc}") from exc

        if completed.returncode != 0:
            LOG.debug("git exited %s, stderr: %s", completed.returncode, completed.stderr)
        return CommandResult(
            args=list(args),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    def check(self, args: Sequence[str]) -> CommandResult:
        """Like `run`, but a non-zero exit raises `GitCommandError`."""

        result = self.run(args)
        if not result.ok:
            raise GitCommandError(
                [self.executable, *args],
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return result

    def is_inside_repository(self) -> bool:
        try:
            result = self.run(["rev-parse", "--is-inside-work-tree"])
        except GitCommandError as exc:
            LOG.debug("repository probe failed: %s", exc)
            return False
        return result.ok and result.stdout.strip() == "true"

    def apply_setting(self, scope: Scope, key: str, value: str) -> None:
        self.check(["config", scope.flag, key, value])

    def get_setting(self, key: str) -> str | None:
        """Effective value of `key`, or None when unset."""

        result = self.run(["config", "--get", key])
        if not result.ok:
            return None
        return result.stdout.strip() or None

    def version(self) -> str:
        return self.check(["--version"]).stdout.strip()
