import subprocess

import pytest

from core.domain.models import Scope
from core.errors import GitCommandError


class ScriptedPrompter:
    """Answers prompts from a script; None entries simulate cancellation."""

    def __init__(self, scope, values=()):
        self.scope = scope
        self.values = list(values)
        self.scope_calls = 0
        self.value_labels = []

    def select_scope(self):
        self.scope_calls += 1
        return self.scope

    def prompt_value(self, label, default=""):
        self.value_labels.append(label)
        return self.values.pop(0)


class RecordingRunner:
    def __init__(self, inside=True, fail_keys=()):
        self.inside = inside
        self.fail_keys = set(fail_keys)
        self.probes = 0
        self.applied = []

    def is_inside_repository(self):
        self.probes += 1
        return self.inside

    def apply_setting(self, scope: Scope, key, value):
        self.applied.append((scope.flag, key, value))
        if key in self.fail_keys:
            raise GitCommandError(
                ["git", "config", scope.flag, key, value],
                returncode=255,
                stderr="error: could not lock config file",
            )


class FakeGit:
    """Stand-in for subprocess.run that records git invocations."""

    def __init__(self, responses=None):
        self.calls = []
        self.responses = responses or {}

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        returncode, stdout, stderr = self.responses.get(tuple(cmd[1:]), (0, "", ""))
        return subprocess.CompletedProcess(args=cmd, returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def fake_git(monkeypatch):
    monkeypatch.delenv("GITFX_GIT_EXECUTABLE", raising=False)
    monkeypatch.delenv("GITFX_LOG_LEVEL", raising=False)
    fake = FakeGit()
    monkeypatch.setattr("adapters.git_runner.subprocess.run", fake)
    return fake
