import subprocess

import pytest

from adapters.git_runner import SubprocessGitRunner
from core.config import AppSettings
from core.domain.models import Scope
from core.errors import GitCommandError

PROBE = ("rev-parse", "--is-inside-work-tree")


@pytest.mark.parametrize(
    "response, expected",
    [
        ((0, "true\n", ""), True),
        ((0, "  true  ", ""), True),
        ((0, "false\n", ""), False),
        ((128, "", "fatal: not a git repository"), False),
    ],
)
def test_probe_requires_success_and_literal_true(fake_git, response, expected):
    fake_git.responses[PROBE] = response

    assert SubprocessGitRunner().is_inside_repository() is expected
    assert fake_git.calls == [["git", "rev-parse", "--is-inside-work-tree"]]


def test_probe_is_false_when_git_is_missing(monkeypatch):
    def missing(*args, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", "git")

    monkeypatch.setattr("adapters.git_runner.subprocess.run", missing)

    assert SubprocessGitRunner().is_inside_repository() is False


def test_apply_setting_builds_config_command(fake_git):
    SubprocessGitRunner().apply_setting(Scope.SYSTEM, "user.email", "bob@example.com")

    assert fake_git.calls == [["git", "config", "--system", "user.email", "bob@example.com"]]


def test_apply_setting_raises_with_stderr_details(fake_git):
    fake_git.responses[("config", "--local", "user.name", "Ada")] = (
        255,
        "",
        "error: could not lock config file .git/config",
    )

    with pytest.raises(GitCommandError) as excinfo:
        SubprocessGitRunner().apply_setting(Scope.LOCAL, "user.name", "Ada")

    message = str(excinfo.value)
    assert "git config --local user.name Ada" in message
    assert "could not lock config file" in message
    assert excinfo.value.returncode == 255


def test_apply_setting_reports_missing_executable(monkeypatch):
    def missing(*args, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", "nogit")

    monkeypatch.setattr("adapters.git_runner.subprocess.run", missing)
    runner = SubprocessGitRunner(AppSettings(git_executable="nogit"))

    with pytest.raises(GitCommandError, match="failed to execute nogit"):
        runner.apply_setting(Scope.GLOBAL, "user.name", "Ada")


def test_executable_comes_from_settings(monkeypatch):
    seen = []

    def fake_run(cmd, **kwargs):
        seen.append(cmd)
        return subprocess.CompletedProcess(args=cmd, returncode=0, stdout="", stderr="")

    monkeypatch.setenv("GITFX_GIT_EXECUTABLE", "/opt/git/bin/git")
    monkeypatch.setattr("adapters.git_runner.subprocess.run", fake_run)

    SubprocessGitRunner().apply_setting(Scope.GLOBAL, "user.name", "Ada")

    assert seen[0][0] == "/opt/git/bin/git"


def test_get_setting_returns_none_when_unset(fake_git):
    fake_git.responses[("config", "--get", "user.name")] = (1, "", "")
    fake_git.responses[("config", "--get", "user.email")] = (0, "ada@example.com\n", "")
    runner = SubprocessGitRunner()

    assert runner.get_setting("user.name") is None
    assert runner.get_setting("user.email") == "ada@example.com"
