"""Tests for executor models."""

from pathlib import Path

import pytest
from devenv_setup.executor.models import ExecutionResult, HookLine, HookOutcome, OSKind, ShellKind


class TestEnums:
    """Tests for OSKind and ShellKind."""

    def test_os_kind_values(self):
        assert {kind.value for kind in OSKind} == {
            "macos", "ubuntu", "debian", "fedora", "rhel", "arch", "nixos", "linux", "unknown",
        }

    def test_shell_kind_values(self):
        assert {kind.value for kind in ShellKind} == {"bash", "zsh", "fish", "unknown"}

    def test_kinds_compare_as_strings(self):
        assert OSKind.MACOS == "macos"
        assert ShellKind("zsh") is ShellKind.ZSH


class TestHookLine:
    """Tests for HookLine class."""

    def test_render_known_shell(self):
        hook = HookLine(name="x", marker="x", comment="# x", lines={ShellKind.BASH: "echo x"})

        assert hook.render(ShellKind.BASH) == "echo x"

    def test_render_missing_shell(self):
        hook = HookLine(name="x", marker="x", comment="# x", lines={ShellKind.BASH: "echo x"})

        assert hook.render(ShellKind.FISH) is None

    def test_hook_line_is_frozen(self):
        hook = HookLine(name="x", marker="x", comment="# x")

        with pytest.raises(AttributeError):
            hook.marker = "y"


class TestExecutionResult:
    """Tests for ExecutionResult class."""

    def test_execution_result_defaults(self):
        result = ExecutionResult(success=True, output="ok")

        assert result.error is None
        assert result.return_code == 0
        assert result.command == []

    def test_execution_result_failure(self):
        result = ExecutionResult(success=False, output="", error="boom", return_code=1, command=["false"])

        assert result.success is False
        assert result.command == ["false"]


class TestHookOutcome:
    """Tests for HookOutcome class."""

    def test_hook_outcome_fields(self):
        outcome = HookOutcome(hook="direnv", path=Path("/home/test/.bashrc"), added=True)

        assert outcome.hook == "direnv"
        assert outcome.added is True
