"""Executor package for detecting the environment and applying setup steps."""

from .cli import check_tool_available, find_tool
from .detect import detect_os, detect_shell
from .hooks import config_file_for, ensure_hook, hooks_status, manual_instructions
from .installer import install_devbox, install_direnv
from .models import ExecutionResult, HookLine, HookOutcome, OSKind, ShellKind

__all__ = [
    "detect_os",
    "detect_shell",
    "config_file_for",
    "ensure_hook",
    "hooks_status",
    "manual_instructions",
    "install_direnv",
    "install_devbox",
    "check_tool_available",
    "find_tool",
    "ExecutionResult",
    "HookLine",
    "HookOutcome",
    "OSKind",
    "ShellKind",
]
