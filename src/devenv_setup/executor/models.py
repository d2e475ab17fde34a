"""Data models for executor module."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class OSKind(str, Enum):
    """Operating systems the installer knows how to classify."""

    MACOS = "macos"
    UBUNTU = "ubuntu"
    DEBIAN = "debian"
    FEDORA = "fedora"
    RHEL = "rhel"
    ARCH = "arch"
    NIXOS = "nixos"
    LINUX = "linux"
    UNKNOWN = "unknown"


class ShellKind(str, Enum):
    """Interactive shells whose startup files can be hooked."""

    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class HookLine:
    """One startup statement that must appear in a shell config file.

    `marker` is the substring used to decide whether the hook is already
    present. `lines` maps each supported shell to its rendered statement.
    """

    name: str
    marker: str
    comment: str
    lines: dict = field(default_factory=dict)

    def render(self, shell: ShellKind) -> Optional[str]:
        """Return the statement for `shell`, or None if it has no form there."""
        return self.lines.get(shell)


@dataclass
class HookOutcome:
    """Result of ensuring one hook in a config file."""

    hook: str
    path: Path
    added: bool


@dataclass
class ExecutionResult:
    """Result of an external command."""

    success: bool
    output: str
    error: Optional[str] = None
    return_code: int = 0
    command: list[str] = field(default_factory=list)
