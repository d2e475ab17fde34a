"""Operating system and shell detection.

Both detectors are pure functions of the environment mapping and the
os-release file they are given, and neither raises: an unrecognised
platform or shell is reported as the ``unknown`` kind.
"""

import os
import sys
from pathlib import Path
from typing import Mapping, Optional

from .logging import get_logger
from .models import OSKind, ShellKind

OS_RELEASE_PATH = Path("/etc/os-release")

# os-release ID values that name a supported distribution, including
# derivatives that share its package manager.
_DISTRO_IDS = {
    "ubuntu": OSKind.UBUNTU,
    "debian": OSKind.DEBIAN,
    "fedora": OSKind.FEDORA,
    "rhel": OSKind.RHEL,
    "centos": OSKind.RHEL,
    "rocky": OSKind.RHEL,
    "almalinux": OSKind.RHEL,
    "arch": OSKind.ARCH,
    "manjaro": OSKind.ARCH,
    "endeavouros": OSKind.ARCH,
    "nixos": OSKind.NIXOS,
}

# Checked in order; the first variable present wins.
_SHELL_MARKERS = (
    ("ZSH_VERSION", ShellKind.ZSH),
    ("BASH_VERSION", ShellKind.BASH),
    ("FISH_VERSION", ShellKind.FISH),
)


def parse_os_release(content: str) -> dict[str, str]:
    """Parse os-release ``KEY=value`` text into a dict.

    Comments and blank lines are skipped and surrounding quotes are removed.
    """
    data = {}
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        data[key.strip()] = value.strip().strip("\"'")
    return data


def _distro_from_release(data: Mapping[str, str]) -> OSKind:
    distro_id = data.get("ID", "").lower()
    if distro_id in _DISTRO_IDS:
        return _DISTRO_IDS[distro_id]

    for like in data.get("ID_LIKE", "").lower().split():
        if like in _DISTRO_IDS:
            return _DISTRO_IDS[like]

    return OSKind.LINUX


def detect_os(
    env: Optional[Mapping[str, str]] = None,
    platform_id: Optional[str] = None,
    os_release: Optional[Path] = None,
) -> OSKind:
    """Detect the running operating system.

    Args:
        env: Environment mapping; defaults to ``os.environ``.
        platform_id: Platform identifier. Falls back to ``$OSTYPE`` and then
            ``sys.platform``.
        os_release: Location of the os-release descriptor; defaults to
            ``/etc/os-release``.

    Returns:
        The detected OSKind. ``linux`` when the distribution cannot be
        identified, ``unknown`` for non-Linux, non-macOS platforms.
    """
    if env is None:
        env = os.environ
    if platform_id is None:
        platform_id = env.get("OSTYPE") or sys.platform
    if os_release is None:
        os_release = OS_RELEASE_PATH

    platform_id = platform_id.lower()
    if platform_id.startswith("darwin"):
        return OSKind.MACOS
    if not platform_id.startswith("linux"):
        return OSKind.UNKNOWN

    try:
        content = os_release.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        get_logger().debug(f"No readable os-release at {os_release}, assuming generic linux")
        return OSKind.LINUX

    return _distro_from_release(parse_os_release(content))


def detect_shell(env: Optional[Mapping[str, str]] = None) -> ShellKind:
    """Detect the current user's shell.

    Shell-specific version variables are checked first (zsh, bash, fish),
    then the basename of ``$SHELL``.

    Returns:
        The detected ShellKind, or ``unknown``.
    """
    if env is None:
        env = os.environ

    for variable, kind in _SHELL_MARKERS:
        if env.get(variable):
            return kind

    shell_path = env.get("SHELL", "")
    if shell_path:
        # Login shells may be reported as "-zsh"
        name = Path(shell_path).name.lstrip("-")
        for kind in ShellKind:
            if kind is not ShellKind.UNKNOWN and name == kind.value:
                return kind

    return ShellKind.UNKNOWN
