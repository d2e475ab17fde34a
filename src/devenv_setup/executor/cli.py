"""CLI utilities for finding installed tool executables."""

import os
import shutil
from typing import Optional


def find_tool(name: str) -> Optional[str]:
    """Find an installed tool executable.

    Checks the following locations in order:
    1. PATH via shutil.which(name)
    2. ~/.local/bin/<name>
    3. /usr/local/bin/<name>
    4. ~/.nix-profile/bin/<name>

    Returns:
        Path to the executable or None if not found.
    """
    path = shutil.which(name)
    if path:
        return path

    # Installers may put binaries in locations not yet on PATH
    common_paths = [
        os.path.expanduser(f"~/.local/bin/{name}"),
        f"/usr/local/bin/{name}",
        os.path.expanduser(f"~/.nix-profile/bin/{name}"),
    ]

    for candidate in common_paths:
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate

    return None


def check_tool_available(name: str) -> tuple[bool, str]:
    """Check if a tool is available.

    Returns:
        Tuple of (is_available, message).
    """
    path = find_tool(name)
    if path:
        return True, f"{name} found at: {path}"
    else:
        return False, f"{name} not found in PATH"
