"""Utility functions for executor module."""

import re


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text.

    This removes color codes, cursor movement, and other terminal control sequences.

    Args:
        text: Text potentially containing ANSI escape codes.

    Returns:
        Clean text without ANSI codes.
    """
    # Pattern matches:
    # - \x1b (ESC) followed by [ and any parameters ending with a letter
    # - \x1b (ESC) followed by other escape sequences
    ansi_pattern = re.compile(r"\x1b\[[0-9;]*[A-Za-z]|\x1b[^[[]?")
    return ansi_pattern.sub("", text)


def tail_lines(text: str, count: int = 10) -> str:
    """Return the last `count` non-empty lines of command output."""
    lines = [line for line in text.splitlines() if line.strip()]
    return "\n".join(lines[-count:])


def format_command(cmd) -> str:
    """Render a command (string or argv list) for log and output messages."""
    if isinstance(cmd, str):
        return cmd
    return " ".join(cmd)
