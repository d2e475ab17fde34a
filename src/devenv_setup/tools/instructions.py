"""Manual shell configuration instructions."""

from typing import Optional

from ..executor import manual_instructions


def get_manual_instructions(shell: Optional[str] = None) -> dict:
    """Return the lines to add by hand when a shell can't be configured."""
    return {
        "shell": shell,
        "instructions": manual_instructions(shell),
    }
