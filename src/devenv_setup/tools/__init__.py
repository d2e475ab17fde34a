"""Tools package for devenv-setup."""

from .instructions import get_manual_instructions
from .setup import setup_dev_environment
from .status import check_status

__all__ = [
    "setup_dev_environment",
    "check_status",
    "get_manual_instructions",
]
