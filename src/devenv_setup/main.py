"""Command-line entry point: install and configure the developer environment."""

import sys

from .tools import setup_dev_environment


def main() -> int:
    """Run the full setup and return the process exit code.

    Takes no arguments; every run performs the same steps.
    """
    result = setup_dev_environment()

    if result["output"]:
        print(result["output"])
    for warning in result["warnings"]:
        print(f"Warning: {warning}", file=sys.stderr)
    if result["error"]:
        print(f"Error: {result['error']}", file=sys.stderr)

    return result["exit_code"]


if __name__ == "__main__":
    sys.exit(main())
