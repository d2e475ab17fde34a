"""MCP server for provisioning a developer environment.

This server exposes the devenv-setup operations as tools, so an editor
agent can install direnv and devbox and hook them into the user's shell.
"""

from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP

from .tools import (
    check_status as check_status_impl,
    get_manual_instructions as get_manual_instructions_impl,
    setup_dev_environment as setup_dev_environment_impl,
)

# Initialize the MCP server
mcp = FastMCP("Developer Environment Setup")


@mcp.tool()
def setup_dev_environment() -> dict:
    """Install and configure direnv and devbox.

    This tool will:
    1. Detect the operating system and install curl, git and direnv
    2. Install devbox with its official installer
    3. Add the direnv and devbox hooks to your shell config
       (.bashrc, .zshrc or config.fish)

    Running it again is safe: hooks already present are not added twice.

    Returns:
        A dictionary with:
        - success: Whether installation succeeded
        - output: Installation log
        - error: Error message if failed
        - os: Detected operating system
        - shell: Detected shell
        - config_file: Shell config file that was edited
        - hooks: Which hooks were added on this run
        - warnings: Non-fatal problems
    """
    return setup_dev_environment_impl()


@mcp.tool()
def check_status() -> dict:
    """Check whether direnv and devbox are installed and hooked into the shell.

    This tool does not change anything.
    """
    return check_status_impl()


@mcp.tool()
def get_manual_instructions(
    shell: Annotated[
        Optional[str],
        "Shell to mention in the instructions (e.g., 'bash', 'zsh', 'fish')",
    ] = None,
) -> dict:
    """Get the lines to add to a shell config file by hand."""
    return get_manual_instructions_impl(shell=shell)


def main():
    """Entry point for the MCP server."""
    mcp.run()


if __name__ == "__main__":
    main()
