"""Status check tool for the developer environment."""

from pathlib import Path
from typing import Mapping, Optional

from ..config import SetupConfig, load_config
from ..errors import ConfigError, ConfigFileError, UnsupportedShellError
from ..executor import check_tool_available, config_file_for, detect_os, detect_shell, hooks_status


def check_status(
    env: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
    config: Optional[SetupConfig] = None,
) -> dict:
    """Check the state of the developer environment without changing it.

    Returns information about:
    - The detected operating system and shell
    - Whether direnv and devbox are available
    - The shell startup file and which hooks it already contains

    A config file that cannot be loaded is reported in ``config_error``
    and the defaults are used instead.
    """
    config_error = None
    if config is None:
        try:
            config = load_config()
        except (ConfigError, FileNotFoundError) as e:
            config = SetupConfig()
            config_error = str(e)

    direnv_available, direnv_message = check_tool_available("direnv")
    devbox_available, devbox_message = check_tool_available("devbox")

    shell_kind = detect_shell(env)
    try:
        config_file = str(config_file_for(shell_kind, home, config.shell_config_files))
        hooks = hooks_status(
            shell_kind,
            home=home,
            strict=config.strict_hook_matching,
            overrides=config.shell_config_files,
        )
        shell_error = None
    except (UnsupportedShellError, ConfigFileError) as e:
        config_file = None
        hooks = {}
        shell_error = str(e)

    return {
        "os": detect_os(env).value,
        "shell": shell_kind.value,
        "direnv_available": direnv_available,
        "direnv_message": direnv_message,
        "devbox_available": devbox_available,
        "devbox_message": devbox_message,
        "config_file": config_file,
        "hooks": hooks,
        "shell_error": shell_error,
        "config_error": config_error,
    }
