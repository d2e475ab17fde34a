"""Install direnv and devbox and hook them into the user's shell."""

from pathlib import Path
from typing import Mapping, Optional

from ..config import SetupConfig, load_config
from ..errors import ConfigError, ConfigFileError, PackageInstallError, UnsupportedOSError, UnsupportedShellError
from ..executor import (
    config_file_for,
    detect_os,
    detect_shell,
    ensure_hook,
    install_devbox,
    install_direnv,
    manual_instructions,
)
from ..executor.logging import get_logger


def setup_dev_environment(
    env: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
    config: Optional[SetupConfig] = None,
) -> dict:
    """Install and configure direnv and devbox.

    Steps:
    1. Detect the operating system (unsupported OS aborts the run)
    2. Install curl, git and direnv with the system package manager
    3. Install devbox with its remote installer
    4. Append the direnv and devbox hooks to the shell startup file

    A config file that cannot be loaded aborts the run, as do installation
    failures. An unsupported shell falls back to manual instructions, and a
    startup file that cannot be written is reported; neither undoes the
    installation.

    Returns:
        A dictionary with:
        - success: Whether every required step succeeded
        - exit_code: 0 on success, 1 otherwise
        - output: Step log
        - error: Error message if a step failed
        - os: Detected OS kind
        - shell: Detected shell kind
        - config_file: Startup file that was edited, if any
        - hooks: Map of hook name to whether it was added on this run
        - warnings: Non-fatal problems (unsupported shell, unwritable startup file)
    """
    logger = get_logger()
    steps_output = []
    result = {
        "success": False,
        "exit_code": 1,
        "output": "",
        "error": None,
        "os": None,
        "shell": None,
        "config_file": None,
        "hooks": {},
        "warnings": [],
    }

    def finish(error: Optional[str] = None) -> dict:
        result["output"] = "\n".join(steps_output)
        result["error"] = error
        result["success"] = error is None
        result["exit_code"] = 0 if error is None else 1
        return result

    if config is None:
        try:
            config = load_config()
        except (ConfigError, FileNotFoundError) as e:
            logger.error(str(e))
            return finish(str(e))

    # Step 1: Detect OS
    os_kind = detect_os(env)
    result["os"] = os_kind.value
    steps_output.append(f"Step 1: Detected operating system: {os_kind.value}")

    # Step 2 and 3: Install packages
    try:
        steps_output.append("\nStep 2: Installing prerequisites and direnv...")
        steps_output.extend(
            install_direnv(os_kind, timeout=config.install_timeout, skip_installed=config.skip_installed)
        )

        steps_output.append("\nStep 3: Installing devbox...")
        steps_output.extend(
            install_devbox(
                config.devbox_installer_url,
                timeout=config.install_timeout,
                skip_installed=config.skip_installed,
            )
        )
    except (UnsupportedOSError, PackageInstallError) as e:
        logger.error(str(e))
        return finish(str(e))

    # Step 4: Hook into the shell
    shell_kind = detect_shell(env)
    result["shell"] = shell_kind.value
    steps_output.append(f"\nStep 4: Configuring shell ({shell_kind.value})...")

    try:
        config_file = config_file_for(shell_kind, home, config.shell_config_files)
        outcomes = ensure_hook(
            shell_kind,
            home=home,
            strict=config.strict_hook_matching,
            overrides=config.shell_config_files,
        )
    except UnsupportedShellError as e:
        logger.warning(str(e))
        result["warnings"].append(str(e))
        steps_output.append(f"⚠ {e}")
        steps_output.append(manual_instructions(shell_kind.value))
        return finish()
    except ConfigFileError as e:
        # Installed packages are kept; only the hook step is reported
        logger.error(str(e))
        result["warnings"].append(str(e))
        steps_output.append(f"⚠ {e}")
        steps_output.append(manual_instructions(shell_kind.value))
        return finish()

    result["config_file"] = str(config_file)
    for outcome in outcomes:
        result["hooks"][outcome.hook] = outcome.added
        if outcome.added:
            steps_output.append(f"✓ Added {outcome.hook} hook to {outcome.path}")
        else:
            steps_output.append(f"✓ {outcome.hook} hook already configured in {outcome.path}")

    steps_output.append("\n--- ✅ Installation Complete! ---")
    steps_output.append(f"→ Run 'source {config_file}' or restart your terminal to apply the changes.")
    return finish()
