"""Configuration models for devenv-setup."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError
from .executor.logging import get_logger

CONFIG_ENV_VAR = "DEVENV_SETUP_CONFIG"
LOCAL_CONFIG_NAME = "devenv-setup.yaml"


class SetupConfig(BaseModel):
    """Settings for an environment setup run."""

    devbox_installer_url: str = Field(
        default="https://get.jetpack.io/devbox",
        description="URL of the devbox installer script piped into bash",
    )
    install_timeout: float = Field(
        default=600,
        gt=0,
        description="Timeout in seconds for each installation command",
    )
    skip_installed: bool = Field(
        default=True,
        description="Skip installing tools that are already available",
    )
    strict_hook_matching: bool = Field(
        default=False,
        description="Require the exact hook line for the shell instead of its marker",
    )
    shell_config_files: dict[str, str] = Field(
        default_factory=dict,
        description="Map of shell name to startup file path relative to home",
    )
    config_path: Optional[Path] = Field(
        default=None, description="File this configuration was loaded from"
    )


def find_config_file() -> Optional[Path]:
    """Find the settings file.

    Search order:
    1. DEVENV_SETUP_CONFIG environment variable
    2. ./devenv-setup.yaml in current working directory
    3. ~/.config/devenv-setup/config.yaml
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser().resolve()

    local = Path.cwd() / LOCAL_CONFIG_NAME
    if local.exists():
        return local

    user = Path.home() / ".config" / "devenv-setup" / "config.yaml"
    if user.exists():
        return user

    return None


def load_config(config_path: Optional[Path] = None) -> SetupConfig:
    """Load settings from a YAML file.

    Args:
        config_path: Path to the settings file. If None, will search for it
            and fall back to defaults when nothing is found.

    Raises:
        FileNotFoundError: If an explicit or env-provided path does not exist.
        ConfigError: If the file is not valid YAML or fails validation.
    """
    logger = get_logger()

    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            logger.debug("No settings file found, using defaults")
            return SetupConfig()

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to parse {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {config_path}")

    try:
        config = SetupConfig(**{**data, "config_path": config_path})
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {config_path}: {e}") from e

    logger.info(f"Loaded settings from {config_path}")
    return config
