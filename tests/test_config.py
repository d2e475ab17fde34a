"""Tests for config module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from devenv_setup.config import SetupConfig, find_config_file, load_config
from devenv_setup.errors import ConfigError


class TestFindConfigFile:
    """Tests for find_config_file() function."""

    def test_find_config_file_from_env(self, tmp_path):
        config_file = tmp_path / "custom.yaml"

        with patch.dict(os.environ, {"DEVENV_SETUP_CONFIG": str(config_file)}):
            result = find_config_file()

        assert result == config_file.resolve()

    def test_find_config_file_in_current_dir(self, tmp_path):
        config_file = tmp_path / "devenv-setup.yaml"
        config_file.write_text("{}", encoding="utf-8")

        with patch.dict(os.environ, {}, clear=True), \
             patch("devenv_setup.config.Path.cwd", return_value=tmp_path):
            result = find_config_file()

        assert result == config_file

    def test_find_config_file_in_user_config(self, tmp_path):
        home = tmp_path / "home"
        user_config = home / ".config" / "devenv-setup" / "config.yaml"
        user_config.parent.mkdir(parents=True)
        user_config.write_text("{}", encoding="utf-8")

        with patch.dict(os.environ, {}, clear=True), \
             patch("devenv_setup.config.Path.cwd", return_value=tmp_path / "work"), \
             patch("devenv_setup.config.Path.home", return_value=home):
            result = find_config_file()

        assert result == user_config

    def test_find_config_file_not_found(self, tmp_path):
        with patch.dict(os.environ, {}, clear=True), \
             patch("devenv_setup.config.Path.cwd", return_value=tmp_path), \
             patch("devenv_setup.config.Path.home", return_value=tmp_path):
            assert find_config_file() is None


class TestLoadConfig:
    """Tests for load_config() function."""

    def test_load_config_defaults_when_no_file(self):
        with patch("devenv_setup.config.find_config_file", return_value=None):
            result = load_config()

        assert result == SetupConfig()
        assert result.devbox_installer_url == "https://get.jetpack.io/devbox"
        assert result.install_timeout == 600
        assert result.skip_installed is True
        assert result.strict_hook_matching is False
        assert result.shell_config_files == {}

    def test_load_config_success(self, tmp_path):
        config_file = tmp_path / "devenv-setup.yaml"
        config_file.write_text(
            "devbox_installer_url: https://example.com/devbox\n"
            "install_timeout: 120\n"
            "strict_hook_matching: true\n"
            "shell_config_files:\n"
            "  bash: .bash_profile\n",
            encoding="utf-8",
        )

        result = load_config(config_file)

        assert result.devbox_installer_url == "https://example.com/devbox"
        assert result.install_timeout == 120
        assert result.strict_hook_matching is True
        assert result.shell_config_files == {"bash": ".bash_profile"}
        assert result.config_path == config_file

    def test_load_config_empty_file(self, tmp_path):
        config_file = tmp_path / "devenv-setup.yaml"
        config_file.write_text("", encoding="utf-8")

        result = load_config(config_file)

        assert result.install_timeout == 600

    def test_load_config_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            load_config(Path("/non/existent/devenv-setup.yaml"))

    def test_load_config_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "invalid.yaml"
        config_file.write_text("invalid: yaml: content: [", encoding="utf-8")

        with pytest.raises(ConfigError):
            load_config(config_file)

    def test_load_config_not_utf8(self, tmp_path):
        config_file = tmp_path / "latin1.yaml"
        config_file.write_bytes(b"devbox_installer_url: caf\xe9\n")

        with pytest.raises(ConfigError):
            load_config(config_file)

    def test_load_config_not_a_mapping(self, tmp_path):
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- one\n- two\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="mapping"):
            load_config(config_file)

    def test_load_config_invalid_values(self, tmp_path):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("install_timeout: -5\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid settings"):
            load_config(config_file)
