"""Pytest fixtures for devenv-setup tests."""

import pytest
from pathlib import Path

from devenv_setup.config import SetupConfig
from devenv_setup.executor import logging


@pytest.fixture
def reset_logger_singleton():
    """Reset the _logger singleton between tests.

    Saves the current value of logging._logger (may be None),
    resets it to None before the test and restores it afterwards.
    """
    original_value = logging._logger

    logging._logger = None

    yield

    logging._logger = original_value


@pytest.fixture
def fake_home(tmp_path):
    """Empty home directory for config editing tests."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def write_os_release(tmp_path):
    """Factory that writes an os-release file and returns its Path."""

    def _write(content: str) -> Path:
        path = tmp_path / "os-release"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def default_config():
    """Settings with defaults, independent of any file on the machine."""
    return SetupConfig()
