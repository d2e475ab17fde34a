"""Tests for pytest fixtures in conftest.py."""

from devenv_setup.config import SetupConfig
from devenv_setup.executor import logging


class TestResetLoggerSingleton:
    """Tests for reset_logger_singleton fixture."""

    def test_reset_logger_singleton(self, reset_logger_singleton):
        """The logger singleton is cleared before the test."""
        assert logging._logger is None

        test_logger = logging.logging.getLogger("test_logger")
        logging._logger = test_logger

        assert logging._logger is test_logger


class TestFileFixtures:
    """Tests for filesystem fixtures."""

    def test_fake_home_is_empty_dir(self, fake_home):
        assert fake_home.is_dir()
        assert list(fake_home.iterdir()) == []

    def test_write_os_release(self, write_os_release):
        path = write_os_release("ID=ubuntu\n")

        assert path.exists()
        assert path.read_text(encoding="utf-8") == "ID=ubuntu\n"

    def test_default_config(self, default_config):
        assert isinstance(default_config, SetupConfig)
        assert default_config.config_path is None
