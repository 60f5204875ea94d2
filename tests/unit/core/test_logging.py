"""
Unit Tests for Centralized Logging.

Tests the logging configuration, handler wiring, and source handling.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from unittest.mock import MagicMock, patch

import pytest

from appmgr.core import logging as logging_module

TEST_CONFIG = {
    "level": "WARNING",
    "format": "console",
    "handlers": {
        "console": {"enabled": True},
        "file": {
            "enabled": False,
            "path": "logs/appmgrcli.jsonl",
            "max_bytes": 5242880,
            "backup_count": 3,
        },
    },
}


@pytest.fixture(autouse=True)
def _fresh_logging_config():
    logging_module._logging_config = None
    yield
    logging_module._logging_config = None


class TestValidSources:
    """Tests for VALID_SOURCES constant."""

    def test_valid_sources_contains_expected_values(self):
        assert logging_module.VALID_SOURCES == frozenset({"cli", "process"})

    def test_valid_sources_is_frozenset(self):
        assert isinstance(logging_module.VALID_SOURCES, frozenset)


class TestLoggingConfigLoading:
    """Tests for logging configuration loading from YAML."""

    def test_load_logging_config_reads_yaml_file(self):
        with patch("appmgr.core.logging.load_yaml_config", return_value=TEST_CONFIG) as load:
            config = logging_module._load_logging_config()

        load.assert_called_once_with("logging.yaml")
        assert config["handlers"]["file"]["max_bytes"] == 5242880

    def test_config_is_cached(self):
        with patch("appmgr.core.logging.load_yaml_config", return_value=TEST_CONFIG) as load:
            logging_module._load_logging_config()
            logging_module._load_logging_config()

        load.assert_called_once()

    def test_load_logging_config_raises_if_file_missing(self):
        with patch(
            "appmgr.core.logging.load_yaml_config",
            side_effect=FileNotFoundError("Configuration file not found: logging.yaml"),
        ):
            with pytest.raises(FileNotFoundError, match="logging.yaml"):
                logging_module._load_logging_config()

    def test_shipped_logging_yaml(self):
        config = logging_module._load_logging_config()

        assert config["level"] == "WARNING"
        assert config["handlers"]["file"]["enabled"] is False


class TestSetupLogging:
    """Tests for handler and level wiring."""

    def test_console_handler_writes_to_stderr(self):
        with patch("appmgr.core.logging.load_yaml_config", return_value=TEST_CONFIG):
            logging_module.setup_logging()

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr
        assert logging.getLogger().level == logging.WARNING

    def test_level_override(self):
        with patch("appmgr.core.logging.load_yaml_config", return_value=TEST_CONFIG):
            logging_module.setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_console_can_be_disabled(self):
        config = {**TEST_CONFIG, "handlers": {**TEST_CONFIG["handlers"], "console": {"enabled": False}}}
        with patch("appmgr.core.logging.load_yaml_config", return_value=config):
            logging_module.setup_logging()

        assert logging.getLogger().handlers == []

    def test_file_handler_under_project_root(self, tmp_path):
        config = {
            **TEST_CONFIG,
            "handlers": {
                "console": {"enabled": False},
                "file": {**TEST_CONFIG["handlers"]["file"], "enabled": True},
            },
        }
        with patch("appmgr.core.logging.load_yaml_config", return_value=config), \
                patch("appmgr.core.logging.find_project_root_or_cwd", return_value=tmp_path):
            logging_module.setup_logging()

        handlers = logging.getLogger().handlers
        assert isinstance(handlers[0], RotatingFileHandler)
        assert handlers[0].baseFilename == str(tmp_path / "logs" / "appmgrcli.jsonl")
        assert (tmp_path / "logs").is_dir()
        handlers[0].close()

    def test_repeated_setup_does_not_stack_handlers(self):
        with patch("appmgr.core.logging.load_yaml_config", return_value=TEST_CONFIG):
            logging_module.setup_logging()
            logging_module.setup_logging()

        assert len(logging.getLogger().handlers) == 1


class TestLogWithSource:
    """Tests for explicit-source logging."""

    def test_passes_source_and_fields(self):
        logger = MagicMock()

        logging_module.log_with_source(logger, "cli", "info", "API request", method="GET")

        logger.info.assert_called_once_with("API request", source="cli", method="GET")

    def test_invalid_level_raises(self):
        logger = MagicMock(spec=["info"])

        with pytest.raises(AttributeError):
            logging_module.log_with_source(logger, "cli", "loud", "message")

    def test_unknown_source_is_rejected(self):
        logger = MagicMock()

        with pytest.raises(ValueError, match="Unknown log source 'web'"):
            logging_module.log_with_source(logger, "web", "info", "message")

        logger.info.assert_not_called()
