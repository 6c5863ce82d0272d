"""
Unit Tests for Centralized Logging.
"""

import logging
import sys
from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError as PydanticValidationError

from modules.backend.core import logging as logging_module


@pytest.fixture(autouse=True)
def _reset_logging_config():
    logging_module._logging_config = None
    yield
    logging_module._logging_config = None


class TestLoggingConfigLoading:
    """Tests for logging configuration loading."""

    def test_reads_yaml(self):
        """Should load and validate logging.yaml."""
        config = {
            "level": "DEBUG",
            "format": "json",
            "handlers": {
                "console": {"enabled": True},
                "file": {"enabled": True, "path": "logs/x.jsonl", "max_bytes": 10, "backup_count": 1},
            },
        }

        with patch("modules.backend.core.logging.load_yaml_config", return_value=config):
            loaded = logging_module._load_logging_config()

        assert loaded.level == "DEBUG"
        assert loaded.handlers.file.path == "logs/x.jsonl"

    def test_rejects_unknown_level(self):
        config = {"level": "LOUD", "format": "json", "handlers": {}}

        with patch("modules.backend.core.logging.load_yaml_config", return_value=config):
            with pytest.raises(PydanticValidationError):
                logging_module._load_logging_config()

    def test_falls_back_outside_project(self):
        """The CLI runs anywhere; without a project root logging stays console-only."""
        with patch(
            "modules.backend.core.logging.load_yaml_config",
            side_effect=RuntimeError("Project root not found"),
        ):
            config = logging_module._load_logging_config()

        assert config.level == "WARNING"
        assert config.handlers.file.enabled is False


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_overrides_level(self):
        """Explicit arguments win over the YAML."""
        with patch(
            "modules.backend.core.logging.load_yaml_config",
            side_effect=FileNotFoundError,
        ):
            logging_module.setup_logging(level="DEBUG", enable_file_logging=False)

        assert logging.getLogger().level == logging.DEBUG

    def test_console_handler_uses_stderr(self):
        """stdout is reserved for command output."""
        with patch(
            "modules.backend.core.logging.load_yaml_config",
            side_effect=FileNotFoundError,
        ):
            logging_module.setup_logging(level="INFO")

        streams = [getattr(h, "stream", None) for h in logging.getLogger().handlers]
        assert streams == [sys.stderr]


class TestLogWithSource:
    """Tests for log_with_source."""

    def test_passes_source(self):
        logger = MagicMock()

        logging_module.log_with_source(logger, "scheduler", "info", "Monitor started", monitor_id=3)

        logger.info.assert_called_once_with("Monitor started", source="scheduler", monitor_id=3)
