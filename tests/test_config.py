"""
Tests for settings and logging setup.
"""

import logging

from layout_repair.core.config import Settings
from layout_repair.core.logging_config import LOGGER_NAME, configure_logging


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("FOOTER_REPAIR_ENABLED", "NAVBAR_REPAIR_ENABLED", "REPAIR_LOG_PATCHES"):
            monkeypatch.delenv(name, raising=False)

        config = Settings(_env_file=None)
        assert config.FOOTER_REPAIR_ENABLED is True
        assert config.NAVBAR_REPAIR_ENABLED is True
        assert config.REPAIR_LOG_PATCHES is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("NAVBAR_REPAIR_ENABLED", "false")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = Settings(_env_file=None)
        assert config.NAVBAR_REPAIR_ENABLED is False
        assert config.LOG_LEVEL == "debug"


class TestLogging:

    def test_single_handler(self):
        logger = configure_logging()
        handlers = len(logger.handlers)

        assert configure_logging() is logger
        assert len(logger.handlers) == handlers
        assert logger.name == LOGGER_NAME

    def test_level_override(self):
        logger = configure_logging("warning")
        try:
            assert logger.level == logging.WARNING
        finally:
            configure_logging("INFO")
