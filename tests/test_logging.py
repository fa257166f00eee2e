"""Tests for agent_session_manager.utils.logging module."""

import logging
import sys

from agent_session_manager.config import DEFAULT_LOG_FORMAT, ManagerConfig
from agent_session_manager.utils.logging import setup_logging, setup_logging_from_dict


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_with_defaults(self):
        """Should default to WARNING with a single console handler."""
        setup_logging()
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1

    def test_console_goes_to_stderr(self):
        setup_logging()
        assert logging.getLogger().handlers[0].stream is sys.stderr

    def test_setup_with_config(self):
        """Should setup logging from ManagerConfig."""
        setup_logging(ManagerConfig(log_level="DEBUG"))
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back(self):
        setup_logging(ManagerConfig(log_level="chatty"))
        assert logging.getLogger().level == logging.WARNING

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_setup_with_file(self, tmp_path):
        """Should create a rotating file handler when log_file is specified."""
        log_file = tmp_path / "manager.log"
        setup_logging(ManagerConfig(log_level="INFO", log_file=str(log_file)))

        logging.getLogger("test").info("Test message")

        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "Test message" in log_file.read_text(encoding="utf-8")

    def test_setup_with_custom_format(self):
        """Should use custom log format."""
        setup_logging(ManagerConfig(log_format="[%(levelname)s] %(message)s"))
        root = logging.getLogger()
        assert root.handlers[0].formatter._fmt == "[%(levelname)s] %(message)s"


class TestSetupLoggingFromDict:
    """Tests for setup_logging_from_dict function."""

    def test_setup_from_dict(self):
        setup_logging_from_dict({"level": "error"})
        assert logging.getLogger().level == logging.ERROR

    def test_setup_from_dict_with_file(self, tmp_path):
        log_file = tmp_path / "dict.log"
        setup_logging_from_dict({
            "level": "INFO",
            "file": str(log_file),
            "format": "%(message)s",
        })

        logging.getLogger("test_dict").info("Dict test message")

        for handler in logging.getLogger().handlers:
            handler.flush()
        assert log_file.read_text(encoding="utf-8") == "Dict test message\n"

    def test_empty_dict_uses_defaults(self):
        setup_logging_from_dict({})
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert root.handlers[0].formatter._fmt == DEFAULT_LOG_FORMAT

    def test_config_logging_section_round_trip(self):
        """setup_logging(config) matches the config's own logging: section."""
        config = ManagerConfig(log_level="ERROR", log_format="%(levelname)s %(message)s")
        setup_logging_from_dict(config.to_dict()["logging"])
        from_dict = (logging.getLogger().level, logging.getLogger().handlers[0].formatter._fmt)

        setup_logging(config)
        from_config = (logging.getLogger().level, logging.getLogger().handlers[0].formatter._fmt)

        assert from_config == from_dict == (logging.ERROR, "%(levelname)s %(message)s")
