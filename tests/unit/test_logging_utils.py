#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_logging_utils.py
"""Unit tests for the command-line logging setup."""

import logging

import pytest

from safedown.logging_utils import PACKAGE_LOGGER_NAME, configure_logging, resolve_log_level


@pytest.mark.unit
class TestResolveLogLevel:
    """Tests for level name resolution."""

    @pytest.mark.parametrize(
        ("log_level", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            (logging.ERROR, logging.ERROR),
            ("NOISY", logging.WARNING),
        ],
    )
    def test_levels(self, log_level, expected):
        assert resolve_log_level(log_level) == expected

    def test_trace_mode_forces_debug(self):
        assert resolve_log_level("ERROR", trace_mode=True) == logging.DEBUG


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_scoped_to_package_logger(self):
        root = logging.getLogger()
        root_handlers = root.handlers[:]
        root_level = root.level

        package_logger = configure_logging("INFO")

        assert package_logger is logging.getLogger(PACKAGE_LOGGER_NAME)
        assert package_logger.level == logging.INFO
        assert package_logger.propagate is False
        assert len(package_logger.handlers) == 1
        assert root.handlers == root_handlers
        assert root.level == root_level

    def test_console_format(self, capsys):
        configure_logging("INFO")
        logging.getLogger("safedown.links").info("hello")
        assert capsys.readouterr().err == "safedown: INFO: hello\n"

    def test_trace_mode(self, capsys):
        package_logger = configure_logging("WARNING", trace_mode=True)
        assert package_logger.level == logging.DEBUG
        logging.getLogger("safedown.links").debug("Link mangled")
        err = capsys.readouterr().err
        assert "[DEBUG] [safedown.links] Link mangled" in err

    def test_repeated_calls_replace_handlers(self, capsys):
        configure_logging("INFO")
        package_logger = configure_logging("INFO")
        assert len(package_logger.handlers) == 1
        package_logger.info("once")
        assert capsys.readouterr().err.count("once") == 1

    def test_log_file(self, tmp_path):
        log_path = tmp_path / "safedown.log"
        package_logger = configure_logging("INFO", log_file=str(log_path))
        assert len(package_logger.handlers) == 2
        logging.getLogger("safedown.converter").info("written")
        for handler in package_logger.handlers:
            handler.flush()
        assert "[INFO] [safedown.converter] written" in log_path.read_text(encoding="utf-8")

    def test_unwritable_log_file(self, tmp_path, capsys):
        log_path = tmp_path / "no-such-dir" / "safedown.log"
        package_logger = configure_logging("INFO", log_file=str(log_path))
        assert len(package_logger.handlers) == 1
        assert "Could not create log file" in capsys.readouterr().err
