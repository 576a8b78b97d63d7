"""
Tests for root logging configuration.
"""

import logging

import pytest

from task_tracker.logging_setup import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_default_handler_at_requested_level(restore_root_logger):
    applied = configure_logging("debug")

    assert applied is False
    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1


def test_missing_config_file_falls_back(restore_root_logger, tmp_path, capsys):
    applied = configure_logging("WARNING", str(tmp_path / "missing.ini"))

    assert applied is False
    assert restore_root_logger.level == logging.WARNING
    assert "Logging config file not found" in capsys.readouterr().err


def test_file_config_is_applied(restore_root_logger, tmp_path):
    ini = tmp_path / "logging.ini"
    ini.write_text(
        "[loggers]\nkeys=root\n\n"
        "[handlers]\nkeys=console\n\n"
        "[formatters]\nkeys=simple\n\n"
        "[logger_root]\nlevel=ERROR\nhandlers=console\n\n"
        "[handler_console]\nclass=StreamHandler\nlevel=ERROR\nformatter=simple\nargs=(sys.stderr,)\n\n"
        "[formatter_simple]\nformat=%%(levelname)s %%(message)s\n"
    )

    applied = configure_logging("INFO", str(ini))

    assert applied is True
    assert restore_root_logger.level == logging.ERROR
