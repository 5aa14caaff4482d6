"""
Tests for logging setup.
"""
import logging

import pytest

from jabdb import setup_logging
from jabdb.core.logging_config import PACKAGE_LOGGER_NAME, get_logger


@pytest.fixture()
def restore_logging():
    """Put back the root handlers and levels replaced by setup_logging()."""
    root = logging.getLogger()
    package = logging.getLogger(PACKAGE_LOGGER_NAME)
    saved_handlers = list(root.handlers)
    saved_root_level = root.level
    saved_package_level = package.level

    yield

    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_root_level)
    package.setLevel(saved_package_level)


def test_setup_logging_console(restore_logging):
    setup_logging("DEBUG")

    root = logging.getLogger()
    assert any(type(h) is logging.StreamHandler for h in root.handlers)
    assert root.level == logging.DEBUG
    assert logging.getLogger(PACKAGE_LOGGER_NAME).level == logging.DEBUG


def test_setup_logging_file(restore_logging, tmp_path):
    log_file = tmp_path / "logs" / "jabdb.log"

    setup_logging("warning", log_file=log_file, enable_file_logging=True)
    get_logger("jabdb.test").warning("written to file")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert logging.getLogger(PACKAGE_LOGGER_NAME).level == logging.WARNING
    assert "written to file" in log_file.read_text(encoding="utf-8")


def test_package_logger_is_silent_by_default():
    handlers = logging.getLogger(PACKAGE_LOGGER_NAME).handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
