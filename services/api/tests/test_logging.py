"""Tests for `ledger_common.logging.setup_logging`."""

import logging
from pathlib import Path

import pytest

from ledger_common.logging import LOG_DATE_FORMAT, LOG_FORMAT, setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Put the root logger's handlers and level back after each test."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


def test_configures_stdout_handler() -> None:
    assert setup_logging() is None
    root = logging.getLogger()

    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    handler = root.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.formatter._fmt == LOG_FORMAT
    assert handler.formatter.datefmt == LOG_DATE_FORMAT


def test_accepts_level_names() -> None:
    setup_logging("warning")

    assert logging.getLogger().level == logging.WARNING


def test_file_handler_in_log_dir(tmp_path) -> None:
    log_dir = tmp_path / "api"

    file_path = setup_logging(log_dir=log_dir)
    logging.getLogger("ledger_api.test").info("hello")

    root = logging.getLogger()
    assert len(root.handlers) == 2
    assert isinstance(root.handlers[1], logging.FileHandler)
    assert Path(root.handlers[1].baseFilename) == file_path
    assert file_path.parent == log_dir
    root.handlers[1].flush()
    assert "hello" in file_path.read_text()


def test_repeated_calls_do_not_stack_handlers() -> None:
    setup_logging()
    setup_logging()

    assert len(logging.getLogger().handlers) == 1
