import logging

import pytest

from gpdviewer.logging_config import resolve_level, setup_logging


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "viewer.log"

    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logging.getLogger("gpdviewer.tests").debug("hello")

    logger = logging.getLogger("gpdviewer")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")


def test_setup_logging_does_not_duplicate_handlers():
    setup_logging()
    setup_logging()

    assert len(logging.getLogger("gpdviewer").handlers) == 1


def test_setup_logging_accepts_level_names():
    setup_logging("debug")

    logger = logging.getLogger("gpdviewer")
    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG


def test_resolve_level():
    assert resolve_level("WARNING") == logging.WARNING
    assert resolve_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError, match="Unknown log level"):
        resolve_level("chatty")
