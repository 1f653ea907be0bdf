"""setup_logger tests"""

import logging

import pytest

from src.todo.logger import setup_logger


def test_setup_logger_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "todo.log"
    setup_logger(log_level="debug", log_file=str(log_file))

    logging.getLogger("src.todo.test").debug("hello log")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert logging.getLogger().level == logging.DEBUG
    assert "hello log" in log_file.read_text(encoding="utf-8")


def test_setup_logger_without_file():
    setup_logger(log_level="WARNING", log_file=None)
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)


def test_unknown_level_raises():
    with pytest.raises(ValueError):
        setup_logger(log_level="LOUD", log_file=None)
