# tests/test_logging_config.py

import logging

from core.logging_config import configure_logging, get_logger


def test_get_logger_is_namespaced():
    logger = get_logger("Namespaced")

    assert logger.name == "roster.Namespaced"
    assert logger.level == logging.NOTSET


def test_get_logger_sets_threshold():
    logger = get_logger("Thresholded", "WARNING")

    assert logger.level == logging.WARNING
    assert not logger.isEnabledFor(logging.INFO)


def test_configure_logging_replaces_handler():
    root = configure_logging("DEBUG")
    root = configure_logging("ERROR")

    try:
        assert len(root.handlers) == 1
        assert root.level == logging.ERROR
        assert root.handlers[0].level == logging.ERROR
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        root.setLevel(logging.NOTSET)
