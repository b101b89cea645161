# core/logging_config.py

"""
Logging setup for roster audit messages.

All loggers live under the `roster` namespace. Thresholds are set per logger by
whoever constructs it, so no severity setting is shared process-wide.
"""

import logging

ROOT_LOGGER_NAME = "roster"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str, level: int | str | None = None) -> logging.Logger:
    """
    Returns a child of the `roster` logger, optionally with its own severity threshold.

    Args:
        name (str): The module or component name (e.g. "Roster").
        level (int | str | None): Minimum severity for this logger. If None, the level is inherited.

    Returns:
        The configured `logging.Logger`.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME).getChild(name)

    if level is not None:
        logger.setLevel(level)

    return logger


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """
    Installs a console handler on the `roster` logger.

    Args:
        level (int | str): Minimum severity emitted by the handler and the `roster` logger.

    Returns:
        The `roster` logger.

    Notes:
        - Calling this more than once replaces the previously installed handler.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    handler.setLevel(level)

    root.addHandler(handler)
    root.setLevel(level)

    return root
