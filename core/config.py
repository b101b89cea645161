# core/config.py

"""
Centralizes runtime configuration for the roster manager.

By default the roster lives in `students.csv` in the working directory, files are
written with a header line, and audit messages at INFO and above are shown.

Each value can be overridden through an environment variable:
- ROSTER_DATA_FILE: path of the roster file used by the save and load menu options
- ROSTER_INCLUDE_HEADER: whether the plain save writes a header line (1/0, true/false, yes/no)
- ROSTER_LOG_LEVEL: minimum severity of audit messages (DEBUG, INFO, WARNING, ERROR)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_DATA_FILE = "students.csv"
DEFAULT_LOG_LEVEL = "INFO"

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


@dataclass(frozen=True)
class RosterConfig:
    data_file: str = DEFAULT_DATA_FILE
    include_header: bool = True
    log_level: str = DEFAULT_LOG_LEVEL


def load_config(environ: Mapping[str, str] | None = None) -> RosterConfig:
    """
    Builds a `RosterConfig` from environment variables, falling back to defaults.

    Args:
        environ (Mapping[str, str] | None): The variables to read. Defaults to `os.environ`.

    Returns:
        A populated `RosterConfig`.

    Raises:
        ValueError: If the header flag or log level cannot be interpreted.
    """
    if environ is None:
        environ = os.environ

    data_file = environ.get("ROSTER_DATA_FILE", "").strip() or DEFAULT_DATA_FILE
    include_header = parse_bool(environ.get("ROSTER_INCLUDE_HEADER", "true"))
    log_level = validate_log_level(environ.get("ROSTER_LOG_LEVEL", DEFAULT_LOG_LEVEL))

    return RosterConfig(
        data_file=os.path.expanduser(data_file),
        include_header=include_header,
        log_level=log_level,
    )


# === data validators ===


def parse_bool(value: str) -> bool:
    normalized = value.strip().lower()

    if normalized in _TRUTHY:
        return True

    if normalized in _FALSY:
        return False

    raise ValueError(f"Invalid boolean value: '{value}'.")


def validate_log_level(level: str) -> str:
    normalized = level.strip().upper()

    if normalized == "WARN":
        normalized = "WARNING"

    if not isinstance(logging.getLevelName(normalized), int):
        raise ValueError(f"Unknown log level: '{level}'.")

    return normalized
