#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/safedown/logging_utils.py
"""Logging setup for the safedown command-line tool.

The library only emits records on module loggers under ``safedown``. The
CLI attaches its handlers to that package logger, leaving the root logger
and any handlers an embedding application installed untouched.

"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "safedown"

_CONSOLE_FORMAT = "safedown: %(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str, trace_mode: bool = False) -> int:
    """Turn a level name or number into a numeric level.

    Trace mode always logs at DEBUG, so every link filter decision and
    conversion summary is shown. Unknown names fall back to WARNING.

    Examples
    --------
        >>> resolve_log_level("info")
        20
        >>> resolve_log_level("ERROR", trace_mode=True)
        10

    """
    if trace_mode:
        return logging.DEBUG
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach console and optional file handlers to the ``safedown`` logger.

    Handlers installed by an earlier call are removed and closed first, so
    calling this repeatedly does not duplicate output. Records do not
    propagate to the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO")
    log_file : str, optional
        Path of a file that also receives every record
    trace_mode : bool, default False
        Log at DEBUG with timestamps and logger names, regardless of
        ``log_level``

    Returns
    -------
    logging.Logger
        The configured package logger

    """
    level = resolve_log_level(log_level, trace_mode)
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.setLevel(level)
    package_logger.propagate = False

    if trace_mode:
        formatter = logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(_CONSOLE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            # The file always gets full trace detail
            file_handler.setFormatter(logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT))
            package_logger.addHandler(file_handler)
            package_logger.debug("Logging to file: %s", log_file)

    return package_logger
