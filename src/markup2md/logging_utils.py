"""Logging setup for the markup2md command.

Library modules only create ``logging.getLogger(__name__)`` loggers under the
``markup2md`` namespace and never install handlers. The command attaches its
handlers to that namespace logger: one writing to stderr, so stdout carries
nothing but the converted markdown, and optionally one appending to a file.

Calling ``configure_logging`` again replaces the handlers it installed
earlier and leaves handlers added by anyone else in place.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

PACKAGE_LOGGER_NAME = "markup2md"
HANDLER_NAME_PREFIX = "markup2md."

CONSOLE_FORMAT = "markup2md: %(levelname)s: %(message)s"
# --trace adds timestamps, logger names and line numbers
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(level: int | str) -> int:
    """Return the numeric logging level for a level number or name.

    Raises
    ------
    ValueError
        If ``level`` is not a known level name

    """
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def _remove_own_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if (handler.get_name() or "").startswith(HANDLER_NAME_PREFIX):
            logger.removeHandler(handler)
            handler.close()


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Route markup2md log records to stderr and, optionally, a file.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "INFO"). Ignored in
        trace mode, which always logs at DEBUG.
    log_file : str, optional
        Path of a file that receives the same records, appended to.
    trace_mode : bool, default False
        Log everything with timestamps, logger names and line numbers.
    stream : IO[str], optional
        Console stream; defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        The ``markup2md`` package logger.

    Raises
    ------
    ValueError
        If ``log_level`` is not a known level name

    """
    level = logging.DEBUG if trace_mode else resolve_log_level(log_level)

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)
    _remove_own_handlers(logger)

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(CONSOLE_FORMAT)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.set_name(f"{HANDLER_NAME_PREFIX}console")
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            file_handler.set_name(f"{HANDLER_NAME_PREFIX}file")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
            logger.debug("Logging to file: %s", log_file)

    return logger
