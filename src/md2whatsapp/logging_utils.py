#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2whatsapp/logging_utils.py
"""Logging setup for the md2whatsapp command line.

Standard output carries the converted message, so console records always go
to standard error. An optional log file receives the same records in the
trace format, since it is read after the run.

Handlers installed here are tagged. Calling ``configure_logging`` again
replaces only those handlers and leaves any handler attached by a host
application or test runner in place.

"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_TAG = "_md2whatsapp_cli_handler"


def resolve_log_level(log_level: int | str) -> int:
    """Return the numeric level for a level number or name.

    Parameters
    ----------
    log_level : int | str
        Numeric level, or a name such as ``"debug"`` in any case

    Returns
    -------
    int
        The logging level; unknown names resolve to ``logging.WARNING``,
        the CLI default

    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.WARNING


def _formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    return logging.Formatter(PLAIN_FORMAT)


def _remove_cli_handlers(root_logger: logging.Logger) -> None:
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()


def _install(root_logger: logging.Logger, handler: logging.Handler, level: int, trace_mode: bool) -> None:
    handler.setLevel(level)
    handler.setFormatter(_formatter(trace_mode))
    setattr(handler, _HANDLER_TAG, True)
    root_logger.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure the root logger for one CLI run.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name
    log_file : str, optional
        Path of a file to append log records to, in addition to stderr
    trace_mode : bool, default False
        Use the trace format (timestamp and logger name) on stderr as well

    Returns
    -------
    logging.Logger
        The configured root logger

    """
    level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    _remove_cli_handlers(root_logger)

    _install(root_logger, logging.StreamHandler(sys.stderr), level, trace_mode)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            _install(root_logger, file_handler, level, trace_mode=True)
            root_logger.info("Logging to file: %s", log_file)

    return root_logger


__all__ = ["configure_logging", "resolve_log_level"]
