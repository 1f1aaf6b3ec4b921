# spanrender:header:start
#
#   project      : SpanRender
#   file         : logging.py
#   file_relpath : src/spanrender/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Custom SpanRender logging with TRACE logging.

This module extends the standard logging module with a custom TRACE level, a
logger class exposing `trace()`, and colored output formatting via `click.style`. The snippet
renderer logs its layout decisions at TRACE so they can be inspected without
touching the rendered output.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

import click

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "SPANRENDER_LOG_LEVEL"


class SpanRenderLogger(logging.Logger):
    """Logger class with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(SpanRenderLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class StyledFormatter(logging.Formatter):
    """Formatter that outputs log records colored by severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message as a string.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return click.style(message, fg="bright_red", bold=True)
        if level >= logging.ERROR:
            return click.style(message, fg="red")
        if level >= logging.WARNING:
            return click.style(message, fg="yellow")
        if level >= logging.INFO:
            return click.style(message, fg="green")
        if level >= logging.DEBUG:
            return click.style(message, fg="bright_black")
        if level >= TRACE_LEVEL:
            return click.style(message, fg="blue")
        return click.style(message, fg="red", dim=True)


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors SPANRENDER_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    name_to_level = {
        "TRACE": TRACE_LEVEL,
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
        "FATAL": logging.CRITICAL,
        "NOTSET": logging.NOTSET,
    }
    return name_to_level.get(v)


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a specified log level and colored output.

    If ``level`` is None, the environment is consulted via `resolve_env_log_level`.
    Default is CRITICAL when unspecified.

    Log records go to stderr so they never mix with rendered diagnostics on stdout.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove all existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    formatter = StyledFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> SpanRenderLogger:
    """Retrieve a SpanRenderLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        SpanRenderLogger: A SpanRenderLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("SpanRenderLogger", logger)
