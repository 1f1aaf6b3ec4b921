# spanrender:header:start
#
#   project      : SpanRender
#   file         : errors.py
#   file_relpath : src/spanrender/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Exceptions for the SpanRender CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if one is present in the Click context
    (see `show()`); otherwise they fall back to Click's default display.
"""

from __future__ import annotations

from typing import IO, Any

import click

from spanrender.cli.exit_codes import ExitCode


class SpanRenderCliError(click.ClickException):
    """Base class for all SpanRender CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text; color is applied in `show()`."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        obj: Any = getattr(ctx, "obj", None)
        console: Any = obj.get("console") if isinstance(obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(
            console.styled(f"Error: {self.format_message()}", {"fg": "bright_red", "bold": True})
        )


class SpanRenderUsageError(SpanRenderCliError):
    """Error for command-line invocation errors (invalid flags, malformed spans)."""

    exit_code = ExitCode.USAGE_ERROR


class SpanRenderConfigError(SpanRenderCliError):
    """Error for configuration errors (invalid values)."""

    exit_code = ExitCode.CONFIG_ERROR


class SpanRenderFileNotFoundError(SpanRenderCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SpanRenderIOError(SpanRenderCliError):
    """Error for I/O errors reading a source file."""

    exit_code = ExitCode.IO_ERROR


class SpanRenderEncodingError(SpanRenderCliError):
    """Error for source files that are not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR
