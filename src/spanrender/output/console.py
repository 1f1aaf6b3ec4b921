# spanrender:header:start
#
#   project      : SpanRender
#   file         : console.py
#   file_relpath : src/spanrender/output/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Click-backed console for rendered diagnostics.

`ClickConsole` writes rows produced by the snippet renderer. Every run of a row is
styled through the palette and a row is written with a single `click.echo` call,
so a style reset always precedes the newline. When color is off, runs are
concatenated as plain text.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

import click

from spanrender.output.writer import format_styled_line

if TYPE_CHECKING:
    from collections.abc import Iterable

    from spanrender.diagnostic.level import Level
    from spanrender.output.palette import StyleKwargs
    from spanrender.rendering.styles import StyledString


class ClickConsole:
    """Console that echoes diagnostics through click.

    Args:
        enable_color (bool): Emit ANSI styling; when False all output is plain.
        out (TextIO | None): Stream for diagnostic rows (``sys.stdout`` by default).
        err (TextIO | None): Stream for error messages (``sys.stderr`` by default).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def print_row(self, row: Iterable[StyledString], level: Level) -> None:
        """Write one rendered row.

        Args:
            row (Iterable[StyledString]): Compacted runs of one grid row.
            level (Level): Level of the diagnostic; it colors primary underlines
                and labels.
        """
        self.print(format_styled_line(row, level, enable_color=self.enable_color))

    def error(self, text: str) -> None:
        click.echo(text, file=self.err, color=self.enable_color)

    def styled(self, text: str, style: StyleKwargs) -> str:
        if not self.enable_color or not style:
            return text
        return click.style(text, **style)
