# spanrender:header:start
#
#   project      : SpanRender
#   file         : console_api.py
#   file_relpath : src/spanrender/output/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Console interface that rendered diagnostics are written to.

Logging stays on the `spanrender` logger; a console only receives program
output: diagnostic rows on stdout and CLI error messages on stderr.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from spanrender.diagnostic.level import Level
    from spanrender.output.palette import StyleKwargs
    from spanrender.rendering.styles import StyledString


class ConsoleLike(Protocol):
    """Sink for rendered diagnostic rows and user-facing messages."""

    enable_color: bool

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a line of plain or pre-styled text to stdout."""
        ...

    def print_row(self, row: Iterable[StyledString], level: Level) -> None:
        """Write one rendered row, styling its runs for a ``level`` diagnostic."""
        ...

    def error(self, text: str) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, style: StyleKwargs) -> str:
        """Return ``text`` with ``style`` applied (unchanged when color is off)."""
        ...
