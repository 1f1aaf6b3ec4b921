# spanrender:header:start
#
#   project      : SpanRender
#   file         : level.py
#   file_relpath : src/spanrender/diagnostic/level.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Diagnostic severity levels.

The level decides the header word (``error``, ``warning``, ...) and, in the
output sink, the color of the header and of primary annotations. The mapping to
terminal colors lives in `spanrender.output.palette`; this module stays UI-agnostic.
"""

from __future__ import annotations

from enum import Enum


class Level(Enum):
    """Severity of a diagnostic.

    ``FATAL`` and ``PHASE_FATAL`` render like ``ERROR``; ``PHASE_FATAL`` is an error
    that should stop the tool after the current phase. ``CANCELLED`` marks a
    diagnostic that must never be rendered.
    """

    BUG = "bug"
    FATAL = "fatal"
    PHASE_FATAL = "phase_fatal"
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"
    HELP = "help"
    CANCELLED = "cancelled"

    @property
    def display(self) -> str:
        """Return the header word for this level.

        Raises:
            ValueError: For ``CANCELLED``, which has no textual form.
        """
        if self is Level.CANCELLED:
            raise ValueError("A cancelled diagnostic has no display text")
        return _DISPLAY[self]


_DISPLAY: dict[Level, str] = {
    Level.BUG: "error: internal compiler error",
    Level.FATAL: "error",
    Level.PHASE_FATAL: "error",
    Level.ERROR: "error",
    Level.WARNING: "warning",
    Level.NOTE: "note",
    Level.HELP: "help",
}
