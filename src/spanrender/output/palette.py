# spanrender:header:start
#
#   project      : SpanRender
#   file         : palette.py
#   file_relpath : src/spanrender/output/palette.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Map semantic styles to terminal styling.

The layout core only knows `Style` and `LevelStyle`. This module is the single
place where those are turned into `click.style` keyword arguments; the level of
the diagnostic being printed decides the color of primary underlines and labels.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict

from spanrender.diagnostic.level import Level
from spanrender.rendering.styles import LevelStyle, Style

if TYPE_CHECKING:
    from spanrender.rendering.styles import AnyStyle


class StyleKwargs(TypedDict, total=False):
    """The subset of `click.style` keyword arguments the palette produces."""

    fg: str
    bold: bool


LEVEL_COLORS: dict[Level, str] = {
    Level.BUG: "bright_red",
    Level.FATAL: "bright_red",
    Level.PHASE_FATAL: "bright_red",
    Level.ERROR: "bright_red",
    Level.WARNING: "yellow",
    Level.NOTE: "bright_green",
    Level.HELP: "bright_cyan",
}

LINE_NUMBER_COLOR: str = "bright_blue"
OLD_SCHOOL_NOTE_COLOR: str = "bright_green"


def level_color(level: Level) -> str | None:
    """Return the foreground color for ``level``, or None for ``CANCELLED``."""
    return LEVEL_COLORS.get(level)


def style_kwargs(style: AnyStyle, level: Level) -> StyleKwargs:
    """Return the `click.style` arguments for ``style``.

    Args:
        style (AnyStyle): Semantic style of a rendered run.
        level (Level): Level of the diagnostic being printed; it colors primary
            underlines and labels.

    Returns:
        StyleKwargs: Keyword arguments for `click.style`; empty for unstyled text.
    """
    if isinstance(style, LevelStyle):
        color: str | None = level_color(style.level)
        if color is None:
            return {"bold": True}
        return {"fg": color, "bold": True}

    if style in (Style.LINE_NUMBER, Style.UNDERLINE_SECONDARY, Style.LABEL_SECONDARY):
        return {"fg": LINE_NUMBER_COLOR, "bold": True}
    if style in (Style.UNDERLINE_PRIMARY, Style.LABEL_PRIMARY):
        color = level_color(level)
        return {"fg": color, "bold": True} if color else {"bold": True}
    if style is Style.HEADER_MSG:
        return {"bold": True}
    if style is Style.OLD_SCHOOL_NOTE:
        return {"fg": OLD_SCHOOL_NOTE_COLOR, "bold": True}
    # NO_STYLE, QUOTATION, LINE_AND_COLUMN, ERROR_CODE
    return {}
