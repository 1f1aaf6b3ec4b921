# spanrender:header:start
#
#   project      : SpanRender
#   file         : styles.py
#   file_relpath : src/spanrender/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Semantic styles attached to grid cells and rendered text runs.

Styles name the *role* of a piece of text (line number, primary underline,
quoted source, ...), never its presentation. The closed set is `Style`; the
level-keyed header style is `LevelStyle`. Mapping roles to colors is the output
sink's job (see `spanrender.output.palette`).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from spanrender.diagnostic.level import Level


class Style(Enum):
    """Closed set of semantic styles used by the layout core."""

    NO_STYLE = "no_style"
    HEADER_MSG = "header_msg"
    ERROR_CODE = "error_code"
    LINE_AND_COLUMN = "line_and_column"
    LINE_NUMBER = "line_number"
    QUOTATION = "quotation"
    UNDERLINE_PRIMARY = "underline_primary"
    UNDERLINE_SECONDARY = "underline_secondary"
    LABEL_PRIMARY = "label_primary"
    LABEL_SECONDARY = "label_secondary"
    OLD_SCHOOL_NOTE = "old_school_note"


@dataclass(frozen=True, slots=True)
class LevelStyle:
    """Style of a severity word, keyed by the diagnostic level it names."""

    level: Level


AnyStyle: TypeAlias = "Style | LevelStyle"


@dataclass(frozen=True, slots=True)
class StyledString:
    """One contiguous run of same-style text produced by grid compaction.

    Attributes:
        text (str): The run's text; never empty.
        style (AnyStyle): The style shared by every character of ``text``.
    """

    text: str
    style: AnyStyle


StyledLine: TypeAlias = "list[StyledString]"


def plain_text(lines: list[StyledLine]) -> str:
    """Join rendered rows into newline-terminated plain text, dropping styles."""
    return "".join("".join(part.text for part in line) + "\n" for line in lines)
