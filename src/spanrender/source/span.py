# spanrender:header:start
#
#   project      : SpanRender
#   file         : span.py
#   file_relpath : src/spanrender/source/span.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Span and position value objects.

A `Span` is a half-open byte range ``[lo, hi)`` expressed in the codemap's global
offset space; the file it belongs to is found by asking the codemap. A `Loc` is
the resolved form of a single offset: file, 1-based line and 0-based column
(counted in characters, not bytes).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spanrender.source.codemap import SourceFile


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open byte range ``[lo, hi)`` into the codemap.

    Attributes:
        lo (int): Global byte offset of the first byte.
        hi (int): Global byte offset one past the last byte.
    """

    lo: int
    hi: int

    def __post_init__(self) -> None:
        if self.lo < 0 or self.hi < 0:
            raise ValueError(f"Span offsets must be >= 0, got {self.lo}..{self.hi}")
        if self.lo > self.hi:
            raise ValueError(f"Span lo must not exceed hi, got {self.lo}..{self.hi}")

    @property
    def is_empty(self) -> bool:
        """Return True for a zero-width span (``lo == hi``)."""
        return self.lo == self.hi

    def __str__(self) -> str:
        return f"{self.lo}..{self.hi}"


@dataclass(frozen=True, slots=True)
class Loc:
    """A resolved source position.

    Attributes:
        file (SourceFile): The file the offset falls in.
        line (int): 1-based line number.
        col (int): 0-based column, in characters.
    """

    file: SourceFile
    line: int
    col: int
