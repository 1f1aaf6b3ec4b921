# spanrender:header:start
#
#   project      : SpanRender
#   file         : codemap.py
#   file_relpath : src/spanrender/source/codemap.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""In-memory codemap: byte offsets to files, lines and columns.

Every registered `SourceFile` owns a contiguous range of the global byte offset
space, in registration order. A one-byte gap separates consecutive files so that
an empty span sitting at the very end of one file still resolves to that file
rather than to the start of the next one.

Queries used by the renderer:
    - `CodeMap.lookup_position`: offset -> `Loc` (file, 1-based line, 0-based column).
    - `CodeMap.get_line_text`: 0-based line index -> text, or None when out of range.
    - `CodeMap.span_to_display_string`: ``"file:line:col"`` for a span's start.

Columns count characters (decoded UTF-8), while offsets count bytes.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from spanrender.config.logging import get_logger
from spanrender.source.span import Loc, Span

if TYPE_CHECKING:
    from spanrender.config.logging import SpanRenderLogger

logger: SpanRenderLogger = get_logger(__name__)


class CodemapLookupError(LookupError):
    """Raised when an offset or span cannot be resolved to a registered file."""


@dataclass(frozen=True, eq=False)
class SourceFile:
    """A named source text registered in a `CodeMap`.

    Attributes:
        name (str): Display name (usually a path).
        text (str): Full file contents.
        start_pos (int): Global byte offset of the first byte of the file.
    """

    name: str
    text: str
    start_pos: int
    _data: bytes = field(init=False, repr=False)
    _line_starts: tuple[int, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        data: bytes = self.text.encode("utf-8")
        starts: list[int] = [0]
        starts.extend(i + 1 for i, byte in enumerate(data) if byte == 0x0A)
        object.__setattr__(self, "_data", data)
        object.__setattr__(self, "_line_starts", tuple(starts))

    @property
    def end_pos(self) -> int:
        """Global offset one past the last byte of the file."""
        return self.start_pos + len(self._data)

    @property
    def line_count(self) -> int:
        """Number of lines, counting a trailing empty line after a final newline."""
        return len(self._line_starts)

    def contains(self, pos: int) -> bool:
        """Return True if ``pos`` lies in ``[start_pos, end_pos]`` (end inclusive)."""
        return self.start_pos <= pos <= self.end_pos

    def get_line(self, index: int) -> str | None:
        """Return the text of the 0-based line ``index`` without its terminator.

        Args:
            index (int): 0-based line index.

        Returns:
            str | None: The line text, or None when ``index`` is out of range.
        """
        if index < 0 or index >= len(self._line_starts):
            return None
        begin: int = self._line_starts[index]
        end: int = (
            self._line_starts[index + 1] if index + 1 < len(self._line_starts) else len(self._data)
        )
        line: str = self._data[begin:end].decode("utf-8", errors="replace")
        return line.rstrip("\r\n")

    def line_and_col(self, rel: int) -> tuple[int, int]:
        """Return the 1-based line and 0-based character column for a file-relative offset."""
        index: int = bisect.bisect_right(self._line_starts, rel) - 1
        line_start: int = self._line_starts[index]
        col: int = len(self._data[line_start:rel].decode("utf-8", errors="ignore"))
        return index + 1, col

    def slice_bytes(self, lo: int, hi: int) -> str:
        """Decode the file-relative byte range ``[lo, hi)``."""
        return self._data[lo:hi].decode("utf-8", errors="replace")

    def find_bytes(self, needle: bytes, start: int) -> int:
        """Return the file-relative offset of ``needle`` at or after ``start`` (or -1)."""
        return self._data.find(needle, start)


class CodeMap:
    """Registry of source files sharing one global byte offset space."""

    def __init__(self) -> None:
        self._files: list[SourceFile] = []
        self._starts: list[int] = []

    @property
    def files(self) -> tuple[SourceFile, ...]:
        """Registered files in registration order."""
        return tuple(self._files)

    def add_file(self, name: str, text: str) -> SourceFile:
        """Register a new file and return it.

        Args:
            name (str): Display name of the file.
            text (str): File contents.

        Returns:
            SourceFile: The registered file, placed after all existing files.
        """
        start_pos: int = self._files[-1].end_pos + 1 if self._files else 0
        source_file = SourceFile(name=name, text=text, start_pos=start_pos)
        self._files.append(source_file)
        self._starts.append(start_pos)
        logger.debug(
            "Registered %s at offsets %d..%d (%d lines)",
            name,
            source_file.start_pos,
            source_file.end_pos,
            source_file.line_count,
        )
        return source_file

    def get_file(self, name: str) -> SourceFile | None:
        """Return the first registered file called ``name``, if any."""
        for source_file in self._files:
            if source_file.name == name:
                return source_file
        return None

    def lookup_file(self, pos: int) -> SourceFile:
        """Return the file containing the global offset ``pos``.

        Raises:
            CodemapLookupError: If no registered file contains ``pos``.
        """
        index: int = bisect.bisect_right(self._starts, pos) - 1
        if index < 0 or not self._files[index].contains(pos):
            raise CodemapLookupError(f"Offset {pos} does not belong to any registered file")
        return self._files[index]

    def lookup_position(self, pos: int) -> Loc:
        """Resolve the global offset ``pos`` to a `Loc`.

        Raises:
            CodemapLookupError: If no registered file contains ``pos``.
        """
        source_file: SourceFile = self.lookup_file(pos)
        line, col = source_file.line_and_col(pos - source_file.start_pos)
        return Loc(file=source_file, line=line, col=col)

    def get_line_text(self, source_file: SourceFile, index: int) -> str | None:
        """Return the text of 0-based line ``index`` of ``source_file`` (None if absent)."""
        return source_file.get_line(index)

    def span_to_display_string(self, span: Span) -> str:
        """Render the start of ``span`` as ``"file:line:col"`` (0-based column)."""
        loc: Loc = self.lookup_position(span.lo)
        return f"{loc.file.name}:{loc.line}:{loc.col}"

    def span_to_snippet(self, span: Span) -> str:
        """Return the source text covered by ``span``.

        Raises:
            CodemapLookupError: If the span's ends fall in different files.
        """
        source_file: SourceFile = self.lookup_file(span.lo)
        if not source_file.contains(span.hi):
            raise CodemapLookupError(f"Span {span} crosses a file boundary")
        base: int = source_file.start_pos
        return source_file.slice_bytes(span.lo - base, span.hi - base)

    def find_span(self, source_file: SourceFile, needle: str, occurrence: int = 0) -> Span:
        """Return the span of the ``occurrence``-th (0-based) match of ``needle``.

        Args:
            source_file (SourceFile): File to search in.
            needle (str): Text to find; must be non-empty.
            occurrence (int): Which match to return, counting from 0.

        Returns:
            Span: Global span of the match.

        Raises:
            ValueError: If ``needle`` is empty or has fewer than ``occurrence + 1`` matches.
        """
        if not needle:
            raise ValueError("Cannot search for an empty string")
        encoded: bytes = needle.encode("utf-8")
        hi: int = 0
        for seen in range(occurrence + 1):
            lo: int = source_file.find_bytes(encoded, hi)
            if lo < 0:
                raise ValueError(
                    f"{source_file.name} does not have {occurrence + 1} occurrences "
                    f"of {needle!r}, only {seen}"
                )
            hi = lo + len(encoded)
        return Span(source_file.start_pos + hi - len(encoded), source_file.start_pos + hi)
