# spanrender:header:start
#
#   project      : SpanRender
#   file         : annotations.py
#   file_relpath : src/spanrender/rendering/annotations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Group a diagnostic's span labels by file and line.

`preprocess_annotations` projects every `SpanLabel` onto the line its span starts
on, producing one `FileWithAnnotatedLines` per file (first-seen order) whose
lines are sorted by line number.

Degradation rules:
    - A span crossing lines or files is minimized to a one-character annotation at
      its start column (``is_minimized=True``); underlines are only ever drawn within
      a line.
    - A zero-width span is widened by one column so a marker is always visible.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from spanrender.config.logging import get_logger

if TYPE_CHECKING:
    from spanrender.config.logging import SpanRenderLogger
    from spanrender.diagnostic.model import DiagnosticMessage
    from spanrender.source.codemap import SourceFile
    from spanrender.source.span import Loc

logger: SpanRenderLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Annotation:
    """A label projected onto one source line.

    Annotations on a line are ordered by `sort_key`; ties keep insertion order.

    Attributes:
        start_col (int): 0-based start column in characters.
        end_col (int): Exclusive end column; always greater than ``start_col``.
        is_primary (bool): Derived from the diagnostic's primary span.
        is_minimized (bool): True when a span crossing lines or files was collapsed
            to one column.
        label (str | None): Optional text attached to the underline.
    """

    start_col: int
    end_col: int
    is_primary: bool = False
    is_minimized: bool = False
    label: str | None = None

    @property
    def sort_key(self) -> tuple[int, int]:
        """Return the ``(start_col, end_col)`` ordering key."""
        return (self.start_col, self.end_col)

    def overlaps(self, other: Annotation) -> bool:
        """Return True if either annotation starts inside the other's range."""
        return (
            other.start_col <= self.start_col < other.end_col
            or self.start_col <= other.start_col < self.end_col
        )


@dataclass(slots=True)
class Line:
    """Annotations attached to one 1-based source line."""

    line_number: int
    annotations: list[Annotation] = field(default_factory=lambda: [])


@dataclass(slots=True)
class FileWithAnnotatedLines:
    """All annotated lines of one file, sorted by line number."""

    file: SourceFile
    lines: list[Line] = field(default_factory=lambda: [])

    def add(self, line_number: int, annotation: Annotation) -> None:
        """Attach ``annotation`` to ``line_number``, creating the line if needed."""
        for line in self.lines:
            if line.line_number == line_number:
                line.annotations.append(annotation)
                line.annotations.sort(key=lambda a: a.sort_key)
                return
        self.lines.append(Line(line_number=line_number, annotations=[annotation]))
        self.lines.sort(key=lambda ln: ln.line_number)


def make_annotation(lo: Loc, hi: Loc, *, is_primary: bool, label: str | None) -> Annotation:
    """Build the single-line annotation for a span resolved to ``lo``/``hi``."""
    # A span ending on another line, or in another file, keeps only its first column.
    is_minimized: bool = lo.file is not hi.file or lo.line != hi.line
    start_col: int = lo.col
    end_col: int = lo.col + 1 if is_minimized else hi.col
    if end_col == start_col:
        end_col += 1
    return Annotation(
        start_col=start_col,
        end_col=end_col,
        is_primary=is_primary,
        is_minimized=is_minimized,
        label=label,
    )


def preprocess_annotations(msg: DiagnosticMessage) -> list[FileWithAnnotatedLines]:
    """Group the span labels of ``msg`` by file and line.

    Args:
        msg (DiagnosticMessage): The diagnostic to preprocess.

    Returns:
        list[FileWithAnnotatedLines]: One entry per file, in the order files are
        first referenced by a label.

    Raises:
        CodemapLookupError: If a label's span cannot be resolved.
    """
    output: list[FileWithAnnotatedLines] = []

    for span_label in msg.span_labels:
        lo: Loc = msg.codemap.lookup_position(span_label.span.lo)
        hi: Loc = msg.codemap.lookup_position(span_label.span.hi)
        annotation: Annotation = make_annotation(
            lo, hi, is_primary=span_label.is_primary, label=span_label.label
        )
        logger.trace(
            "Annotation %s:%d cols %d..%d (primary=%s, minimized=%s)",
            lo.file.name,
            lo.line,
            annotation.start_col,
            annotation.end_col,
            annotation.is_primary,
            annotation.is_minimized,
        )

        entry: FileWithAnnotatedLines | None = next(
            (f for f in output if f.file.name == lo.file.name), None
        )
        if entry is None:
            entry = FileWithAnnotatedLines(file=lo.file)
            output.append(entry)
        entry.add(lo.line, annotation)

    return output
