# spanrender:header:start
#
#   project      : SpanRender
#   file         : snippet.py
#   file_relpath : src/spanrender/rendering/snippet.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Lay out a diagnostic as annotated source snippets.

`render_diagnostic` writes a `DiagnosticMessage` into a fresh `StyledGrid` and
returns the compacted rows. The layout, for a primary file and one secondary file:

```text
warning: Not sure what this is [E123]
  --> foo.rs:3:13
   |>
3  |>    vec.push(vec.pop().unwrap());
   |>    ---      ^^^ primary message
   |>    |
   |>    secondary message
   |>
  ::: bar.rs
   |>
12 |>    vec2.push(vec2.pop().unwrap());
   |>              ---- tertiary message
```

The gutter width is the digit count of the largest line number referenced by any
label, across all files. Source text starts two columns after the ``|>`` marker.

Label placement on one line:
    - The rightmost labeled annotation is written inline after the underline row
      unless any other annotation on the line overlaps it.
    - Every other labeled annotation hangs below, each one row lower than the
      previous, with ``|`` connectors from the underline row to its text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from spanrender.config.logging import get_logger
from spanrender.config.model import RenderConfig, RenderMode
from spanrender.diagnostic.level import Level
from spanrender.rendering.annotations import preprocess_annotations
from spanrender.rendering.grid import StyledGrid
from spanrender.rendering.styles import LevelStyle, Style

if TYPE_CHECKING:
    from spanrender.config.logging import SpanRenderLogger
    from spanrender.diagnostic.model import DiagnosticMessage
    from spanrender.rendering.annotations import Annotation, FileWithAnnotatedLines, Line
    from spanrender.rendering.styles import StyledLine
    from spanrender.source.codemap import SourceFile
    from spanrender.source.span import Loc

logger: SpanRenderLogger = get_logger(__name__)

GUTTER_MARKER: str = "|>"
PRIMARY_LOCATION_MARKER: str = "--> "
SECONDARY_LOCATION_MARKER: str = "::: "
ELISION_MARKER: str = "..."
NOTE_MARKER: str = "=> "


def render_diagnostic(
    msg: DiagnosticMessage,
    config: RenderConfig | None = None,
) -> list[StyledLine]:
    """Render ``msg`` into rows of styled text.

    Args:
        msg (DiagnosticMessage): The frozen diagnostic to render.
        config (RenderConfig | None): Rendering options; defaults to `RenderConfig()`.

    Returns:
        list[StyledLine]: One list of styled runs per output row.

    Raises:
        ValueError: If the diagnostic's level is ``CANCELLED``.
        CodemapLookupError: If a span cannot be resolved by the codemap.
    """
    config = config or RenderConfig()
    renderer = _SnippetRenderer(msg, config)
    return renderer.render()


def max_line_number(msg: DiagnosticMessage) -> int:
    """Return the largest line number touched by any label's end, across all files."""
    max_line: int = 0
    for span_label in msg.span_labels:
        hi: Loc = msg.codemap.lookup_position(span_label.span.hi)
        max_line = max(max_line, hi.line)
    return max_line


def move_primary_file_first(
    annotated_files: list[FileWithAnnotatedLines],
    primary_file_name: str,
) -> None:
    """Swap the file named ``primary_file_name`` into position 0, in place.

    Uses a linear scan; the list is in first-seen order, not sorted by name.
    """
    for index, annotated_file in enumerate(annotated_files):
        if annotated_file.file.name == primary_file_name:
            annotated_files[0], annotated_files[index] = (
                annotated_files[index],
                annotated_files[0],
            )
            return


class _SnippetRenderer:
    """One render pass; owns the grid for the duration of `render`."""

    def __init__(self, msg: DiagnosticMessage, config: RenderConfig) -> None:
        self.msg: DiagnosticMessage = msg
        self.config: RenderConfig = config
        self.buffer: StyledGrid = StyledGrid()
        self.gutter_width: int = 0

    @property
    def source_offset(self) -> int:
        return self.gutter_width + 3

    @property
    def marker_col(self) -> int:
        return self.gutter_width + 1

    def render(self) -> list[StyledLine]:
        msg: DiagnosticMessage = self.msg
        self._render_header()

        annotated_files: list[FileWithAnnotatedLines] = preprocess_annotations(msg)

        self.gutter_width = len(str(max_line_number(msg)))
        logger.trace("Gutter width %d for %d file(s)", self.gutter_width, len(annotated_files))

        primary_lo: Loc = msg.codemap.lookup_position(msg.primary_span.lo)
        move_primary_file_first(annotated_files, primary_lo.file.name)

        for annotated_file in annotated_files:
            if annotated_file.file.name == primary_lo.file.name:
                self._render_primary_location()
            else:
                self._render_secondary_location(annotated_file.file)

            self._render_spacer()
            self._render_file_lines(annotated_file)

        self._render_notes()
        return self.buffer.render()

    def _render_header(self) -> None:
        msg: DiagnosticMessage = self.msg
        self.buffer.append(0, msg.level.display, LevelStyle(msg.level))
        self.buffer.append(0, ": ", Style.HEADER_MSG)
        self.buffer.append(0, msg.primary_msg, Style.HEADER_MSG)
        if msg.error_code:
            self.buffer.append(0, f" [{msg.error_code}]", Style.ERROR_CODE)

    def _render_spacer(self) -> None:
        row: int = self.buffer.num_lines()
        self.buffer.put_str(row, self.marker_col, GUTTER_MARKER, Style.LINE_NUMBER)

    def _render_primary_location(self) -> None:
        row: int = self.buffer.num_lines()
        self.buffer.prepend(row, PRIMARY_LOCATION_MARKER, Style.LINE_NUMBER)
        self.buffer.append(
            row,
            self.msg.codemap.span_to_display_string(self.msg.primary_span),
            Style.LINE_AND_COLUMN,
        )
        self.buffer.prepend(row, " " * self.gutter_width, Style.NO_STYLE)

    def _render_secondary_location(self, source_file: SourceFile) -> None:
        self._render_spacer()
        row: int = self.buffer.num_lines()
        self.buffer.prepend(row, SECONDARY_LOCATION_MARKER, Style.LINE_NUMBER)
        self.buffer.append(row, source_file.name, Style.LINE_AND_COLUMN)
        self.buffer.prepend(row, " " * self.gutter_width, Style.NO_STYLE)

    def _render_file_lines(self, annotated_file: FileWithAnnotatedLines) -> None:
        lines: list[Line] = annotated_file.lines
        for index, line in enumerate(lines):
            self._render_source_line(annotated_file.file, line)
            if index + 1 >= len(lines):
                continue

            delta: int = lines[index + 1].line_number - line.line_number
            if delta > 2:
                logger.trace(
                    "Eliding lines %d..%d of %s",
                    line.line_number + 1,
                    lines[index + 1].line_number - 1,
                    annotated_file.file.name,
                )
                self.buffer.put_str(self.buffer.num_lines(), 0, ELISION_MARKER, Style.LINE_NUMBER)
            elif delta == 2:
                self._render_context_line(annotated_file.file, line.line_number + 1)

    def _render_context_line(self, source_file: SourceFile, line_number: int) -> None:
        text: str = self.msg.codemap.get_line_text(source_file, line_number - 1) or ""
        row: int = self.buffer.num_lines()
        self.buffer.put_str(row, 0, str(line_number), Style.LINE_NUMBER)
        self.buffer.put_str(row, self.marker_col, GUTTER_MARKER, Style.LINE_NUMBER)
        self.buffer.put_str(row, self.source_offset, text, Style.QUOTATION)

    def _render_source_line(self, source_file: SourceFile, line: Line) -> None:
        buffer: StyledGrid = self.buffer
        offset: int = self.source_offset
        source: str = self.msg.codemap.get_line_text(source_file, line.line_number - 1) or ""
        row: int = buffer.num_lines()

        buffer.put_str(row, offset, source, Style.QUOTATION)
        buffer.put_str(row, 0, str(line.line_number), Style.LINE_NUMBER)
        buffer.put_str(row, self.marker_col, GUTTER_MARKER, Style.LINE_NUMBER)

        if not line.annotations:
            return

        annotations: list[Annotation] = sorted(line.annotations, key=lambda a: a.sort_key)
        if self.config.mode is RenderMode.OLD_SCHOOL:
            self._render_old_school_underlines(row, annotations)
            return

        for annotation in annotations:
            underline_style: Style = (
                Style.UNDERLINE_PRIMARY if annotation.is_primary else Style.UNDERLINE_SECONDARY
            )
            marker: str = "^" if annotation.is_primary else "-"
            for col in range(annotation.start_col, annotation.end_col):
                buffer.put_char(row + 1, offset + col, marker, underline_style)
                if not annotation.is_minimized:
                    buffer.set_style(row, offset + col, underline_style)
        buffer.put_str(row + 1, self.marker_col, GUTTER_MARKER, Style.LINE_NUMBER)

        self._render_labels(row, annotations)

    def _render_old_school_underlines(self, row: int, annotations: list[Annotation]) -> None:
        for annotation in annotations:
            style: Style = (
                Style.UNDERLINE_PRIMARY if annotation.is_primary else Style.OLD_SCHOOL_NOTE
            )
            for col in range(annotation.start_col, annotation.end_col):
                marker: str = "^" if col == annotation.start_col else "~"
                self.buffer.put_char(row + 1, self.source_offset + col, marker, style)
        self.buffer.put_str(row + 1, self.marker_col, GUTTER_MARKER, Style.LINE_NUMBER)

    def _render_labels(self, row: int, annotations: list[Annotation]) -> None:
        buffer: StyledGrid = self.buffer
        offset: int = self.source_offset
        labeled: list[Annotation] = [a for a in annotations if a.label is not None]
        unlabeled: list[Annotation] = [a for a in annotations if a.label is None]
        if not labeled:
            return

        last: Annotation = labeled[-1]
        others: list[Annotation] = labeled[:-1] + unlabeled
        if not any(other.overlaps(last) for other in others):
            buffer.append(row + 1, f" {last.label}", _label_style(last))
            labeled = labeled[:-1]
        else:
            logger.trace("Label %r overlaps another annotation; hanging it below", last.label)

        for index, annotation in enumerate(labeled):
            comes_after: int = len(labeled) - index - 1
            blank_lines: int = 3 + comes_after
            connector_style: Style = (
                Style.UNDERLINE_PRIMARY if annotation.is_primary else Style.UNDERLINE_SECONDARY
            )
            for connector_row in range(row + 2, row + blank_lines):
                buffer.put_char(connector_row, offset + annotation.start_col, "|", connector_style)
                buffer.put_str(connector_row, self.marker_col, GUTTER_MARKER, Style.LINE_NUMBER)

            label_row: int = row + blank_lines
            buffer.put_str(
                label_row,
                offset + annotation.start_col,
                annotation.label or "",
                _label_style(annotation),
            )
            buffer.put_str(label_row, self.marker_col, GUTTER_MARKER, Style.LINE_NUMBER)

    def _render_notes(self) -> None:
        if not self.msg.notes:
            return
        self._render_spacer()
        for note in self.msg.notes:
            row: int = self.buffer.num_lines()
            self.buffer.put_str(row, self.marker_col, NOTE_MARKER, Style.LINE_NUMBER)
            self.buffer.append(row, "note: ", LevelStyle(Level.NOTE))
            self.buffer.append(row, note, Style.NO_STYLE)


def _label_style(annotation: Annotation) -> Style:
    return Style.LABEL_PRIMARY if annotation.is_primary else Style.LABEL_SECONDARY
