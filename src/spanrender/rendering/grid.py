# spanrender:header:start
#
#   project      : SpanRender
#   file         : grid.py
#   file_relpath : src/spanrender/rendering/grid.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""A 2-D canvas of styled characters.

`StyledGrid` is the scratch space the snippet renderer writes a diagnostic into.
Cells are addressed by ``(line, col)``; writing past the end of the canvas grows
it, so the renderer can work top to bottom without knowing the final size.

Growth rules:
    - Writing to a row beyond the last one appends empty rows up to it.
    - Writing past the end of a row pads it with ``NO_STYLE`` cells. A padding cell
      is a tab when row 0 holds a tab in the same column, otherwise a space, which
      keeps tab-indented source aligned with the rows drawn beneath it.

The grid never deletes or reorders characters. `StyledGrid.render` compacts each
row into runs of same-style text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from spanrender.rendering.styles import Style, StyledString

if TYPE_CHECKING:
    from spanrender.rendering.styles import AnyStyle, StyledLine


class StyledGrid:
    """Growable rectangular-ish buffer of ``(char, style)`` cells."""

    def __init__(self) -> None:
        self._text: list[list[str]] = []
        self._styles: list[list[AnyStyle]] = []

    def _ensure_lines(self, line: int) -> None:
        while line >= len(self._text):
            self._text.append([])
            self._styles.append([])

    def _pad_char(self, col: int) -> str:
        first_row: list[str] = self._text[0]
        if col < len(first_row) and first_row[col] == "\t":
            return "\t"
        return " "

    def put_char(self, line: int, col: int, ch: str, style: AnyStyle) -> None:
        """Write one cell, growing the grid as needed."""
        self._ensure_lines(line)
        row_text: list[str] = self._text[line]
        row_styles: list[AnyStyle] = self._styles[line]
        if col < len(row_text):
            row_text[col] = ch
            row_styles[col] = style
            return
        for i in range(len(row_text), col):
            row_text.append(self._pad_char(i))
            row_styles.append(Style.NO_STYLE)
        row_text.append(ch)
        row_styles.append(style)

    def put_str(self, line: int, col: int, text: str, style: AnyStyle) -> None:
        """Write ``text`` starting at ``col``, one column per character."""
        for offset, ch in enumerate(text):
            self.put_char(line, col + offset, ch, style)

    def set_style(self, line: int, col: int, style: AnyStyle) -> None:
        """Restyle an existing cell; does nothing if the cell does not exist."""
        if line < len(self._styles) and col < len(self._styles[line]):
            self._styles[line][col] = style

    def prepend(self, line: int, text: str, style: AnyStyle) -> None:
        """Insert ``text`` at the start of a row, shifting its content right."""
        self._ensure_lines(line)
        self._text[line][0:0] = [" "] * len(text)
        self._styles[line][0:0] = [Style.NO_STYLE] * len(text)
        self.put_str(line, 0, text, style)

    def append(self, line: int, text: str, style: AnyStyle) -> None:
        """Write ``text`` right after the last cell of a row (column 0 for a new row)."""
        col: int = len(self._text[line]) if line < len(self._text) else 0
        self.put_str(line, col, text, style)

    def num_lines(self) -> int:
        """Return the current number of rows."""
        return len(self._text)

    def render(self) -> list[StyledLine]:
        """Compact every row into runs of same-style text.

        Returns:
            list[StyledLine]: One list of `StyledString` runs per row, in row order.
            Empty rows yield an empty list; empty runs are never emitted.
        """
        output: list[StyledLine] = []
        for row_text, row_styles in zip(self._text, self._styles):
            runs: StyledLine = []
            current_style: AnyStyle = Style.NO_STYLE
            current_text: list[str] = []
            for ch, style in zip(row_text, row_styles):
                if style != current_style:
                    if current_text:
                        runs.append(StyledString("".join(current_text), current_style))
                    current_style = style
                    current_text = []
                current_text.append(ch)
            if current_text:
                runs.append(StyledString("".join(current_text), current_style))
            output.append(runs)
        return output
