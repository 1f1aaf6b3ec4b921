# spanrender:header:start
#
#   project      : SpanRender
#   file         : __init__.py
#   file_relpath : src/spanrender/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Layout core: styled grid, annotation preprocessing and snippet rendering.

This package produces abstract styled rows only; it never decides colors and
never writes to a stream. See `spanrender.output` for that.

Public modules:
    - spanrender.rendering.styles
    - spanrender.rendering.grid
    - spanrender.rendering.annotations
    - spanrender.rendering.snippet
"""

from __future__ import annotations

from spanrender.rendering.grid import StyledGrid
from spanrender.rendering.snippet import render_diagnostic
from spanrender.rendering.styles import LevelStyle, Style, StyledString, plain_text

__all__ = [
    "LevelStyle",
    "Style",
    "StyledGrid",
    "StyledString",
    "plain_text",
    "render_diagnostic",
]
