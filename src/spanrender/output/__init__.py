# spanrender:header:start
#
#   project      : SpanRender
#   file         : __init__.py
#   file_relpath : src/spanrender/output/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Output sink for rendered diagnostics.

Modules:
    - spanrender.output.color: color-mode resolution (no Click dependency).
    - spanrender.output.console_api: `ConsoleLike` protocol.
    - spanrender.output.console: `ClickConsole`.
    - spanrender.output.palette: semantic style to `click.style` mapping.
    - spanrender.output.writer: row formatting and printing.

Only `color` is imported eagerly; it is needed by the configuration model.
"""

from __future__ import annotations

from spanrender.output.color import ColorMode, resolve_color_mode

__all__ = [
    "ColorMode",
    "resolve_color_mode",
]
