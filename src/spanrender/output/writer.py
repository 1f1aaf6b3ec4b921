# spanrender:header:start
#
#   project      : SpanRender
#   file         : writer.py
#   file_relpath : src/spanrender/output/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Write rendered rows to a console.

Each fragment is styled on its own, so a style never leaks into the next run, and
each row is one `ConsoleLike.print_row` call, so the reset sequence always comes
before the newline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from spanrender.config.logging import get_logger
from spanrender.output.palette import style_kwargs
from spanrender.rendering.snippet import render_diagnostic

if TYPE_CHECKING:
    from collections.abc import Iterable

    from spanrender.config.logging import SpanRenderLogger
    from spanrender.config.model import RenderConfig
    from spanrender.diagnostic.level import Level
    from spanrender.diagnostic.model import DiagnosticMessage
    from spanrender.output.console_api import ConsoleLike
    from spanrender.rendering.styles import StyledLine, StyledString

logger: SpanRenderLogger = get_logger(__name__)


def format_styled_line(
    fragments: Iterable[StyledString],
    level: Level,
    *,
    enable_color: bool,
) -> str:
    """Return one row as a string, with ANSI styling when ``enable_color`` is set."""
    if not enable_color:
        return "".join(fragment.text for fragment in fragments)

    parts: list[str] = []
    for fragment in fragments:
        kwargs = style_kwargs(fragment.style, level)
        parts.append(click.style(fragment.text, **kwargs) if kwargs else fragment.text)
    return "".join(parts)


def write_styled_lines(lines: list[StyledLine], level: Level, console: ConsoleLike) -> None:
    """Print every row of ``lines`` to ``console``."""
    for line in lines:
        console.print_row(line, level)


def emit_diagnostic(
    msg: DiagnosticMessage,
    console: ConsoleLike,
    config: RenderConfig | None = None,
) -> None:
    """Render ``msg`` and print it to ``console``.

    Raises:
        ValueError: If the diagnostic's level is ``CANCELLED``.
        CodemapLookupError: If a span cannot be resolved by the codemap.
    """
    lines: list[StyledLine] = render_diagnostic(msg, config)
    logger.debug("Emitting %d row(s) for %s diagnostic", len(lines), msg.level.value)
    write_styled_lines(lines, msg.level, console)
