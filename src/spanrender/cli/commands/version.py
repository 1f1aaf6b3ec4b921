# spanrender:header:start
#
#   project      : SpanRender
#   file         : version.py
#   file_relpath : src/spanrender/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""SpanRender `version` command.

Prints the current SpanRender version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from spanrender.constants import SPANRENDER_VERSION

if TYPE_CHECKING:
    from spanrender.output.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of SpanRender.",
)
def version_command() -> None:
    """Show the current version of SpanRender."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    console.print(console.styled(SPANRENDER_VERSION, {"bold": True}))
