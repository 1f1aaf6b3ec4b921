# spanrender:header:start
#
#   project      : SpanRender
#   file         : main.py
#   file_relpath : src/spanrender/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""SpanRender click group.

Group-level options are resolved once and placed into ``ctx.obj``:

- ``color_override``: the ``--color``/``--no-color`` intent, or None.
- ``console``: a `ClickConsole` for user-facing output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from spanrender.cli.commands.render import render_command
from spanrender.cli.commands.version import version_command
from spanrender.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from spanrender.config.logging import get_logger, resolve_env_log_level, setup_logging
from spanrender.output.color import ColorMode, resolve_color_mode
from spanrender.output.console import ClickConsole

if TYPE_CHECKING:
    from spanrender.config.logging import SpanRenderLogger
    from spanrender.output.console_api import ConsoleLike

logger: SpanRenderLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    # The environment wins; flags only apply when given.
    level: int | None = level_env
    if level is None and (verbose or quiet):
        level = level_cli
    setup_logging(level=level)

    color_override: ColorMode | None = ColorMode.NEVER if no_color else color_mode
    ctx.obj["color_override"] = color_override
    enable_color: bool = resolve_color_mode(color_mode_override=color_override)
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: log level=%s, color=%s", level, enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Render compiler diagnostics as annotated source snippets.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the SpanRender CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'spanrender render FILE --primary SPAN -m MESSAGE'.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(render_command)

if __name__ == "__main__":
    cli()
