# spanrender:header:start
#
#   project      : SpanRender
#   file         : render.py
#   file_relpath : src/spanrender/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""SpanRender `render` command.

Loads the given files into a `CodeMap`, builds one diagnostic from the command
line and prints it.

Examples:
    Label the second ``vec`` in ``foo.rs`` as the primary span::

        spanrender render foo.rs --primary '~vec#1' --primary-label 'primary message' \\
            --label '~vec=secondary message' -m 'Unresolved name' --code E123
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from spanrender.cli.cli_types import EnumChoiceParam, SpanSpecParam
from spanrender.cli.errors import (
    SpanRenderConfigError,
    SpanRenderEncodingError,
    SpanRenderFileNotFoundError,
    SpanRenderIOError,
    SpanRenderUsageError,
)
from spanrender.cli.spans import SpanSpecError, resolve_span_spec
from spanrender.config.io import load_render_config
from spanrender.config.logging import get_logger
from spanrender.config.model import ConfigError, MutableRenderConfig, RenderMode
from spanrender.diagnostic.level import Level
from spanrender.diagnostic.model import DiagnosticBuilder
from spanrender.output.color import resolve_color_mode
from spanrender.output.console import ClickConsole
from spanrender.output.writer import emit_diagnostic
from spanrender.source.codemap import CodeMap

if TYPE_CHECKING:
    from spanrender.cli.spans import SpanSpec
    from spanrender.config.logging import SpanRenderLogger
    from spanrender.config.model import RenderConfig
    from spanrender.output.color import ColorMode
    from spanrender.source.codemap import SourceFile
    from spanrender.source.span import Span

logger: SpanRenderLogger = get_logger(__name__)


def load_codemap(paths: tuple[Path, ...]) -> CodeMap:
    """Register every path in a new `CodeMap`, in argument order.

    Raises:
        SpanRenderFileNotFoundError: If a path does not exist.
        SpanRenderIOError: If a path cannot be read.
        SpanRenderEncodingError: If a file is not valid UTF-8.
    """
    codemap = CodeMap()
    for path in paths:
        if not path.exists():
            raise SpanRenderFileNotFoundError(f"No such file: {path}")
        try:
            text: str = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise SpanRenderEncodingError(f"{path} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise SpanRenderIOError(f"Cannot read {path}: {exc}") from exc
        codemap.add_file(str(path), text)
    return codemap


def resolve_render_config(
    config_path: Path | None,
    *,
    old_school: bool,
) -> RenderConfig:
    """Layer the config file and command-line flags into a `RenderConfig`.

    Raises:
        SpanRenderConfigError: If the config file holds an invalid value.
    """
    try:
        cfg: MutableRenderConfig = load_render_config(config_path)
    except ConfigError as exc:
        raise SpanRenderConfigError(str(exc)) from exc
    if old_school:
        cfg = cfg.merge_with(MutableRenderConfig(mode=RenderMode.OLD_SCHOOL))
    return cfg.freeze()


@click.command(
    name="render",
    help="Render one diagnostic against FILES and print it.",
)
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--primary",
    "primary",
    required=True,
    type=SpanSpecParam(),
    help="Primary span: [FILE@]LO:HI or [FILE@]~NEEDLE[#N].",
)
@click.option(
    "--primary-label",
    "primary_label",
    default=None,
    help="Label text for the primary span.",
)
@click.option(
    "--label",
    "labels",
    multiple=True,
    type=SpanSpecParam(allow_label=True),
    help="Secondary span with optional text: SPAN[=TEXT]. Repeatable.",
)
@click.option("--note", "notes", multiple=True, help="Note appended below the snippet. Repeatable.")
@click.option(
    "--level",
    "level",
    type=EnumChoiceParam(Level),
    default=Level.ERROR.value,
    show_default=True,
    help="Severity of the diagnostic.",
)
@click.option("-m", "--message", "message", required=True, help="Header message.")
@click.option("--code", "error_code", default=None, help="Error code shown as ' [CODE]'.")
@click.option(
    "--old-school",
    "old_school",
    is_flag=True,
    help="Use ^~~~ underlines without labels.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Config file (spanrender.toml layout, or a pyproject.toml).",
)
def render_command(
    *,
    files: tuple[Path, ...],
    primary: SpanSpec,
    primary_label: str | None,
    labels: tuple[SpanSpec, ...],
    notes: tuple[str, ...],
    level: Level,
    message: str,
    error_code: str | None,
    old_school: bool,
    config_path: Path | None,
) -> None:
    """Render one diagnostic.

    Args:
        files (tuple[Path, ...]): Source files; the first one is the default for spans.
        primary (SpanSpec): The primary span.
        primary_label (str | None): Label text for the primary span.
        labels (tuple[SpanSpec, ...]): Additional labelled spans.
        notes (tuple[str, ...]): Notes shown after the snippet.
        level (Level): Severity.
        message (str): Header message.
        error_code (str | None): Optional error code.
        old_school (bool): Force the old-school layout.
        config_path (Path | None): Explicit config file.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)

    if level is Level.CANCELLED:
        raise SpanRenderUsageError("A cancelled diagnostic cannot be rendered.")

    config: RenderConfig = resolve_render_config(config_path, old_school=old_school)
    codemap: CodeMap = load_codemap(files)
    default_file: SourceFile = codemap.files[0]

    try:
        primary_span: Span = resolve_span_spec(primary, codemap, default_file)
        builder = DiagnosticBuilder(
            level, message, primary_span, codemap=codemap, error_code=error_code
        )
        builder.add_span_label(primary_span, primary_label)
        for spec in labels:
            builder.add_span_label(resolve_span_spec(spec, codemap, default_file), spec.label)
    except SpanSpecError as exc:
        raise SpanRenderUsageError(str(exc)) from exc
    for note in notes:
        builder.add_note(note)

    # An explicit --color/--no-color beats the config file.
    color_override: ColorMode | None = ctx.obj.get("color_override")
    enable_color: bool = resolve_color_mode(
        color_mode_override=color_override or config.color_mode
    )
    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console

    logger.info("Rendering %s diagnostic with %d label(s)", level.value, len(labels) + 1)
    emit_diagnostic(builder.freeze(), console, config)
