# spanrender:header:start
#
#   project      : SpanRender
#   file         : io.py
#   file_relpath : src/spanrender/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Load render configuration from TOML sources.

Sources, in discovery order:
    - an explicit path (``spanrender.toml`` layout, or a ``pyproject.toml``),
    - ``spanrender.toml`` in the working directory,
    - ``[tool.spanrender]`` in ``pyproject.toml`` in the working directory.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, TypeAlias, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from spanrender.config.keys import Toml
from spanrender.config.logging import get_logger
from spanrender.config.model import MutableRenderConfig

if TYPE_CHECKING:
    from spanrender.config.logging import SpanRenderLogger

logger: SpanRenderLogger = get_logger(__name__)

TomlTable: TypeAlias = "dict[str, Any]"

SPANRENDER_TOML: Final[str] = "spanrender.toml"
PYPROJECT_TOML: Final[str] = "pyproject.toml"


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_render_table(data: TomlTable, *, is_pyproject: bool) -> TomlTable:
    """Return the SpanRender table of a parsed document.

    ``pyproject.toml`` nests the settings under ``[tool.spanrender]``; a
    ``spanrender.toml`` keeps them at the top level.
    """
    if not is_pyproject:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL)
    if not isinstance(tool, dict):
        return {}
    table: Any = cast("TomlTable", tool).get(Toml.SECTION_SPANRENDER)
    return cast("TomlTable", table) if isinstance(table, dict) else {}


def discover_config_path(cwd: Path | None = None) -> Path | None:
    """Return the first config file found in ``cwd``, or None.

    ``pyproject.toml`` only counts when it has a ``[tool.spanrender]`` table.
    """
    base: Path = cwd or Path.cwd()
    candidate: Path = base / SPANRENDER_TOML
    if candidate.is_file():
        return candidate
    candidate = base / PYPROJECT_TOML
    if candidate.is_file() and extract_render_table(load_toml_dict(candidate), is_pyproject=True):
        return candidate
    return None


def load_render_config(path: Path | None = None, *, cwd: Path | None = None) -> MutableRenderConfig:
    """Load a partial render configuration.

    Args:
        path: Explicit config file; when None, `discover_config_path` is used.
        cwd: Directory searched during discovery; defaults to the working directory.

    Returns:
        MutableRenderConfig: Runtime defaults overlaid with the file's settings.

    Raises:
        ConfigError: If the file holds an invalid value for a known key.
    """
    defaults: MutableRenderConfig = MutableRenderConfig.from_defaults()
    source: Path | None = path if path is not None else discover_config_path(cwd)
    if source is None:
        logger.debug("No config file found; using defaults")
        return defaults

    data: TomlTable = load_toml_dict(source)
    table: TomlTable = extract_render_table(data, is_pyproject=source.name == PYPROJECT_TOML)
    return defaults.merge_with(MutableRenderConfig.from_toml_dict(table, source=str(source)))
