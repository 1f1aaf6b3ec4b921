# spanrender:header:start
#
#   project      : SpanRender
#   file         : model.py
#   file_relpath : src/spanrender/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Render configuration model and merge policy.

This module defines:
    - `RenderConfig`: an immutable snapshot passed to `render_diagnostic`.
    - `MutableRenderConfig`: a mutable builder used while layering defaults, TOML
      files and CLI overrides; it can be frozen into `RenderConfig` and thawed back.

TOML I/O lives in `spanrender.config.io`; this module is I/O-free.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from spanrender.config.keys import Toml
from spanrender.config.logging import get_logger
from spanrender.output.color import ColorMode

if TYPE_CHECKING:
    from collections.abc import Mapping

    from spanrender.config.logging import SpanRenderLogger

logger: SpanRenderLogger = get_logger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration value is invalid."""


class RenderMode(str, Enum):
    """Layout used for underlines and labels.

    Attributes:
        MODERN: ``^``/``-`` underlines with inline or stacked labels.
        OLD_SCHOOL: ``^~~~`` underlines, no labels.
    """

    MODERN = "modern"
    OLD_SCHOOL = "old_school"


def _parse_enum(enum_cls: type[Enum], key: str, value: Any) -> Any:
    if not isinstance(value, str):
        raise ConfigError(f"Config key '{key}' must be a string, got {type(value).__name__}")
    try:
        return enum_cls(value.strip().lower())
    except ValueError as exc:
        choices: str = ", ".join(str(m.value) for m in enum_cls)
        raise ConfigError(
            f"Invalid value {value!r} for '{key}' (expected one of: {choices})"
        ) from exc


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable rendering configuration.

    Attributes:
        mode (RenderMode): Layout flavour; defaults to the modern layout.
        color_mode (ColorMode): Color intent for output sinks.
    """

    mode: RenderMode = RenderMode.MODERN
    color_mode: ColorMode = ColorMode.AUTO

    def thaw(self) -> MutableRenderConfig:
        """Return a mutable copy of this configuration."""
        return MutableRenderConfig(mode=self.mode, color_mode=self.color_mode)


@dataclass
class MutableRenderConfig:
    """Mutable builder for `RenderConfig`.

    Unset fields (``None``) fall back to the defaults at `freeze` time, so a
    later layer only overrides what it actually sets.
    """

    mode: RenderMode | None = None
    color_mode: ColorMode | None = None

    @classmethod
    def from_defaults(cls) -> MutableRenderConfig:
        """Return a builder holding the runtime defaults."""
        defaults = RenderConfig()
        return cls(mode=defaults.mode, color_mode=defaults.color_mode)

    @classmethod
    def from_toml_dict(
        cls,
        data: Mapping[str, Any],
        *,
        source: str = "<toml>",
    ) -> MutableRenderConfig:
        """Build a partial configuration from a parsed TOML table.

        Args:
            data: The ``[tool.spanrender]`` table or a ``spanrender.toml`` document.
            source: Description of the origin, used in log messages.

        Returns:
            MutableRenderConfig: A builder with only the keys present in ``data`` set.

        Raises:
            ConfigError: If a known key holds an invalid value.
        """
        for key in data:
            if key not in Toml.ALL_KEYS:
                logger.warning("Ignoring unknown config key '%s' in %s", key, source)

        cfg = cls()
        if Toml.KEY_MODE in data:
            cfg.mode = _parse_enum(RenderMode, Toml.KEY_MODE, data[Toml.KEY_MODE])
        if Toml.KEY_COLOR in data:
            cfg.color_mode = _parse_enum(ColorMode, Toml.KEY_COLOR, data[Toml.KEY_COLOR])
        logger.debug("Loaded config from %s: %r", source, cfg)
        return cfg

    def merge_with(self, other: MutableRenderConfig) -> MutableRenderConfig:
        """Return a new builder where fields set on ``other`` override this one."""
        return MutableRenderConfig(
            mode=other.mode if other.mode is not None else self.mode,
            color_mode=other.color_mode if other.color_mode is not None else self.color_mode,
        )

    def freeze(self) -> RenderConfig:
        """Freeze this builder into an immutable `RenderConfig`."""
        defaults = RenderConfig()
        return RenderConfig(
            mode=self.mode if self.mode is not None else defaults.mode,
            color_mode=self.color_mode if self.color_mode is not None else defaults.color_mode,
        )
