# spanrender:header:start
#
#   project      : SpanRender
#   file         : __init__.py
#   file_relpath : src/spanrender/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Configuration: logging setup, render options and TOML loading.

Modules:
    - spanrender.config.logging: TRACE-aware logger and `setup_logging`.
    - spanrender.config.keys: TOML key names.
    - spanrender.config.model: `RenderConfig` / `MutableRenderConfig`.
    - spanrender.config.io: TOML discovery and loading.
"""

from __future__ import annotations

from spanrender.config.logging import get_logger, setup_logging
from spanrender.config.model import ConfigError, MutableRenderConfig, RenderConfig, RenderMode
from spanrender.config.io import load_render_config

__all__ = [
    "ConfigError",
    "MutableRenderConfig",
    "RenderConfig",
    "RenderMode",
    "get_logger",
    "load_render_config",
    "setup_logging",
]
