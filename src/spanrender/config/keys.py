# spanrender:header:start
#
#   project      : SpanRender
#   file         : keys.py
#   file_relpath : src/spanrender/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Canonical TOML key names for SpanRender configuration.

Keys defined here are the external configuration schema as it appears in
``spanrender.toml`` (top level) and in ``[tool.spanrender]`` inside
``pyproject.toml``. Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML table and key names used by SpanRender configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_SPANRENDER: Final[str] = "spanrender"

    # Rendering layout ("modern" or "old_school")
    KEY_MODE: Final[str] = "mode"

    # Color output ("auto", "always" or "never")
    KEY_COLOR: Final[str] = "color"

    ALL_KEYS: Final[frozenset[str]] = frozenset({KEY_MODE, KEY_COLOR})
