# spanrender:header:start
#
#   project      : SpanRender
#   file         : constants.py
#   file_relpath : src/spanrender/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""SpanRender Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SPANRENDER_VERSION: str = get_version("spanrender")
