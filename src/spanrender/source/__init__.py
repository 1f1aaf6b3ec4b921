# spanrender:header:start
#
#   project      : SpanRender
#   file         : __init__.py
#   file_relpath : src/spanrender/source/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Source positions: spans, resolved locations and the codemap."""

from __future__ import annotations

from spanrender.source.codemap import CodeMap, CodemapLookupError, SourceFile
from spanrender.source.span import Loc, Span

__all__ = [
    "CodeMap",
    "CodemapLookupError",
    "Loc",
    "SourceFile",
    "Span",
]
