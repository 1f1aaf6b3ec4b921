# spanrender:header:start
#
#   project      : SpanRender
#   file         : __init__.py
#   file_relpath : src/spanrender/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""SpanRender package.

SpanRender turns compiler-style diagnostics (a level, a message, labelled source
spans and notes) into annotated source snippets, as rows of semantically styled
text. A small click CLI renders diagnostics against files on disk.
"""

from __future__ import annotations

# Configuration first: the output package's color helpers depend on it.
from spanrender.config import RenderConfig, RenderMode
from spanrender.diagnostic import DiagnosticBuilder, DiagnosticMessage, Level
from spanrender.rendering import render_diagnostic
from spanrender.source import CodeMap, Span

__all__ = [
    "CodeMap",
    "DiagnosticBuilder",
    "DiagnosticMessage",
    "Level",
    "RenderConfig",
    "RenderMode",
    "Span",
    "render_diagnostic",
]
