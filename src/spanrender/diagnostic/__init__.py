# spanrender:header:start
#
#   project      : SpanRender
#   file         : __init__.py
#   file_relpath : src/spanrender/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Diagnostic primitives.

Design:
    - A tool collects labels and notes on a mutable `DiagnosticBuilder`.
    - `DiagnosticBuilder.freeze` returns an immutable `DiagnosticMessage`, which is
      what the snippet renderer consumes.
"""

from __future__ import annotations

from spanrender.diagnostic.level import Level
from spanrender.diagnostic.model import (
    DiagnosticBuilder,
    DiagnosticMessage,
    SpanLabel,
    SpanLabelError,
)

__all__ = [
    "DiagnosticBuilder",
    "DiagnosticMessage",
    "Level",
    "SpanLabel",
    "SpanLabelError",
]
