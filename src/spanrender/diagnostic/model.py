# spanrender:header:start
#
#   project      : SpanRender
#   file         : model.py
#   file_relpath : src/spanrender/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Diagnostic value objects and their builder.

Sections:
    * SpanLabel: one annotation request (span, primary flag, optional text).
    * DiagnosticBuilder: mutable, append-only builder used while a tool collects
      labels and notes for a diagnostic.
    * DiagnosticMessage: immutable snapshot produced by `DiagnosticBuilder.freeze`;
      this is the only form the renderer accepts.

A label is primary when its span equals the diagnostic's primary span. The flag
is derived, never passed explicitly, so labelling the primary span twice yields
two primary labels.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from spanrender.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from spanrender.config.logging import SpanRenderLogger
    from spanrender.diagnostic.level import Level
    from spanrender.source.codemap import CodeMap
    from spanrender.source.span import Span


logger: SpanRenderLogger = get_logger(__name__)


class SpanLabelError(ValueError):
    """Raised when a span label is requested without a span."""


@dataclass(frozen=True, slots=True)
class SpanLabel:
    """One annotation request attached to a diagnostic.

    Attributes:
        span (Span): The annotated source range.
        is_primary (bool): True when ``span`` equals the diagnostic's primary span.
        label (str | None): Optional text shown next to the underline.
    """

    span: Span
    is_primary: bool
    label: str | None = None


@dataclass(frozen=True, slots=True)
class DiagnosticMessage:
    """Immutable diagnostic, ready to be rendered.

    Use `DiagnosticMessage.thaw` to get a builder for further edits.
    """

    level: Level
    primary_span: Span
    primary_msg: str
    codemap: CodeMap = field(compare=False, repr=False)
    span_labels: tuple[SpanLabel, ...] = ()
    notes: tuple[str, ...] = ()
    error_code: str | None = None

    def thaw(self) -> DiagnosticBuilder:
        """Return a mutable builder seeded with this diagnostic's contents."""
        builder = DiagnosticBuilder(
            self.level,
            self.primary_msg,
            self.primary_span,
            codemap=self.codemap,
            error_code=self.error_code,
        )
        builder.span_labels.extend(self.span_labels)
        builder.notes.extend(self.notes)
        return builder

    def primary_labels(self) -> Iterator[SpanLabel]:
        """Iterate over the labels flagged primary, in insertion order."""
        return (sl for sl in self.span_labels if sl.is_primary)


class DiagnosticBuilder:
    """Mutable, append-only builder for a `DiagnosticMessage`.

    Example:
        ```python
        msg = (
            DiagnosticBuilder(Level.ERROR, "Unresolved name", span, codemap=cm, error_code="E123")
            .add_span_label(span, "primary message")
            .add_note("did you mean `vec2`?")
            .freeze()
        )
        ```
    """

    def __init__(
        self,
        level: Level,
        message: str,
        primary_span: Span,
        *,
        codemap: CodeMap,
        error_code: str | None = None,
    ) -> None:
        self.level: Level = level
        self.primary_msg: str = message
        self.primary_span: Span = primary_span
        self.codemap: CodeMap = codemap
        self.error_code: str | None = error_code
        self.span_labels: list[SpanLabel] = []
        self.notes: list[str] = []

    def add_span_label(self, span: Span | None, label: str | None = None) -> DiagnosticBuilder:
        """Attach a label to ``span``.

        Args:
            span (Span | None): The annotated range; must not be None.
            label (str | None): Optional text displayed with the underline.

        Returns:
            DiagnosticBuilder: This builder, for chaining.

        Raises:
            SpanLabelError: If ``span`` is None.
        """
        if span is None:
            raise SpanLabelError(f"Span label {label!r} has no span")
        span_label = SpanLabel(span=span, is_primary=span == self.primary_span, label=label)
        self.span_labels.append(span_label)
        logger.trace(
            "Adding %s label at %s: %r",
            "primary" if span_label.is_primary else "secondary",
            span,
            label,
        )
        return self

    def add_note(self, text: str) -> DiagnosticBuilder:
        """Append a free-text note rendered after the source snippets.

        Args:
            text (str): The note text.

        Returns:
            DiagnosticBuilder: This builder, for chaining.
        """
        self.notes.append(text)
        logger.trace("Adding note: %r", text)
        return self

    def freeze(self) -> DiagnosticMessage:
        """Return an immutable snapshot of this builder."""
        return DiagnosticMessage(
            level=self.level,
            primary_span=self.primary_span,
            primary_msg=self.primary_msg,
            codemap=self.codemap,
            span_labels=tuple(self.span_labels),
            notes=tuple(self.notes),
            error_code=self.error_code,
        )
