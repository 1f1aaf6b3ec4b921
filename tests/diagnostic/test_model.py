# spanrender:header:start
#
#   project      : SpanRender
#   file         : test_model.py
#   file_relpath : tests/diagnostic/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

# pyright: strict

"""Unit tests for `Level`, `DiagnosticBuilder` and `DiagnosticMessage`."""

from __future__ import annotations

import dataclasses

import pytest

from spanrender.diagnostic.level import Level
from spanrender.diagnostic.model import DiagnosticBuilder, DiagnosticMessage, SpanLabelError
from spanrender.source.span import Span
from tests.conftest import make_codemap


@pytest.mark.parametrize(
    ("level", "display"),
    [
        (Level.BUG, "error: internal compiler error"),
        (Level.FATAL, "error"),
        (Level.PHASE_FATAL, "error"),
        (Level.ERROR, "error"),
        (Level.WARNING, "warning"),
        (Level.NOTE, "note"),
        (Level.HELP, "help"),
    ],
)
def test_level_display(level: Level, display: str) -> None:
    assert level.display == display


def test_cancelled_has_no_display() -> None:
    with pytest.raises(ValueError):
        _ = Level.CANCELLED.display


def test_primary_flag_follows_span_equality() -> None:
    codemap = make_codemap(("a.rs", "abc def"))
    primary = Span(0, 3)
    msg: DiagnosticMessage = (
        DiagnosticBuilder(Level.ERROR, "m", primary, codemap=codemap)
        .add_span_label(Span(0, 3), "again")
        .add_span_label(Span(4, 7))
        .add_span_label(primary, "twice")
        .freeze()
    )

    assert [sl.is_primary for sl in msg.span_labels] == [True, False, True]
    assert [sl.label for sl in msg.primary_labels()] == ["again", "twice"]


def test_label_without_span_is_rejected() -> None:
    codemap = make_codemap(("a.rs", "abc"))
    builder = DiagnosticBuilder(Level.ERROR, "m", Span(0, 1), codemap=codemap)

    with pytest.raises(SpanLabelError):
        builder.add_span_label(None, "orphan")
    assert builder.span_labels == []


def test_freeze_snapshot_is_immutable_and_detached() -> None:
    codemap = make_codemap(("a.rs", "abc"))
    builder = DiagnosticBuilder(Level.WARNING, "m", Span(0, 1), codemap=codemap, error_code="W1")
    builder.add_note("first")
    msg: DiagnosticMessage = builder.freeze()

    builder.add_note("second")

    assert msg.notes == ("first",)
    assert msg.error_code == "W1"
    with pytest.raises(dataclasses.FrozenInstanceError):
        msg.primary_msg = "changed"  # type: ignore[misc]


def test_thaw_round_trips_contents() -> None:
    codemap = make_codemap(("a.rs", "abc"))
    msg: DiagnosticMessage = (
        DiagnosticBuilder(Level.NOTE, "m", Span(0, 1), codemap=codemap)
        .add_span_label(Span(0, 1), "x")
        .add_note("n")
        .freeze()
    )

    again: DiagnosticMessage = msg.thaw().add_note("more").freeze()

    assert again.span_labels == msg.span_labels
    assert again.notes == ("n", "more")
    assert again.codemap is codemap
