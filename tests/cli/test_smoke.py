# spanrender:header:start
#
#   project      : SpanRender
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""CLI smoke tests: group help, `version`, and span argument parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from spanrender.cli.spans import SpanSpec, SpanSpecError, parse_span_spec
from spanrender.constants import SPANRENDER_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
def test_no_subcommand_prints_hint_and_help() -> None:
    result: Result = run_cli(["--no-color"])

    assert_SUCCESS(result)
    assert "Hint: use 'spanrender render" in result.output
    assert "render" in result.output
    assert "version" in result.output


@mark_cli
def test_version() -> None:
    result: Result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == SPANRENDER_VERSION


@pytest.mark.parametrize(
    ("text", "allow_label", "expected"),
    [
        ("3:7", False, SpanSpec(offsets=(3, 7))),
        ("a.rs@3:7", False, SpanSpec(file="a.rs", offsets=(3, 7))),
        ("~vec", False, SpanSpec(needle="vec")),
        ("~vec#2", False, SpanSpec(needle="vec", occurrence=2)),
        ("b.rs@~x@y#1", False, SpanSpec(file="b.rs", needle="x@y", occurrence=1)),
        ("~a=b", False, SpanSpec(needle="a=b")),
        ("~vec#1=the label", True, SpanSpec(needle="vec", occurrence=1, label="the label")),
        ("0:0=", True, SpanSpec(offsets=(0, 0), label="")),
    ],
)
def test_parse_span_spec(text: str, allow_label: bool, expected: SpanSpec) -> None:
    assert parse_span_spec(text, allow_label=allow_label) == expected


@pytest.mark.parametrize("text", ["", "abc", "5:2", "@1:2", "~", "1:2:3"])
def test_parse_span_spec_rejects(text: str) -> None:
    with pytest.raises(SpanSpecError):
        parse_span_spec(text)
