# spanrender:header:start
#
#   project      : SpanRender
#   file         : test_render.py
#   file_relpath : tests/cli/test_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""CLI tests: `render` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from spanrender.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

FOO_SOURCE: str = "\nfn foo() {\n    vec.push(vec.pop().unwrap());\n}\n"

EXPECTED_NOTES: str = (
    "error: Not sure what this is [E123]\n"
    " --> foo.rs:3:13\n"
    "  |>\n"
    "3 |>    vec.push(vec.pop().unwrap());\n"
    "  |>    ---      ^^^ primary message\n"
    "  |>    |\n"
    "  |>    secondary message\n"
    "  |>\n"
    "  => note: Are you sure you want to call it `vec`?\n"
)


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A temporary directory holding ``foo.rs``, with color env vars cleared."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    (tmp_path / "foo.rs").write_text(FOO_SOURCE, encoding="utf-8")
    return tmp_path


@mark_cli
def test_render_by_needle(project: Path) -> None:
    result: Result = run_cli_in(
        project,
        [
            "render",
            "foo.rs",
            "--primary",
            "~vec#1",
            "--primary-label",
            "primary message",
            "--label",
            "~vec=secondary message",
            "--note",
            "Are you sure you want to call it `vec`?",
            "-m",
            "Not sure what this is",
            "--code",
            "E123",
        ],
    )

    assert_SUCCESS(result)
    assert result.output == EXPECTED_NOTES


@mark_cli
def test_render_by_offsets_with_file_prefix(project: Path) -> None:
    # "vec" on line 3 starts at byte 16 of the file
    result: Result = run_cli_in(
        project,
        ["render", "foo.rs", "--primary", "foo.rs@16:19", "--level", "warning", "-m", "w"],
    )

    assert_SUCCESS(result)
    assert result.output == (
        "warning: w\n --> foo.rs:3:4\n  |>\n3 |>    vec.push(vec.pop().unwrap());\n"
        "  |>    ^^^\n"
    )


@mark_cli
def test_old_school_flag(project: Path) -> None:
    result: Result = run_cli_in(
        project,
        ["render", "foo.rs", "--primary", "~vec.pop()", "--old-school", "-m", "x"],
    )

    assert_SUCCESS(result)
    assert result.output.splitlines()[-1] == "  |>             ^~~~~~~~~"


@mark_cli
def test_old_school_from_config_file(project: Path) -> None:
    (project / "spanrender.toml").write_text('mode = "old_school"\n', encoding="utf-8")

    result: Result = run_cli_in(
        project,
        ["render", "foo.rs", "--primary", "~vec", "--primary-label", "ignored", "-m", "x"],
    )

    assert_SUCCESS(result)
    assert result.output.splitlines()[-1] == "  |>    ^~~"


@mark_cli
def test_color_always_emits_ansi(project: Path) -> None:
    result: Result = run_cli_in(
        project,
        ["--color", "always", "render", "foo.rs", "--primary", "~vec", "-m", "x"],
    )

    assert_SUCCESS(result)
    assert "\x1b[" in result.output


@mark_cli
def test_missing_file_exit_code(project: Path) -> None:
    result: Result = run_cli_in(project, ["render", "nope.rs", "--primary", "0:1", "-m", "x"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND


@mark_cli
def test_unresolvable_span_is_usage_error(project: Path) -> None:
    result: Result = run_cli_in(project, ["render", "foo.rs", "--primary", "~vec#9", "-m", "x"])

    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "occurrences" in result.output


@mark_cli
def test_span_past_end_of_file_is_usage_error(project: Path) -> None:
    result: Result = run_cli_in(project, ["render", "foo.rs", "--primary", "0:999", "-m", "x"])

    assert result.exit_code == ExitCode.USAGE_ERROR


@mark_cli
def test_malformed_span_is_rejected_by_click(project: Path) -> None:
    result: Result = run_cli_in(project, ["render", "foo.rs", "--primary", "abc", "-m", "x"])

    assert result.exit_code == 2
    assert "Invalid span" in result.output


@mark_cli
def test_invalid_config_value_exit_code(project: Path) -> None:
    (project / "spanrender.toml").write_text('mode = "fancy"\n', encoding="utf-8")

    result: Result = run_cli_in(project, ["render", "foo.rs", "--primary", "~vec", "-m", "x"])

    assert result.exit_code == ExitCode.CONFIG_ERROR


@mark_cli
def test_cancelled_level_is_usage_error(project: Path) -> None:
    result: Result = run_cli_in(
        project,
        ["render", "foo.rs", "--primary", "~vec", "--level", "cancelled", "-m", "x"],
    )

    assert result.exit_code == ExitCode.USAGE_ERROR


@mark_cli
def test_verbose_and_quiet_conflict(project: Path) -> None:
    result: Result = run_cli_in(
        project, ["-v", "-q", "render", "foo.rs", "--primary", "~vec", "-m", "x"]
    )

    assert result.exit_code == ExitCode.USAGE_ERROR
