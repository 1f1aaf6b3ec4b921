# spanrender:header:start
#
#   project      : SpanRender
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""CLI test helpers.

`run_cli_in()` changes the working directory to ``tmp_path`` before invoking the
Click group, so relative file arguments and config discovery resolve against
the temporary directory.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from spanrender.cli.exit_codes import ExitCode
from spanrender.cli.main import cli
from spanrender.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (Sequence[str]): CLI argument vector, e.g. ``["render", "a.rs", ...]``.

    Returns:
        Result: The `click.testing.Result` of the run.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(cwd)
        # The group reconfigures logging onto the runner's stderr.
        setup_logging(level=TRACE_LEVEL)


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI without changing the working directory."""
    try:
        return CliRunner().invoke(cli, list(argv))
    finally:
        setup_logging(level=TRACE_LEVEL)


def assert_SUCCESS(result: Result) -> None:  # noqa: N802
    """Assert that the run exited with `ExitCode.SUCCESS`, showing output otherwise."""
    assert result.exit_code == ExitCode.SUCCESS, result.output
