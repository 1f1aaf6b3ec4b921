# spanrender:header:start
#
#   project      : SpanRender
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Pytest configuration for the SpanRender test suite.

Sets logging to TRACE for every run so the renderer's layout decisions are
exercised, and provides small builders shared by the test modules.

Notes:
    Tests follow the builder/snapshot split: collect labels on a
    `DiagnosticBuilder`, then `freeze()` it before calling `render_diagnostic`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from spanrender.config import logging
from spanrender.rendering.snippet import render_diagnostic
from spanrender.rendering.styles import plain_text
from spanrender.source.codemap import CodeMap

if TYPE_CHECKING:
    from spanrender.config.model import RenderConfig
    from spanrender.diagnostic.model import DiagnosticMessage

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_spanrender_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure SpanRender's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_codemap(*files: tuple[str, str]) -> CodeMap:
    """Return a `CodeMap` holding ``files`` as ``(name, text)`` pairs, in order."""
    codemap = CodeMap()
    for name, text in files:
        codemap.add_file(name, text)
    return codemap


def render_text(msg: DiagnosticMessage, config: RenderConfig | None = None) -> str:
    """Render ``msg`` and return it as newline-terminated plain text."""
    return plain_text(render_diagnostic(msg, config))
