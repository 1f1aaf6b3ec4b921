# spanrender:header:start
#
#   project      : SpanRender
#   file         : cli_types.py
#   file_relpath : src/spanrender/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Custom Click parameter types for the SpanRender CLI."""

from __future__ import annotations

from enum import Enum
from typing import Generic, NoReturn, TypeVar

import click

from spanrender.cli.spans import SpanSpec, SpanSpecError, parse_span_spec

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [str(e.value) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Converts a string to a member of the Enum (case-insensitive)."""
        if isinstance(value, self.enum_cls):
            return value

        lookup: dict[str, E] = {str(choice.value).lower(): choice for choice in self.enum_cls}
        key: str = str(value).lower()
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )


class SpanSpecParam(click.ParamType):
    """Click parameter type for span arguments (see `spanrender.cli.spans`)."""

    name: str = "span"

    def __init__(self, *, allow_label: bool = False) -> None:
        self.allow_label = allow_label

    def convert(
        self,
        value: str | SpanSpec,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> SpanSpec:
        """Parse ``value`` into a `SpanSpec`."""
        if isinstance(value, SpanSpec):
            return value
        try:
            return parse_span_spec(value, allow_label=self.allow_label)
        except SpanSpecError as exc:
            self.fail(str(exc), param, ctx)
