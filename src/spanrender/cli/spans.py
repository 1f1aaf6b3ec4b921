# spanrender:header:start
#
#   project      : SpanRender
#   file         : spans.py
#   file_relpath : src/spanrender/cli/spans.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Span arguments given on the command line.

Grammar (``FILE@`` is optional and defaults to the first input file)::

    SPAN  := [FILE@]LO:HI          byte offsets relative to the file start
           | [FILE@]~NEEDLE[#N]    N-th occurrence (0-based) of NEEDLE
    LABEL := SPAN[=TEXT]

Parsing is separate from resolution: `parse_span_spec` only reads the text,
`resolve_span_spec` needs the loaded `CodeMap`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from spanrender.source.span import Span

if TYPE_CHECKING:
    from spanrender.source.codemap import CodeMap, SourceFile

_OFFSETS_RE: re.Pattern[str] = re.compile(r"^(?P<lo>\d+):(?P<hi>\d+)$")
_OCCURRENCE_RE: re.Pattern[str] = re.compile(r"^(?P<needle>.+?)#(?P<n>\d+)$")


class SpanSpecError(ValueError):
    """Raised when a span argument cannot be parsed or resolved."""


@dataclass(frozen=True, slots=True)
class SpanSpec:
    """A parsed, not yet resolved, span argument.

    Exactly one of ``offsets`` and ``needle`` is set.

    Attributes:
        file (str | None): Target file name, or None for the default file.
        offsets (tuple[int, int] | None): File-relative ``(lo, hi)`` byte offsets.
        needle (str | None): Text to search for.
        occurrence (int): Which match of ``needle`` to use (0-based).
        label (str | None): Label text after ``=``, for ``--label`` arguments.
    """

    file: str | None = None
    offsets: tuple[int, int] | None = None
    needle: str | None = None
    occurrence: int = 0
    label: str | None = None


def parse_span_spec(text: str, *, allow_label: bool = False) -> SpanSpec:
    """Parse one span argument.

    With ``allow_label``, everything after the first ``=`` is label text.

    Raises:
        SpanSpecError: If ``text`` does not follow the span grammar.
    """
    label: str | None = None
    body: str = text
    if allow_label and "=" in text:
        body, _, label = text.partition("=")

    file_name: str | None = None
    if "@" in body and not body.startswith("~"):
        file_name, _, body = body.partition("@")
        if not file_name:
            raise SpanSpecError(f"Empty file name in span {text!r}")

    if body.startswith("~"):
        needle: str = body[1:]
        occurrence: int = 0
        match: re.Match[str] | None = _OCCURRENCE_RE.match(needle)
        if match:
            needle, occurrence = match["needle"], int(match["n"])
        if not needle:
            raise SpanSpecError(f"Empty search text in span {text!r}")
        return SpanSpec(file=file_name, needle=needle, occurrence=occurrence, label=label)

    match = _OFFSETS_RE.match(body)
    if match is None:
        raise SpanSpecError(f"Invalid span {text!r}; expected [FILE@]LO:HI or [FILE@]~NEEDLE[#N]")
    lo, hi = int(match["lo"]), int(match["hi"])
    if lo > hi:
        raise SpanSpecError(f"Span start exceeds end in {text!r}")
    return SpanSpec(file=file_name, offsets=(lo, hi), label=label)


def resolve_span_spec(spec: SpanSpec, codemap: CodeMap, default_file: SourceFile) -> Span:
    """Turn ``spec`` into a global `Span` within ``codemap``.

    Raises:
        SpanSpecError: If the file is unknown, the offsets run past the end of the
            file, or the search text has too few matches.
    """
    source_file: SourceFile | None = default_file
    if spec.file is not None:
        source_file = codemap.get_file(spec.file)
        if source_file is None:
            raise SpanSpecError(f"Span refers to unknown file {spec.file!r}")

    if spec.offsets is not None:
        lo, hi = spec.offsets
        size: int = source_file.end_pos - source_file.start_pos
        if hi > size:
            raise SpanSpecError(
                f"Span {lo}:{hi} runs past the end of {source_file.name} ({size} bytes)"
            )
        return Span(source_file.start_pos + lo, source_file.start_pos + hi)

    try:
        return codemap.find_span(source_file, spec.needle or "", spec.occurrence)
    except ValueError as exc:
        raise SpanSpecError(str(exc)) from exc
