# spanrender:header:start
#
#   project      : SpanRender
#   file         : test_snippet.py
#   file_relpath : tests/rendering/test_snippet.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

# pyright: strict

"""End-to-end layout tests for `render_diagnostic`.

Expected outputs are plain text; styles are checked separately where they matter.
"""

from __future__ import annotations

import pytest

from spanrender.config.model import RenderConfig, RenderMode
from spanrender.diagnostic.level import Level
from spanrender.diagnostic.model import DiagnosticBuilder
from spanrender.rendering.annotations import FileWithAnnotatedLines
from spanrender.rendering.snippet import move_primary_file_first, render_diagnostic
from spanrender.rendering.styles import LevelStyle, Style, StyledString
from spanrender.source.span import Span
from tests.conftest import make_codemap, render_text

ELLIPSIS_SOURCE: str = """
fn foo() {
    //blah blah
    //blah blah
    vec.pop();
    //blah blah
    //blah blah
    //blah blah
    //blah blah
    //blah blah
    //blah blah
    //blah blah
    //blah blah
    //blah blah
    vec.push(vec.pop().unwrap());
}
"""

WARNING_SOURCE: str = """
fn foo() {
    vec.push(1);
    vec.push(2);
    vec.push(3);
    vec.push(4);
    vec.push(5);
    vec.push(6);
}
"""

FOO_SOURCE: str = """
fn foo() {
    vec.push(vec.pop().unwrap());
}
"""

BAR_SOURCE: str = """
fn bar() {
    //comment line
    //comment line
    //comment line
    //comment line
    //comment line
    //comment line
    //comment line
    //comment line
    //comment line
    vec2.push(vec2.pop().unwrap());
}
"""


def test_ellipsis_between_distant_lines() -> None:
    codemap = make_codemap(("foo.rs", ELLIPSIS_SOURCE))
    foo = codemap.files[0]
    secondary: Span = codemap.find_span(foo, "vec", 0)
    primary: Span = codemap.find_span(foo, "vec", 1)
    msg = (
        DiagnosticBuilder(
            Level.ERROR, "Unresolved name", primary, codemap=codemap, error_code="E123"
        )
        .add_span_label(primary, "primary message")
        .add_span_label(secondary, "secondary message")
        .freeze()
    )

    assert render_text(msg) == (
        "error: Unresolved name [E123]\n"
        "  --> foo.rs:15:4\n"
        "   |>\n"
        "5  |>    vec.pop();\n"
        "   |>    --- secondary message\n"
        "...\n"
        "15 |>    vec.push(vec.pop().unwrap());\n"
        "   |>    ^^^ primary message\n"
    )


def test_warning_with_single_context_line() -> None:
    codemap = make_codemap(("foo.rs", WARNING_SOURCE))
    foo = codemap.files[0]
    secondary: Span = codemap.find_span(foo, "vec", 2)
    primary: Span = codemap.find_span(foo, "vec", 4)
    msg = (
        DiagnosticBuilder(
            Level.WARNING, "Not sure what this is", primary, codemap=codemap, error_code="E123"
        )
        .add_span_label(primary, "primary message")
        .add_span_label(secondary, "secondary message")
        .freeze()
    )

    assert render_text(msg) == (
        "warning: Not sure what this is [E123]\n"
        " --> foo.rs:7:4\n"
        "  |>\n"
        "5 |>    vec.push(3);\n"
        "  |>    --- secondary message\n"
        "6 |>    vec.push(4);\n"
        "7 |>    vec.push(5);\n"
        "  |>    ^^^ primary message\n"
    )


def test_gutter_aligned_across_files() -> None:
    """The widest line number in any file decides the gutter for all files."""
    codemap = make_codemap(("bar.rs", BAR_SOURCE), ("foo.rs", FOO_SOURCE))
    bar = codemap.files[0]
    foo = codemap.files[1]
    secondary: Span = codemap.find_span(foo, "vec", 0)
    primary: Span = codemap.find_span(foo, "vec", 1)
    tertiary: Span = codemap.find_span(bar, "vec2", 1)
    msg = (
        DiagnosticBuilder(
            Level.WARNING, "Not sure what this is", primary, codemap=codemap, error_code="E123"
        )
        .add_span_label(primary, "primary message")
        .add_span_label(secondary, "secondary message")
        .add_span_label(tertiary, "tertiary message")
        .freeze()
    )

    assert render_text(msg) == (
        "warning: Not sure what this is [E123]\n"
        "  --> foo.rs:3:13\n"
        "   |>\n"
        "3  |>    vec.push(vec.pop().unwrap());\n"
        "   |>    ---      ^^^ primary message\n"
        "   |>    |\n"
        "   |>    secondary message\n"
        "   |>\n"
        "  ::: bar.rs\n"
        "   |>\n"
        "12 |>    vec2.push(vec2.pop().unwrap());\n"
        "   |>              ---- tertiary message\n"
    )


def test_notes_follow_the_snippet() -> None:
    codemap = make_codemap(("foo.rs", FOO_SOURCE))
    foo = codemap.files[0]
    secondary: Span = codemap.find_span(foo, "vec", 0)
    primary: Span = codemap.find_span(foo, "vec", 1)
    msg = (
        DiagnosticBuilder(
            Level.ERROR, "Not sure what this is", primary, codemap=codemap, error_code="E123"
        )
        .add_span_label(primary, "primary message")
        .add_span_label(secondary, "secondary message")
        .add_note("Are you sure you want to call it `vec`?")
        .freeze()
    )

    lines = render_diagnostic(msg)

    assert render_text(msg) == (
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
    assert lines[-1] == [
        StyledString("  ", Style.NO_STYLE),
        StyledString("=> ", Style.LINE_NUMBER),
        StyledString("note: ", LevelStyle(Level.NOTE)),
        StyledString("Are you sure you want to call it `vec`?", Style.NO_STYLE),
    ]


def test_header_styles() -> None:
    codemap = make_codemap(("foo.rs", FOO_SOURCE))
    span: Span = codemap.find_span(codemap.files[0], "vec")
    msg = DiagnosticBuilder(
        Level.ERROR, "boom", span, codemap=codemap, error_code="E1"
    ).freeze()

    header = render_diagnostic(msg)[0]

    assert header == [
        StyledString("error", LevelStyle(Level.ERROR)),
        StyledString(": boom", Style.HEADER_MSG),
        StyledString(" [E1]", Style.ERROR_CODE),
    ]


def test_no_labels_renders_header_and_notes_only() -> None:
    codemap = make_codemap(("foo.rs", FOO_SOURCE))
    span: Span = codemap.find_span(codemap.files[0], "vec")
    msg = DiagnosticBuilder(Level.HELP, "try this", span, codemap=codemap).add_note("n").freeze()

    assert render_text(msg) == "help: try this\n  |>\n  => note: n\n"


def test_bug_level_header() -> None:
    codemap = make_codemap(("foo.rs", FOO_SOURCE))
    span: Span = codemap.find_span(codemap.files[0], "vec")
    msg = DiagnosticBuilder(Level.BUG, "oops", span, codemap=codemap).freeze()

    assert render_text(msg) == "error: internal compiler error: oops\n"


def test_cancelled_diagnostic_is_rejected() -> None:
    codemap = make_codemap(("foo.rs", FOO_SOURCE))
    span: Span = codemap.find_span(codemap.files[0], "vec")
    msg = DiagnosticBuilder(Level.CANCELLED, "x", span, codemap=codemap).freeze()

    with pytest.raises(ValueError):
        render_diagnostic(msg)


def test_overlapping_last_label_hangs_below() -> None:
    """An unlabeled ``[0, 8)`` overlapping the labeled ``[7, 10)`` pushes its label down."""
    codemap = make_codemap(("a.rs", "abcdefghijkl\n"))
    base: int = codemap.files[0].start_pos
    wide = Span(base, base + 8)
    narrow = Span(base + 7, base + 10)
    msg = (
        DiagnosticBuilder(Level.ERROR, "m", wide, codemap=codemap)
        .add_span_label(wide)
        .add_span_label(narrow, "x")
        .freeze()
    )

    assert render_text(msg) == (
        "error: m\n"
        " --> a.rs:1:0\n"
        "  |>\n"
        "1 |>abcdefghijkl\n"
        "  |>^^^^^^^---\n"
        "  |>       |\n"
        "  |>       x\n"
    )


def test_stacked_labels_step_down() -> None:
    """Each earlier label hangs one row lower than the one after it."""
    codemap = make_codemap(("a.rs", "aa bb cc dd\n"))
    source_file = codemap.files[0]
    aa: Span = codemap.find_span(source_file, "aa")
    bb: Span = codemap.find_span(source_file, "bb")
    cc: Span = codemap.find_span(source_file, "cc")
    msg = (
        DiagnosticBuilder(Level.ERROR, "m", cc, codemap=codemap)
        .add_span_label(aa, "one")
        .add_span_label(bb, "two")
        .add_span_label(cc, "three")
        .freeze()
    )

    assert render_text(msg) == (
        "error: m\n"
        " --> a.rs:1:6\n"
        "  |>\n"
        "1 |>aa bb cc dd\n"
        "  |>-- -- ^^ three\n"
        "  |>|  |\n"
        "  |>|  two\n"
        "  |>one\n"
    )


def test_zero_width_span_gets_one_marker() -> None:
    codemap = make_codemap(("a.rs", "let x;\n"))
    lo: int = codemap.find_span(codemap.files[0], ";").lo
    span = Span(lo, lo)
    msg = DiagnosticBuilder(Level.ERROR, "m", span, codemap=codemap).add_span_label(span).freeze()

    assert render_text(msg).splitlines()[-1] == "  |>     ^"


def test_minimized_span_does_not_restyle_source() -> None:
    codemap = make_codemap(("a.rs", "start\nend\n"))
    base: int = codemap.files[0].start_pos
    span = Span(base, base + 9)
    msg = DiagnosticBuilder(Level.ERROR, "m", span, codemap=codemap).add_span_label(span).freeze()

    lines = render_diagnostic(msg)

    assert [run.text for run in lines[3]] == ["1", " ", "|>", "start"]
    assert lines[3][-1].style is Style.QUOTATION
    assert "".join(run.text for run in lines[4]) == "  |>^"


def test_primary_underline_restyles_source() -> None:
    codemap = make_codemap(("a.rs", "let x;\n"))
    span: Span = codemap.find_span(codemap.files[0], "x")
    msg = DiagnosticBuilder(Level.ERROR, "m", span, codemap=codemap).add_span_label(span).freeze()

    source_row = render_diagnostic(msg)[3]

    assert StyledString("x", Style.UNDERLINE_PRIMARY) in source_row


def test_empty_last_line_renders_bare_row() -> None:
    """A label on the empty line after the final newline renders a bare numbered row."""
    codemap = make_codemap(("a.rs", "one\n"))
    source_file = codemap.files[0]
    span = Span(source_file.end_pos, source_file.end_pos)
    msg = DiagnosticBuilder(Level.ERROR, "m", span, codemap=codemap).add_span_label(span).freeze()

    assert render_text(msg) == "error: m\n --> a.rs:2:0\n  |>\n2 |>\n  |>^\n"


def test_old_school_underlines_without_labels() -> None:
    codemap = make_codemap(("foo.rs", FOO_SOURCE))
    foo = codemap.files[0]
    secondary: Span = codemap.find_span(foo, "vec", 0)
    primary: Span = codemap.find_span(foo, "vec.pop()")
    msg = (
        DiagnosticBuilder(Level.WARNING, "w", primary, codemap=codemap)
        .add_span_label(primary, "primary message")
        .add_span_label(secondary, "secondary message")
        .freeze()
    )
    config = RenderConfig(mode=RenderMode.OLD_SCHOOL)

    lines = render_diagnostic(msg, config)

    assert render_text(msg, config) == (
        "warning: w\n"
        " --> foo.rs:3:13\n"
        "  |>\n"
        "3 |>    vec.push(vec.pop().unwrap());\n"
        "  |>    ^~~      ^~~~~~~~~\n"
    )
    assert StyledString("^~~", Style.OLD_SCHOOL_NOTE) in lines[4]
    assert StyledString("^~~~~~~~~", Style.UNDERLINE_PRIMARY) in lines[4]
    assert lines[3][-1] == StyledString("    vec.push(vec.pop().unwrap());", Style.QUOTATION)


def test_move_primary_file_first_swaps() -> None:
    codemap = make_codemap(("a.rs", "a\n"), ("b.rs", "b\n"), ("c.rs", "c\n"))
    files = [FileWithAnnotatedLines(file=f) for f in codemap.files]

    move_primary_file_first(files, "c.rs")

    assert [f.file.name for f in files] == ["c.rs", "b.rs", "a.rs"]


def test_primary_file_rendered_first() -> None:
    codemap = make_codemap(("a.rs", "alpha\n"), ("b.rs", "beta\n"))
    a_span: Span = codemap.find_span(codemap.files[0], "alpha")
    b_span: Span = codemap.find_span(codemap.files[1], "beta")
    msg = (
        DiagnosticBuilder(Level.ERROR, "m", b_span, codemap=codemap)
        .add_span_label(a_span, "in a")
        .add_span_label(b_span, "in b")
        .freeze()
    )

    assert render_text(msg) == (
        "error: m\n"
        " --> b.rs:1:0\n"
        "  |>\n"
        "1 |>beta\n"
        "  |>^^^^ in b\n"
        "  |>\n"
        " ::: a.rs\n"
        "  |>\n"
        "1 |>alpha\n"
        "  |>----- in a\n"
    )
