# topmark:header:start
#
#   project      : TagTint
#   file         : test_resolver.py
#   file_relpath : tests/markup/test_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tree resolution: color scopes, restore values and passthrough elements."""

from __future__ import annotations

from tagtint.markup.parser import parse_markup
from tagtint.markup.resolver import is_color_scope, open_scope, resolve_tree
from tagtint.rendering.api import parse
from tagtint.rendering.colors import ColorAxis, TerminalColor
from tagtint.rendering.operations import EmitText, SetColor
from tagtint.rendering.program import RenderProgram
from tests.conftest import rendered_spans, texts

FG = ColorAxis.FOREGROUND
BG = ColorAxis.BACKGROUND
RED = TerminalColor.RED
BLUE = TerminalColor.BLUE


def test_single_scope_operations() -> None:
    """A color scope pushes, emits its text, then restores the default."""
    program = parse("<c f='red'>hi</c>")

    assert program.operations == (
        SetColor(FG, RED),
        EmitText("hi"),
        SetColor(FG, None),
    )


def test_nested_scopes_restore_one_level_at_a_time() -> None:
    """Inner scopes restore the outer color, not the default."""
    program = parse("<c f='red'>A<c f='blue'>B</c>C</c>")

    assert program.operations == (
        SetColor(FG, RED),
        EmitText("A"),
        SetColor(FG, BLUE),
        EmitText("B"),
        SetColor(FG, RED),
        EmitText("C"),
        SetColor(FG, None),
    )
    assert rendered_spans("<c f='red'>A<c f='blue'>B</c>C</c>") == [
        ("A", RED, None),
        ("B", BLUE, None),
        ("C", RED, None),
    ]


def test_background_only_scope_leaves_foreground_alone() -> None:
    """A ``b`` attribute touches the background axis only."""
    program = parse("<c b='darkblue'>x</c>")

    assert program.operations == (
        SetColor(BG, TerminalColor.DARK_BLUE),
        EmitText("x"),
        SetColor(BG, None),
    )


def test_both_axes_are_pushed_and_restored() -> None:
    """Foreground and background set in one element both unwind on close."""
    spans = rendered_spans("<c f='yellow' b='darkred'>warn</c> after")

    assert spans == [
        ("warn", TerminalColor.YELLOW, TerminalColor.DARK_RED),
        (" after", None, None),
    ]


def test_scope_restores_initial_terminal_colors() -> None:
    """Outermost scopes restore the colors the terminal had before rendering."""
    spans = rendered_spans(
        "<c f='red'>x</c>y",
        initial_foreground=TerminalColor.GREEN,
        initial_background=TerminalColor.BLACK,
    )

    assert spans == [
        ("x", RED, TerminalColor.BLACK),
        ("y", TerminalColor.GREEN, TerminalColor.BLACK),
    ]


def test_redundant_color_changes_are_not_elided() -> None:
    """Setting the color already in effect still produces operations."""
    program = parse("<c f='red'><c f='red'>x</c></c>")

    assert program.operations == (
        SetColor(FG, RED),
        SetColor(FG, RED),
        EmitText("x"),
        SetColor(FG, RED),
        SetColor(FG, None),
    )


def test_tag_and_keys_are_case_insensitive() -> None:
    """``C``, ``F`` and color names match regardless of case and padding."""
    program = parse("<C F=' DarkCyan '>x</C>")

    assert program.operations[0] == SetColor(FG, TerminalColor.DARK_CYAN)


def test_unknown_color_is_ignored() -> None:
    """An unrecognized color name leaves its axis untouched."""
    program = parse("<c f='purple' b='red'>x</c>")

    assert program.operations == (
        SetColor(BG, RED),
        EmitText("x"),
        SetColor(BG, None),
    )


def test_unknown_colors_only_produce_text() -> None:
    """A scope with no recognized color emits just its content."""
    program = parse("<c f='nope'>x</c>")

    assert program.operations == (EmitText("x"),)


def test_passthrough_element_with_children() -> None:
    """Other elements are reproduced as literal tags around their content."""
    program = parse("<foo a='1'>bar</foo>")

    assert texts(program.operations) == "<foo a='1'>bar</foo>"
    assert not any(isinstance(op, SetColor) for op in program.operations)


def test_passthrough_element_without_children_is_self_closing() -> None:
    """An empty element is written back in self-closing form."""
    assert texts(parse("<tag></tag>").operations) == "<tag />"
    assert texts(parse("<tag x=\"1\" y='2'/>").operations) == "<tag x=\"1\" y='2' />"


def test_bare_c_is_passthrough() -> None:
    """``<c>`` without ``f`` or ``b`` is not a color scope."""
    program = parse("<c>x</c>")

    assert texts(program.operations) == "<c>x</c>"


def test_passthrough_attributes_keep_source_text() -> None:
    """Passthrough attributes are emitted as written, entities included."""
    program = parse("<a href='x&amp;y'>go</a>")

    assert texts(program.operations) == "<a href='x&amp;y'>go</a>"


def test_scope_inside_passthrough() -> None:
    """Color scopes nested in a passthrough element still apply."""
    spans = rendered_spans("<b><c f='red'>x</c></b>")

    assert ("x", RED, None) in spans
    assert "".join(text for text, _, _ in spans) == "<b>x</b>"


def test_is_color_scope() -> None:
    """Only ``c`` elements with an ``f`` or ``b`` attribute are scopes."""
    root = parse_markup("<c f='red'/><c/><c x='1'/><d f='red'/><c B='red'/>")
    flags = [is_color_scope(child) for child in root.children]  # type: ignore[arg-type]

    assert flags == [True, False, False, False, True]


def test_open_scope_records_restore_values() -> None:
    """`open_scope` remembers the previous color of each pushed axis."""
    element = parse_markup("<c f='red' b='blue'/>").children[0]
    program = RenderProgram(foreground=TerminalColor.GRAY)

    scope = open_scope(element, program)  # type: ignore[arg-type]

    assert scope.pushed == (FG, BG)
    assert scope.restore == {FG: TerminalColor.GRAY, BG: None}


def test_resolve_tree_returns_program() -> None:
    """`resolve_tree` appends to and returns the given program."""
    program = RenderProgram()

    assert resolve_tree(parse_markup("x"), program) is program
    assert program.operations == (EmitText("x"),)


def test_deep_scopes_do_not_recurse() -> None:
    """Thousands of nested scopes resolve without hitting the recursion limit."""
    depth = 3000
    markup = "<c f='red'>" * depth + "x" + "</c>" * depth

    program = parse(markup)

    assert len(program) == 2 * depth + 1
    assert program.foreground is None
