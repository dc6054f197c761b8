# topmark:header:start
#
#   project      : TagTint
#   file         : test_parser.py
#   file_relpath : tests/markup/test_parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup parser: node tree shape, entities, and syntax errors."""

from __future__ import annotations

import pytest

from tagtint.markup.errors import MarkupSyntaxError
from tagtint.markup.nodes import Attribute, ElementNode, TextNode
from tagtint.markup.parser import escape, parse_markup


def test_bare_text_becomes_single_text_node() -> None:
    """Text without tags is wrapped in the synthetic root as one text node."""
    root = parse_markup("hello world")

    assert root.name == ""
    assert root.children == [TextNode("hello world")]


def test_empty_markup_has_no_children() -> None:
    """Empty input parses to an empty root."""
    assert parse_markup("").children == []


def test_multiple_top_level_siblings_keep_source_order() -> None:
    """Top-level text and elements are children of the root, in order."""
    root = parse_markup("a<x>b</x>c<y />d")

    kinds = [type(child).__name__ for child in root.children]
    assert kinds == ["TextNode", "ElementNode", "TextNode", "ElementNode", "TextNode"]
    assert root.children[1] == ElementNode("x", [], [TextNode("b")], position=1)
    assert root.children[3] == ElementNode("y", [], [], position=10)


def test_nested_elements() -> None:
    """Children are nested under their parent element."""
    root = parse_markup("<c f='red'>A<c f='blue'>B</c>C</c>")

    outer = root.children[0]
    assert isinstance(outer, ElementNode)
    assert outer.name == "c"
    assert [type(child) for child in outer.children] == [TextNode, ElementNode, TextNode]
    inner = outer.children[1]
    assert isinstance(inner, ElementNode)
    assert inner.children == [TextNode("B")]


def test_attributes_keep_order_value_and_raw_text() -> None:
    """Attributes keep source order, decoded value, and exact source text."""
    root = parse_markup("""<tag b="2" a='x &amp; y'   z = '3'/>""")

    element = root.children[0]
    assert isinstance(element, ElementNode)
    assert element.attributes == [
        Attribute("b", "2", 'b="2"'),
        Attribute("a", "x & y", "a='x &amp; y'"),
        Attribute("z", "3", "z = '3'"),
    ]
    assert element.children == []


def test_find_attribute_case_handling() -> None:
    """`find_attribute` is case-sensitive unless asked otherwise."""
    element = parse_markup("<C F='Red'/>").children[0]
    assert isinstance(element, ElementNode)

    assert element.find_attribute("f") is None
    found = element.find_attribute("f", ignore_case=True)
    assert found is not None and found.value == "Red"


def test_entities_are_decoded_in_text() -> None:
    """Predefined and numeric entities are decoded."""
    root = parse_markup("&lt;b&gt; &amp; &quot;&apos; &#65;&#x42;")

    assert root.children == [TextNode("<b> & \"' AB")]


def test_greater_than_is_allowed_in_text() -> None:
    """A bare '>' is plain text."""
    assert parse_markup("a > b").children == [TextNode("a > b")]


def test_whitespace_only_text_is_preserved() -> None:
    """Whitespace between elements is kept."""
    root = parse_markup("<c f='red'>A</c> <c f='blue'>B</c>")

    assert root.children[1] == TextNode(" ")


def test_line_endings_are_normalized() -> None:
    """CRLF and CR become LF."""
    assert parse_markup("a\r\nb\rc").children == [TextNode("a\nb\nc")]


def test_comment_is_kept_verbatim() -> None:
    """Comments are reproduced literally as text."""
    root = parse_markup("a<!-- note -->b")

    assert root.children == [TextNode("a"), TextNode("<!-- note -->"), TextNode("b")]


def test_cdata_content_is_text() -> None:
    """CDATA content becomes text without entity decoding."""
    root = parse_markup("<![CDATA[<c f='red'> &amp;]]>")

    assert root.children == [TextNode("<c f='red'> &amp;")]


def test_deep_nesting_does_not_recurse() -> None:
    """Thousands of nested elements parse without hitting the recursion limit."""
    depth = 5000
    root = parse_markup("<x>" * depth + "deep" + "</x>" * depth)

    node: ElementNode = root
    for _ in range(depth):
        child = node.children[0]
        assert isinstance(child, ElementNode)
        node = child
    assert node.children == [TextNode("deep")]


def test_escape_round_trips_through_parser() -> None:
    """Escaped text parses back to the original text."""
    raw = "<c f='red'> & </c>"

    assert parse_markup(escape(raw)).children == [TextNode(raw)]


@pytest.mark.parametrize(
    ("markup", "message"),
    [
        ("<c f='red'>oops", "Unclosed tag <c>"),
        ("oops</c>", "Unexpected closing tag </c>"),
        ("<a><b></a></b>", "Mismatched closing tag </a>, expected </b>"),
        ("1 < 2", "'<' does not start a valid tag"),
        ("<a b='1' b='2'/>", "Duplicate attribute 'b' in <a>"),
        ("<a b=1/>", "Malformed attribute or unterminated tag <a>"),
        ("<a b='1'c='2'/>", "Malformed attribute or unterminated tag <a>"),
        ("<a", "Malformed attribute or unterminated tag <a>"),
        ("</ a>", "Malformed closing tag"),
        ("fish & chips", "Invalid entity reference"),
        ("&nbsp;", "Undefined entity '&nbsp;'"),
        ("&#0;", "Invalid character reference '&#0;'"),
        ("&#x110000;", "Invalid character reference '&#x110000;'"),
        ("<!-- a -- b -->", "'--' is not allowed inside a comment"),
        ("<!-- open", "Unterminated comment"),
        ("<![CDATA[open", "Unterminated CDATA section"),
        ("<?xml version='1.0'?>", "Unsupported markup declaration"),
        ("<!DOCTYPE x>", "Unsupported markup declaration"),
        ("bell\x07", "Invalid character U+0007 in markup"),
    ],
)
def test_malformed_markup_raises(markup: str, message: str) -> None:
    """Malformed markup raises `MarkupSyntaxError` with a precise message."""
    with pytest.raises(MarkupSyntaxError) as excinfo:
        parse_markup(markup)

    assert excinfo.value.message.startswith(message)


def test_syntax_error_reports_line_and_column() -> None:
    """Errors carry the offset plus 1-based line and column."""
    markup = "first line\nsecond <c f='red'>open"
    with pytest.raises(MarkupSyntaxError) as excinfo:
        parse_markup(markup)

    err = excinfo.value
    assert err.position == markup.index("<c")
    assert (err.line, err.column) == (2, 8)
    assert "line 2, column 8" in str(err)
    assert err.excerpt().splitlines() == ["second <c f='red'>open", "       ^"]


def test_syntax_error_is_a_value_error() -> None:
    """`MarkupSyntaxError` can be caught as `ValueError`."""
    with pytest.raises(ValueError):
        parse_markup("<a>")
