# topmark:header:start
#
#   project      : TagTint
#   file         : test_colors.py
#   file_relpath : tests/rendering/test_colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the terminal color enums."""

from __future__ import annotations

import pytest

from tagtint.rendering.colors import ColorAxis, TerminalColor, describe_color

MARKUP_NAMES = [
    "black",
    "darkblue",
    "darkgreen",
    "darkcyan",
    "darkred",
    "darkmagenta",
    "darkyellow",
    "gray",
    "darkgray",
    "blue",
    "green",
    "cyan",
    "red",
    "magenta",
    "yellow",
    "white",
]


def test_sixteen_colors_in_canonical_order() -> None:
    assert [color.value for color in TerminalColor] == MARKUP_NAMES


@pytest.mark.parametrize("name", MARKUP_NAMES)
def test_lookup_every_name(name: str) -> None:
    color = TerminalColor.lookup(name)

    assert color is not None
    assert color.value == name
    assert color == name


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("DarkRed", TerminalColor.DARK_RED),
        ("  yellow ", TerminalColor.YELLOW),
        ("GRAY", TerminalColor.GRAY),
        ("grey", None),
        ("dark red", None),
        ("9", None),
        ("", None),
    ],
)
def test_lookup_normalization(raw: str, expected: TerminalColor | None) -> None:
    """Lookup ignores case and padding but accepts names only."""
    assert TerminalColor.lookup(raw) is expected


@pytest.mark.parametrize(
    ("color", "ansi_name"),
    [
        (TerminalColor.DARK_BLUE, "blue"),
        (TerminalColor.BLUE, "bright_blue"),
        (TerminalColor.GRAY, "white"),
        (TerminalColor.DARK_GRAY, "bright_black"),
        (TerminalColor.WHITE, "bright_white"),
        (TerminalColor.BLACK, "black"),
    ],
)
def test_ansi_names(color: TerminalColor, ansi_name: str) -> None:
    assert color.ansi_name == ansi_name


def test_color_axis_keys() -> None:
    assert ColorAxis.FOREGROUND.key == "f"
    assert ColorAxis.BACKGROUND.key == "b"
    assert [axis.value for axis in ColorAxis] == ["foreground", "background"]


def test_describe_color() -> None:
    assert describe_color(None) == "default"
    assert describe_color(TerminalColor.DARK_CYAN) == "darkcyan"
