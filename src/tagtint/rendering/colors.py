# topmark:header:start
#
#   project      : TagTint
#   file         : colors.py
#   file_relpath : src/tagtint/rendering/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal color model for TagTint markup.

Key types:
    - `TerminalColor`: the 16 canonical terminal colors accepted in markup.
      Each member's `.value` is the lower-case markup name (``"darkblue"``);
      `.ansi_name` is the matching Click color name (``"blue"``), used by
      terminal surfaces that emit ANSI escape sequences.
    - `ColorAxis`: foreground or background, each bound to its markup
      attribute key (``f`` / ``b``).

Design:
    `TerminalColor` keeps `_value_` as the plain markup name and stores the
    ANSI name separately (`_ansi_name`), so Enum semantics (hashing, equality,
    `repr`) are preserved while the renderer-specific mapping stays attached
    to the member.

    Throughout TagTint, ``None`` in place of a `TerminalColor` means "the
    terminal's default color".

Example:
    ```python
    TerminalColor.lookup("DarkRed")      # TerminalColor.DARK_RED
    TerminalColor.DARK_RED.ansi_name     # 'red'
    TerminalColor.lookup("purple")       # None
    ```
"""

from __future__ import annotations

from enum import Enum


class TerminalColor(str, Enum):
    """One of the 16 named terminal colors.

    The "dark" colors map to the normal ANSI palette and the plain names to
    the bright palette; ``gray`` is normal white and ``darkgray`` bright black.
    """

    _value_: str
    _ansi_name: str

    # Value format: (markup name: str, Click color name: str)
    BLACK = ("black", "black")
    DARK_BLUE = ("darkblue", "blue")
    DARK_GREEN = ("darkgreen", "green")
    DARK_CYAN = ("darkcyan", "cyan")
    DARK_RED = ("darkred", "red")
    DARK_MAGENTA = ("darkmagenta", "magenta")
    DARK_YELLOW = ("darkyellow", "yellow")
    GRAY = ("gray", "white")
    DARK_GRAY = ("darkgray", "bright_black")
    BLUE = ("blue", "bright_blue")
    GREEN = ("green", "bright_green")
    CYAN = ("cyan", "bright_cyan")
    RED = ("red", "bright_red")
    MAGENTA = ("magenta", "bright_magenta")
    YELLOW = ("yellow", "bright_yellow")
    WHITE = ("white", "bright_white")

    def __new__(cls, text: str, ansi_name: str) -> TerminalColor:
        """Construct a color member.

        Args:
            text (str): The markup name (stored in `_value_`).
            ansi_name (str): The Click/ANSI color name.

        Returns:
            TerminalColor: The newly constructed enum member.
        """
        obj: TerminalColor = str.__new__(cls, text)
        obj._value_ = text
        obj._ansi_name = ansi_name
        return obj

    @property
    def value(self) -> str:
        """Return the markup name of the color."""
        return self._value_

    @property
    def ansi_name(self) -> str:
        """Return the Click color name used for ANSI output."""
        return self._ansi_name

    @classmethod
    def lookup(cls, name: str) -> TerminalColor | None:
        """Resolve a markup color name, ignoring case and surrounding whitespace.

        Args:
            name (str): Candidate color name, e.g. ``"DarkCyan"``.

        Returns:
            TerminalColor | None: The matching color, or None when `name` is
                not one of the 16 recognized names.
        """
        return _BY_NAME.get(name.strip().lower())


_BY_NAME: dict[str, TerminalColor] = {color.value: color for color in TerminalColor}


class ColorAxis(str, Enum):
    """Color channel addressed by a scope: foreground or background."""

    _value_: str
    _key: str

    # Value format: (axis name: str, markup attribute key: str)
    FOREGROUND = ("foreground", "f")
    BACKGROUND = ("background", "b")

    def __new__(cls, text: str, key: str) -> ColorAxis:
        obj: ColorAxis = str.__new__(cls, text)
        obj._value_ = text
        obj._key = key
        return obj

    @property
    def value(self) -> str:
        """Return the axis name."""
        return self._value_

    @property
    def key(self) -> str:
        """Return the markup attribute key selecting this axis (``f`` or ``b``)."""
        return self._key


def describe_color(color: TerminalColor | None) -> str:
    """Return a display name for an optional color (``default`` for None)."""
    return "default" if color is None else color.value
