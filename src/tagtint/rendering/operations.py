# topmark:header:start
#
#   project      : TagTint
#   file         : operations.py
#   file_relpath : src/tagtint/rendering/operations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render operations: the atomic terminal actions of a render program.

Operations are frozen dataclasses so a program can be inspected and compared
in tests (``program.operations == (EmitText("a"), Newline())``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from tagtint.rendering.colors import ColorAxis, TerminalColor, describe_color


@dataclass(frozen=True)
class EmitText:
    """Write `text` to the terminal, without an implicit line break."""

    text: str

    def __str__(self) -> str:
        return f"text {self.text!r}"


@dataclass(frozen=True)
class SetColor:
    """Set one color channel; the other channel is untouched.

    Attributes:
        axis (ColorAxis): Channel to change.
        color (TerminalColor | None): New color; None selects the terminal default.
    """

    axis: ColorAxis
    color: TerminalColor | None

    def __str__(self) -> str:
        return f"{self.axis.value} {describe_color(self.color)}"


@dataclass(frozen=True)
class Newline:
    """Emit a line break."""

    def __str__(self) -> str:
        return "newline"


RenderOperation = Union[EmitText, SetColor, Newline]
