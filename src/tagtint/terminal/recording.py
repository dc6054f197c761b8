# topmark:header:start
#
#   project      : TagTint
#   file         : recording.py
#   file_relpath : src/tagtint/terminal/recording.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recording terminal surface.

`RecordingTerminal` touches no real terminal: it remembers every call made to
it, in order, together with the colors in effect. It is the test double of
choice for render programs and is handy for previews.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tagtint.rendering.colors import ColorAxis
from tagtint.terminal.surface_api import TerminalSurface

if TYPE_CHECKING:
    from tagtint.rendering.colors import TerminalColor


@dataclass
class RecordingTerminal(TerminalSurface):
    """Terminal double recording calls as ``(method, argument)`` pairs.

    Attributes:
        calls (list[tuple[str, object]]): Every call in order, e.g.
            ``("write", "hi")``, ``("set_foreground", TerminalColor.RED)``,
            ``("newline", None)``.
        spans (list[tuple[str, TerminalColor | None, TerminalColor | None]]):
            Each written text with the foreground/background active when it
            was written.
    """

    initial_foreground: TerminalColor | None = None
    initial_background: TerminalColor | None = None
    calls: list[tuple[str, object]] = field(default_factory=list)
    spans: list[tuple[str, TerminalColor | None, TerminalColor | None]] = field(
        default_factory=list
    )

    def __post_init__(self) -> None:
        self._colors: dict[ColorAxis, TerminalColor | None] = {
            ColorAxis.FOREGROUND: self.initial_foreground,
            ColorAxis.BACKGROUND: self.initial_background,
        }

    @property
    def foreground(self) -> TerminalColor | None:
        return self._colors[ColorAxis.FOREGROUND]

    @property
    def background(self) -> TerminalColor | None:
        return self._colors[ColorAxis.BACKGROUND]

    @property
    def text(self) -> str:
        """Return everything written so far, newlines included."""
        return "".join(
            "\n" if method == "newline" else str(arg)
            for method, arg in self.calls
            if method in ("write", "newline")
        )

    def write(self, text: str) -> None:
        self.calls.append(("write", text))
        self.spans.append((text, self.foreground, self.background))

    def set_foreground(self, color: TerminalColor | None) -> None:
        self.calls.append(("set_foreground", color))
        self._colors[ColorAxis.FOREGROUND] = color

    def set_background(self, color: TerminalColor | None) -> None:
        self.calls.append(("set_background", color))
        self._colors[ColorAxis.BACKGROUND] = color

    def newline(self) -> None:
        self.calls.append(("newline", None))

    def clear(self) -> None:
        """Forget recorded calls; the current colors are kept."""
        self.calls.clear()
        self.spans.clear()
