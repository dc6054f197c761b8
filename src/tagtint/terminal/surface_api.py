# topmark:header:start
#
#   project      : TagTint
#   file         : surface_api.py
#   file_relpath : src/tagtint/terminal/surface_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic terminal interface for rendered markup.

This protocol defines the small surface a render program is replayed against.
Implementations may emit ANSI sequences, drive curses, or simply record calls.

The `foreground` and `background` properties report the colors currently in
effect; render entry points read them once per call to seed the program's
tracked state, so scope restores return to whatever was active before.
Terminal color state is shared: callers writing to one surface from several
threads must serialize render calls themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tagtint.rendering.colors import TerminalColor


class TerminalSurface(Protocol):
    """Minimal interface of a terminal that can show colored text."""

    @property
    def foreground(self) -> TerminalColor | None:
        """Return the active foreground color (None for the terminal default)."""
        ...

    @property
    def background(self) -> TerminalColor | None:
        """Return the active background color (None for the terminal default)."""
        ...

    def write(self, text: str) -> None:
        """Write text without an implicit line break."""
        ...

    def set_foreground(self, color: TerminalColor | None) -> None:
        """Set the foreground color; None restores the terminal default."""
        ...

    def set_background(self, color: TerminalColor | None) -> None:
        """Set the background color; None restores the terminal default."""
        ...

    def newline(self) -> None:
        """Emit a line break."""
        ...
