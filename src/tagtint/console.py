# topmark:header:start
#
#   project      : TagTint
#   file         : console.py
#   file_relpath : src/tagtint/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup console bound to one terminal surface.

`MarkupConsole` is the convenience front door for applications: every write
method accepts markup and returns the console, so calls can be chained:

    ```python
    MarkupConsole().write("<c f='green'>ok</c> ").write_line("done")
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tagtint.rendering.api import render, render_line, render_lines
from tagtint.terminal.click_terminal import ClickTerminal

if TYPE_CHECKING:
    from tagtint.terminal.surface_api import TerminalSurface


class MarkupConsole:
    """Write markup to a terminal surface.

    Args:
        terminal (TerminalSurface | None): Target surface. Defaults to a
            `ClickTerminal` on stdout.

    Attributes:
        terminal (TerminalSurface): The surface all writes go to.
    """

    terminal: TerminalSurface

    def __init__(self, terminal: TerminalSurface | None = None) -> None:
        self.terminal = terminal if terminal is not None else ClickTerminal()

    def write(self, markup: str) -> MarkupConsole:
        """Write markup without a trailing line break.

        Raises:
            MarkupSyntaxError: If the markup is not well formed.
        """
        render(markup, self.terminal)
        return self

    def write_line(self, markup: str = "") -> MarkupConsole:
        """Write markup followed by a line break.

        Raises:
            MarkupSyntaxError: If the markup is not well formed.
        """
        render_line(markup, self.terminal)
        return self

    def write_lines(self, *lines: str) -> MarkupConsole:
        """Write each markup line followed by a line break.

        Raises:
            MarkupSyntaxError: If a line is not well formed.
        """
        render_lines(lines, self.terminal)
        return self
