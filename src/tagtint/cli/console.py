# topmark:header:start
#
#   project      : TagTint
#   file         : console.py
#   file_relpath : src/tagtint/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup-driven console for CLI messages.

`ClickConsole` keeps CLI messages apart from internal logging and from the
markup a command renders for the user. Its messages are themselves rendered
as TagTint markup on two `ClickTerminal` surfaces (stdout and stderr), so
color handling follows the same ``--color`` policy everywhere.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from tagtint.cli.console_api import ConsoleLike
from tagtint.markup.parser import replace_invalid_characters
from tagtint.rendering.api import escape, render, render_line
from tagtint.rendering.colors import TerminalColor
from tagtint.terminal.click_terminal import ClickTerminal

if TYPE_CHECKING:
    from tagtint.terminal.surface_api import TerminalSurface

WARNING_COLOR = TerminalColor.YELLOW
ERROR_COLOR = TerminalColor.RED


def literal(text: str) -> str:
    """Return markup that shows `text` exactly, control characters aside."""
    return escape(replace_invalid_characters(text))


def colored(text: str, color: TerminalColor) -> str:
    """Return markup showing literal `text` in the foreground `color`.

    Args:
        text (str): Text to show literally.
        color (TerminalColor): Foreground color.

    Returns:
        str: A single color-scope element, e.g. ``<c f='green'>ok</c>``.
    """
    return f"<c f='{color.value}'>{literal(text)}</c>"


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, emit ANSI color codes; otherwise all
            output is plain text.
        out (TextIO | None): Stream for regular messages. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for warnings and errors. Defaults to `sys.stderr`.

    Attributes:
        enable_color (bool): Whether ANSI color codes are emitted.
        stdout (ClickTerminal): Surface for regular messages.
        stderr (ClickTerminal): Surface for warnings and errors.
    """

    enable_color: bool
    stdout: ClickTerminal
    stderr: ClickTerminal

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.stdout = ClickTerminal(enable_color=enable_color, out=out or sys.stdout)
        self.stderr = ClickTerminal(enable_color=enable_color, out=err or sys.stderr)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write literal text to stdout.

        Args:
            text (str): Message text, shown as is.
            nl (bool): If True, append a newline.
        """
        self._show(literal(text), self.stdout, nl=nl)

    def print_markup(self, markup: str, *, nl: bool = True) -> None:
        """Render markup to stdout.

        Raises:
            MarkupSyntaxError: If `markup` is not well formed.
        """
        self._show(markup, self.stdout, nl=nl)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning to stderr."""
        self._show(colored(text, WARNING_COLOR), self.stderr, nl=nl)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to stderr."""
        self._show(colored(text, ERROR_COLOR), self.stderr, nl=nl)

    @staticmethod
    def _show(markup: str, terminal: TerminalSurface, *, nl: bool) -> None:
        if nl:
            render_line(markup, terminal)
        else:
            render(markup, terminal)
