# topmark:header:start
#
#   project      : TagTint
#   file         : click_terminal.py
#   file_relpath : src/tagtint/terminal/click_terminal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ANSI terminal surface built on Click.

`ClickTerminal` turns color changes into SGR escape sequences produced by
`click.style` and writes everything through `click.echo`, so ANSI codes are
stripped automatically when the stream is not a terminal (unless color is
forced on).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

import click

from tagtint.config.logging import get_logger
from tagtint.terminal.surface_api import TerminalSurface

if TYPE_CHECKING:
    from tagtint.config.logging import TagtintLogger
    from tagtint.rendering.colors import TerminalColor

logger: TagtintLogger = get_logger(__name__)

# Click maps "reset" to SGR 39 (fg) / 49 (bg): the terminal's default color.
_DEFAULT_COLOR_NAME = "reset"


class ClickTerminal(TerminalSurface):
    """Terminal surface writing ANSI-colored text to a stream.

    Args:
        enable_color (bool | None): True forces ANSI codes, False strips them,
            None lets Click decide (codes are kept only on a TTY).
        out (TextIO | None): The output stream. Defaults to `sys.stdout`.

    Attributes:
        enable_color (bool | None): Color policy passed to `click.echo`.
        out (TextIO): Output stream.
    """

    enable_color: bool | None
    out: TextIO

    def __init__(
        self,
        *,
        enable_color: bool | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self._foreground: TerminalColor | None = None
        self._background: TerminalColor | None = None

    @property
    def foreground(self) -> TerminalColor | None:
        """Return the foreground color last set through this terminal."""
        return self._foreground

    @property
    def background(self) -> TerminalColor | None:
        """Return the background color last set through this terminal."""
        return self._background

    def write(self, text: str) -> None:
        """Write text without a line break.

        Args:
            text (str): Text to write.
        """
        click.echo(text, nl=False, file=self.out, color=self.enable_color)

    def set_foreground(self, color: TerminalColor | None) -> None:
        """Emit the SGR sequence selecting a foreground color.

        Args:
            color (TerminalColor | None): New color, None for the default.
        """
        name = color.ansi_name if color is not None else _DEFAULT_COLOR_NAME
        self._emit(click.style("", fg=name, reset=False))
        self._foreground = color

    def set_background(self, color: TerminalColor | None) -> None:
        """Emit the SGR sequence selecting a background color.

        Args:
            color (TerminalColor | None): New color, None for the default.
        """
        name = color.ansi_name if color is not None else _DEFAULT_COLOR_NAME
        self._emit(click.style("", bg=name, reset=False))
        self._background = color

    def newline(self) -> None:
        """Write a line break."""
        click.echo("", file=self.out, color=self.enable_color)

    def reset(self) -> None:
        """Restore both channels to the terminal defaults."""
        if self._foreground is not None:
            self.set_foreground(None)
        if self._background is not None:
            self.set_background(None)

    def _emit(self, sequence: str) -> None:
        logger.trace("ansi sequence %r", sequence)
        click.echo(sequence, nl=False, file=self.out, color=self.enable_color)
