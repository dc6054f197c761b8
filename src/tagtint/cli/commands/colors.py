# topmark:header:start
#
#   project      : TagTint
#   file         : colors.py
#   file_relpath : src/tagtint/cli/commands/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagTint `colors` command.

Shows the 16 markup color names, each rendered in its own color.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tagtint.rendering.api import render_line
from tagtint.rendering.colors import TerminalColor

if TYPE_CHECKING:
    from tagtint.terminal.surface_api import TerminalSurface


def color_sample_markup(color: TerminalColor, *, background: bool = False) -> str:
    """Return the markup line showing `color` as foreground or background.

    Args:
        color (TerminalColor): Color to show.
        background (bool): Paint the background instead of the text.

    Returns:
        str: One line of markup, e.g. ``<c f='red'>red</c>``.
    """
    if background:
        return f"<c b='{color.value}'> {color.value:<11} </c>"
    return f"<c f='{color.value}'>{color.value}</c>"


@click.command(
    name="colors",
    help="Show the color names accepted in markup, rendered in their color.",
)
@click.option(
    "--background",
    is_flag=True,
    default=False,
    help="Paint the background instead of the text.",
)
def colors_command(*, background: bool) -> None:
    """Render one sample line per color.

    Args:
        background (bool): Paint the background instead of the text.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    terminal: TerminalSurface = ctx.obj["terminal"]

    for color in TerminalColor:
        render_line(color_sample_markup(color, background=background), terminal)
