# topmark:header:start
#
#   project      : TagTint
#   file         : render.py
#   file_relpath : src/tagtint/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagTint `render` command.

Renders markup given as arguments (one line each) or read from STDIN.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tagtint.cli.errors import TagtintMarkupError
from tagtint.cli.io import collect_markup_inputs
from tagtint.markup.errors import MarkupSyntaxError
from tagtint.rendering.api import render, render_line

if TYPE_CHECKING:
    from tagtint.terminal.surface_api import TerminalSurface


@click.command(
    name="render",
    help=(
        "Render MARKUP to the terminal, one line per argument. "
        "With no argument or '-', render STDIN as one document."
    ),
)
@click.argument("markup", nargs=-1)
@click.option(
    "-n",
    "--no-newline",
    "no_newline",
    is_flag=True,
    default=False,
    help="Do not append a line break after each document.",
)
def render_command(*, markup: tuple[str, ...], no_newline: bool) -> None:
    """Render markup documents in order.

    Documents are rendered one by one: a malformed document stops the command
    after the documents before it were written.

    Args:
        markup (tuple[str, ...]): Markup arguments.
        no_newline (bool): Use `render` instead of `render_line`.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    terminal: TerminalSurface = ctx.obj["terminal"]

    write = render if no_newline else render_line
    for item in collect_markup_inputs(markup):
        try:
            write(item.markup, terminal)
        except MarkupSyntaxError as exc:
            raise TagtintMarkupError.from_syntax_error(exc, label=item.label) from exc
