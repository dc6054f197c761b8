# topmark:header:start
#
#   project      : TagTint
#   file         : api.py
#   file_relpath : src/tagtint/rendering/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""API for rendering TagTint markup.

`parse()` turns markup into a `RenderProgram`; `render()` and
`render_line()` parse and immediately execute against a terminal surface.
These two functions are the only path through which higher-level helpers
reach the terminal.

Parsing completes before execution starts, so a `MarkupSyntaxError` always
means nothing was written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tagtint.config.logging import get_logger
from tagtint.markup.parser import escape as _escape
from tagtint.markup.parser import parse_markup
from tagtint.markup.resolver import resolve_tree
from tagtint.rendering.program import RenderProgram

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tagtint.config.logging import TagtintLogger
    from tagtint.rendering.colors import TerminalColor
    from tagtint.terminal.surface_api import TerminalSurface

logger: TagtintLogger = get_logger(__name__)


def parse(
    markup: str,
    *,
    foreground: TerminalColor | None = None,
    background: TerminalColor | None = None,
) -> RenderProgram:
    """Parse markup into a render program.

    Args:
        markup (str): Markup text.
        foreground (TerminalColor | None): Foreground in effect before the
            markup; outermost scopes restore to it.
        background (TerminalColor | None): Background in effect before the
            markup; outermost scopes restore to it.

    Returns:
        RenderProgram: The fully built program.

    Raises:
        MarkupSyntaxError: If the markup is not well formed.
    """
    root = parse_markup(markup)
    return resolve_tree(root, RenderProgram(foreground=foreground, background=background))


def _parse_for(markup: str, terminal: TerminalSurface) -> RenderProgram:
    return parse(markup, foreground=terminal.foreground, background=terminal.background)


def render(markup: str, terminal: TerminalSurface) -> None:
    """Render markup to `terminal` without a trailing line break.

    Args:
        markup (str): Markup text.
        terminal (TerminalSurface): Target surface.

    Raises:
        MarkupSyntaxError: If the markup is not well formed (nothing is written).
    """
    _parse_for(markup, terminal).execute(terminal)


def render_line(markup: str, terminal: TerminalSurface) -> None:
    """Render markup to `terminal` followed by exactly one line break.

    Args:
        markup (str): Markup text.
        terminal (TerminalSurface): Target surface.

    Raises:
        MarkupSyntaxError: If the markup is not well formed (nothing is written).
    """
    program = _parse_for(markup, terminal)
    program.add_newline()
    program.execute(terminal)


def render_lines(lines: Iterable[str], terminal: TerminalSurface) -> None:
    """Render each markup line with `render_line`, in order.

    Lines are parsed one at a time: a malformed line raises after the lines
    before it were written.

    Args:
        lines (Iterable[str]): Markup lines.
        terminal (TerminalSurface): Target surface.

    Raises:
        MarkupSyntaxError: If a line is not well formed.
    """
    for line in lines:
        render_line(line, terminal)


def escape(text: str) -> str:
    """Escape `text` so it renders literally inside markup.

    Example:
        ```python
        render_line(f"<c f='red'>{escape(user_input)}</c>", terminal)
        ```
    """
    return _escape(text)


def plain_text(markup: str) -> str:
    """Return the text `render` would write for `markup`, without colors.

    Raises:
        MarkupSyntaxError: If the markup is not well formed.
    """
    return parse(markup).plain_text()
