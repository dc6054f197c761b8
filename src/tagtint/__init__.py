# topmark:header:start
#
#   project      : TagTint
#   file         : __init__.py
#   file_relpath : src/tagtint/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagTint package.

TagTint renders a small tag-based color markup to the terminal:

    <c f='yellow'>warning:</c> disk <c f='white' b='darkred'>almost full</c>

Markup is parsed into a node tree, resolved into an ordered render program
(text, color changes, newline) and replayed against a terminal surface.
The CLI lives in `tagtint.cli`; this module re-exports the library API.
"""

from __future__ import annotations

from tagtint.console import MarkupConsole
from tagtint.markup.errors import MarkupSyntaxError
from tagtint.rendering.api import escape, parse, plain_text, render, render_line, render_lines
from tagtint.rendering.colors import ColorAxis, TerminalColor
from tagtint.rendering.operations import EmitText, Newline, RenderOperation, SetColor
from tagtint.rendering.program import RenderProgram
from tagtint.terminal.click_terminal import ClickTerminal
from tagtint.terminal.recording import RecordingTerminal
from tagtint.terminal.surface_api import TerminalSurface

__all__ = [
    "ClickTerminal",
    "ColorAxis",
    "EmitText",
    "MarkupConsole",
    "MarkupSyntaxError",
    "Newline",
    "RecordingTerminal",
    "RenderOperation",
    "RenderProgram",
    "SetColor",
    "TerminalColor",
    "TerminalSurface",
    "escape",
    "parse",
    "plain_text",
    "render",
    "render_line",
    "render_lines",
]
