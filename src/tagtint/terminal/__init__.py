# topmark:header:start
#
#   project      : TagTint
#   file         : __init__.py
#   file_relpath : src/tagtint/terminal/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal surfaces that render programs are replayed against.

Public modules:
    - tagtint.terminal.surface_api: the `TerminalSurface` protocol
    - tagtint.terminal.click_terminal: ANSI output through Click
    - tagtint.terminal.recording: call-recording test double
"""

from __future__ import annotations
