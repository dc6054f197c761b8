# topmark:header:start
#
#   project      : TagTint
#   file         : console_api.py
#   file_relpath : src/tagtint/cli/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console interface for CLI messages.

Commands report status, warnings and errors through this protocol. Messages
are either plain text (shown literally) or TagTint markup, so the CLI styles
its own output with the same color scopes it renders for users.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """What a CLI command needs to talk to the user."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write literal text to stdout."""
        ...

    def print_markup(self, markup: str, *, nl: bool = True) -> None:
        """Render markup to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write literal text to stderr as a warning."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write literal text to stderr as an error."""
        ...
