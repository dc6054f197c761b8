# topmark:header:start
#
#   project      : TagTint
#   file         : errors.py
#   file_relpath : src/tagtint/markup/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while parsing TagTint markup."""

from __future__ import annotations


class MarkupSyntaxError(ValueError):
    """Markup is not well formed (unbalanced tags, stray ``<``, bad entity, ...).

    Raised before any render operation reaches a terminal.

    Attributes:
        message (str): Description of the problem, without location.
        markup (str): The markup being parsed (after line-ending normalization).
        position (int): 0-based offset of the problem in `markup`.
        line (int): 1-based line number of `position`.
        column (int): 1-based column number of `position`.
    """

    def __init__(self, message: str, markup: str, position: int) -> None:
        self.message = message
        self.markup = markup
        self.position = position
        self.line = markup.count("\n", 0, position) + 1
        self.column = position - (markup.rfind("\n", 0, position) + 1) + 1
        super().__init__(f"{message} (line {self.line}, column {self.column})")

    def excerpt(self, width: int = 20) -> str:
        """Return the offending line around the error with a caret under it.

        Args:
            width (int): Characters of context kept on each side.

        Returns:
            str: Two lines: the source excerpt and a ``^`` marker.
        """
        line_start = self.markup.rfind("\n", 0, self.position) + 1
        line_end = self.markup.find("\n", self.position)
        if line_end == -1:
            line_end = len(self.markup)
        start = max(line_start, self.position - width)
        end = min(line_end, self.position + width)
        return f"{self.markup[start:end]}\n{' ' * (self.position - start)}^"
