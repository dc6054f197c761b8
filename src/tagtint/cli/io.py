# topmark:header:start
#
#   project      : TagTint
#   file         : io.py
#   file_relpath : src/tagtint/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup input handling for Click commands.

Commands accept markup as positional arguments, one document per argument,
or a single ``-`` (or no argument at all) to read one document from STDIN.
"""

from __future__ import annotations

from typing import NamedTuple

import click

from tagtint.cli.errors import TagtintInputError, TagtintUsageError
from tagtint.config.logging import get_logger

logger = get_logger(__name__)

STDIN_SENTINEL = "-"


class MarkupInput(NamedTuple):
    """One markup document to process.

    Attributes:
        label: Display name (``"stdin"`` or ``"argument N"``).
        markup: The markup text.
    """

    label: str
    markup: str


def read_stdin_markup() -> str:
    """Read STDIN as one markup document, dropping a single trailing newline.

    Raises:
        TagtintInputError: If STDIN is not valid text in its encoding.
    """
    stream = click.get_text_stream("stdin")
    try:
        text = stream.read()
    except UnicodeDecodeError as exc:
        logger.error("cannot decode STDIN: %s", exc)
        raise TagtintInputError(f"Cannot decode STDIN: {exc}") from exc
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def collect_markup_inputs(arguments: tuple[str, ...]) -> list[MarkupInput]:
    """Return the markup documents named by the positional arguments.

    Args:
        arguments (tuple[str, ...]): Positional ``MARKUP`` arguments.

    Returns:
        list[MarkupInput]: Documents in command-line order.

    Raises:
        TagtintUsageError: If ``-`` is combined with other arguments, or STDIN
            is requested while it is an interactive terminal.
    """
    if arguments and arguments != (STDIN_SENTINEL,):
        if STDIN_SENTINEL in arguments:
            raise TagtintUsageError("'-' (STDIN) cannot be combined with other MARKUP arguments.")
        return [MarkupInput(f"argument {i}", text) for i, text in enumerate(arguments, start=1)]

    if click.get_text_stream("stdin").isatty():
        raise TagtintUsageError("No MARKUP given; pass markup as arguments or pipe it on STDIN.")
    markup = read_stdin_markup()
    logger.debug("read %d character(s) of markup from STDIN", len(markup))
    return [MarkupInput("stdin", markup)]
