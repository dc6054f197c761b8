# topmark:header:start
#
#   project      : TagTint
#   file         : check.py
#   file_relpath : src/tagtint/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagTint `check` command.

Validates markup without rendering it. Each document gets one status line;
with ``-v`` the render operations of valid documents are listed as well.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tagtint.cli.console import colored, literal
from tagtint.cli.errors import TagtintMarkupError
from tagtint.cli.io import collect_markup_inputs
from tagtint.config.logging import get_logger
from tagtint.markup.errors import MarkupSyntaxError
from tagtint.rendering.api import parse
from tagtint.rendering.colors import TerminalColor

if TYPE_CHECKING:
    from tagtint.cli.console_api import ConsoleLike

logger = get_logger(__name__)


@click.command(
    name="check",
    help=(
        "Check that MARKUP is well formed without rendering it. "
        "With no argument or '-', check STDIN as one document."
    ),
)
@click.argument("markup", nargs=-1)
def check_command(*, markup: tuple[str, ...]) -> None:
    """Parse every document and report the malformed ones.

    Args:
        markup (tuple[str, ...]): Markup arguments.

    Raises:
        TagtintMarkupError: If at least one document is malformed.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)

    inputs = collect_markup_inputs(markup)
    failures = 0
    for item in inputs:
        try:
            program = parse(item.markup)
        except MarkupSyntaxError as exc:
            failures += 1
            console.error(
                f"{item.label}: line {exc.line}, column {exc.column}: {exc.message}"
            )
            if verbosity >= 0:
                console.error(exc.excerpt())
            continue

        if verbosity >= 0:
            console.print_markup(
                f"{literal(item.label)}: {colored('ok', TerminalColor.GREEN)} "
                f"({len(program)} operation(s))"
            )
        if verbosity > 0:
            for line in program.describe():
                console.print(f"    {line}")

    logger.debug("checked %d document(s), %d malformed", len(inputs), failures)
    if failures:
        raise TagtintMarkupError(f"{failures} of {len(inputs)} markup document(s) are malformed.")
