# topmark:header:start
#
#   project      : TagTint
#   file         : version.py
#   file_relpath : src/tagtint/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagTint `version` command.

Prints the current TagTint version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tagtint.constants import TAGTINT_VERSION

if TYPE_CHECKING:
    from tagtint.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of TagTint.",
)
def version_command() -> None:
    """Show the current version of TagTint."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    console.print(TAGTINT_VERSION)
