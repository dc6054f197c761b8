# topmark:header:start
#
#   project      : TagTint
#   file         : main.py
#   file_relpath : src/tagtint/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click CLI for TagTint.

Key ideas:
- Group-level options are initialized once, placed into ``ctx.obj``.
- ``ctx.obj["console"]`` carries CLI messages, ``ctx.obj["terminal"]`` carries
  rendered markup; both honor the resolved color mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tagtint.cli.commands.check import check_command
from tagtint.cli.commands.colors import colors_command
from tagtint.cli.commands.render import render_command
from tagtint.cli.commands.version import version_command
from tagtint.cli.console import ClickConsole
from tagtint.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from tagtint.config.logging import get_logger, resolve_env_log_level, setup_logging
from tagtint.terminal.click_terminal import ClickTerminal

if TYPE_CHECKING:
    from tagtint.cli.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Configure program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Configure internal logging via env:
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO.value)
    )
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    logger.debug("color mode %s resolved to %s", effective_color_mode.value, enable_color)

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    ctx.obj["terminal"] = ClickTerminal(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,  # Always invoke the cli() function
    help="TagTint: render color markup such as <c f='red'>text</c> in the terminal.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the TagTint CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'tagtint render MARKUP...' to render markup.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(check_command)

cli.add_command(colors_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
