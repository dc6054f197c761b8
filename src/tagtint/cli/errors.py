# topmark:header:start
#
#   project      : TagTint
#   file         : errors.py
#   file_relpath : src/tagtint/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the TagTint CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library code raises plain exceptions
    (`tagtint.markup.errors.MarkupSyntaxError`); commands translate them here.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from tagtint.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from tagtint.markup.errors import MarkupSyntaxError


class TagtintError(click.ClickException):
    """Base class for all TagTint CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class TagtintUsageError(TagtintError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TagtintMarkupError(TagtintError):
    """Error for markup that is not well formed."""

    exit_code = ExitCode.MARKUP_ERROR

    @classmethod
    def from_syntax_error(
        cls, exc: MarkupSyntaxError, *, label: str | None = None
    ) -> TagtintMarkupError:
        """Build the CLI error for a parser failure, location and excerpt included.

        Args:
            exc (MarkupSyntaxError): The parser error.
            label (str | None): Optional name of the offending input.

        Returns:
            TagtintMarkupError: The error to raise.
        """
        prefix = f"{label}: " if label else ""
        return cls(
            f"{prefix}malformed markup at line {exc.line}, column {exc.column}: "
            f"{exc.message}\n{exc.excerpt()}"
        )


class TagtintInputError(TagtintError):
    """Error for markup input that cannot be read (e.g. undecodable STDIN)."""

    exit_code = ExitCode.INPUT_ERROR
