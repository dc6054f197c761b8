# topmark:header:start
#
#   project      : TagTint
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running TagTint through Click's test runner.

Color detection honors ``FORCE_COLOR`` / ``NO_COLOR``; the autouse fixture
below clears both so results do not depend on the developer's shell.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from tagtint.cli.exit_codes import ExitCode
from tagtint.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence


@pytest.fixture(autouse=True)
def neutral_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove color-forcing environment variables for the duration of a test.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with Click's test runner.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g.
            ``["render", "<c f='red'>x</c>"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input to
            pass to the command.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["check", "<c f='red'>x</c>"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_MARKUP_ERROR(result: Result) -> None:
    """Assert that the command exited with MARKUP_ERROR (code 65).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.MARKUP_ERROR, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
