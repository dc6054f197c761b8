# topmark:header:start
#
#   project      : TagTint
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the TagTint test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, and provides helpers shared by the rendering tests.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from tagtint.config import logging
from tagtint.rendering.api import render
from tagtint.rendering.colors import TerminalColor
from tagtint.rendering.operations import EmitText, RenderOperation
from tagtint.terminal.recording import RecordingTerminal

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

Span = tuple[str, TerminalColor | None, TerminalColor | None]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_tagtint_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure TagTint's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("TAGTINT_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def terminal() -> RecordingTerminal:
    """Return a fresh recording terminal with default colors."""
    return RecordingTerminal()


def texts(operations: tuple[RenderOperation, ...]) -> str:
    """Concatenate the text of all `EmitText` operations."""
    return "".join(op.text for op in operations if isinstance(op, EmitText))


def rendered_spans(markup: str, **initial: TerminalColor | None) -> list[Span]:
    """Render `markup` to a recording terminal and return its colored spans.

    Args:
        markup (str): Markup text.
        **initial (TerminalColor | None): Optional ``initial_foreground`` /
            ``initial_background`` for the terminal.

    Returns:
        list[Span]: ``(text, foreground, background)`` per written text.
    """
    recorder = RecordingTerminal(**initial)
    render(markup, recorder)
    return recorder.spans
