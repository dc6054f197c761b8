# topmark:header:start
#
#   project      : TagTint
#   file         : program.py
#   file_relpath : src/tagtint/rendering/program.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Deferred render programs.

A `RenderProgram` accumulates render operations while markup is traversed,
without touching any terminal, then replays them in one go with `execute()`.

The program tracks the foreground/background that will be active at the end
of the operations recorded so far. That state only serves to compute the
value a color scope restores on close; it is never used to drop or merge
redundant color changes, so the operation sequence stays deterministic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tagtint.config.logging import get_logger
from tagtint.rendering.colors import ColorAxis, describe_color
from tagtint.rendering.operations import EmitText, Newline, SetColor

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tagtint.config.logging import TagtintLogger
    from tagtint.rendering.colors import TerminalColor
    from tagtint.rendering.operations import RenderOperation
    from tagtint.terminal.surface_api import TerminalSurface

logger: TagtintLogger = get_logger(__name__)


class RenderProgram:
    """Ordered, single-use sequence of render operations.

    Args:
        foreground (TerminalColor | None): Foreground active before the first
            operation (None for the terminal default).
        background (TerminalColor | None): Background active before the first
            operation (None for the terminal default).
    """

    def __init__(
        self,
        foreground: TerminalColor | None = None,
        background: TerminalColor | None = None,
    ) -> None:
        self._operations: list[RenderOperation] = []
        self._current: dict[ColorAxis, TerminalColor | None] = {
            ColorAxis.FOREGROUND: foreground,
            ColorAxis.BACKGROUND: background,
        }

    def __len__(self) -> int:
        return len(self._operations)

    def __iter__(self) -> Iterator[RenderOperation]:
        return iter(tuple(self._operations))

    def __repr__(self) -> str:
        return f"RenderProgram({len(self._operations)} operation(s))"

    @property
    def operations(self) -> tuple[RenderOperation, ...]:
        """Return a snapshot of the pending operations."""
        return tuple(self._operations)

    @property
    def foreground(self) -> TerminalColor | None:
        """Return the tracked foreground color."""
        return self._current[ColorAxis.FOREGROUND]

    @property
    def background(self) -> TerminalColor | None:
        """Return the tracked background color."""
        return self._current[ColorAxis.BACKGROUND]

    def current(self, axis: ColorAxis) -> TerminalColor | None:
        """Return the tracked color of `axis`."""
        return self._current[axis]

    def add_text(self, text: str) -> None:
        """Append an `EmitText` operation.

        Args:
            text (str): Text to write.
        """
        self._operations.append(EmitText(text))

    def push_color(self, axis: ColorAxis, color: TerminalColor) -> TerminalColor | None:
        """Append a color change and return the color it replaces.

        Args:
            axis (ColorAxis): Channel to change.
            color (TerminalColor): New color.

        Returns:
            TerminalColor | None: The tracked color before the change, i.e. the
                value to restore when the scope closes.
        """
        previous = self._current[axis]
        self._operations.append(SetColor(axis, color))
        self._current[axis] = color
        return previous

    def restore_color(self, axis: ColorAxis, color: TerminalColor | None) -> None:
        """Append the color change closing a scope.

        Args:
            axis (ColorAxis): Channel to restore.
            color (TerminalColor | None): Value returned by the matching `push_color`.
        """
        self._operations.append(SetColor(axis, color))
        self._current[axis] = color

    def add_newline(self) -> None:
        """Append a `Newline` operation."""
        self._operations.append(Newline())

    def execute(self, terminal: TerminalSurface) -> None:
        """Replay all operations against `terminal`, then clear the program.

        Args:
            terminal (TerminalSurface): Surface receiving the calls.
        """
        logger.debug("executing %d render operation(s)", len(self._operations))
        for operation in self._operations:
            logger.trace("render: %s", operation)
            if isinstance(operation, EmitText):
                terminal.write(operation.text)
            elif isinstance(operation, SetColor):
                if operation.axis is ColorAxis.FOREGROUND:
                    terminal.set_foreground(operation.color)
                else:
                    terminal.set_background(operation.color)
            else:
                terminal.newline()
        self._operations.clear()

    def describe(self) -> list[str]:
        """Return one human-readable line per pending operation."""
        return [str(operation) for operation in self._operations]

    def plain_text(self) -> str:
        """Return the text the program would write, newlines included."""
        return "".join(
            operation.text if isinstance(operation, EmitText) else "\n"
            for operation in self._operations
            if not isinstance(operation, SetColor)
        )

    def summary(self) -> str:
        """Return a one-line summary of the tracked colors, for logging."""
        return (
            f"{len(self._operations)} operation(s), "
            f"fg={describe_color(self.foreground)}, bg={describe_color(self.background)}"
        )
