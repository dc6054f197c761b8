# topmark:header:start
#
#   project      : TagTint
#   file         : resolver.py
#   file_relpath : src/tagtint/markup/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve a markup node tree into render operations.

The tree is visited in document order (element, then its children, then its
next sibling) with an explicit stack of frames, one per open element.

Color scopes:
    An element is a *color scope* when its name is ``c`` and it carries an
    ``f`` (foreground) or ``b`` (background) attribute; names and keys are
    matched case-insensitively. Each axis is handled on its own: a recognized
    color name pushes the axis (the current color is remembered and the new
    one set), an absent or unknown value leaves it alone. When the element
    closes, every pushed axis is set back to the remembered value, so nested
    scopes unwind one level at a time.

Passthrough elements:
    Any other element, including a bare ``<c>``, is written back as literal
    text: ``<name attr...`` followed by `` />`` when it has no children, or by
    ``>``, the children and ``</name>``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from tagtint.config.logging import get_logger
from tagtint.markup.nodes import ElementNode, TextNode
from tagtint.rendering.colors import ColorAxis, TerminalColor

if TYPE_CHECKING:
    from tagtint.config.logging import TagtintLogger
    from tagtint.rendering.program import RenderProgram

logger: TagtintLogger = get_logger(__name__)

COLOR_TAG: Final[str] = "c"


@dataclass
class ColorScope:
    """Axes pushed by one color-scope element, with the value each restores.

    An axis missing from `restore` was not pushed and is left alone on close.
    """

    restore: dict[ColorAxis, TerminalColor | None] = field(default_factory=dict)

    @property
    def pushed(self) -> tuple[ColorAxis, ...]:
        """Return the pushed axes in push order."""
        return tuple(self.restore)


@dataclass
class _Frame:
    """An element being visited: next child index and how to close it."""

    element: ElementNode
    scope: ColorScope | None = None
    passthrough: bool = False
    index: int = 0


def is_color_scope(element: ElementNode) -> bool:
    """Return True if `element` is a ``c`` element with an ``f`` or ``b`` attribute."""
    if element.name.lower() != COLOR_TAG:
        return False
    return any(
        element.find_attribute(axis.key, ignore_case=True) is not None for axis in ColorAxis
    )


def open_scope(element: ElementNode, program: RenderProgram) -> ColorScope:
    """Push the recognized colors of a color-scope element.

    Args:
        element (ElementNode): A color-scope element.
        program (RenderProgram): Program receiving the color changes.

    Returns:
        ColorScope: The pushed axes and their restore values.
    """
    scope = ColorScope()
    for axis in ColorAxis:
        attribute = element.find_attribute(axis.key, ignore_case=True)
        if attribute is None:
            continue
        color = TerminalColor.lookup(attribute.value)
        if color is None:
            logger.debug(
                "ignoring unknown %s color %r at offset %d",
                axis.value,
                attribute.value,
                element.position,
            )
            continue
        scope.restore[axis] = program.push_color(axis, color)
    return scope


def close_scope(scope: ColorScope, program: RenderProgram) -> None:
    """Restore every axis pushed by `scope`."""
    for axis, color in scope.restore.items():
        program.restore_color(axis, color)


def open_passthrough(element: ElementNode, program: RenderProgram) -> None:
    """Write the literal start tag of a passthrough element."""
    program.add_text(
        "".join([f"<{element.name}", *(f" {attribute.raw}" for attribute in element.attributes)])
    )
    program.add_text(">" if element.children else " />")


def close_passthrough(element: ElementNode, program: RenderProgram) -> None:
    """Write the literal end tag of a passthrough element that has children."""
    if element.children:
        program.add_text(f"</{element.name}>")


def _enter(element: ElementNode, program: RenderProgram) -> _Frame:
    if is_color_scope(element):
        return _Frame(element, scope=open_scope(element, program))
    open_passthrough(element, program)
    return _Frame(element, passthrough=True)


def _leave(frame: _Frame, program: RenderProgram) -> None:
    if frame.scope is not None:
        close_scope(frame.scope, program)
    elif frame.passthrough:
        close_passthrough(frame.element, program)


def resolve_tree(root: ElementNode, program: RenderProgram) -> RenderProgram:
    """Append the operations for the children of `root` to `program`.

    `root` itself is the synthetic parse root and produces no output.

    Args:
        root (ElementNode): Root returned by `tagtint.markup.parser.parse_markup`.
        program (RenderProgram): Program receiving the operations.

    Returns:
        RenderProgram: `program`, for chaining.
    """
    stack: list[_Frame] = [_Frame(root)]
    while stack:
        frame = stack[-1]
        children = frame.element.children
        if frame.index < len(children):
            child = children[frame.index]
            frame.index += 1
            if isinstance(child, TextNode):
                program.add_text(child.content)
            else:
                stack.append(_enter(child, program))
        else:
            stack.pop()
            _leave(frame, program)
    logger.debug("resolved markup: %s", program.summary())
    return program
