# topmark:header:start
#
#   project      : TagTint
#   file         : nodes.py
#   file_relpath : src/tagtint/markup/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup node tree produced by the parser.

A tree is built once per parse call and discarded after traversal. Children
are plain ordered lists; traversal code walks them by index.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Attribute:
    """One attribute of an element.

    Attributes:
        name (str): Attribute name as written.
        value (str): Value with entities decoded.
        raw (str): Exact source text, e.g. ``a='1'``; used to reproduce
            passthrough elements verbatim.
    """

    name: str
    value: str
    raw: str


@dataclass
class TextNode:
    """Character data (entities already decoded)."""

    content: str


@dataclass
class ElementNode:
    """An element with ordered attributes and children.

    Attributes:
        name (str): Tag name as written.
        attributes (list[Attribute]): Attributes in source order.
        children (list[MarkupNode]): Child nodes in source order.
        position (int): Offset of the element's ``<`` in the markup
            (0 for the synthetic root).
    """

    name: str
    attributes: list[Attribute] = field(default_factory=list)
    children: list[MarkupNode] = field(default_factory=list)
    position: int = 0

    def find_attribute(self, name: str, *, ignore_case: bool = False) -> Attribute | None:
        """Return the first attribute called `name`, or None.

        Args:
            name (str): Attribute name to look for.
            ignore_case (bool): Compare names case-insensitively.

        Returns:
            Attribute | None: The matching attribute, if any.
        """
        wanted = name.lower() if ignore_case else name
        for attribute in self.attributes:
            candidate = attribute.name.lower() if ignore_case else attribute.name
            if candidate == wanted:
                return attribute
        return None


MarkupNode = Union[TextNode, ElementNode]
