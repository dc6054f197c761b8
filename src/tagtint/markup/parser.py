# topmark:header:start
#
#   project      : TagTint
#   file         : parser.py
#   file_relpath : src/tagtint/markup/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse TagTint markup into a node tree.

The grammar is the element subset of XML 1.0:

- start tags ``<name attr='v' attr2="v2">``, empty tags ``<name />`` and end
  tags ``</name>``; end tags must close the innermost open element;
- single- or double-quoted attribute values (no ``<``, no duplicate names);
- the five predefined entities plus numeric character references, decoded
  in text and attribute values;
- comments ``<!-- ... -->`` (kept verbatim as text) and CDATA sections
  (their content is text).

Line endings are normalized to ``\\n`` before parsing. Parsing never recurses:
open elements live on an explicit stack under a synthetic root, so any number
of top-level siblings (or bare text) is accepted.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from tagtint.config.logging import get_logger
from tagtint.markup.errors import MarkupSyntaxError
from tagtint.markup.nodes import Attribute, ElementNode, TextNode

if TYPE_CHECKING:
    from tagtint.config.logging import TagtintLogger

logger: TagtintLogger = get_logger(__name__)

ROOT_NAME: Final[str] = ""

_NAME: Final[str] = r"(?:[^\W\d]|:)[\w.\-:]*"

# group 1: tag name
_START_TAG_RE: Final[re.Pattern[str]] = re.compile(rf"<({_NAME})")
# group 1: tag name
_END_TAG_RE: Final[re.Pattern[str]] = re.compile(rf"</({_NAME})\s*>")
# group 1: name, group 2: double-quoted value, group 3: single-quoted value
_ATTRIBUTE_RE: Final[re.Pattern[str]] = re.compile(
    rf"\s+({_NAME})\s*=\s*(?:\"([^<\"]*)\"|'([^<']*)')"
)
# group 1: "/" for an empty-element tag
_TAG_CLOSE_RE: Final[re.Pattern[str]] = re.compile(r"\s*(/?)>")
# group 1: decimal, group 2: hexadecimal, group 3: entity name
_ENTITY_RE: Final[re.Pattern[str]] = re.compile(r"&(?:#([0-9]+)|#x([0-9a-fA-F]+)|(\w+));")
# Characters outside the XML 1.0 Char production (CR is gone after normalization).
_INVALID_CHAR_RE: Final[re.Pattern[str]] = re.compile(
    r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]"
)

_NAMED_ENTITIES: Final[dict[str, str]] = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "apos": "'",
}

_ESCAPE_TABLE: Final[dict[str, str]] = {"&": "&amp;", "<": "&lt;", ">": "&gt;"}

_COMMENT_OPEN: Final[str] = "<!--"
_COMMENT_CLOSE: Final[str] = "-->"
_CDATA_OPEN: Final[str] = "<![CDATA["
_CDATA_CLOSE: Final[str] = "]]>"


def normalize_line_endings(markup: str) -> str:
    """Translate ``\\r\\n`` and lone ``\\r`` to ``\\n``."""
    return markup.replace("\r\n", "\n").replace("\r", "\n")


def escape(text: str) -> str:
    """Escape `text` so that it renders literally when embedded in markup.

    Args:
        text (str): Arbitrary text, e.g. user input.

    Returns:
        str: `text` with ``&``, ``<`` and ``>`` replaced by entity references.
    """
    return "".join(_ESCAPE_TABLE.get(char, char) for char in text)


def replace_invalid_characters(text: str, replacement: str = "\ufffd") -> str:
    """Replace characters markup may not contain (C0 controls, surrogates, ...)."""
    return _INVALID_CHAR_RE.sub(replacement, text)


class MarkupParser:
    """Single-use parser turning one markup string into a node tree.

    Args:
        markup (str): Markup text; line endings are normalized on construction.
    """

    def __init__(self, markup: str) -> None:
        self.markup: str = normalize_line_endings(markup)
        self.index: int = 0

    def parse(self) -> ElementNode:
        """Parse the whole markup.

        Returns:
            ElementNode: The synthetic root element (name ``""``) whose
                children are the top-level nodes of the markup.

        Raises:
            MarkupSyntaxError: If the markup is not well formed.
        """
        self._check_characters()

        root = ElementNode(ROOT_NAME)
        stack: list[ElementNode] = [root]
        markup = self.markup
        self.index = 0

        while self.index < len(markup):
            lt = markup.find("<", self.index)
            if lt == -1:
                lt = len(markup)
            if lt > self.index:
                self._add_text(stack[-1], markup[self.index : lt], self.index)
                self.index = lt
                continue

            if markup.startswith(_COMMENT_OPEN, lt):
                self._parse_comment(stack[-1])
            elif markup.startswith(_CDATA_OPEN, lt):
                self._parse_cdata(stack[-1])
            elif markup.startswith("</", lt):
                self._parse_end_tag(stack)
            else:
                self._parse_start_tag(stack)

        if len(stack) > 1:
            unclosed = stack[-1]
            raise MarkupSyntaxError(f"Unclosed tag <{unclosed.name}>", markup, unclosed.position)

        logger.debug("parsed markup into %d top-level node(s)", len(root.children))
        return root

    def _error(self, message: str, position: int) -> MarkupSyntaxError:
        return MarkupSyntaxError(message, self.markup, position)

    def _check_characters(self) -> None:
        match = _INVALID_CHAR_RE.search(self.markup)
        if match:
            raise self._error(
                f"Invalid character U+{ord(match.group()):04X} in markup", match.start()
            )

    def _add_text(self, parent: ElementNode, text: str, offset: int) -> None:
        content = self._decode(text, offset)
        if content:
            parent.children.append(TextNode(content))

    def _parse_comment(self, parent: ElementNode) -> None:
        start = self.index
        body_start = start + len(_COMMENT_OPEN)
        end = self.markup.find(_COMMENT_CLOSE, body_start)
        if end == -1:
            raise self._error("Unterminated comment", start)
        body = self.markup[body_start:end]
        if "--" in body or body.endswith("-"):
            raise self._error("'--' is not allowed inside a comment", start)
        self.index = end + len(_COMMENT_CLOSE)
        # Comments are shown as written
        parent.children.append(TextNode(self.markup[start : self.index]))

    def _parse_cdata(self, parent: ElementNode) -> None:
        start = self.index
        body_start = start + len(_CDATA_OPEN)
        end = self.markup.find(_CDATA_CLOSE, body_start)
        if end == -1:
            raise self._error("Unterminated CDATA section", start)
        if end > body_start:
            parent.children.append(TextNode(self.markup[body_start:end]))
        self.index = end + len(_CDATA_CLOSE)

    def _parse_end_tag(self, stack: list[ElementNode]) -> None:
        start = self.index
        match = _END_TAG_RE.match(self.markup, start)
        if match is None:
            raise self._error("Malformed closing tag", start)
        name = match.group(1)
        if len(stack) == 1:
            raise self._error(f"Unexpected closing tag </{name}>", start)
        if name != stack[-1].name:
            raise self._error(
                f"Mismatched closing tag </{name}>, expected </{stack[-1].name}>", start
            )
        stack.pop()
        self.index = match.end()

    def _parse_start_tag(self, stack: list[ElementNode]) -> None:
        start = self.index
        markup = self.markup
        match = _START_TAG_RE.match(markup, start)
        if match is None:
            if markup.startswith(("<!", "<?"), start):
                raise self._error("Unsupported markup declaration", start)
            raise self._error("'<' does not start a valid tag", start)

        name = match.group(1)
        attributes: list[Attribute] = []
        seen: set[str] = set()
        pos = match.end()
        while True:
            close = _TAG_CLOSE_RE.match(markup, pos)
            if close is not None:
                break
            attr = _ATTRIBUTE_RE.match(markup, pos)
            if attr is None:
                raise self._error(f"Malformed attribute or unterminated tag <{name}>", pos)
            attr_name = attr.group(1)
            if attr_name in seen:
                raise self._error(f"Duplicate attribute '{attr_name}' in <{name}>", attr.start(1))
            seen.add(attr_name)
            value_group = 2 if attr.group(2) is not None else 3
            value = self._decode(attr.group(value_group), attr.start(value_group))
            attributes.append(
                Attribute(name=attr_name, value=value, raw=markup[attr.start(1) : attr.end()])
            )
            pos = attr.end()

        element = ElementNode(name, attributes, position=start)
        stack[-1].children.append(element)
        if not close.group(1):
            stack.append(element)
        self.index = close.end()

    def _decode(self, text: str, offset: int) -> str:
        """Decode entity references in `text`, found at `offset` in the markup."""
        if "&" not in text:
            return text
        parts: list[str] = []
        pos = 0
        while True:
            amp = text.find("&", pos)
            if amp == -1:
                parts.append(text[pos:])
                break
            parts.append(text[pos:amp])
            match = _ENTITY_RE.match(text, amp)
            if match is None:
                raise self._error(
                    "Invalid entity reference ('&' must be written '&amp;')", offset + amp
                )
            parts.append(self._resolve_entity(match, offset + amp))
            pos = match.end()
        return "".join(parts)

    def _resolve_entity(self, match: re.Match[str], position: int) -> str:
        decimal, hexadecimal, name = match.groups()
        if name is not None:
            try:
                return _NAMED_ENTITIES[name]
            except KeyError:
                raise self._error(f"Undefined entity '&{name};'", position) from None
        code = int(decimal, 10) if decimal is not None else int(hexadecimal, 16)
        if code > 0x10FFFF or _INVALID_CHAR_RE.match(chr(code)):
            raise self._error(f"Invalid character reference '{match.group()}'", position)
        return chr(code)


def parse_markup(markup: str) -> ElementNode:
    """Parse `markup` into a node tree under a synthetic root element.

    Args:
        markup (str): Markup text.

    Returns:
        ElementNode: The synthetic root; its children are the top-level nodes.

    Raises:
        MarkupSyntaxError: If the markup is not well formed.
    """
    return MarkupParser(markup).parse()
