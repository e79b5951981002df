"""Closed set of node kinds seen when walking a paragraph's children.

Everything downstream of :func:`classify_node` works on these dataclasses
instead of bs4 objects, so the folds in the vocabulary parser and transcript
encoder only have to handle four cases.
"""

from dataclasses import dataclass
from typing import List, Union

from bs4.element import NavigableString, PageElement, PreformattedString, Tag

EMPHASIS_TAGS = frozenset({"strong", "b"})
LINE_BREAK_TAG = "br"


@dataclass(frozen=True)
class Emphasis:
    """A <strong>/<b> element; ``text`` is its full, untrimmed text."""

    text: str


@dataclass(frozen=True)
class LineBreak:
    """A <br> element."""


@dataclass(frozen=True)
class Text:
    """A bare text node."""

    text: str


@dataclass(frozen=True)
class OtherElement:
    """Any other element (links, spans, comments...)."""

    name: str
    text: str = ""


Node = Union[Emphasis, LineBreak, Text, OtherElement]


def classify_node(node: PageElement) -> Node:
    """Map a bs4 node onto one of the node kinds."""
    if isinstance(node, Tag):
        name = (node.name or "").lower()
        if name in EMPHASIS_TAGS:
            return Emphasis(node.get_text())
        if name == LINE_BREAK_TAG:
            return LineBreak()
        return OtherElement(name, node.get_text())
    if isinstance(node, PreformattedString):
        # Comments, CDATA, doctype and processing instructions carry no content
        return OtherElement(f"#{type(node).__name__.lower()}")
    if isinstance(node, NavigableString):
        return Text(str(node))
    raise TypeError(f"Unsupported node type: {type(node)!r}")


def child_nodes(tag: Tag) -> List[Node]:
    """Classify the direct children of ``tag`` in document order."""
    return [classify_node(child) for child in tag.children]


def is_blank_text(node: Node) -> bool:
    return isinstance(node, Text) and not node.text.strip()
