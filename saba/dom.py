"""The document tree and helpers that search it."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Union

from saba.errors import UnexpectedInputError


@dataclass
class Attribute:
    """A name/value pair on an element, built up one character at a time."""

    name: str = ""
    value: str = ""

    def add_char(self, c: str, is_name: bool) -> None:
        """Append ``c`` to the name or to the value."""
        if is_name:
            self.name += c
        else:
            self.value += c


class ElementKind(Enum):
    """The element types the browser knows about."""

    HTML = "html"
    HEAD = "head"
    STYLE = "style"
    SCRIPT = "script"
    BODY = "body"
    P = "p"
    H1 = "h1"
    H2 = "h2"
    A = "a"

    @classmethod
    def from_name(cls, name: str) -> ElementKind:
        """Look up a kind by its tag name."""
        try:
            return cls(name)
        except ValueError:
            raise UnexpectedInputError(f"unimplemented element name {name!r}") from None

    def __str__(self) -> str:
        return self.value


_BLOCK_ELEMENTS = frozenset({ElementKind.BODY, ElementKind.H1, ElementKind.H2, ElementKind.P})


@dataclass
class Element:
    """An element node's tag and attributes."""

    kind: ElementKind
    attributes: list[Attribute] = field(default_factory=list)

    def get_attribute(self, name: str) -> Optional[str]:
        """Return the value of the first attribute called ``name``."""
        for attr in self.attributes:
            if attr.name == name:
                return attr.value
        return None

    def is_block_element(self) -> bool:
        """Whether the element is displayed as a block by default."""
        return self.kind in _BLOCK_ELEMENTS


@dataclass
class Document:
    """The kind of the root node."""


@dataclass
class Text:
    """The kind of a text node, holding its characters."""

    text: str = ""


NodeKind = Union[Document, Element, Text]


def _same_kind(a: NodeKind, b: NodeKind) -> bool:
    if isinstance(a, Element):
        return isinstance(b, Element) and a.kind == b.kind
    return type(a) is type(b)


@dataclass(eq=False)
class Node:
    """A node of the document tree, linked to its parent, children and siblings.

    Two nodes compare equal when they are of the same kind: both documents,
    both text, or elements of the same element kind.
    """

    kind: NodeKind
    parent: Optional[Node] = field(default=None, repr=False)
    first_child: Optional[Node] = field(default=None, repr=False)
    last_child: Optional[Node] = field(default=None, repr=False)
    previous_sibling: Optional[Node] = field(default=None, repr=False)
    next_sibling: Optional[Node] = field(default=None, repr=False)
    window: Optional[Window] = field(default=None, repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return _same_kind(self.kind, other.kind)

    __hash__ = None  # type: ignore[assignment]

    def get_element(self) -> Optional[Element]:
        """The element of an element node, otherwise None."""
        return self.kind if isinstance(self.kind, Element) else None

    def element_kind(self) -> Optional[ElementKind]:
        """The element kind of an element node, otherwise None."""
        element = self.get_element()
        return element.kind if element is not None else None

    def children(self) -> Iterator[Node]:
        """Iterate over the direct children in order."""
        child = self.first_child
        while child is not None:
            yield child
            child = child.next_sibling


class Window:
    """Holds the document of a page."""

    def __init__(self) -> None:
        self.document = Node(Document())
        self.document.window = self


def _walk(node: Optional[Node]) -> Iterator[Node]:
    """Pre-order walk of ``node``, its descendants and its following siblings."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current is None:
            continue
        yield current
        stack.append(current.next_sibling)
        stack.append(current.first_child)


def get_element_by_id(node: Optional[Node], id_name: str) -> Optional[Node]:
    """Find the first element whose ``id`` attribute equals ``id_name``."""
    for current in _walk(node):
        element = current.get_element()
        if element is not None and any(
            attr.name == "id" and attr.value == id_name for attr in element.attributes
        ):
            return current
    return None


def get_target_element_node(node: Optional[Node], element_kind: ElementKind) -> Optional[Node]:
    """Find the first element node of the given kind."""
    for current in _walk(node):
        if current.element_kind() == element_kind:
            return current
    return None


def _first_text_of(root: Node, element_kind: ElementKind) -> str:
    target = get_target_element_node(root, element_kind)
    if target is None or target.first_child is None:
        return ""
    kind = target.first_child.kind
    return kind.text if isinstance(kind, Text) else ""


def get_style_content(root: Node) -> str:
    """The text inside the first ``<style>`` element, or an empty string."""
    return _first_text_of(root, ElementKind.STYLE)


def get_js_content(root: Node) -> str:
    """The text inside the first ``<script>`` element, or an empty string."""
    return _first_text_of(root, ElementKind.SCRIPT)


def convert_dom_to_string(root: Optional[Node]) -> str:
    """Render the tree one node per line, children indented by two spaces."""
    lines = [""]
    stack: list[tuple[Optional[Node], int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if node is None:
            continue
        lines.append(f"{'  ' * depth}{node.kind!r}")
        stack.append((node.next_sibling, depth))
        stack.append((node.first_child, depth + 1))
    return "\n".join(lines) + "\n"