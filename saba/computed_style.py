"""Computed CSS values of a node and their defaults."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from saba.dom import Document, Element, ElementKind, Node, Text
from saba.errors import UnexpectedInputError

_NAMED_COLORS = {
    "black": "#000000",
    "silver": "#c0c0c0",
    "gray": "#808080",
    "white": "#ffffff",
    "maroon": "#800000",
    "red": "#ff0000",
    "purple": "#800080",
    "fuchsia": "#ff00ff",
    "green": "#008000",
    "lime": "#00ff00",
    "olive": "#808000",
    "yellow": "#ffff00",
    "navy": "#000080",
    "blue": "#0000ff",
    "teal": "#008080",
    "aqua": "#00ffff",
    "orange": "#ffa500",
    "lightgray": "#d3d3d3",
}
_COLOR_NAMES = {code: name for name, code in _NAMED_COLORS.items()}


@dataclass(frozen=True)
class Color:
    """A color with its ``#rrggbb`` code and, when known, its name."""

    name: Optional[str]
    code: str

    @classmethod
    def from_name(cls, name: str) -> Color:
        """Look up a named color."""
        try:
            code = _NAMED_COLORS[name]
        except KeyError:
            raise UnexpectedInputError(f"color name {name!r} is not supported yet") from None
        return cls(name=name, code=code)

    @classmethod
    def from_code(cls, code: str) -> Color:
        """Look up a color by its ``#rrggbb`` code."""
        if not code.startswith("#") or len(code) != 7:
            raise UnexpectedInputError(f"invalid color code {code}")
        try:
            name = _COLOR_NAMES[code]
        except KeyError:
            raise UnexpectedInputError(f"color code {code!r} is not supported yet") from None
        return cls(name=name, code=code)

    @classmethod
    def white(cls) -> Color:
        """The initial background color."""
        return cls(name="white", code="#ffffff")

    @classmethod
    def black(cls) -> Color:
        """The initial text color."""
        return cls(name="black", code="#000000")


def _element_kind(node: Node) -> Optional[ElementKind]:
    kind = node.kind
    return kind.kind if isinstance(kind, Element) else None


class FontSize(Enum):
    """Absolute font sizes."""

    MEDIUM = "medium"
    XLARGE = "x-large"
    XXLARGE = "xx-large"

    @classmethod
    def default_for(cls, node: Node) -> FontSize:
        """The initial font size of ``node``."""
        element_kind = _element_kind(node)
        if element_kind is ElementKind.H1:
            return cls.XXLARGE
        if element_kind is ElementKind.H2:
            return cls.XLARGE
        return cls.MEDIUM


class DisplayType(Enum):
    """Values of the ``display`` property."""

    BLOCK = "block"
    INLINE = "inline"
    DISPLAY_NONE = "none"

    @classmethod
    def default_for(cls, node: Node) -> DisplayType:
        """The initial display type of ``node``."""
        kind = node.kind
        if isinstance(kind, Document):
            return cls.BLOCK
        if isinstance(kind, Element):
            return cls.BLOCK if kind.is_block_element() else cls.INLINE
        if isinstance(kind, Text):
            return cls.INLINE
        raise UnexpectedInputError(f"unknown node kind {kind!r}")

    @classmethod
    def from_name(cls, name: str) -> DisplayType:
        """Parse a ``display`` value."""
        try:
            return cls(name)
        except ValueError:
            raise UnexpectedInputError(f"display {name!r} is not supported yet") from None


class TextDecoration(Enum):
    """Values of the ``text-decoration`` property."""

    NONE = "none"
    UNDERLINE = "underline"

    @classmethod
    def default_for(cls, node: Node) -> TextDecoration:
        """The initial text decoration of ``node``: links are underlined."""
        if _element_kind(node) is ElementKind.A:
            return cls.UNDERLINE
        return cls.NONE


@dataclass
class ComputedStyle:
    """The style values of one node; None until set or defaulted."""

    background_color: Optional[Color] = None
    color: Optional[Color] = None
    display: Optional[DisplayType] = None
    font_size: Optional[FontSize] = None
    text_decoration: Optional[TextDecoration] = None
    height: Optional[float] = None
    width: Optional[float] = None

    def defaulting(self, node: Node, parent_style: Optional[ComputedStyle]) -> None:
        """Fill unset values, inheriting non-initial ones from ``parent_style``."""
        if parent_style is not None:
            if self.background_color is None and _differs(
                parent_style.background_color, Color.white()
            ):
                self.background_color = parent_style.background_color
            if self.color is None and _differs(parent_style.color, Color.black()):
                self.color = parent_style.color
            if self.font_size is None and _differs(parent_style.font_size, FontSize.MEDIUM):
                self.font_size = parent_style.font_size
            if self.text_decoration is None and _differs(
                parent_style.text_decoration, TextDecoration.NONE
            ):
                self.text_decoration = parent_style.text_decoration

        if self.background_color is None:
            self.background_color = Color.white()
        if self.color is None:
            self.color = Color.black()
        if self.display is None:
            self.display = DisplayType.default_for(node)
        if self.font_size is None:
            self.font_size = FontSize.default_for(node)
        if self.text_decoration is None:
            self.text_decoration = TextDecoration.default_for(node)
        if self.height is None:
            self.height = 0.0
        if self.width is None:
            self.width = 0.0


def _differs(value: object, initial: object) -> bool:
    return value is not None and value != initial