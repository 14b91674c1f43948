"""Node model for styled text snapshots.

A snapshot of a styled text is a tree of frozen dataclasses.  The set of
node kinds is closed: every class is registered in :data:`NODE_TYPES` and
the navigator refuses to step into anything else.

Modifier and font-provider classes carry a ``kind`` tag so that variants
sharing a payload shape (underline and strikethrough both hold a
``line_style``) are told apart by an ordinary enum comparison.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

from PIL import ImageColor

NODE_TYPES: dict[str, type] = {}


def _node(cls: type) -> type:
    NODE_TYPES[cls.__name__] = cls
    return cls


# ---------------------------------------------------------------------------
# Tags and enumerations
# ---------------------------------------------------------------------------


class ModifierKind(str, Enum):
    """Closed set of text modifier variants."""

    COLOR = "color"
    FONT = "font"
    WEIGHT = "weight"
    ITALIC = "italic"
    KERNING = "kerning"
    TRACKING = "tracking"
    BASELINE_OFFSET = "baseline_offset"
    ANY_TEXT = "any_text"
    BOLD = "bold"
    STRIKETHROUGH = "strikethrough"
    UNDERLINE = "underline"


class ProviderKind(str, Enum):
    """How a font's parameters are specified."""

    NAMED = "named"  # custom font by name and point size
    SYSTEM = "system"  # system font at a point size
    TEXT_STYLE = "text_style"  # dynamic type style


class FontWeight(str, Enum):
    ULTRA_LIGHT = "ultra_light"
    THIN = "thin"
    LIGHT = "light"
    REGULAR = "regular"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    HEAVY = "heavy"
    BLACK = "black"


class FontDesign(str, Enum):
    DEFAULT = "default"
    SERIF = "serif"
    ROUNDED = "rounded"
    MONOSPACED = "monospaced"


class TextStyle(str, Enum):
    LARGE_TITLE = "large_title"
    TITLE = "title"
    TITLE2 = "title2"
    TITLE3 = "title3"
    HEADLINE = "headline"
    SUBHEADLINE = "subheadline"
    BODY = "body"
    CALLOUT = "callout"
    FOOTNOTE = "footnote"
    CAPTION = "caption"
    CAPTION2 = "caption2"


# ---------------------------------------------------------------------------
# Colour
# ---------------------------------------------------------------------------


@_node
@dataclass(frozen=True)
class Color:
    """An RGBA colour, 8 bits per channel."""

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 255

    @classmethod
    def named(cls, spec: str) -> Color:
        """Build a colour from a CSS name or ``#rrggbb``/``rgb()`` spec."""
        r, g, b, a = ImageColor.getcolor(spec, "RGBA")
        return cls(r, g, b, a)

    def hex(self) -> str:
        if self.alpha == 255:
            return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}{self.alpha:02x}"


# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------


@_node
@dataclass(frozen=True)
class NamedProvider:
    kind: ClassVar[ProviderKind] = ProviderKind.NAMED

    name: str = ""
    size: float = 0.0
    text_style: TextStyle | None = None  # scales relative to this style


@_node
@dataclass(frozen=True)
class SystemProvider:
    kind: ClassVar[ProviderKind] = ProviderKind.SYSTEM

    size: float = 0.0
    weight: FontWeight = FontWeight.REGULAR
    design: FontDesign = FontDesign.DEFAULT


@_node
@dataclass(frozen=True)
class TextStyleProvider:
    kind: ClassVar[ProviderKind] = ProviderKind.TEXT_STYLE

    style: TextStyle = TextStyle.BODY
    weight: FontWeight | None = None
    design: FontDesign | None = None


Provider = Union[NamedProvider, SystemProvider, TextStyleProvider]


@_node
@dataclass(frozen=True)
class FontBox:
    """Type-erased holder of a font provider."""

    base: Provider = field(default_factory=TextStyleProvider)


@_node
@dataclass(frozen=True)
class Font:
    provider: FontBox = field(default_factory=FontBox)

    @classmethod
    def custom(cls, name: str, size: float, relative_to: TextStyle | None = None) -> Font:
        return cls(FontBox(NamedProvider(name=name, size=size, text_style=relative_to)))

    @classmethod
    def system(
        cls,
        size: float,
        weight: FontWeight = FontWeight.REGULAR,
        design: FontDesign = FontDesign.DEFAULT,
    ) -> Font:
        return cls(FontBox(SystemProvider(size=size, weight=weight, design=design)))

    @classmethod
    def styled(
        cls,
        style: TextStyle,
        weight: FontWeight | None = None,
        design: FontDesign | None = None,
    ) -> Font:
        return cls(FontBox(TextStyleProvider(style=style, weight=weight, design=design)))


# ---------------------------------------------------------------------------
# Modifiers
# ---------------------------------------------------------------------------


@_node
@dataclass(frozen=True)
class LineStyle:
    active: bool = True
    color: Color | None = None


@_node
@dataclass(frozen=True)
class BoldTextModifier:
    kind: ClassVar[ModifierKind] = ModifierKind.BOLD


@_node
@dataclass(frozen=True)
class StrikethroughTextModifier:
    kind: ClassVar[ModifierKind] = ModifierKind.STRIKETHROUGH

    line_style: LineStyle | None = None


@_node
@dataclass(frozen=True)
class UnderlineTextModifier:
    kind: ClassVar[ModifierKind] = ModifierKind.UNDERLINE

    line_style: LineStyle | None = None


WrappedModifier = Union[BoldTextModifier, StrikethroughTextModifier, UnderlineTextModifier]


@_node
@dataclass(frozen=True)
class AnyTextModifier:
    kind: ClassVar[ModifierKind] = ModifierKind.ANY_TEXT

    any_text_modifier: WrappedModifier = field(default_factory=BoldTextModifier)


@_node
@dataclass(frozen=True)
class ColorModifier:
    kind: ClassVar[ModifierKind] = ModifierKind.COLOR

    color: Color | None = None


@_node
@dataclass(frozen=True)
class FontModifier:
    kind: ClassVar[ModifierKind] = ModifierKind.FONT

    font: Font | None = None


@_node
@dataclass(frozen=True)
class WeightModifier:
    kind: ClassVar[ModifierKind] = ModifierKind.WEIGHT

    weight: FontWeight | None = None


@_node
@dataclass(frozen=True)
class ItalicModifier:
    kind: ClassVar[ModifierKind] = ModifierKind.ITALIC


@_node
@dataclass(frozen=True)
class KerningModifier:
    kind: ClassVar[ModifierKind] = ModifierKind.KERNING

    kerning: float = 0.0


@_node
@dataclass(frozen=True)
class TrackingModifier:
    kind: ClassVar[ModifierKind] = ModifierKind.TRACKING

    tracking: float = 0.0


@_node
@dataclass(frozen=True)
class BaselineOffsetModifier:
    kind: ClassVar[ModifierKind] = ModifierKind.BASELINE_OFFSET

    baseline: float = 0.0


Modifier = Union[
    ColorModifier,
    FontModifier,
    WeightModifier,
    ItalicModifier,
    KerningModifier,
    TrackingModifier,
    BaselineOffsetModifier,
    AnyTextModifier,
]


def bold() -> AnyTextModifier:
    return AnyTextModifier(BoldTextModifier())


def underline(active: bool = True, color: Color | None = None) -> AnyTextModifier:
    return AnyTextModifier(UnderlineTextModifier(LineStyle(active=active, color=color)))


def strikethrough(active: bool = True, color: Color | None = None) -> AnyTextModifier:
    return AnyTextModifier(StrikethroughTextModifier(LineStyle(active=active, color=color)))


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


@_node
@dataclass(frozen=True)
class VerbatimStorage:
    verbatim: str = ""


@_node
@dataclass(frozen=True)
class LocalizedStorage:
    key: str = ""
    table: str | None = None


@_node
@dataclass(frozen=True)
class ConcatenatedStorage:
    first: Text
    second: Text


Storage = Union[VerbatimStorage, LocalizedStorage, ConcatenatedStorage]


@_node
@dataclass(frozen=True)
class Text:
    """A text node: its storage plus the modifiers applied to it."""

    storage: Storage = field(default_factory=VerbatimStorage)
    modifiers: tuple[Modifier, ...] = ()

    @classmethod
    def verbatim(cls, string: str, *modifiers: Modifier) -> Text:
        return cls(VerbatimStorage(string), tuple(modifiers))

    def modified(self, *modifiers: Modifier) -> Text:
        """Return a copy with *modifiers* appended."""
        return Text(self.storage, self.modifiers + tuple(modifiers))

    def __add__(self, other: Text) -> Text:
        if not isinstance(other, Text):
            return NotImplemented
        return Text(ConcatenatedStorage(self, other))
