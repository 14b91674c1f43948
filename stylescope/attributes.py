"""Effective styling of a composite text.

A text built by concatenating independently styled texts is flattened
into an ordered sequence of chunks, each holding its own substring and
modifier list.  A trait (bold, colour, kerning, ...) is reported for the
whole text only when every chunk carries it and all chunks agree::

    attrs = TextAttributes.extract(Text.verbatim("Hello", bold()) + Text.verbatim("!"))
    attrs[0:5].is_bold()   # True
    attrs.is_bold()        # TextAttributeError: applied only to a subrange
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, TypeVar, Union

from .errors import AttributeNotFound, InspectionError, ModifierNotFound, TextAttributeError
from .navigator import attribute, attribute_label, type_tag
from .nodes import Color, Font, FontWeight, ModifierKind, Text

log = logging.getLogger(__name__)

V = TypeVar("V")


class _Missing(Enum):
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing.MISSING
"""Returned by trait extractors when a modifier does not carry the trait."""

Extractor = Callable[[Any], Union[V, _Missing]]


def text_string(text: Text) -> str:
    """Return the printable contents of *text*."""
    if _concatenation(text) is not None:
        return TextAttributes.extract(text).string
    try:
        return attribute("storage|verbatim", text, str)
    except AttributeNotFound:
        pass
    try:
        return attribute("storage|key", text, str)
    except AttributeNotFound:
        raise AttributeNotFound(label="string", parent="Text") from None


def _concatenation(text: Text) -> tuple[Text, Text] | None:
    try:
        first = attribute("storage|first", text, Text)
        second = attribute("storage|second", text, Text)
    except AttributeNotFound:
        return None
    return first, second


# ---------------------------------------------------------------------------
# Chunk model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Chunk:
    """A contiguous run of the text and the modifiers applied to it."""

    text: str
    modifiers: tuple[Any, ...] = ()

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class TextAttributes:
    """Ordered, immutable chunk sequence of a styled text."""

    chunks: tuple[Chunk, ...] = ()

    @classmethod
    def from_leaf(cls, text: str, modifiers: tuple[Any, ...] | list[Any] = ()) -> TextAttributes:
        return cls((Chunk(text, tuple(modifiers)),))

    @classmethod
    def extract(cls, text: Text) -> TextAttributes:
        """Flatten *text*, recursing into both sides of every concatenation."""
        parts = _concatenation(text)
        if parts is not None:
            first, second = parts
            return cls.extract(first) + cls.extract(second)
        modifiers = attribute_label("modifiers", text, tuple)
        return cls.from_leaf(text_string(text), modifiers)

    def __add__(self, other: TextAttributes) -> TextAttributes:
        if not isinstance(other, TextAttributes):
            return NotImplemented
        return TextAttributes(self.chunks + other.chunks)

    def __len__(self) -> int:
        return sum(chunk.length for chunk in self.chunks)

    @property
    def string(self) -> str:
        return "".join(chunk.text for chunk in self.chunks)

    @property
    def chunk_ranges(self) -> list[range]:
        """Character-offset range of each chunk.

        Offsets count code points, the unit of Python ``str`` indexing, so
        ``attrs[i:j]`` lines up with ``attrs.string[i:j]``.  A grapheme made
        of several code points (combining accents, flag emoji) spans several
        offsets.
        """
        ranges: list[range] = []
        start = 0
        for chunk in self.chunks:
            ranges.append(range(start, start + chunk.length))
            start += chunk.length
        return ranges

    @property
    def chunk_string_ranges(self) -> list[range]:
        """UTF-8 byte-offset range of each chunk within ``string``."""
        ranges: list[range] = []
        start = 0
        for chunk in self.chunks:
            end = start + len(chunk.text.encode("utf-8"))
            ranges.append(range(start, end))
            start = end
        return ranges

    # -- range subscripting ------------------------------------------------

    def __getitem__(self, key: slice) -> TextAttributes:
        """Chunks overlapping a character-offset slice, e.g. ``attrs[3:7]``."""
        if not isinstance(key, slice):
            raise TypeError(f"TextAttributes indices must be slices, not {type(key).__name__}")
        return self._select(_relative(key, len(self)), self.chunk_ranges)

    def at_positions(self, key: slice) -> TextAttributes:
        """Chunks overlapping a slice of UTF-8 byte offsets into ``string``."""
        return self._select(
            _relative(key, len(self.string.encode("utf-8"))), self.chunk_string_ranges
        )

    def _select(self, query: range, ranges: list[range]) -> TextAttributes:
        return TextAttributes(
            tuple(chunk for span, chunk in zip(ranges, self.chunks) if _overlaps(query, span))
        )

    # -- trait resolution --------------------------------------------------

    def common_trait(self, name: str, extract: Extractor) -> Any:
        """Return the value of trait *name* shared by every chunk.

        Each chunk contributes the value of the first of its modifiers for
        which *extract* does not return :data:`MISSING`.

        Raises
        ------
        TextAttributeError
            If there are no chunks, if only some chunks carry the trait,
            or if chunks disagree on its value.
        ModifierNotFound
            If no chunk carries the trait.
        """
        if not self.chunks:
            raise TextAttributeError("Invalid text range")

        traits = []
        for chunk in self.chunks:
            for modifier in chunk.modifiers:
                value = extract(modifier)
                if value is not MISSING:
                    traits.append(value)
                    break

        if not traits:
            raise ModifierNotFound(parent="Text", modifier=name)
        if len(traits) != len(self.chunks):
            raise TextAttributeError(f"Modifier '{name}' is applied only to a subrange")
        trait = traits[0]
        if any(value != trait for value in traits):
            raise TextAttributeError(f"Modifier '{name}' has different values in subranges")
        log.debug("Trait %r resolved to %r across %d chunks", name, trait, len(traits))
        return trait

    def is_italic(self) -> bool:
        return self.common_trait(
            "italic", lambda m: True if type_tag(m) is ModifierKind.ITALIC else MISSING
        ) is True

    def is_bold(self) -> bool:
        """Bold either through a ``bold`` weight or a bold text modifier.

        A weight that is inconsistent across the range is reported as such;
        a weight that is simply absent falls back to the bold modifier.
        """
        try:
            return self._font_weight("bold") is FontWeight.BOLD
        except TextAttributeError:
            raise
        except InspectionError as e:
            log.debug("No font weight for bold lookup (%s), checking bold modifier", e)
        return self.common_trait("bold", _bold) is True

    def font_weight(self) -> FontWeight:
        return self._font_weight("fontWeight")

    def _font_weight(self, name: str) -> FontWeight:
        return self.common_trait(name, _optional_path("weight|some", FontWeight))

    def font(self) -> Font:
        return self.common_trait("font", _optional_path("font|some", Font))

    def foreground_color(self) -> Color:
        return self.common_trait("foregroundColor", _optional_path("color|some", Color))

    def is_strikethrough(self) -> bool:
        return self.common_trait(
            "strikethrough", _line_style(ModifierKind.STRIKETHROUGH, "active", bool)
        )

    def strikethrough_color(self) -> Color | None:
        return self.common_trait(
            "strikethrough", _line_style(ModifierKind.STRIKETHROUGH, "color", (Color, type(None)))
        )

    def is_underline(self) -> bool:
        return self.common_trait("underline", _line_style(ModifierKind.UNDERLINE, "active", bool))

    def underline_color(self) -> Color | None:
        return self.common_trait(
            "underline", _line_style(ModifierKind.UNDERLINE, "color", (Color, type(None)))
        )

    def kerning(self) -> float:
        return self.common_trait("kerning", _number("kerning"))

    def tracking(self) -> float:
        return self.common_trait("tracking", _number("tracking"))

    def baseline_offset(self) -> float:
        return self.common_trait("baselineOffset", _number("baseline"))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _relative(key: slice, length: int) -> range:
    start, stop, step = key.indices(length)
    if step != 1:
        raise ValueError("TextAttributes slices do not support a step")
    return range(start, stop)


def _overlaps(a: range, b: range) -> bool:
    if not a or not b:
        return False
    return a.start < b.stop and b.start < a.stop


def _wrapped(modifier: Any, kind: ModifierKind) -> Any:
    """Return the modifier wrapped in an ``AnyTextModifier`` if it is of *kind*."""
    try:
        child = attribute_label("any_text_modifier", modifier)
    except AttributeNotFound:
        return MISSING
    return child if type_tag(child) is kind else MISSING


def _bold(modifier: Any) -> bool | _Missing:
    return True if _wrapped(modifier, ModifierKind.BOLD) is not MISSING else MISSING


def _optional_path(path: str, expected: type) -> Extractor:
    def extract(modifier: Any) -> Any:
        try:
            return attribute(path, modifier, expected)
        except AttributeNotFound:
            return MISSING

    return extract


def _line_style(kind: ModifierKind, label: str, expected: type | tuple[type, ...]) -> Extractor:
    def extract(modifier: Any) -> Any:
        child = _wrapped(modifier, kind)
        if child is MISSING:
            return MISSING
        try:
            return attribute(f"line_style|some|{label}", child, expected)
        except AttributeNotFound:
            return MISSING

    return extract


def _number(label: str) -> Extractor:
    def extract(modifier: Any) -> Any:
        try:
            value = attribute_label(label, modifier, (int, float))
        except AttributeNotFound:
            return MISSING
        if isinstance(value, bool):
            return MISSING
        return float(value)

    return extract


def attributes(text: Text) -> TextAttributes:
    """Shorthand for :meth:`TextAttributes.extract`."""
    return TextAttributes.extract(text)
