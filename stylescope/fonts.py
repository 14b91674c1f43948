"""Font attribute lookups.

Each lookup walks ``provider|base|<property>`` on a :class:`~.nodes.Font`.
Navigation failures are reported as ``AttributeNotFound`` scoped to the
property name and the ``Font`` parent, not to the raw path.
"""

from __future__ import annotations

import logging

from .errors import AttributeNotFound
from .navigator import attribute, type_tag
from .nodes import Font, FontDesign, FontWeight, ProviderKind, TextStyle

log = logging.getLogger(__name__)


def _lookup(font: Font, label: str, expected: type | tuple[type, ...]):
    try:
        return attribute(f"provider|base|{label}", font, expected)
    except AttributeNotFound:
        raise AttributeNotFound(label=label, parent="Font") from None


def font_size(font: Font) -> float:
    size = _lookup(font, "size", (int, float))
    if isinstance(size, bool):
        raise AttributeNotFound(label="size", parent="Font")
    return float(size)


def font_name(font: Font) -> str:
    return _lookup(font, "name", str)


def font_weight(font: Font) -> FontWeight:
    return _lookup(font, "weight", FontWeight)


def font_design(font: Font) -> FontDesign:
    return _lookup(font, "design", FontDesign)


def font_style(font: Font) -> TextStyle:
    """Return the dynamic text style of *font*.

    Text-style fonts keep it under ``style``; named fonts that scale
    relative to a style keep it under ``text_style``.
    """
    for label in ("style", "text_style"):
        try:
            return attribute(f"provider|base|{label}", font, TextStyle)
        except AttributeNotFound:
            continue
    raise AttributeNotFound(label="style", parent="Font")


def is_fixed_size(font: Font) -> bool:
    """True for a named font that does not scale with any text style."""
    try:
        provider = attribute("provider|base", font)
    except AttributeNotFound:
        return False
    if type_tag(provider) is not ProviderKind.NAMED:
        return False
    try:
        font_style(font)
    except AttributeNotFound:
        return True
    log.debug("Font %r scales with a text style", font)
    return False
