"""Inspect the effective styling of composite styled text."""

__version__ = "0.1.0"

from .attributes import MISSING, Chunk, TextAttributes, attributes, text_string
from .errors import (
    AttributeNotFound,
    InspectionError,
    ModifierNotFound,
    SnapshotError,
    TextAttributeError,
)
from .fonts import font_design, font_name, font_size, font_style, font_weight, is_fixed_size
from .navigator import attribute, attribute_label, type_tag
from .nodes import (
    AnyTextModifier,
    BaselineOffsetModifier,
    BoldTextModifier,
    Color,
    ColorModifier,
    ConcatenatedStorage,
    Font,
    FontBox,
    FontDesign,
    FontModifier,
    FontWeight,
    ItalicModifier,
    KerningModifier,
    LineStyle,
    LocalizedStorage,
    ModifierKind,
    NamedProvider,
    ProviderKind,
    StrikethroughTextModifier,
    SystemProvider,
    Text,
    TextStyle,
    TextStyleProvider,
    TrackingModifier,
    UnderlineTextModifier,
    VerbatimStorage,
    WeightModifier,
    bold,
    strikethrough,
    underline,
)
from .snapshot import load_node, load_snapshot, load_text

__all__ = [
    "MISSING",
    "Chunk",
    "TextAttributes",
    "attributes",
    "text_string",
    "AttributeNotFound",
    "InspectionError",
    "ModifierNotFound",
    "SnapshotError",
    "TextAttributeError",
    "font_design",
    "font_name",
    "font_size",
    "font_style",
    "font_weight",
    "is_fixed_size",
    "attribute",
    "attribute_label",
    "type_tag",
    "AnyTextModifier",
    "BaselineOffsetModifier",
    "BoldTextModifier",
    "Color",
    "ColorModifier",
    "ConcatenatedStorage",
    "Font",
    "FontBox",
    "FontDesign",
    "FontModifier",
    "FontWeight",
    "ItalicModifier",
    "KerningModifier",
    "LineStyle",
    "LocalizedStorage",
    "ModifierKind",
    "NamedProvider",
    "ProviderKind",
    "StrikethroughTextModifier",
    "SystemProvider",
    "Text",
    "TextStyle",
    "TextStyleProvider",
    "TrackingModifier",
    "UnderlineTextModifier",
    "VerbatimStorage",
    "WeightModifier",
    "bold",
    "strikethrough",
    "underline",
    "load_node",
    "load_snapshot",
    "load_text",
]
