"""Tests for path navigation and variant tags."""

import pytest

from stylescope.errors import AttributeNotFound
from stylescope.navigator import attribute, attribute_label, type_tag
from stylescope.nodes import (
    Color,
    ColorModifier,
    Font,
    ItalicModifier,
    LineStyle,
    ModifierKind,
    ProviderKind,
    Text,
    TextStyle,
    UnderlineTextModifier,
    WeightModifier,
    underline,
)


class TestAttribute:
    def test_nested_path_with_unwrap(self):
        red = Color.named("red")
        modifier = underline(color=red)
        assert attribute("any_text_modifier|line_style|some|color", modifier, Color) == red

    def test_unwrap_of_none_fails(self):
        with pytest.raises(AttributeNotFound):
            attribute("weight|some", WeightModifier(weight=None))

    def test_unknown_field_fails(self):
        with pytest.raises(AttributeNotFound) as exc:
            attribute("color|some", ItalicModifier())
        assert exc.value.label == "color|some"
        assert exc.value.parent == "ItalicModifier"

    def test_field_of_none_fails_without_unwrap(self):
        with pytest.raises(AttributeNotFound):
            attribute("line_style|active", UnderlineTextModifier(line_style=None))

    def test_expected_type_mismatch(self):
        with pytest.raises(AttributeNotFound):
            attribute("color|some", ColorModifier(Color.named("blue")), str)

    def test_optional_leaf_may_be_none(self):
        modifier = UnderlineTextModifier(LineStyle(active=True, color=None))
        assert attribute("line_style|some|color", modifier, (Color, type(None))) is None

    def test_tuple_index(self):
        text = Text.verbatim("Hi", ItalicModifier(), ColorModifier(Color()))
        assert attribute("modifiers|1|color|some", text, Color) == Color()
        with pytest.raises(AttributeNotFound):
            attribute("modifiers|5", text)
        with pytest.raises(AttributeNotFound):
            attribute("modifiers|first", text)

    def test_unregistered_values_are_opaque(self):
        class Impostor:
            color = Color()

        with pytest.raises(AttributeNotFound):
            attribute("color", Impostor())

    def test_enum_leaf_cannot_be_entered(self):
        font = Font.styled(TextStyle.BODY)
        assert attribute("provider|base|style", font, TextStyle) is TextStyle.BODY
        with pytest.raises(AttributeNotFound):
            attribute("provider|base|style|value", font)

    def test_label_is_single_segment(self):
        assert attribute_label("weight", WeightModifier(None)) is None
        with pytest.raises(ValueError):
            attribute_label("weight|some", WeightModifier(None))


class TestTypeTag:
    def test_modifier_tags(self):
        assert type_tag(ItalicModifier()) is ModifierKind.ITALIC
        assert type_tag(underline()) is ModifierKind.ANY_TEXT
        assert type_tag(underline().any_text_modifier) is ModifierKind.UNDERLINE

    def test_provider_tags(self):
        assert type_tag(Font.custom("Helvetica", 12).provider.base) is ProviderKind.NAMED
        assert type_tag(Font.system(12).provider.base) is ProviderKind.SYSTEM
        assert type_tag(Font.styled(TextStyle.TITLE).provider.base) is ProviderKind.TEXT_STYLE

    def test_untagged_values(self):
        assert type_tag(Color()) is None
        assert type_tag("italic") is None
        assert type_tag(None) is None
