"""Tests for font attribute lookups."""

import pytest

from stylescope.errors import AttributeNotFound
from stylescope.fonts import (
    font_design,
    font_name,
    font_size,
    font_style,
    font_weight,
    is_fixed_size,
)
from stylescope.nodes import Font, FontBox, FontDesign, FontWeight, NamedProvider, TextStyle


def test_named_font():
    font = Font.custom("Avenir", 17)
    assert font_name(font) == "Avenir"
    assert font_size(font) == 17.0
    assert isinstance(font_size(font), float)


def test_system_font():
    font = Font.system(14, weight=FontWeight.SEMIBOLD, design=FontDesign.ROUNDED)
    assert font_size(font) == 14.0
    assert font_weight(font) is FontWeight.SEMIBOLD
    assert font_design(font) is FontDesign.ROUNDED


def test_text_style_font():
    font = Font.styled(TextStyle.HEADLINE, weight=FontWeight.HEAVY)
    assert font_style(font) is TextStyle.HEADLINE
    assert font_weight(font) is FontWeight.HEAVY


@pytest.mark.parametrize(
    "lookup, label",
    [
        (font_size, "size"),
        (font_name, "name"),
        (font_weight, "weight"),
        (font_design, "design"),
    ],
)
def test_missing_property_is_scoped_to_font(lookup, label):
    with pytest.raises(AttributeNotFound) as exc:
        lookup(Font.styled(TextStyle.BODY))
    assert exc.value.label == label
    assert exc.value.parent == "Font"


def test_style_falls_back_to_relative_text_style():
    font = Font.custom("Avenir", 17, relative_to=TextStyle.CAPTION)
    assert font_style(font) is TextStyle.CAPTION


def test_style_missing():
    with pytest.raises(AttributeNotFound) as exc:
        font_style(Font.system(12))
    assert exc.value.label == "style"
    assert exc.value.parent == "Font"


def test_named_font_without_text_style_is_fixed_size():
    assert is_fixed_size(Font.custom("Courier", 12)) is True
    assert is_fixed_size(Font(FontBox(NamedProvider(name="Courier", size=12.0)))) is True


def test_named_font_relative_to_style_is_not_fixed_size():
    assert is_fixed_size(Font.custom("Courier", 12, relative_to=TextStyle.BODY)) is False


def test_other_providers_are_not_fixed_size():
    assert is_fixed_size(Font.system(12)) is False
    assert is_fixed_size(Font.styled(TextStyle.BODY)) is False


def test_bool_size_is_not_a_size():
    font = Font(FontBox(NamedProvider(name="Courier", size=True)))
    with pytest.raises(AttributeNotFound) as exc:
        font_size(font)
    assert exc.value.label == "size"
