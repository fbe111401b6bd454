"""Unit tests for the font catalog."""

import pytest

from typeflow.fonts import (
    POPULAR_FONTS,
    find_font,
    font_stack,
    get_required_fonts,
    google_fonts_import_url,
    list_fonts,
)
from typeflow.models.settings import TypographySettings


def test_catalog_size():
    assert len(POPULAR_FONTS) == 14


def test_find_font():
    font = find_font("Playfair Display")
    assert font is not None
    assert font.category == "serif"
    assert find_font("Comic Sans MS") is None


@pytest.mark.parametrize("category,expected", [
    ("sans-serif", "Inter"),
    ("serif", "Merriweather"),
    ("monospace", "Fira Code"),
])
def test_list_fonts_by_category(category, expected):
    fonts = list_fonts(category)
    assert expected in [font.family for font in fonts]
    assert all(font.category == category for font in fonts)


def test_list_fonts_unknown_category():
    with pytest.raises(ValueError, match="cursive"):
        list_fonts("cursive")


def test_google_fonts_import_url():
    assert google_fonts_import_url("Playfair Display") == (
        "https://fonts.googleapis.com/css2?family=Playfair+Display:wght@400;700&display=swap"
    )


def test_font_stack():
    assert font_stack("Inter") == '"Inter", sans-serif'


class TestRequiredFonts:
    """Test which fonts must be loaded."""

    def test_body_only(self):
        settings = TypographySettings(heading_font_family="Lora")
        assert get_required_fonts(settings) == ["Inter"]

    def test_separate_heading_font(self):
        settings = TypographySettings(heading_font_family="Lora", use_separate_heading_font=True)
        assert get_required_fonts(settings) == ["Inter", "Lora"]

    def test_same_font_listed_once(self):
        settings = TypographySettings(use_separate_heading_font=True)
        assert get_required_fonts(settings) == ["Inter"]
