"""Catalog of popular webfonts offered by the playground."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .models.settings import TypographySettings

GOOGLE_FONTS_CSS_URL = "https://fonts.googleapis.com/css2"

FONT_CATEGORIES = ("sans-serif", "serif", "monospace")


@dataclass(frozen=True)
class FontOption:
    """A webfont family with its generic category and available weights."""
    family: str
    category: str
    variants: Tuple[str, ...]


POPULAR_FONTS: Tuple[FontOption, ...] = (
    FontOption("Inter", "sans-serif", ("400", "500", "600", "700")),
    FontOption("Roboto", "sans-serif", ("400", "500", "700")),
    FontOption("Open Sans", "sans-serif", ("400", "600", "700")),
    FontOption("Lato", "sans-serif", ("400", "700")),
    FontOption("Montserrat", "sans-serif", ("400", "500", "600", "700")),
    FontOption("Poppins", "sans-serif", ("400", "500", "600", "700")),
    FontOption("Raleway", "sans-serif", ("400", "500", "600", "700")),
    FontOption("Merriweather", "serif", ("400", "700")),
    FontOption("PT Serif", "serif", ("400", "700")),
    FontOption("Playfair Display", "serif", ("400", "500", "600", "700")),
    FontOption("Lora", "serif", ("400", "500", "600", "700")),
    FontOption("Source Code Pro", "monospace", ("400", "600")),
    FontOption("Fira Code", "monospace", ("400", "500", "600", "700")),
    FontOption("JetBrains Mono", "monospace", ("400", "500", "600", "700")),
)


def find_font(family: str) -> Optional[FontOption]:
    """Find a catalog font by exact family name."""
    return next((font for font in POPULAR_FONTS if font.family == family), None)


def list_fonts(category: Optional[str] = None) -> List[FontOption]:
    """List catalog fonts, optionally only one category."""
    if category is None:
        return list(POPULAR_FONTS)
    if category not in FONT_CATEGORIES:
        raise ValueError(f"Unknown font category: {category}")
    return [font for font in POPULAR_FONTS if font.category == category]


def get_required_fonts(settings: TypographySettings) -> List[str]:
    """Font families the settings need loaded, body font first, no duplicates."""
    fonts = [settings.font_family]
    if settings.use_separate_heading_font and settings.heading_font_family not in fonts:
        fonts.append(settings.heading_font_family)
    return fonts


def google_fonts_import_url(family: str) -> str:
    """Stylesheet URL loading regular and bold weights of a family."""
    return f"{GOOGLE_FONTS_CSS_URL}?family={family.replace(' ', '+')}:wght@400;700&display=swap"


def font_stack(family: str) -> str:
    """CSS font-family value for a webfont with a generic fallback."""
    return f'"{family}", sans-serif'
