"""Shared text helpers for the CSS, SASS and preview stylesheets."""

from typing import Iterable, List, Optional

from ..fonts import google_fonts_import_url
from ..models.settings import TypographySettings
from ..models.type_scale import HEADING_LINE_HEIGHTS


def format_number(value) -> str:
    """Format a number the way it reads in a stylesheet: 16.0 -> "16", 1.5 -> "1.5"."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def px(value) -> str:
    return f"{format_number(value)}px"


def em(value) -> str:
    return f"{format_number(value)}em"


def css_block(selector: str, declarations: Iterable[str], indent: int = 0) -> str:
    """Render a rule: selector on its own line, one declaration per line."""
    pad = " " * indent
    body = "\n".join(f"{pad}  {declaration}" for declaration in declarations)
    return f"{pad}{selector} {{\n{body}\n{pad}}}"


def media_block(query: str, blocks: Iterable[str]) -> str:
    """Wrap already-indented rules in an @media block."""
    inner = "\n\n".join(blocks)
    return f"@media {query} {{\n{inner}\n}}"


def font_import_lines(settings: TypographySettings) -> List[str]:
    """@import lines for the body font and, if it differs, the heading font."""
    lines = [f"@import url('{google_fonts_import_url(settings.font_family)}');"]
    if (
        settings.use_separate_heading_font
        and settings.heading_font_family != settings.font_family
    ):
        lines.append(f"@import url('{google_fonts_import_url(settings.heading_font_family)}');")
    return lines


def heading_declarations(
    level_index: int,
    size: str,
    spacing: str,
    weight: str,
    font_family: Optional[str] = None,
) -> List[str]:
    """Declarations for heading level_index (0 = h1).

    Every heading but h1 gets a fixed 1.5em top margin.
    """
    declarations = [f"font-size: {size};"]
    if level_index > 0:
        declarations.append("margin-top: 1.5em;")
    declarations.extend([
        f"margin-bottom: {spacing};",
        f"line-height: {format_number(HEADING_LINE_HEIGHTS[level_index])};",
        f"font-weight: {weight};",
    ])
    if font_family:
        declarations.append(f"font-family: {font_family};")
    return declarations


def block_spacing_rules(paragraph_spacing: str, list_spacing: str, prefix: str = "") -> List[str]:
    """Rules for paragraphs and lists shared by every stylesheet."""
    def sel(*names: str) -> str:
        return ", ".join(f"{prefix}{name}" for name in names)

    return [
        css_block(sel("p"), [f"margin-bottom: {paragraph_spacing};"]),
        css_block(sel("ul", "ol"), [f"margin-bottom: {paragraph_spacing};", "padding-left: 2em;"]),
        css_block(sel("li"), [f"margin-bottom: {list_spacing};"]),
        css_block(sel("li:last-child"), ["margin-bottom: 0;"]),
    ]
