"""CSS export: custom properties with mobile-first media queries."""

import logging
from typing import List, Optional

from ..fonts import font_stack
from ..models.settings import TypographySettings
from ..models.type_scale import HEADING_LEVELS, TypeScale
from ..ramps.viewport import calculate_type_scale
from .formatting import (
    block_spacing_rules,
    css_block,
    em,
    font_import_lines,
    format_number,
    heading_declarations,
    media_block,
    px,
)

logger = logging.getLogger(__name__)

CSS_HEADER = "/* Typography Flow - Generated CSS */"


def _size_variables(base_size: float, sizes: List[float]) -> List[str]:
    variables = [f"--base-font-size: {px(base_size)};"]
    variables.extend(
        f"--{level}-size: {px(size)};" for level, size in zip(HEADING_LEVELS, sizes)
    )
    return variables


def _root_variables(settings: TypographySettings, scale: TypeScale, viewport: str) -> List[str]:
    """Full :root declaration list for one viewport."""
    variables = _size_variables(scale.base_sizes[viewport], scale.sizes_for(viewport))
    variables[1:1] = [
        f"--base-line-height: {format_number(settings.base_line_height)};",
        f"--paragraph-spacing: {em(settings.paragraph_spacing)};",
        f"--heading-spacing: {em(settings.heading_spacing)};",
        f"--list-spacing: {em(settings.list_spacing)};",
    ]
    variables.extend(
        f"--{level}-weight: {format_number(weight)};"
        for level, weight in zip(HEADING_LEVELS, scale.weights)
    )
    variables.append(f"--body-weight: {format_number(settings.base_font_weight)};")
    return variables


def _variable_sections(settings: TypographySettings, scale: TypeScale) -> List[str]:
    if not settings.responsive_scaling:
        return [css_block(":root", _root_variables(settings, scale, "desktop"))]

    tablet = _size_variables(scale.base_sizes["tablet"], scale.tablet)
    desktop = _size_variables(scale.base_sizes["desktop"], scale.desktop)
    return [
        "/* Mobile styles */\n" + css_block(":root", _root_variables(settings, scale, "mobile")),
        "/* Tablet styles */\n" + media_block(
            f"(min-width: {px(settings.breakpoint_mobile)})",
            [css_block(":root", tablet, indent=2)],
        ),
        "/* Desktop styles */\n" + media_block(
            f"(min-width: {px(settings.breakpoint_tablet)})",
            [css_block(":root", desktop, indent=2)],
        ),
    ]


def heading_rules(settings: TypographySettings, heading_font: Optional[str], prefix: str = "") -> List[str]:
    """h1-h6 rules that read sizes and weights from the custom properties."""
    return [
        css_block(
            f"{prefix}{level}",
            heading_declarations(
                index,
                size=f"var(--{level}-size)",
                spacing="var(--heading-spacing)",
                weight=f"var(--{level}-weight)",
                font_family=heading_font,
            ),
        )
        for index, level in enumerate(HEADING_LEVELS)
    ]


def generate_css(settings: TypographySettings, scale: Optional[TypeScale] = None) -> str:
    """Generate a stylesheet for the settings.

    Args:
        settings: Typography settings
        scale: Precomputed type scale (calculated from settings if None)

    Returns:
        CSS text: font imports, custom properties (with media queries when
        responsive_scaling is on) and element rules
    """
    if scale is None:
        scale = calculate_type_scale(settings)

    heading_font = font_stack(settings.heading_font_family) if settings.use_separate_heading_font else None

    sections = [CSS_HEADER + "\n/* Font imports */\n" + "\n".join(font_import_lines(settings))]
    sections.extend(_variable_sections(settings, scale))
    sections.append(css_block("body", [
        "font-size: var(--base-font-size);",
        "line-height: var(--base-line-height);",
        f"font-family: {font_stack(settings.font_family)};",
    ]))
    sections.extend(heading_rules(settings, heading_font))
    sections.extend(block_spacing_rules("var(--paragraph-spacing)", "var(--list-spacing)"))

    css = "\n\n".join(sections) + "\n"
    logger.info(f"Generated CSS ({len(css)} chars, responsive={settings.responsive_scaling})")
    return css
