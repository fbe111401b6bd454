"""SASS (SCSS syntax) export: variables plus mobile-first rules."""

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

SASS_HEADER = "// Typography Flow - Generated SASS"


def _variables(settings: TypographySettings, scale: TypeScale) -> str:
    lines = [
        "// Variables",
        "// Breakpoints",
        f"$breakpoint-mobile: {px(settings.breakpoint_mobile)};",
        f"$breakpoint-tablet: {px(settings.breakpoint_tablet)};",
        "",
        "// Font families",
        f"$body-font: {font_stack(settings.font_family)};",
    ]
    if settings.use_separate_heading_font:
        lines.append(f"$heading-font: {font_stack(settings.heading_font_family)};")
    lines.extend(["", "// Font weights", f"$body-weight: {format_number(settings.base_font_weight)};"])
    lines.extend(
        f"${level}-weight: {format_number(weight)};"
        for level, weight in zip(HEADING_LEVELS, scale.weights)
    )
    lines.extend([
        "",
        "// Base typography settings",
        f"$base-line-height: {format_number(settings.base_line_height)};",
        f"$paragraph-spacing: {em(settings.paragraph_spacing)};",
        f"$heading-spacing: {em(settings.heading_spacing)};",
        f"$list-spacing: {em(settings.list_spacing)};",
    ])
    return "\n".join(lines)


def _size_variables(title: str, suffix: str, base_size: float, sizes: List[float]) -> str:
    lines = [f"// {title}", f"$base-font-size{suffix}: {px(base_size)};"]
    lines.extend(
        f"${level}-size{suffix}: {px(size)};" for level, size in zip(HEADING_LEVELS, sizes)
    )
    return "\n".join(lines)


def _element_rules(settings: TypographySettings, suffix: str) -> List[str]:
    heading_font = "$heading-font" if settings.use_separate_heading_font else None
    rules = [css_block("body", [
        f"font-size: $base-font-size{suffix};",
        "line-height: $base-line-height;",
        "font-family: $body-font;",
    ])]
    rules.extend(
        css_block(level, heading_declarations(
            index,
            size=f"${level}-size{suffix}",
            spacing="$heading-spacing",
            weight=f"${level}-weight",
            font_family=heading_font,
        ))
        for index, level in enumerate(HEADING_LEVELS)
    )
    return rules


def _size_override_block(title: str, breakpoint_variable: str, suffix: str) -> str:
    blocks = [css_block("body", [f"font-size: $base-font-size{suffix};"], indent=2)]
    blocks.extend(
        css_block(level, [f"font-size: ${level}-size{suffix};"], indent=2)
        for level in HEADING_LEVELS
    )
    return f"// {title}\n" + media_block(f"(min-width: {breakpoint_variable})", blocks)


def generate_sass(settings: TypographySettings, scale: Optional[TypeScale] = None) -> str:
    """Generate SCSS source for the settings.

    Args:
        settings: Typography settings
        scale: Precomputed type scale (calculated from settings if None)

    Returns:
        SCSS text with per-viewport size variables when responsive_scaling is on
    """
    if scale is None:
        scale = calculate_type_scale(settings)

    sections = [
        SASS_HEADER + "\n// Font imports\n" + "\n".join(font_import_lines(settings)),
        _variables(settings, scale),
    ]

    if settings.responsive_scaling:
        sections.extend([
            _size_variables("Mobile typography (base)", "-mobile", scale.base_sizes["mobile"], scale.mobile),
            _size_variables("Tablet typography", "-tablet", scale.base_sizes["tablet"], scale.tablet),
            _size_variables("Desktop typography", "-desktop", scale.base_sizes["desktop"], scale.desktop),
        ])
        rules = _element_rules(settings, "-mobile")
        rules[0] = "// Base styles (mobile first)\n" + rules[0]
        sections.extend(rules)
        sections.append(_size_override_block("Tablet styles", "$breakpoint-mobile", "-tablet"))
        sections.append(_size_override_block("Desktop styles", "$breakpoint-tablet", "-desktop"))
    else:
        sections.append(_size_variables("Typography", "", scale.base_sizes["desktop"], scale.desktop))
        sections.extend(_element_rules(settings, ""))

    sections.extend(block_spacing_rules("$paragraph-spacing", "$list-spacing"))

    sass = "\n\n".join(sections) + "\n"
    logger.info(f"Generated SASS ({len(sass)} chars, responsive={settings.responsive_scaling})")
    return sass
