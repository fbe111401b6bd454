"""Standalone HTML preview of typography settings over sample content."""

import html
import logging
from pathlib import Path
from string import Template
from typing import Dict

from ..export.css_export import heading_rules
from ..export.formatting import block_spacing_rules, css_block, em, format_number, px
from ..fonts import font_stack, get_required_fonts, google_fonts_import_url
from ..models.settings import TypographySettings
from ..models.type_scale import HEADING_LEVELS
from ..ramps.size_ramp import round_half_up
from ..ramps.viewport import (
    VIEWPORT_PREVIEW_WIDTHS,
    calculate_actual_spacing,
    calculate_sizes_for_viewport,
    get_scale_factor,
)
from ..ramps.weight_ramp import calculate_weights

logger = logging.getLogger(__name__)

PREVIEW_CLASS = "typography-preview"
SPACING_CLASS = "spacing-visualization"

# Fixed top margin of h2-h6, in em
HEADING_MARGIN_TOP_EM = 1.5


def _read_stylesheet(name: str) -> str:
    """Read a stylesheet shipped next to this module."""
    css_path = Path(__file__).resolve().parent / name
    with open(css_path, "r", encoding="utf-8") as f:
        return f.read()


def preview_base_font_size(settings: TypographySettings, viewport: str) -> int:
    """Body font size shown in the preview for a viewport (always rounded)."""
    return round_half_up(settings.base_font_size * get_scale_factor(settings, viewport))


def build_preview_styles(settings: TypographySettings, viewport: str) -> Dict[str, str]:
    """Custom properties applied to the preview container for a viewport."""
    sizes = calculate_sizes_for_viewport(settings, viewport)
    weights = calculate_weights(settings)

    styles = {
        "--base-font-size": px(preview_base_font_size(settings, viewport)),
        "--base-line-height": format_number(settings.base_line_height),
        "--paragraph-spacing": em(settings.paragraph_spacing),
        "--heading-spacing": em(settings.heading_spacing),
        "--list-spacing": em(settings.list_spacing),
    }
    for level, size in zip(HEADING_LEVELS, sizes):
        styles[f"--{level}-size"] = px(size)
    for level, weight in zip(HEADING_LEVELS, weights):
        styles[f"--{level}-weight"] = format_number(weight)
    styles["--body-weight"] = format_number(settings.base_font_weight)
    styles["font-family"] = font_stack(settings.font_family)
    return styles


def preview_spacing_px(settings: TypographySettings, viewport: str) -> Dict[str, int]:
    """Pixel values of the em spacings at the viewport's body size."""
    base = preview_base_font_size(settings, viewport)
    return {
        "margin_top_px": calculate_actual_spacing(HEADING_MARGIN_TOP_EM, base),
        "heading_mb_px": calculate_actual_spacing(settings.heading_spacing, base),
        "paragraph_mb_px": calculate_actual_spacing(settings.paragraph_spacing, base),
        "list_mb_px": calculate_actual_spacing(settings.list_spacing, base),
    }


def build_preview_stylesheet(
    settings: TypographySettings,
    viewport: str = "desktop",
    visualize_spacing: bool = False,
) -> str:
    """Stylesheet scoped to the preview container.

    With visualize_spacing the overlay labels show px values at the
    viewport's body size.
    """
    prefix = f".{PREVIEW_CLASS} "
    heading_family = (
        settings.heading_font_family if settings.use_separate_heading_font else settings.font_family
    )

    rules = [css_block(f".{PREVIEW_CLASS}", [
        "font-size: var(--base-font-size);",
        "line-height: var(--base-line-height);",
        "font-weight: var(--body-weight);",
        f"font-family: {font_stack(settings.font_family)};",
    ])]
    rules.extend(heading_rules(settings, font_stack(heading_family), prefix=prefix))
    rules.extend(block_spacing_rules("var(--paragraph-spacing)", "var(--list-spacing)", prefix=prefix))
    rules.append(_read_stylesheet("preview_base.css").strip())

    if visualize_spacing:
        template = Template(_read_stylesheet("spacing_visualization.css"))
        rules.append(template.substitute(
            heading_spacing=format_number(settings.heading_spacing),
            paragraph_spacing=format_number(settings.paragraph_spacing),
            list_spacing=format_number(settings.list_spacing),
            **preview_spacing_px(settings, viewport),
        ).strip())

    return "\n\n".join(rules)


def build_preview_page(
    settings: TypographySettings,
    content_html: str,
    viewport: str = "desktop",
    visualize_spacing: bool = False,
    title: str = "Typography Flow Preview",
) -> str:
    """Render a standalone HTML page previewing the settings.

    Args:
        settings: Typography settings
        content_html: HTML to typeset (e.g. from markdown_to_html)
        viewport: "mobile", "tablet" or "desktop"
        visualize_spacing: Overlay margins, line heights and list spacing
        title: Document title

    Returns:
        HTML document as string
    """
    styles = build_preview_styles(settings, viewport)
    spacing = preview_spacing_px(settings, viewport)

    container_style = dict(styles)
    container_style["width"] = VIEWPORT_PREVIEW_WIDTHS[viewport]
    if viewport != "desktop":
        container_style["border"] = "1px solid #ddd"
        container_style["padding"] = "16px"
    style_attr = "; ".join(f"{key}: {value}" for key, value in container_style.items())

    classes = PREVIEW_CLASS + (f" {SPACING_CLASS}" if visualize_spacing else "")
    data_attrs = " ".join([
        f'data-px="{spacing["margin_top_px"]}"',
        f'data-heading-mb-px="{spacing["heading_mb_px"]}"',
        f'data-paragraph-mb-px="{spacing["paragraph_mb_px"]}"',
        f'data-list-mb-px="{spacing["list_mb_px"]}"',
    ])

    stylesheet = build_preview_stylesheet(settings, viewport, visualize_spacing)
    font_links = "\n".join(
        f'  <link href="{html.escape(google_fonts_import_url(family))}" rel="stylesheet">'
        for family in get_required_fonts(settings)
    )

    logger.info(f"Built preview page (viewport={viewport}, spacing={visualize_spacing})")
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{html.escape(title)}</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
{font_links}
  <style>
{stylesheet}
  </style>
</head>
<body>
  <div style="display: flex; justify-content: center">
    <div class="{classes}" style="{html.escape(style_attr)}" {data_attrs}>
{content_html}
    </div>
  </div>
</body>
</html>
"""
