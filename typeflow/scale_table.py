"""Tabular summary of a type scale."""

from typing import Optional

import pandas as pd

from .models.settings import TypographySettings
from .models.type_scale import HEADING_LEVELS, HEADING_LINE_HEIGHTS, TypeScale
from .ramps.viewport import calculate_actual_spacing, calculate_type_scale

SCALE_TABLE_COLUMNS = [
    "desktop_px",
    "tablet_px",
    "mobile_px",
    "weight",
    "line_height",
    "margin_bottom_px",
]


def build_scale_table(settings: TypographySettings, scale: Optional[TypeScale] = None) -> pd.DataFrame:
    """Build a DataFrame with one row per text level (body, h1-h6).

    Tablet and mobile columns equal desktop when responsive_scaling is off.
    margin_bottom_px is the em spacing converted at the desktop base size.

    Args:
        settings: Typography settings
        scale: Precomputed type scale (calculated from settings if None)

    Returns:
        DataFrame indexed by level with SCALE_TABLE_COLUMNS
    """
    if scale is None:
        scale = calculate_type_scale(settings)

    base = settings.base_font_size
    if settings.responsive_scaling:
        body_sizes = [scale.base_sizes["desktop"], scale.base_sizes["tablet"], scale.base_sizes["mobile"]]
    else:
        body_sizes = [base, base, base]

    rows = [{
        "level": "body",
        "desktop_px": body_sizes[0],
        "tablet_px": body_sizes[1],
        "mobile_px": body_sizes[2],
        "weight": settings.base_font_weight,
        "line_height": settings.base_line_height,
        "margin_bottom_px": calculate_actual_spacing(settings.paragraph_spacing, base),
    }]
    heading_margin = calculate_actual_spacing(settings.heading_spacing, base)
    for index, level in enumerate(HEADING_LEVELS):
        rows.append({
            "level": level,
            "desktop_px": scale.desktop[index],
            "tablet_px": scale.tablet[index],
            "mobile_px": scale.mobile[index],
            "weight": scale.weights[index],
            "line_height": HEADING_LINE_HEIGHTS[index],
            "margin_bottom_px": heading_margin,
        })

    df = pd.DataFrame(rows).set_index("level")
    return df[SCALE_TABLE_COLUMNS]
