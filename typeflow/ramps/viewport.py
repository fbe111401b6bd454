"""Responsive scaling of ramps for mobile, tablet and desktop viewports."""

import logging
from typing import List

from ..models.settings import TypographySettings
from ..models.type_scale import TypeScale
from .size_ramp import calculate_sizes, round_half_up, scale_values
from .weight_ramp import calculate_weights

logger = logging.getLogger(__name__)

VIEWPORTS = ("mobile", "tablet", "desktop")

# Width of the preview container per viewport
VIEWPORT_PREVIEW_WIDTHS = {
    "mobile": "375px",
    "tablet": "768px",
    "desktop": "100%",
}


def _check_viewport(viewport: str) -> None:
    if viewport not in VIEWPORTS:
        raise ValueError(
            f"Unknown viewport: {viewport} (must be 'mobile', 'tablet', or 'desktop')"
        )


def get_scale_factor(settings: TypographySettings, viewport: str) -> float:
    """Get the size multiplier for a viewport.

    Mobile and tablet use their scale factor only when responsive_scaling is on;
    desktop is always 1.
    """
    _check_viewport(viewport)
    if viewport == "desktop" or not settings.responsive_scaling:
        return 1
    if viewport == "mobile":
        return settings.mobile_scale_factor
    return settings.tablet_scale_factor


def calculate_sizes_for_viewport(settings: TypographySettings, viewport: str) -> List[int]:
    """Calculate H1-H6 sizes scaled for a viewport, rounded half up."""
    factor = get_scale_factor(settings, viewport)
    return scale_values(calculate_sizes(settings), factor)


def base_font_size_for_viewport(settings: TypographySettings, viewport: str) -> float:
    """Get body font size for a viewport as written by the exporters.

    The desktop value is the configured size unchanged. Tablet and mobile always
    apply their factor; exporters only emit them when responsive_scaling is on.
    """
    _check_viewport(viewport)
    if viewport == "desktop":
        return settings.base_font_size
    if viewport == "tablet":
        return round_half_up(settings.base_font_size * settings.tablet_scale_factor)
    return round_half_up(settings.base_font_size * settings.mobile_scale_factor)


def calculate_actual_spacing(em_value: float, base_font_size: float) -> int:
    """Convert an em spacing into px at the given font size."""
    return round_half_up(em_value * base_font_size)


def calculate_type_scale(settings: TypographySettings) -> TypeScale:
    """Calculate ramps for every viewport plus the weight ramp.

    Args:
        settings: Typography settings

    Returns:
        TypeScale with desktop/tablet/mobile sizes, weights and base sizes

    Raises:
        UnknownAlgorithmError: If the size or weight algorithm is not registered
    """
    scale = TypeScale(
        desktop=calculate_sizes_for_viewport(settings, "desktop"),
        tablet=calculate_sizes_for_viewport(settings, "tablet"),
        mobile=calculate_sizes_for_viewport(settings, "mobile"),
        weights=calculate_weights(settings),
        base_sizes={
            viewport: base_font_size_for_viewport(settings, viewport)
            for viewport in VIEWPORTS
        },
    )
    logger.debug(
        f"Type scale ({settings.ramp_algorithm}/{settings.font_weight_ramp_algorithm}): "
        f"desktop={scale.desktop} weights={scale.weights}"
    )
    return scale
