"""Design-token export in the Figma Tokens JSON layout."""

import json
import logging
from typing import Any, Dict, List, Optional

from ..models.settings import TypographySettings
from ..models.type_scale import HEADING_LEVELS, HEADING_LINE_HEIGHTS, TypeScale
from ..ramps.viewport import calculate_type_scale
from .formatting import em, format_number, px

logger = logging.getLogger(__name__)


def _token(value: str) -> Dict[str, str]:
    return {"value": value}


def _size_tokens(base_size: float, sizes: List[float]) -> Dict[str, Dict[str, str]]:
    tokens = {"base": _token(px(base_size))}
    for level, size in zip(HEADING_LEVELS, sizes):
        tokens[level] = _token(px(size))
    return tokens


def build_tokens(settings: TypographySettings, scale: Optional[TypeScale] = None) -> Dict[str, Any]:
    """Build the token tree; every leaf is {"value": <string>}.

    responsiveSizes is only present when responsive_scaling is on.
    """
    if scale is None:
        scale = calculate_type_scale(settings)

    heading_family = (
        settings.heading_font_family if settings.use_separate_heading_font else settings.font_family
    )

    font_weights = {"body": _token(format_number(settings.base_font_weight))}
    line_heights = {"body": _token(format_number(settings.base_line_height))}
    for level, weight, line_height in zip(HEADING_LEVELS, scale.weights, HEADING_LINE_HEIGHTS):
        font_weights[level] = _token(format_number(weight))
        line_heights[level] = _token(format_number(line_height))

    typography: Dict[str, Any] = {
        "fontFamilies": {
            "body": _token(settings.font_family),
            "heading": _token(heading_family),
        },
        "fontWeights": font_weights,
        "lineHeights": line_heights,
        "fontSize": _size_tokens(scale.base_sizes["desktop"], scale.desktop),
    }

    if settings.responsive_scaling:
        typography["responsiveSizes"] = {
            "breakpoints": {
                "mobile": _token(px(settings.breakpoint_mobile)),
                "tablet": _token(px(settings.breakpoint_tablet)),
            },
            "scaleFactors": {
                "mobile": _token(format_number(settings.mobile_scale_factor)),
                "tablet": _token(format_number(settings.tablet_scale_factor)),
            },
            "mobile": _size_tokens(scale.base_sizes["mobile"], scale.mobile),
            "tablet": _size_tokens(scale.base_sizes["tablet"], scale.tablet),
        }

    return {
        "typography": typography,
        "spacing": {
            "paragraph": _token(em(settings.paragraph_spacing)),
            "heading": _token(em(settings.heading_spacing)),
            "list": _token(em(settings.list_spacing)),
        },
    }


def generate_figma_tokens(settings: TypographySettings, scale: Optional[TypeScale] = None) -> str:
    """Generate the design-token JSON document (2-space indent)."""
    tokens = build_tokens(settings, scale)
    output = json.dumps(tokens, indent=2, ensure_ascii=False)
    logger.info(f"Generated design tokens ({len(output)} chars)")
    return output
