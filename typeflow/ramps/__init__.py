"""Ramp calculation: heading sizes, weights and responsive scaling."""

from .size_ramp import (
    RAMP_ALGORITHMS,
    UnknownAlgorithmError,
    calculate_sizes,
    round_half_up,
)
from .viewport import (
    VIEWPORTS,
    calculate_actual_spacing,
    calculate_sizes_for_viewport,
    calculate_type_scale,
    get_scale_factor,
)
from .weight_ramp import DEFAULT_HEADING_WEIGHTS, WEIGHT_RAMP_ALGORITHMS, calculate_weights

__all__ = [
    "RAMP_ALGORITHMS",
    "WEIGHT_RAMP_ALGORITHMS",
    "DEFAULT_HEADING_WEIGHTS",
    "VIEWPORTS",
    "UnknownAlgorithmError",
    "calculate_sizes",
    "calculate_weights",
    "calculate_sizes_for_viewport",
    "calculate_type_scale",
    "calculate_actual_spacing",
    "get_scale_factor",
    "round_half_up",
]
