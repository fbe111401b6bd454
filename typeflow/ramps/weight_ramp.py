"""Font-weight ramp algorithms for heading levels H1-H6."""

from typing import Dict, List

from ..models.settings import TypographySettings
from .size_ramp import RampAlgorithm, get_algorithm, linear_steps

# Heading weights used whenever the weight ramp is switched off
DEFAULT_HEADING_WEIGHTS = (700, 700, 600, 600, 500, 400)


def _stepped_weights(settings: TypographySettings) -> List[int]:
    if not settings.use_weight_ramp:
        return list(DEFAULT_HEADING_WEIGHTS)
    return list(settings.custom_weight_ramp_values)


def _linear_weights(settings: TypographySettings) -> List[int]:
    if not settings.use_weight_ramp:
        return list(DEFAULT_HEADING_WEIGHTS)
    return linear_steps(settings.max_font_weight, settings.min_font_weight)


WEIGHT_RAMP_ALGORITHMS: Dict[str, RampAlgorithm] = {
    "stepped": RampAlgorithm(
        name="Stepped Weights",
        description="Uses predefined weight steps for each heading level",
        calculate=_stepped_weights,
    ),
    "linear": RampAlgorithm(
        name="Linear Weight Scale",
        description="Equal steps between min and max font weights",
        calculate=_linear_weights,
    ),
    "custom": RampAlgorithm(
        name="Custom Weight Ramp",
        description="Define your own custom weight values for each heading level",
        calculate=_stepped_weights,
    ),
}


def calculate_weights(settings: TypographySettings) -> List[int]:
    """Calculate H1-H6 font weights with the selected weight ramp.

    Raises:
        UnknownAlgorithmError: If font_weight_ramp_algorithm is not registered
    """
    algorithm = get_algorithm(settings.font_weight_ramp_algorithm, WEIGHT_RAMP_ALGORITHMS)
    return algorithm.calculate(settings)
