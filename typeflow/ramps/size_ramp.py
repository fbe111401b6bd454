"""Font-size ramp algorithms for heading levels H1-H6."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from ..models.settings import TypographySettings

# Fibonacci ratios for H1-H6, divided by 3 so H3 lands on the base size
FIBONACCI_RATIOS = (8, 5, 3, 2, 1, 1)

# H6 of the modular scale sits just below the base size
MODULAR_SMALLEST_FACTOR = 0.9


class UnknownAlgorithmError(ValueError):
    """Raised when a ramp algorithm key is not registered."""
    pass


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (14.5 -> 15, -0.5 -> 0).

    Python's round() rounds halves to even, which would turn 10.5 into 10.
    """
    return int(math.floor(value + 0.5))


def linear_steps(maximum: float, minimum: float, count: int = 6) -> List[int]:
    """Interpolate count values from maximum down to minimum, rounded."""
    step = (maximum - minimum) / (count - 1)
    values = [round_half_up(maximum - i * step) for i in range(count - 1)]
    values.append(round_half_up(minimum))
    return values


@dataclass(frozen=True)
class RampAlgorithm:
    """Named ramp formula."""
    name: str
    description: str
    calculate: Callable[[TypographySettings], List[float]]


def _modular_sizes(settings: TypographySettings) -> List[float]:
    base = settings.base_font_size
    ratio = settings.scale_ratio
    sizes = [round_half_up(base * math.pow(ratio, power)) for power in (4, 3, 2, 1)]
    sizes.append(round_half_up(base))
    sizes.append(round_half_up(base * MODULAR_SMALLEST_FACTOR))
    return sizes


def _linear_sizes(settings: TypographySettings) -> List[float]:
    return linear_steps(settings.max_font_size, settings.min_font_size)


def _fibonacci_sizes(settings: TypographySettings) -> List[float]:
    base = settings.base_font_size
    return [round_half_up(base * ratio / 3) for ratio in FIBONACCI_RATIOS]


def _custom_sizes(settings: TypographySettings) -> List[float]:
    return list(settings.custom_ramp_values)


RAMP_ALGORITHMS: Dict[str, RampAlgorithm] = {
    "modular": RampAlgorithm(
        name="Modular Scale",
        description="Uses a consistent ratio between each step in the scale",
        calculate=_modular_sizes,
    ),
    "linear": RampAlgorithm(
        name="Linear Scale",
        description="Equal steps between each size in the scale",
        calculate=_linear_sizes,
    ),
    "fibonacci": RampAlgorithm(
        name="Fibonacci Sequence",
        description="Based on the Fibonacci sequence (each number is the sum of the two preceding ones)",
        calculate=_fibonacci_sizes,
    ),
    "custom": RampAlgorithm(
        name="Custom Ramp",
        description="Define your own custom values for each heading level",
        calculate=_custom_sizes,
    ),
}


def get_algorithm(key: str, registry: Dict[str, RampAlgorithm] = RAMP_ALGORITHMS) -> RampAlgorithm:
    """Look up a ramp algorithm by key.

    Raises:
        UnknownAlgorithmError: If key is not in the registry
    """
    try:
        return registry[key]
    except KeyError:
        raise UnknownAlgorithmError(
            f"Unknown algorithm '{key}' (expected one of: {', '.join(registry)})"
        ) from None


def calculate_sizes(settings: TypographySettings) -> List[float]:
    """Calculate H1-H6 font sizes in px with the selected ramp algorithm.

    Args:
        settings: Typography settings (uses ramp_algorithm)

    Returns:
        List of six sizes, H1 first
    """
    return get_algorithm(settings.ramp_algorithm).calculate(settings)


def scale_values(values: Sequence[float], factor: float) -> List[int]:
    """Multiply every value by factor and round half up."""
    return [round_half_up(value * factor) for value in values]
