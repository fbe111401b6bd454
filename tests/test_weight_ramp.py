"""Unit tests for font-weight ramps."""

import pytest

from typeflow.models.settings import TypographySettings
from typeflow.ramps.size_ramp import UnknownAlgorithmError
from typeflow.ramps.weight_ramp import (
    DEFAULT_HEADING_WEIGHTS,
    WEIGHT_RAMP_ALGORITHMS,
    calculate_weights,
)


def test_stepped_uses_custom_values():
    settings = TypographySettings(custom_weight_ramp_values=[900, 800, 700, 600, 500, 400])
    assert calculate_weights(settings) == [900, 800, 700, 600, 500, 400]


def test_linear_weights():
    settings = TypographySettings(font_weight_ramp_algorithm="linear")
    assert calculate_weights(settings) == [700, 640, 580, 520, 460, 400]


def test_linear_weights_custom_range():
    settings = TypographySettings(
        font_weight_ramp_algorithm="linear",
        min_font_weight=500,
        max_font_weight=700,
    )
    assert calculate_weights(settings) == [700, 660, 620, 580, 540, 500]


def test_custom_behaves_like_stepped():
    settings = TypographySettings(
        font_weight_ramp_algorithm="custom",
        custom_weight_ramp_values=[800, 700, 600, 500, 400, 300],
    )
    assert calculate_weights(settings) == [800, 700, 600, 500, 400, 300]


@pytest.mark.parametrize("algorithm", ["stepped", "linear", "custom"])
def test_disabled_ramp_falls_back_to_defaults(algorithm):
    """With use_weight_ramp off every algorithm gives the default weights."""
    settings = TypographySettings(
        font_weight_ramp_algorithm=algorithm,
        use_weight_ramp=False,
        custom_weight_ramp_values=[100, 100, 100, 100, 100, 100],
        min_font_weight=100,
        max_font_weight=900,
    )
    assert calculate_weights(settings) == list(DEFAULT_HEADING_WEIGHTS)


def test_unknown_weight_algorithm():
    settings = TypographySettings(font_weight_ramp_algorithm="exponential")
    with pytest.raises(UnknownAlgorithmError):
        calculate_weights(settings)


def test_registry_keys():
    assert set(WEIGHT_RAMP_ALGORITHMS) == {"stepped", "linear", "custom"}
