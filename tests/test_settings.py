"""Unit tests for the TypographySettings data model."""

import pytest

from typeflow.models.settings import (
    DEFAULT_CUSTOM_RAMP_VALUES,
    TypographySettings,
    _to_snake_case,
)


def test_defaults():
    settings = TypographySettings()

    assert settings.base_font_size == 16
    assert settings.base_line_height == 1.5
    assert settings.scale_ratio == 1.2
    assert settings.ramp_algorithm == "modular"
    assert settings.custom_ramp_values == DEFAULT_CUSTOM_RAMP_VALUES
    assert settings.responsive_scaling is True
    assert settings.breakpoint_mobile == 480
    assert settings.breakpoint_tablet == 768
    assert settings.font_family == "Inter"
    assert settings.font_weight_ramp_algorithm == "stepped"
    assert settings.use_weight_ramp is True


def test_default_lists_are_independent():
    first = TypographySettings()
    second = TypographySettings()
    first.custom_ramp_values[0] = 60
    assert second.custom_ramp_values[0] == 48


@pytest.mark.parametrize("key,expected", [
    ("baseFontSize", "base_font_size"),
    ("breakpointMobile", "breakpoint_mobile"),
    ("useSeparateHeadingFont", "use_separate_heading_font"),
    ("scale_ratio", "scale_ratio"),
])
def test_to_snake_case(key, expected):
    assert _to_snake_case(key) == expected


class TestFromDict:
    """Test building settings from dictionaries."""

    def test_snake_case_keys(self):
        settings = TypographySettings.from_dict({"base_font_size": 18, "ramp_algorithm": "linear"})
        assert settings.base_font_size == 18
        assert settings.ramp_algorithm == "linear"

    def test_camel_case_keys(self):
        settings = TypographySettings.from_dict({
            "baseFontSize": 18,
            "customRampValues": (40, 32, 26, 20, 18, 16),
        })
        assert settings.base_font_size == 18
        assert settings.custom_ramp_values == [40, 32, 26, 20, 18, 16]

    def test_missing_keys_take_defaults(self):
        settings = TypographySettings.from_dict({})
        assert settings == TypographySettings()

    def test_none_is_empty(self):
        assert TypographySettings.from_dict(None) == TypographySettings()

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown typography setting: letterSpacing"):
            TypographySettings.from_dict({"letterSpacing": 1})


def test_to_dict_round_trip():
    settings = TypographySettings(base_font_size=18, use_separate_heading_font=True)
    data = settings.to_dict()

    assert list(data) == TypographySettings.field_names()
    assert TypographySettings.from_dict(data) == settings


def test_updated_returns_copy():
    settings = TypographySettings()
    changed = settings.updated(scaleRatio=1.5, list_spacing=0.8)

    assert changed.scale_ratio == 1.5
    assert changed.list_spacing == 0.8
    assert settings.scale_ratio == 1.2


def test_updated_unknown_key():
    with pytest.raises(ValueError):
        TypographySettings().updated(color="red")
