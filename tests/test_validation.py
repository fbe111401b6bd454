"""Unit tests for settings validation."""

import logging

import pytest

from typeflow.models.settings import TypographySettings
from typeflow.models.settings_report import SettingsReport, SettingsValidationError
from typeflow.validation import validate_settings


def test_defaults_are_valid():
    report = validate_settings(TypographySettings())

    assert report.ok
    assert report.errors == []
    assert report.warnings == []


class TestErrors:
    """Problems that make ramps or exports impossible."""

    def test_unknown_ramp_algorithm(self):
        report = validate_settings(TypographySettings(ramp_algorithm="golden"))
        assert not report.ok
        assert "Unknown ramp algorithm: golden" in report.errors

    def test_unknown_weight_algorithm(self):
        report = validate_settings(TypographySettings(font_weight_ramp_algorithm="heavy"))
        assert "Unknown weight ramp algorithm: heavy" in report.errors

    @pytest.mark.parametrize("field_name", [
        "base_font_size",
        "scale_ratio",
        "mobile_scale_factor",
        "tablet_scale_factor",
    ])
    def test_non_positive_values(self, field_name):
        settings = TypographySettings().updated(**{field_name: 0})
        report = validate_settings(settings)
        assert any(field_name in error for error in report.errors)

    def test_custom_ramp_wrong_length(self):
        settings = TypographySettings(ramp_algorithm="custom", custom_ramp_values=[40, 30, 20])
        report = validate_settings(settings)
        assert "custom_ramp_values must have 6 values, got 3" in report.errors

    def test_custom_ramp_negative_value(self):
        settings = TypographySettings(
            ramp_algorithm="custom",
            custom_ramp_values=[40, 30, 20, 18, 16, -1],
        )
        report = validate_settings(settings)
        assert "custom_ramp_values[H6] must be positive, got -1" in report.errors

    def test_custom_ramp_ignored_for_other_algorithms(self):
        settings = TypographySettings(ramp_algorithm="modular", custom_ramp_values=[1])
        assert validate_settings(settings).ok

    def test_weight_ramp_wrong_length(self):
        settings = TypographySettings(custom_weight_ramp_values=[700, 600])
        report = validate_settings(settings)
        assert "custom_weight_ramp_values must have 6 values, got 2" in report.errors

    @pytest.mark.parametrize("changes,expected", [
        ({"base_font_size": "big"}, "base_font_size must be a number, got 'big'"),
        ({"breakpoint_mobile": None}, "breakpoint_mobile must be a number, got None"),
        ({"scale_ratio": True}, "scale_ratio must be a number, got True"),
        ({"custom_weight_ramp_values": 5}, "custom_weight_ramp_values must be a list of 6 numbers, got 5"),
        ({"custom_ramp_values": [40, "x", 20, 18, 16, 14]}, "custom_ramp_values must contain only numbers"),
        ({"ramp_algorithm": ["a"]}, "ramp_algorithm must be a string, got ['a']"),
        ({"font_family": 12}, "font_family must be a string, got 12"),
        ({"responsive_scaling": "sometimes"}, "responsive_scaling must be true or false, got 'sometimes'"),
    ])
    def test_wrong_types(self, changes, expected):
        """Values of the wrong type are errors, not crashes."""
        report = validate_settings(TypographySettings().updated(**changes))

        assert not report.ok
        assert any(error.startswith(expected) for error in report.errors)

    def test_raise_for_errors(self):
        report = validate_settings(TypographySettings(ramp_algorithm="golden"))

        with pytest.raises(SettingsValidationError) as exc_info:
            report.raise_for_errors()

        assert exc_info.value.errors == report.errors
        assert "Invalid typography settings" in str(exc_info.value)


class TestWarnings:
    """Values outside the playground ranges still produce output."""

    def test_out_of_range(self):
        report = validate_settings(TypographySettings(scale_ratio=3))
        assert report.ok
        assert "scale_ratio = 3 is outside 1.0-2.0" in report.warnings

    def test_min_above_max_font_size(self):
        report = validate_settings(TypographySettings(min_font_size=50, max_font_size=48))
        assert any("min_font_size" in warning for warning in report.warnings)

    def test_min_above_max_weight(self):
        report = validate_settings(TypographySettings(min_font_weight=700, max_font_weight=400))
        assert any("min_font_weight" in warning for warning in report.warnings)

    def test_inverted_breakpoints(self):
        report = validate_settings(TypographySettings(breakpoint_mobile=900, breakpoint_tablet=768))
        assert any("breakpoint_mobile" in warning for warning in report.warnings)

    def test_unknown_font(self):
        report = validate_settings(TypographySettings(font_family="Comic Sans MS"))
        assert "Font 'Comic Sans MS' is not in the font catalog" in report.warnings

    def test_heading_font_only_checked_when_separate(self):
        settings = TypographySettings(heading_font_family="Unknown Grotesk")
        assert validate_settings(settings).warnings == []

        settings = settings.updated(use_separate_heading_font=True)
        assert validate_settings(settings).warnings != []

    def test_warnings_are_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="typeflow.validation"):
            validate_settings(TypographySettings(base_line_height=4))
        assert "base_line_height = 4 is outside 1-2.5" in caplog.text


def test_empty_report_is_ok():
    report = SettingsReport()
    assert report.ok
    report.raise_for_errors()
