"""Range and consistency checks for typography settings."""

import logging
from typing import List

from .fonts import find_font
from .models.settings import TypographySettings
from .models.settings_report import SettingsReport
from .ramps.size_ramp import RAMP_ALGORITHMS
from .ramps.weight_ramp import WEIGHT_RAMP_ALGORITHMS

logger = logging.getLogger(__name__)

# Ranges offered by the playground controls: field -> (min, max)
SETTING_RANGES = {
    "base_font_size": (8, 24),
    "base_line_height": (1, 2.5),
    "scale_ratio": (1.0, 2.0),
    "paragraph_spacing": (0.5, 3),
    "heading_spacing": (0.5, 3),
    "list_spacing": (0.5, 3),
    "min_font_size": (8, 100),
    "max_font_size": (8, 100),
    "mobile_scale_factor": (0.5, 1),
    "tablet_scale_factor": (0.6, 1),
    "breakpoint_mobile": (320, 1200),
    "breakpoint_tablet": (320, 1200),
    "min_font_weight": (100, 900),
    "max_font_weight": (100, 900),
    "base_font_weight": (100, 900),
}

CUSTOM_SIZE_RANGE = (8, 100)
CUSTOM_WEIGHT_RANGE = (100, 900)

RAMP_LENGTH = 6

LIST_FIELDS = ("custom_ramp_values", "custom_weight_ramp_values")
STRING_FIELDS = ("ramp_algorithm", "font_weight_ramp_algorithm", "font_family", "heading_font_family")
BOOL_FIELDS = ("responsive_scaling", "use_separate_heading_font", "use_weight_ramp")


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_types(settings: TypographySettings, report: SettingsReport) -> None:
    """Report values of the wrong type; range checks assume these pass."""
    for name in SETTING_RANGES:
        value = getattr(settings, name)
        if not _is_number(value):
            report.errors.append(f"{name} must be a number, got {value!r}")
    for name in STRING_FIELDS:
        value = getattr(settings, name)
        if not isinstance(value, str):
            report.errors.append(f"{name} must be a string, got {value!r}")
    for name in BOOL_FIELDS:
        value = getattr(settings, name)
        if not isinstance(value, bool):
            report.errors.append(f"{name} must be true or false, got {value!r}")
    for name in LIST_FIELDS:
        value = getattr(settings, name)
        if not isinstance(value, list):
            report.errors.append(f"{name} must be a list of {RAMP_LENGTH} numbers, got {value!r}")
        elif not all(_is_number(item) for item in value):
            report.errors.append(f"{name} must contain only numbers, got {value!r}")


def _check_custom_ramp(
    name: str,
    values: List[float],
    value_range: tuple,
    report: SettingsReport,
) -> None:
    if len(values) != RAMP_LENGTH:
        report.errors.append(f"{name} must have {RAMP_LENGTH} values, got {len(values)}")
        return
    low, high = value_range
    for index, value in enumerate(values, start=1):
        if value <= 0:
            report.errors.append(f"{name}[H{index}] must be positive, got {value}")
        elif not low <= value <= high:
            report.warnings.append(f"{name}[H{index}] = {value} is outside {low}-{high}")


def validate_settings(settings: TypographySettings) -> SettingsReport:
    """Validate typography settings.

    Errors are problems that make ramps or exports impossible (unknown algorithm,
    wrong value types, wrong ramp length, non-positive sizes). When any value has
    the wrong type, only the type errors are reported. Warnings flag values
    outside the playground's control ranges and inverted min/max pairs.

    Args:
        settings: Settings to check

    Returns:
        SettingsReport with errors and warnings
    """
    report = SettingsReport()

    _check_types(settings, report)
    if report.errors:
        return report

    if settings.ramp_algorithm not in RAMP_ALGORITHMS:
        report.errors.append(f"Unknown ramp algorithm: {settings.ramp_algorithm}")
    if settings.font_weight_ramp_algorithm not in WEIGHT_RAMP_ALGORITHMS:
        report.errors.append(
            f"Unknown weight ramp algorithm: {settings.font_weight_ramp_algorithm}"
        )

    for name in ("base_font_size", "mobile_scale_factor", "tablet_scale_factor", "scale_ratio"):
        value = getattr(settings, name)
        if value <= 0:
            report.errors.append(f"{name} must be positive, got {value}")

    for name, (low, high) in SETTING_RANGES.items():
        value = getattr(settings, name)
        if value > 0 and not low <= value <= high:
            report.warnings.append(f"{name} = {value} is outside {low}-{high}")

    if settings.min_font_size >= settings.max_font_size:
        report.warnings.append(
            f"min_font_size ({settings.min_font_size}) should be below "
            f"max_font_size ({settings.max_font_size})"
        )
    if settings.min_font_weight >= settings.max_font_weight:
        report.warnings.append(
            f"min_font_weight ({settings.min_font_weight}) should be below "
            f"max_font_weight ({settings.max_font_weight})"
        )
    if settings.breakpoint_mobile >= settings.breakpoint_tablet:
        report.warnings.append(
            f"breakpoint_mobile ({settings.breakpoint_mobile}) should be below "
            f"breakpoint_tablet ({settings.breakpoint_tablet})"
        )

    if settings.ramp_algorithm == "custom":
        _check_custom_ramp("custom_ramp_values", settings.custom_ramp_values, CUSTOM_SIZE_RANGE, report)
    if settings.use_weight_ramp and settings.font_weight_ramp_algorithm in ("stepped", "custom"):
        _check_custom_ramp(
            "custom_weight_ramp_values",
            settings.custom_weight_ramp_values,
            CUSTOM_WEIGHT_RANGE,
            report,
        )

    families = [settings.font_family]
    if settings.use_separate_heading_font:
        families.append(settings.heading_font_family)
    for family in families:
        if find_font(family) is None:
            report.warnings.append(f"Font '{family}' is not in the font catalog")

    for warning in report.warnings:
        logger.warning(warning)
    return report
