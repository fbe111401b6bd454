"""Data models for typography settings and computed scales."""

from .settings import TypographySettings
from .settings_report import SettingsReport, SettingsValidationError
from .type_scale import HEADING_LEVELS, HEADING_LINE_HEIGHTS, TypeScale

__all__ = [
    "TypographySettings",
    "SettingsReport",
    "SettingsValidationError",
    "TypeScale",
    "HEADING_LEVELS",
    "HEADING_LINE_HEIGHTS",
]
