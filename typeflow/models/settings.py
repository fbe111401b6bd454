"""TypographySettings data model: the single record every ramp and export reads."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List

DEFAULT_CUSTOM_RAMP_VALUES = [48, 36, 24, 20, 16, 14]
DEFAULT_CUSTOM_WEIGHT_RAMP_VALUES = [700, 700, 600, 600, 500, 400]


def _to_snake_case(name: str) -> str:
    """Convert a camelCase key (baseFontSize) to snake_case (base_font_size)."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


@dataclass
class TypographySettings:
    """Flat record of typography settings.

    Range validity (e.g. min_font_size < max_font_size) is not enforced here;
    callers check it with validation.validate_settings().

    Attributes:
        base_font_size: Body font size in px
        base_line_height: Unitless body line height
        scale_ratio: Ratio between steps of the modular ramp
        paragraph_spacing: Paragraph bottom margin in em
        heading_spacing: Heading bottom margin in em
        list_spacing: List item bottom margin in em
        ramp_algorithm: "modular", "linear", "fibonacci" or "custom"
        min_font_size: Smallest size of the linear ramp (H6)
        max_font_size: Largest size of the linear ramp (H1)
        custom_ramp_values: H1-H6 sizes used by the custom ramp
        responsive_scaling: Scale sizes down for tablet and mobile
        mobile_scale_factor: Multiplier applied below the mobile breakpoint
        tablet_scale_factor: Multiplier applied below the tablet breakpoint
        breakpoint_mobile: Mobile breakpoint in px
        breakpoint_tablet: Tablet breakpoint in px
        font_family: Body font family
        heading_font_family: Heading font family (used when separate)
        use_separate_heading_font: Use heading_font_family for h1-h6
        base_font_weight: Body font weight
        font_weight_ramp_algorithm: "stepped", "linear" or "custom"
        min_font_weight: Lightest weight of the linear weight ramp (H6)
        max_font_weight: Heaviest weight of the linear weight ramp (H1)
        custom_weight_ramp_values: H1-H6 weights for stepped/custom ramps
        use_weight_ramp: When False headings get the default weights
    """

    base_font_size: float = 16
    base_line_height: float = 1.5
    scale_ratio: float = 1.2
    paragraph_spacing: float = 1.5
    heading_spacing: float = 1
    list_spacing: float = 1
    ramp_algorithm: str = "modular"
    min_font_size: float = 14
    max_font_size: float = 48
    custom_ramp_values: List[float] = field(
        default_factory=lambda: list(DEFAULT_CUSTOM_RAMP_VALUES)
    )
    responsive_scaling: bool = True
    mobile_scale_factor: float = 0.75
    tablet_scale_factor: float = 0.9
    breakpoint_mobile: int = 480
    breakpoint_tablet: int = 768
    font_family: str = "Inter"
    heading_font_family: str = "Inter"
    use_separate_heading_font: bool = False
    base_font_weight: int = 400
    font_weight_ramp_algorithm: str = "stepped"
    min_font_weight: int = 400
    max_font_weight: int = 700
    custom_weight_ramp_values: List[int] = field(
        default_factory=lambda: list(DEFAULT_CUSTOM_WEIGHT_RAMP_VALUES)
    )
    use_weight_ramp: bool = True

    @classmethod
    def field_names(cls) -> List[str]:
        """Names of all settings fields, in declaration order."""
        return [f.name for f in fields(cls)]

    @classmethod
    def normalize_keys(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Map snake_case or camelCase keys onto field names.

        Raises:
            ValueError: If a key does not name a settings field
        """
        known = set(cls.field_names())
        normalized = {}
        for key, value in data.items():
            name = key if key in known else _to_snake_case(key)
            if name not in known:
                raise ValueError(f"Unknown typography setting: {key}")
            if isinstance(value, (list, tuple)):
                value = list(value)
            normalized[name] = value
        return normalized

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TypographySettings':
        """Create TypographySettings from dictionary; missing keys take defaults."""
        return cls(**cls.normalize_keys(data or {}))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with snake_case keys."""
        result = {}
        for name in self.field_names():
            value = getattr(self, name)
            result[name] = list(value) if isinstance(value, list) else value
        return result

    def updated(self, **changes: Any) -> 'TypographySettings':
        """Return a copy with the given fields replaced."""
        return replace(self, **self.normalize_keys(changes))
