"""TypeScale data model: computed ramps for every viewport."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

HEADING_LEVELS = ("h1", "h2", "h3", "h4", "h5", "h6")

# Fixed per-level line heights used by every export format
HEADING_LINE_HEIGHTS = (1.2, 1.25, 1.3, 1.35, 1.4, 1.4)


@dataclass
class TypeScale:
    """Calculated type scale.

    Attributes:
        desktop: H1-H6 sizes in px at desktop width
        tablet: H1-H6 sizes in px at tablet width
        mobile: H1-H6 sizes in px at mobile width
        weights: H1-H6 font weights
        base_sizes: Body font size per viewport ("desktop", "tablet", "mobile")
    """

    desktop: List[float]
    tablet: List[float]
    mobile: List[float]
    weights: List[int]
    base_sizes: Dict[str, float] = field(default_factory=dict)

    def __post_init__(self):
        """Validate that every ramp has one value per heading level."""
        for name in ("desktop", "tablet", "mobile", "weights"):
            values = getattr(self, name)
            if len(values) != len(HEADING_LEVELS):
                raise ValueError(
                    f"{name} must have {len(HEADING_LEVELS)} values, got {len(values)}"
                )

    def sizes_for(self, viewport: str) -> List[float]:
        """Get the H1-H6 sizes for a viewport."""
        if viewport not in ("desktop", "tablet", "mobile"):
            raise ValueError(f"Unknown viewport: {viewport}")
        return getattr(self, viewport)
