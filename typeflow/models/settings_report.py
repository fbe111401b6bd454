"""SettingsReport data model representing the outcome of settings validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


class SettingsValidationError(ValueError):
    """Raised when typography settings cannot produce a type scale."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Invalid typography settings: " + "; ".join(self.errors))


@dataclass
class SettingsReport:
    """Validation result for a TypographySettings record.

    Attributes:
        errors: Problems that make ramps or exports impossible
        warnings: Values outside the playground's ranges; output is still produced
    """

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        """Raise SettingsValidationError if any errors were collected."""
        if self.errors:
            raise SettingsValidationError(self.errors)
