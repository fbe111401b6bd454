"""Export generators: CSS, SASS and design-token JSON."""

from typing import Callable, Dict, Optional

from ..models.settings import TypographySettings
from ..models.type_scale import TypeScale
from .css_export import generate_css
from .sass_export import generate_sass
from .tokens_export import build_tokens, generate_figma_tokens


class UnknownExportFormatError(ValueError):
    """Raised when an export format name is not recognised."""
    pass


# Canonical format name -> file extension
EXPORT_FORMATS: Dict[str, str] = {
    "css": "css",
    "sass": "scss",
    "figma": "json",
}

_FORMAT_ALIASES = {
    "scss": "sass",
    "tokens": "figma",
    "json": "figma",
}

_GENERATORS: Dict[str, Callable[..., str]] = {
    "css": generate_css,
    "sass": generate_sass,
    "figma": generate_figma_tokens,
}


def normalize_export_format(export_format: str) -> str:
    """Resolve aliases (scss, tokens, json) to a canonical format name.

    Raises:
        UnknownExportFormatError: If the format is not known
    """
    name = export_format.strip().lower()
    name = _FORMAT_ALIASES.get(name, name)
    if name not in EXPORT_FORMATS:
        raise UnknownExportFormatError(
            f"Unknown export format: {export_format} (must be 'css', 'sass', or 'figma')"
        )
    return name


def generate_export(
    settings: TypographySettings,
    export_format: str = "css",
    scale: Optional[TypeScale] = None,
) -> str:
    """Render the settings in the requested export format."""
    return _GENERATORS[normalize_export_format(export_format)](settings, scale)


__all__ = [
    "EXPORT_FORMATS",
    "UnknownExportFormatError",
    "build_tokens",
    "generate_css",
    "generate_export",
    "generate_figma_tokens",
    "generate_sass",
    "normalize_export_format",
]
