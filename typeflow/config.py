"""Central configuration for Typography Flow."""

import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def get_app_name() -> str:
    """Get application name."""
    return "Typography Flow"


def get_app_version() -> str:
    """Get application version from pyproject.toml."""
    try:
        import tomli
        pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            pyproject = tomli.load(f)
            return pyproject.get("project", {}).get("version", "0.1.0")
    except Exception:
        # Installed without the source tree next to it
        return "0.1.0"


def get_default_output_dir() -> Path:
    """Get default output directory for exports and preview pages.

    - TYPEFLOW_OUTPUT_DIR, when set.
    - Otherwise project root / "out".

    Returns:
        Path object to default output directory (created if needed)
    """
    env_path = os.getenv("TYPEFLOW_OUTPUT_DIR")
    if env_path:
        output_dir = Path(env_path)
    else:
        output_dir = Path(__file__).resolve().parent.parent / "out"
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def get_default_export_format() -> str:
    """Get default export format.

    Aliases (scss, tokens, json) resolve to their canonical name.

    Returns:
        "css", "sass" or "figma" from TYPEFLOW_EXPORT_FORMAT, default "css"
    """
    from .export import UnknownExportFormatError, normalize_export_format

    export_format = os.getenv("TYPEFLOW_EXPORT_FORMAT", "css")
    try:
        return normalize_export_format(export_format)
    except UnknownExportFormatError:
        logger.warning(f"Invalid export format: {export_format}, using 'css'")
        return "css"


def get_default_profile_name() -> str:
    """Get name of the settings profile used when none is given.

    Returns:
        Profile name from TYPEFLOW_PROFILE, default "default"
    """
    return os.getenv("TYPEFLOW_PROFILE", "default")


def get_profiles_dir() -> Path:
    """Get directory containing profile YAML files.

    Returns:
        TYPEFLOW_PROFILES_DIR if set, else the profiles shipped with the package
    """
    env_path = os.getenv("TYPEFLOW_PROFILES_DIR")
    if env_path:
        return Path(env_path)
    return Path(__file__).resolve().parent / "configs" / "profiles"
