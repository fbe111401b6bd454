"""Profile loader for named typography presets."""

import json
import yaml
from pathlib import Path
from typing import Dict, Any
from dataclasses import dataclass, field

from ..config import get_profiles_dir
from ..models.settings import TypographySettings


@dataclass
class ProfileConfig:
    """A named preset of typography settings."""
    name: str
    description: str = ""
    settings: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProfileConfig':
        """Create ProfileConfig from dictionary."""
        return cls(
            name=data.get('name', 'default'),
            description=data.get('description', ''),
            settings=dict(data.get('settings') or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'name': self.name,
            'description': self.description,
            'settings': self.settings,
        }

    def to_settings(self) -> TypographySettings:
        """Build TypographySettings; keys the profile omits keep their defaults.

        Raises:
            ValueError: If the profile names an unknown setting
        """
        return TypographySettings.from_dict(self.settings)


def load_profile(profile_name: str = "default") -> ProfileConfig:
    """Load a typography profile.

    Args:
        profile_name: Name of profile to load (without .yaml extension)

    Returns:
        ProfileConfig object

    Raises:
        FileNotFoundError: If profile file doesn't exist
        ValueError: If profile file is invalid
    """
    profiles_dir = get_profiles_dir()
    profile_path = profiles_dir / f"{profile_name}.yaml"

    if not profile_path.exists():
        raise FileNotFoundError(f"Profile not found: {profile_name} (expected at {profile_path})")

    try:
        with open(profile_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in profile {profile_name}: {e}")

    if not data:
        raise ValueError(f"Profile file is empty: {profile_path}")
    if not isinstance(data, dict):
        raise ValueError(f"Profile {profile_name} must be a mapping, got {type(data).__name__}")

    data.setdefault('name', profile_name)
    return ProfileConfig.from_dict(data)


def list_available_profiles() -> list[str]:
    """List all available profile names.

    Returns:
        List of profile names (without .yaml extension)
    """
    profiles_dir = get_profiles_dir()

    if not profiles_dir.exists():
        return ["default"]

    profiles = []
    for profile_file in profiles_dir.glob("*.yaml"):
        profiles.append(profile_file.stem)

    return sorted(profiles) if profiles else ["default"]


def get_default_profile() -> ProfileConfig:
    """Get default profile (always available).

    Returns:
        Default ProfileConfig
    """
    try:
        return load_profile("default")
    except FileNotFoundError:
        # Fallback: built-in defaults
        return ProfileConfig(
            name="default",
            description="Default typography settings",
            settings={},
        )


def load_settings_file(path: Path) -> Dict[str, Any]:
    """Read settings overrides from a YAML or JSON file.

    A file may hold the settings mapping directly or a profile-shaped
    document with a "settings" key.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file cannot be parsed or is not a mapping
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid settings file {path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    if isinstance(data.get('settings'), dict):
        return dict(data['settings'])
    return data
