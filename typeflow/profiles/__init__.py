"""Named typography presets (YAML profiles)."""
