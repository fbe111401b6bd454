"""Typography Flow: type-scale ramps, exports and previews."""
