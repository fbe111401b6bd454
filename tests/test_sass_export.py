"""Unit tests for SASS export."""

import pytest

from typeflow.export.sass_export import SASS_HEADER, generate_sass
from typeflow.models.settings import TypographySettings


@pytest.fixture
def responsive_sass():
    return generate_sass(TypographySettings())


@pytest.fixture
def fixed_sass():
    return generate_sass(TypographySettings(responsive_scaling=False))


def test_header(responsive_sass):
    assert responsive_sass.startswith(SASS_HEADER + "\n// Font imports\n@import url(")
    assert responsive_sass.endswith("\n")


def test_variables(responsive_sass):
    assert "$breakpoint-mobile: 480px;\n$breakpoint-tablet: 768px;" in responsive_sass
    assert '$body-font: "Inter", sans-serif;' in responsive_sass
    assert "$heading-font" not in responsive_sass
    assert "$body-weight: 400;\n$h1-weight: 700;" in responsive_sass
    assert "$h5-weight: 500;" in responsive_sass
    assert "$base-line-height: 1.5;" in responsive_sass
    assert "$paragraph-spacing: 1.5em;" in responsive_sass
    assert "$list-spacing: 1em;" in responsive_sass


class TestResponsive:
    """Per-viewport size variables and mobile-first overrides."""

    def test_size_variables(self, responsive_sass):
        assert "// Mobile typography (base)\n$base-font-size-mobile: 12px;\n$h1-size-mobile: 25px;" in responsive_sass
        assert "// Tablet typography\n$base-font-size-tablet: 14px;\n$h1-size-tablet: 30px;" in responsive_sass
        assert "// Desktop typography\n$base-font-size-desktop: 16px;\n$h1-size-desktop: 33px;" in responsive_sass
        assert "$h6-size-mobile: 11px;" in responsive_sass

    def test_base_styles_use_mobile_sizes(self, responsive_sass):
        assert (
            "// Base styles (mobile first)\nbody {\n  font-size: $base-font-size-mobile;\n"
            "  line-height: $base-line-height;\n  font-family: $body-font;\n}"
        ) in responsive_sass
        assert (
            "h3 {\n  font-size: $h3-size-mobile;\n  margin-top: 1.5em;\n"
            "  margin-bottom: $heading-spacing;\n  line-height: 1.3;\n  font-weight: $h3-weight;\n}"
        ) in responsive_sass

    def test_breakpoint_overrides(self, responsive_sass):
        assert (
            "// Tablet styles\n@media (min-width: $breakpoint-mobile) {\n"
            "  body {\n    font-size: $base-font-size-tablet;\n  }"
        ) in responsive_sass
        assert "  h1 {\n    font-size: $h1-size-tablet;\n  }" in responsive_sass
        assert "// Desktop styles\n@media (min-width: $breakpoint-tablet) {" in responsive_sass
        assert "  h6 {\n    font-size: $h6-size-desktop;\n  }" in responsive_sass


class TestNonResponsive:
    """Unsuffixed variables and no media queries."""

    def test_plain_variables(self, fixed_sass):
        assert "// Typography\n$base-font-size: 16px;\n$h1-size: 33px;" in fixed_sass
        assert "$h1-size-mobile" not in fixed_sass
        assert "$base-font-size-desktop" not in fixed_sass
        assert "@media" not in fixed_sass

    def test_rules_use_plain_variables(self, fixed_sass):
        assert "body {\n  font-size: $base-font-size;" in fixed_sass
        assert "h1 {\n  font-size: $h1-size;\n  margin-bottom: $heading-spacing;" in fixed_sass


def test_separate_heading_font():
    settings = TypographySettings(heading_font_family="Lora", use_separate_heading_font=True)
    sass = generate_sass(settings)

    assert '$heading-font: "Lora", sans-serif;' in sass
    assert "  font-family: $heading-font;\n" in sass


def test_spacing_rules(responsive_sass):
    assert "p {\n  margin-bottom: $paragraph-spacing;\n}" in responsive_sass
    assert "li {\n  margin-bottom: $list-spacing;\n}" in responsive_sass
    assert "li:last-child {\n  margin-bottom: 0;\n}" in responsive_sass
