"""CLI interface for Typography Flow: exports, scale tables and preview pages."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

# Fix encoding for Windows console
if sys.platform == "win32":
    try:
        sys.stdout.reconfigure(encoding='utf-8')
    except (AttributeError, ValueError):
        pass  # Already configured

import yaml

from ..config import (
    get_app_name,
    get_app_version,
    get_default_export_format,
    get_default_output_dir,
    get_default_profile_name,
)
from ..export import EXPORT_FORMATS, generate_export, normalize_export_format
from ..fonts import list_fonts
from ..models.settings import TypographySettings
from ..preview import DEFAULT_PREVIEW_CONTENT, MarkdownConversionError, build_preview_page, load_preview_content
from ..profiles.profile_loader import list_available_profiles, load_profile, load_settings_file
from ..profiles.profile_manager import set_profile
from ..ramps.viewport import VIEWPORTS, calculate_type_scale
from ..scale_table import build_scale_table
from ..validation import validate_settings

logger = logging.getLogger(__name__)

MARKDOWN_ERROR_MESSAGE = "Error parsing markdown. Please check your input."


def _parse_set_option(option: str) -> Tuple[str, Any]:
    """Split a --set KEY=VALUE option; VALUE is read as a YAML scalar or list.

    Raises:
        ValueError: If the option has no '='
    """
    key, sep, raw_value = option.partition("=")
    if not sep or not key.strip():
        raise ValueError(f"Invalid --set option: {option!r} (expected key=value)")
    try:
        value = yaml.safe_load(raw_value)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid value for {key.strip()}: {e}")
    return key.strip(), value


def build_settings(
    profile_name: Optional[str] = None,
    settings_file: Optional[str] = None,
    overrides: Optional[List[str]] = None,
) -> TypographySettings:
    """Resolve settings: profile, then settings file, then --set overrides.

    Raises:
        FileNotFoundError: If the profile or settings file doesn't exist
        ValueError: If any layer is invalid or names an unknown setting
    """
    profile = set_profile(profile_name or get_default_profile_name())
    settings = profile.to_settings()
    logger.info(f"Using profile: {profile.name}")

    if settings_file:
        file_overrides = load_settings_file(Path(settings_file))
        settings = settings.updated(**file_overrides)
        logger.info(f"Applied {len(file_overrides)} setting(s) from {settings_file}")

    set_overrides: Dict[str, Any] = {}
    for option in overrides or []:
        key, value = _parse_set_option(option)
        set_overrides[key] = value
    if set_overrides:
        settings = settings.updated(**set_overrides)

    return settings


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)


def _handle_list_profiles() -> None:
    for name in list_available_profiles():
        try:
            description = load_profile(name).description
        except (FileNotFoundError, ValueError) as e:
            description = f"(unreadable: {e})"
        print(f"{name:<12} {description}")


def _handle_list_fonts() -> None:
    for font in list_fonts():
        print(f"{font.family:<20} {font.category:<11} {', '.join(font.variants)}")


def _handle_export(args: argparse.Namespace, settings: TypographySettings, scale, export_format: str) -> None:
    content = generate_export(settings, export_format, scale)

    if args.output:
        output_path = Path(args.output)
        _write_text(output_path, content if content.endswith("\n") else content + "\n")
        print(f"{export_format.upper()} export written to: {output_path}")
    else:
        sys.stdout.write(content if content.endswith("\n") else content + "\n")


def _handle_preview(args: argparse.Namespace, settings: TypographySettings) -> None:
    """Render the preview page; a markdown failure writes nothing and exits 1."""
    if args.preview == "-":
        content_html = DEFAULT_PREVIEW_CONTENT
    else:
        with open(args.preview, 'r', encoding='utf-8') as f:
            markdown_text = f.read()
        try:
            content_html = load_preview_content(markdown_text, DEFAULT_PREVIEW_CONTENT)
        except MarkdownConversionError:
            print(MARKDOWN_ERROR_MESSAGE, file=sys.stderr)
            sys.exit(1)

    page = build_preview_page(
        settings,
        content_html,
        viewport=args.viewport,
        visualize_spacing=args.show_spacing,
    )

    if args.preview_output:
        output_path = Path(args.preview_output)
    else:
        output_path = get_default_output_dir() / f"preview-{args.viewport}.html"
    _write_text(output_path, page)
    print(f"Preview written to: {output_path}")


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="typeflow",
        description=f"{get_app_name()} - Generate typographic scales and export them as CSS, SASS or design tokens"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {get_app_version()}"
    )

    parser.add_argument(
        "--profile",
        type=str,
        default=None,
        help="Settings profile to start from (default: TYPEFLOW_PROFILE or 'default')"
    )

    parser.add_argument(
        "--settings",
        type=str,
        help="YAML or JSON file with setting overrides"
    )

    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a single setting, e.g. --set scale_ratio=1.333 (repeatable)"
    )

    parser.add_argument(
        "--format",
        type=str,
        default=None,
        help=f"Export format: {', '.join(EXPORT_FORMATS)} (default: TYPEFLOW_EXPORT_FORMAT or css)"
    )

    parser.add_argument(
        "--output",
        type=str,
        help="Write the export to this file instead of stdout"
    )

    parser.add_argument(
        "--table",
        action="store_true",
        help="Print the computed type scale as a table"
    )

    parser.add_argument(
        "--preview",
        type=str,
        metavar="FILE.md",
        help="Render an HTML preview of a markdown file ('-' for the built-in sample content)"
    )

    parser.add_argument(
        "--preview-output",
        type=str,
        help="Where to write the preview page (default: <output dir>/preview-<viewport>.html)"
    )

    parser.add_argument(
        "--viewport",
        choices=VIEWPORTS,
        default="desktop",
        help="Viewport for the preview page (default: desktop)"
    )

    parser.add_argument(
        "--show-spacing",
        action="store_true",
        help="Overlay margins, line heights and list spacing in the preview"
    )

    parser.add_argument(
        "--list-profiles",
        action="store_true",
        help="List available settings profiles"
    )

    parser.add_argument(
        "--list-fonts",
        action="store_true",
        help="List fonts in the font catalog"
    )

    parser.add_argument(
        "--check-deps",
        action="store_true",
        help="Check that required libraries are installed"
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with error code if validation produces warnings"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(message)s"
    )

    if args.check_deps:
        from .check_deps import run_check
        sys.exit(0 if run_check(verbose=True) else 1)

    if args.list_profiles:
        _handle_list_profiles()
        return

    if args.list_fonts:
        _handle_list_fonts()
        return

    try:
        export_format = normalize_export_format(args.format or get_default_export_format())
        settings = build_settings(args.profile, args.settings, args.overrides)

        report = validate_settings(settings)
        report.raise_for_errors()
        if args.strict and report.warnings:
            print(f"Error: {len(report.warnings)} validation warning(s) in strict mode", file=sys.stderr)
            sys.exit(1)

        scale = calculate_type_scale(settings)

        if args.table:
            print(build_scale_table(settings, scale).to_string())

        if args.preview:
            _handle_preview(args, settings)

        # Export runs unless only a table or preview was requested
        if args.format or args.output or not (args.table or args.preview):
            _handle_export(args, settings, scale, export_format)

    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
