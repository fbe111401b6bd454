"""Preview rendering: markdown import and standalone HTML pages."""

from .default_content import DEFAULT_PREVIEW_CONTENT
from .markdown_converter import MarkdownConversionError, load_preview_content, markdown_to_html
from .preview_page import build_preview_page, build_preview_styles

__all__ = [
    "DEFAULT_PREVIEW_CONTENT",
    "MarkdownConversionError",
    "build_preview_page",
    "build_preview_styles",
    "load_preview_content",
    "markdown_to_html",
]
