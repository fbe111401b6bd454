"""Markdown to HTML conversion for preview content."""

import logging

import markdown

logger = logging.getLogger(__name__)

# Tables, fenced code and strict list handling approximate GitHub-flavoured
# markdown; raw HTML passes through untouched.
MARKDOWN_EXTENSIONS = [
    "markdown.extensions.tables",
    "markdown.extensions.fenced_code",
    "markdown.extensions.sane_lists",
]


class MarkdownConversionError(Exception):
    """Raised when markdown cannot be converted to HTML."""
    pass


def markdown_to_html(text: str) -> str:
    """Convert markdown text to HTML.

    Args:
        text: Markdown source (may contain raw HTML)

    Returns:
        HTML string

    Raises:
        MarkdownConversionError: If the markdown library fails
    """
    if text is None:
        raise MarkdownConversionError("No markdown input")
    try:
        return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS, output_format="html")
    except Exception as e:
        raise MarkdownConversionError(f"Error converting markdown to HTML: {e}") from e


def load_preview_content(markdown_text: str, previous: str) -> str:
    """Convert imported markdown into new preview content.

    On failure the error is logged and re-raised; the caller keeps showing
    `previous`.

    Args:
        markdown_text: Markdown to import
        previous: Preview HTML currently shown

    Returns:
        New preview HTML
    """
    try:
        return markdown_to_html(markdown_text)
    except MarkdownConversionError as e:
        logger.error(f"{e}; keeping previous preview content ({len(previous)} chars)")
        raise
