"""
Helpers for turning markdown test-case text into plain text for display and plain-text export.
"""
import re

_REPLACEMENTS = [
    (re.compile(r"!\[([^\]]*)\]\([^)]*\)"), r"\1"),        # images
    (re.compile(r"\[([^\]]+)\]\([^)]*\)"), r"\1"),         # links
    (re.compile(r"`([^`]+)`"), r"\1"),                     # inline code
    (re.compile(r"\*\*(.*?)\*\*"), r"\1"),
    (re.compile(r"__(.*?)__"), r"\1"),
    (re.compile(r"^[ \t]*#{1,6}[ \t]+", re.MULTILINE), ""),
    (re.compile(r"^[ \t]*[-*_]{3,}[ \t]*$", re.MULTILINE), ""),  # horizontal rules
    (re.compile(r"^[ \t]*[-*+][ \t]+", re.MULTILINE), "• "),
    (re.compile(r"(?<![\w*])\*(?!\s)(.+?)(?<!\s)\*(?![\w*])"), r"\1"),
    (re.compile(r"(?<!\w)_(?!\s)(.+?)(?<!\s)_(?!\w)"), r"\1"),
    (re.compile(r"^[ \t]*>[ \t]?", re.MULTILINE), ""),
    (re.compile(r"\n[ \t]*(?:\n[ \t]*)+"), "\n\n"),
]


def strip_markdown_formatting(text: str) -> str:
    """
    Removes markdown syntax from `text`: emphasis, headings, links and images,
    inline code, block quotes and horizontal rules. List bullets become "• "
    and runs of blank lines collapse to one.

    Args:
        text (str): Text with markdown formatting.

    Returns:
        str: The cleaned text. Empty input is returned unchanged.
    """
    if not text:
        return text
    for pattern, replacement in _REPLACEMENTS:
        text = pattern.sub(replacement, text)
    return text.strip()
