"""
This module splits raw test-case text (manual paste, uploaded file content or
generative-AI output) into independent blocks, one candidate test case each.
"""
import re
from typing import Iterator, List, Optional, Union

COMPLIANCE_MARKER = "Compliance Note:"

# A line made only of three or more dashes, spaces/tabs allowed around them.
SEPARATOR_RE = re.compile(r"^[ \t]*-{3,}[ \t]*$", re.MULTILINE)


def _as_text(text: Union[str, bytes, None]) -> str:
    if text is None:
        return ""
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")
    return text.replace("\r\n", "\n").replace("\r", "\n")


def truncate_compliance_note(text: str, marker: str = COMPLIANCE_MARKER) -> str:
    """
    Cuts the text at the start of the first line introduced by the compliance-note marker.
    Only markdown decoration (quotes, headings, emphasis) may precede the marker on that
    line; a marker mentioned inside a field value does not count. The marker line and
    everything after it are dropped.

    Args:
        text (str): The raw text.
        marker (str): The marker introducing the trailing compliance note.

    Returns:
        str: The text before the marker line, or the whole text when no marker is present.
    """
    if not marker:
        return text
    match = re.search(r"^[ \t>#*_]*" + re.escape(marker), text, re.IGNORECASE | re.MULTILINE)
    if match is None:
        return text
    return text[:match.start()]


def iter_blocks(text: Union[str, bytes, None], marker: str = COMPLIANCE_MARKER) -> Iterator[str]:
    """
    Lazily yields the non-empty test-case blocks of `text` in their original order.

    Args:
        text (Union[str, bytes, None]): The raw text. Bytes are decoded as UTF-8.
        marker (str): The compliance-note marker; content from its line onwards is never segmented.

    Yields:
        str: One block per candidate test case.
    """
    region = truncate_compliance_note(_as_text(text), marker)
    start = 0
    for match in SEPARATOR_RE.finditer(region):
        block = region[start:match.start()]
        start = match.end()
        if block.strip():
            yield block
    tail = region[start:]
    if tail.strip():
        yield tail


def segment(text: Union[str, bytes, None], marker: Optional[str] = COMPLIANCE_MARKER) -> List[str]:
    """Materialized form of `iter_blocks`."""
    return list(iter_blocks(text, marker or ""))
