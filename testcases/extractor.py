"""
This module extracts structured `TestCaseRecord` objects from markdown test-case blocks.

Every field is searched for independently, so a missing or malformed field never
prevents the others from being extracted. Absent fields fall back to defaults and
extraction never fails: any block yields exactly one record.
"""
import logging
import re
from typing import Iterator, List, Optional, Union

from models.test_case import (
    TestCaseRecord,
    DEFAULT_PRIORITY,
    DEFAULT_TITLE,
    default_case_id,
    new_record_id,
)
from testcases.segmenter import COMPLIANCE_MARKER, iter_blocks

logger = logging.getLogger(__name__)

_FLAGS = re.IGNORECASE | re.MULTILINE


def _words(name: str) -> str:
    return r"[ \t]+".join(re.escape(word) for word in name.split())


def _bold_label(name: str) -> str:
    """Pattern for `**Name:**` and `**Name**:`."""
    return r"\*\*[ \t]*" + _words(name) + r"[ \t]*(?::[ \t]*\*\*|\*\*[ \t]*:)"


CASE_ID_LABEL = r"#+[ \t]*(?:\*\*)?[ \t]*Case[ \t]+ID[ \t]*(?:\*\*)?[ \t]*:(?:\*\*)?"
# Exports of the web app write this placeholder when a case has no trace.
NO_TRACE_VALUES = ("n/a", "na", "none", "-")
FIELD_LABELS = ("Title", "Description", "Test Steps", "Expected Results", "Priority", "Requirements Trace")


def _line_pattern(label: str) -> "re.Pattern[str]":
    return re.compile(r"^[ \t]*" + label + r"[ \t]*(.*)$", _FLAGS)


CASE_ID_RE = _line_pattern(CASE_ID_LABEL)
TITLE_RE = _line_pattern(_bold_label("Title"))
DESCRIPTION_RE = _line_pattern(_bold_label("Description"))
EXPECTED_RESULTS_RE = _line_pattern(_bold_label("Expected Results"))
PRIORITY_RE = _line_pattern(_bold_label("Priority"))
REQUIREMENTS_TRACE_RE = _line_pattern(_bold_label("Requirements Trace"))

# The steps region ends at the next recognized label line or at the end of the block.
_NEXT_LABEL = (
    r"^[ \t]*(?:"
    + "|".join(_bold_label(name) for name in FIELD_LABELS if name != "Test Steps")
    + "|" + CASE_ID_LABEL
    + ")"
)
TEST_STEPS_RE = re.compile(
    r"^[ \t]*" + _bold_label("Test Steps") + r"(.*?)(?=" + _NEXT_LABEL + r"|\Z)",
    _FLAGS | re.DOTALL,
)

ORDINAL_RE = re.compile(r"^\d+[.)](?!\d)\s*")
BULLET_RE = re.compile(r"^[-*•]\s+")


def _search(pattern: "re.Pattern[str]", block: str) -> Optional[str]:
    """Returns the trimmed capture of `pattern`, or None when it is missing or blank."""
    match = pattern.search(block)
    if match is None:
        return None
    value = match.group(1).strip()
    return value or None


def clean_step(line: str) -> str:
    """
    Strips a step line and removes one leading ordinal ("1.", "2)") or, if there is
    none, one leading bullet ("-", "*", "•").
    """
    line = line.strip()
    stripped = ORDINAL_RE.sub("", line, count=1)
    if stripped == line:
        stripped = BULLET_RE.sub("", line, count=1)
    return stripped.strip()


def extract_steps(block: str) -> List[str]:
    """
    Extracts the ordered list of test steps from a block.

    Args:
        block (str): One test-case block.

    Returns:
        List[str]: The steps without numbering, blank lines discarded. Empty when the
                   block has no "Test Steps" label.
    """
    match = TEST_STEPS_RE.search(block)
    if match is None:
        return []
    steps = []
    for line in match.group(1).splitlines():
        step = clean_step(line)
        if step:
            steps.append(step)
    return steps


def extract_requirements_trace(block: str) -> Optional[str]:
    """Returns the Requirements Trace value, or None when it is absent or a placeholder such as "N/A"."""
    value = _search(REQUIREMENTS_TRACE_RE, block)
    if value is None or value.lower() in NO_TRACE_VALUES:
        return None
    return value


def extract_record(block: Union[str, bytes, None], index: int = 0) -> TestCaseRecord:
    """
    Builds exactly one `TestCaseRecord` from a block. Never raises.

    Args:
        block (Union[str, bytes, None]): One test-case block. Empty input produces a record
                                         made entirely of defaults.
        index (int): The 0-based position of the block in its batch. Used for the default
                     case ID and the record identifier.

    Returns:
        TestCaseRecord: The extracted record.
    """
    if block is None:
        block = ""
    elif isinstance(block, bytes):
        block = block.decode("utf-8", errors="replace")

    case_id = _search(CASE_ID_RE, block)
    title = _search(TITLE_RE, block)
    priority = _search(PRIORITY_RE, block)

    if case_id is None:
        case_id = default_case_id(index)
        logger.debug("Block %d has no Case ID, using %s", index, case_id)
    if title is None:
        logger.debug("Block %d has no Title", index)
    if priority is None:
        logger.debug("Block %d has no Priority, defaulting to %s", index, DEFAULT_PRIORITY)

    return TestCaseRecord(
        case_id=case_id,
        title=title or DEFAULT_TITLE,
        description=_search(DESCRIPTION_RE, block) or "",
        test_steps=extract_steps(block),
        expected_results=_search(EXPECTED_RESULTS_RE, block) or "",
        priority=priority or DEFAULT_PRIORITY,
        requirements_trace=extract_requirements_trace(block),
        record_id=new_record_id(index),
    )


def iter_test_cases(text: Union[str, bytes, None], marker: str = COMPLIANCE_MARKER) -> Iterator[TestCaseRecord]:
    """Lazily yields one record per block of `text`, in order."""
    for index, block in enumerate(iter_blocks(text, marker)):
        yield extract_record(block, index)


def parse_test_cases(text: Union[str, bytes, None], marker: str = COMPLIANCE_MARKER) -> List[TestCaseRecord]:
    """
    Parses markdown test-case text into records.

    Args:
        text (Union[str, bytes, None]): The raw text, e.g. generative-AI output or pasted content.
        marker (str): The compliance-note marker; everything from its line onwards is ignored.

    Returns:
        List[TestCaseRecord]: One record per non-empty block, in original order. Empty when
                              no blocks survive segmentation.
    """
    records = list(iter_test_cases(text, marker))
    logger.info("Parsed %d test case(s)", len(records))
    return records
