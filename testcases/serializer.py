"""
This module converts `TestCaseRecord` objects back into the markdown format that
`testcases.extractor` reads, for copying, exporting and display.
"""
from typing import Iterable, List

from models.test_case import TestCaseRecord

BLOCK_SEPARATOR = "\n\n---\n\n"


def to_markdown(record: TestCaseRecord) -> str:
    """
    Serializes one record into a markdown block. Steps are renumbered from 1
    regardless of how they were numbered in the source text.

    Args:
        record (TestCaseRecord): The record to serialize.

    Returns:
        str: The markdown block, without a trailing separator or compliance note.
    """
    lines: List[str] = [
        f"### Case ID: {record.case_id}",
        f"**Title:** {record.title}",
        f"**Description:** {record.description}",
        "**Test Steps:**",
    ]
    lines.extend(f"{number}. {step}" for number, step in enumerate(record.test_steps, start=1))
    lines.append(f"**Expected Results:** {record.expected_results}")
    lines.append(f"**Priority:** {record.priority}")
    if record.requirements_trace:
        lines.append(f"**Requirements Trace:** {record.requirements_trace}")
    return "\n".join(lines)


def to_markdown_all(records: Iterable[TestCaseRecord]) -> str:
    """Serializes several records, joined with the horizontal-rule block separator."""
    return BLOCK_SEPARATOR.join(to_markdown(record) for record in records)
