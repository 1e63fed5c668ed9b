"""
This module implements the Remove Duplicates step of the pipeline.
Duplicates come from earlier JSON exports loaded more than once, which keep their record IDs.
"""
from typing import Dict, Any, List, Set, Tuple

from models.test_case import TestCaseRecord

def dedupe(testcases: List[TestCaseRecord]) -> List[TestCaseRecord]:
    """
    Removes records sharing the composite key (record_id, case_id), keeping the first one.
    Records that only share a case_id are kept: case IDs are not required to be unique.

    Args:
        testcases (List[TestCaseRecord]): Records in their original order.

    Returns:
        List[TestCaseRecord]: The unique records, order preserved.
    """
    seen: Set[Tuple[str, str]] = set()
    unique = []
    for record in testcases:
        key = (record.record_id, record.case_id)
        if key not in seen:
            seen.add(key)
            unique.append(record)
    return unique

def run(ctx: Dict[str, Any]) -> None:
    testcases = ctx.get("testcases", [])
    unique = dedupe(testcases)
    ctx["duplicates_removed"] = len(testcases) - len(unique)
    ctx["testcases"] = unique
    if ctx["duplicates_removed"]:
        print(f"🧹 Removed {ctx['duplicates_removed']} duplicate test case(s).")
