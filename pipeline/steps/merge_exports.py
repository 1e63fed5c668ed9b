"""
This module implements the Merge Previous Exports step of the pipeline.
Test cases exported earlier as JSON are loaded back with their original record IDs,
so that re-imported copies of the same record can be recognized as duplicates.
"""
import json
from typing import Dict, Any, List

from logs.logger import log_error
from models.test_case import TestCaseRecord
from utils.exceptions import PipelineError

def records_from_json(txt: str, source: str = "JSON export") -> List[TestCaseRecord]:
    """
    Rebuilds test-case records from the content of a JSON export.

    Args:
        txt (str): The file content, a list of objects as written by the JSON export
                   (a single object is accepted too).
        source (str): Name of the file, used in error messages.

    Returns:
        List[TestCaseRecord]: The records, in file order.

    Raises:
        PipelineError: If the content is not valid JSON or an entry has no case_id.
    """
    try:
        data = json.loads(txt)
    except json.JSONDecodeError as e:
        log_error(f"Invalid JSON in {source}: {e}")
        raise PipelineError(f"Invalid JSON format in {source}: {e}") from e

    if not isinstance(data, list):
        data = [data]

    records = []
    for item in data:
        if not isinstance(item, dict) or "case_id" not in item:
            raise PipelineError(f"Each test case in {source} must be an object with a 'case_id'")
        records.append(TestCaseRecord.from_dict(item))
    return records

def run(ctx: Dict[str, Any]) -> None:
    """
    Executes the Merge Previous Exports step. Every file listed in `ctx["merge_files"]`
    is read as a JSON export and its records are appended after the current ones.

    Args:
        ctx (Dict[str, Any]): The pipeline context dictionary, expected to contain:
                              - 'testcases' (list): Records from the parsing step.
                              - 'merge_files' (list, optional): Paths of earlier JSON exports.
    """
    merged = 0
    for file_path in ctx.get("merge_files") or []:
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                txt = f.read()
        except OSError as e:
            log_error(f"Failed to read export {file_path}: {e}")
            raise PipelineError(f"Cannot read export file {file_path}: {e}") from e
        records = records_from_json(txt, file_path)
        ctx.setdefault("testcases", []).extend(records)
        merged += len(records)

    ctx["merged_testcases"] = merged
    if merged:
        print(f"📥 Merged {merged} test case(s) from previous exports.")
