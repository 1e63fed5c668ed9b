"""
This module implements the Parse Test Cases step of the pipeline.
It turns the raw text stored in the context into structured test-case records.
"""
from typing import Dict, Any

from config import config
from logs.logger import log_error
from pipeline.steps.merge_exports import records_from_json
from testcases.extractor import parse_test_cases
from utils.exceptions import PipelineError

def run(ctx: Dict[str, Any]) -> None:
    """
    Executes the Parse Test Cases step. The text in `ctx["txt"]` is segmented at the
    horizontal-rule separators (ignoring any trailing compliance note) and every block
    becomes one record, stored as `ctx["testcases"]`. A `.json` input file is read as
    an earlier JSON export instead, keeping its record IDs.

    Args:
        ctx (Dict[str, Any]): The pipeline context dictionary, which must contain:
                              - 'txt' (str): The raw test-case text.
                              It may contain 'compliance_marker' to override the configured marker.

    Raises:
        PipelineError: If the input contains no test cases at all, or is invalid JSON.
    """
    file_name = ctx.get("file_name", "input text")
    if file_name.lower().endswith(".json"):
        testcases = records_from_json(ctx.get("txt", ""), file_name)
    else:
        marker = ctx.get("compliance_marker", config.compliance_marker)
        testcases = parse_test_cases(ctx.get("txt", ""), marker)

    if not testcases:
        error_message = f"No valid test cases found in {file_name}"
        log_error(error_message)
        raise PipelineError(error_message)

    ctx["testcases"] = testcases
    print(f"✅ Parsed {len(testcases)} test case(s).")
