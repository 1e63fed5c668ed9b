"""
This module defines the test-case pipeline steps and provides functionality to
initialize and execute a pipeline run.
"""
import logging
import os
import uuid
from typing import Dict, Any, List, Optional

from logs.logger import log_error
from pipeline.steps import parse_testcases, merge_exports, dedupe_testcases, export_testcases
from utils.exceptions import PipelineError

logger = logging.getLogger(__name__)

# Define the sequence of pipeline steps
# Each tuple contains the step name and the function to execute for that step.
PIPELINE_STEPS = [
    ("Parsing Test Cases", parse_testcases.run),
    ("Merging Previous Exports", merge_exports.run),
    ("Removing Duplicates", dedupe_testcases.run),
    ("Exporting Test Cases", export_testcases.run),
]

def initialize_pipeline(file_path: str, merge_files: Optional[List[str]] = None) -> dict:
    """
    Initializes a new pipeline run by creating a unique run ID, reading the input file,
    and setting up the initial context for pipeline execution.

    Args:
        file_path (str): Path to the text file holding the test cases, or to an earlier JSON export.
        merge_files (Optional[List[str]]): Paths of earlier JSON exports to merge into this run.

    Returns:
        dict: A dictionary containing the initial pipeline context, including:
              - 'run_id' (str): A unique identifier for the current pipeline run.
              - 'file_name' (str): The name of the input file.
              - 'txt' (str): The content of the input file.
              - 'merge_files' (list): The JSON exports to merge.
              - 'step_index' (int): The current step index, initialized to 0.

    Raises:
        PipelineError: If the input file cannot be read.
    """
    try:
        with open(file_path, "rb") as f:
            txt = f.read().decode("utf-8", errors="replace")
    except OSError as e:
        log_error(f"Failed to initialize pipeline for {file_path}: {e}")
        raise PipelineError(f"Cannot read input file {file_path}: {e}") from e

    return {
        "run_id": str(uuid.uuid4()),
        "file_name": os.path.basename(file_path),
        "txt": txt,
        "merge_files": list(merge_files or []),
        "step_index": 0
    }

def run_pipeline(ctx: Dict[str, Any]) -> Dict[str, Any]:
    """
    Runs every remaining step, starting from `ctx["step_index"]`, and advances the index
    after each completed step.

    Args:
        ctx (Dict[str, Any]): A context created by `initialize_pipeline`.

    Returns:
        Dict[str, Any]: The same context, after the last step.

    Raises:
        PipelineError: If a step fails. The index still points at the failed step.
    """
    while ctx.get("step_index", 0) < len(PIPELINE_STEPS):
        step_name, step_function = PIPELINE_STEPS[ctx.get("step_index", 0)]
        logger.info("Running step %s for run_id %s", step_name, ctx.get("run_id"))
        try:
            step_function(ctx)
        except PipelineError:
            raise
        except Exception as e:
            log_error(f"An error occurred during step {step_name}, run_id {ctx.get('run_id')}: {e}")
            raise PipelineError(f"Step '{step_name}' failed: {e}") from e
        ctx["step_index"] = ctx.get("step_index", 0) + 1
    return ctx
