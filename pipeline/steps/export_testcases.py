"""
This module implements the Export Test Cases step of the pipeline.
It writes the parsed test cases to a local file under the run's artifact directory,
in one of the supported formats (markdown/text, JSON, CSV or plain text).
"""
import csv
import io
import json
import os
import re
from typing import Dict, Any, List

from config import config, EXPORT_FORMATS
from logs.logger import log_error
from models.test_case import TestCaseRecord
from testcases.formatting import strip_markdown_formatting
from testcases.serializer import to_markdown, to_markdown_all, BLOCK_SEPARATOR
from utils.exceptions import ExportError

FILE_EXTENSIONS = {
    "markdown": "md",
    "text": "txt",
    "json": "json",
    "csv": "csv",
    "plain": "txt",
}

CSV_COLUMNS = ["Case ID", "Title", "Description", "Test Steps", "Expected Results", "Priority", "Requirements Trace"]


def export_file_name(record: TestCaseRecord) -> str:
    """File name (without extension) for downloading a single test case, e.g. TC-001_Login_Test."""
    title = re.sub(r"\s+", "_", record.title.strip())
    return f"{record.case_id}_{title}"


def _to_csv(testcases: List[TestCaseRecord]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(CSV_COLUMNS)
    for record in testcases:
        writer.writerow([
            record.case_id,
            record.title,
            record.description,
            "\n".join(f"{number}. {step}" for number, step in enumerate(record.test_steps, start=1)),
            record.expected_results,
            record.priority,
            record.requirements_trace or "",
        ])
    return buffer.getvalue()


def render(testcases: List[TestCaseRecord], export_format: str) -> str:
    """
    Renders test cases as the text content of an export file.

    Args:
        testcases (List[TestCaseRecord]): The records to export.
        export_format (str): One of "markdown", "text", "json", "csv" or "plain".

    Returns:
        str: The file content.

    Raises:
        ExportError: If the format is not supported.
    """
    if export_format in ("markdown", "text"):
        return to_markdown_all(testcases) + "\n"
    if export_format == "json":
        return json.dumps([record.to_dict() for record in testcases], indent=2, ensure_ascii=False)
    if export_format == "csv":
        return _to_csv(testcases)
    if export_format == "plain":
        return BLOCK_SEPARATOR.join(strip_markdown_formatting(to_markdown(record)) for record in testcases) + "\n"
    raise ExportError(f"Unsupported export format: {export_format}. Must be one of {EXPORT_FORMATS}")


def run(ctx: Dict[str, Any]) -> None:
    """
    Executes the Export Test Cases step. The records in `ctx["testcases"]` are rendered
    in the requested format and written to `<export_dir>/<run_id>/testcases.<ext>`.
    The path of the written file is stored as `ctx["export_file"]`.

    Args:
        ctx (Dict[str, Any]): The pipeline context dictionary, expected to contain:
                              - 'run_id' (str): Unique identifier for the run.
                              - 'testcases' (list): Records from the parsing step.
                              Optional 'export_format' and 'export_dir' override the configuration.

    Raises:
        ExportError: If the format is unsupported or the file cannot be written.
    """
    run_id = ctx["run_id"]
    export_format = str(ctx.get("export_format") or config.export_format).lower()
    export_dir = os.path.join(ctx.get("export_dir") or config.export_dir, run_id)

    content = render(ctx.get("testcases", []), export_format)

    export_file = os.path.join(export_dir, f"testcases.{FILE_EXTENSIONS[export_format]}")
    try:
        os.makedirs(export_dir, exist_ok=True)
        with open(export_file, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        error_message = f"Failed to write export file {export_file}: {e}"
        log_error(error_message)
        raise ExportError(error_message) from e

    ctx["export_file"] = export_file
    print(f"✅ Test cases exported to {export_file}")
