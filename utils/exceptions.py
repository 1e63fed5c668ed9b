"""
This module defines custom exception classes used around the test-case parser.
The parser itself never raises on text input; these exceptions belong to the
pipeline shell that loads, processes and exports the parsed test cases.
"""

class PipelineError(Exception):
    """Custom exception raised for errors occurring during test-case pipeline execution."""
    pass

class ExportError(PipelineError):
    """Custom exception raised when test cases cannot be exported (e.g., unsupported format)."""
    pass
