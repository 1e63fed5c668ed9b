"""
This module defines the `TestCaseRecord` dataclass, which represents a single test case
extracted from markdown text, together with the bookkeeping metadata callers use
for deduplication and versioning.
"""
import uuid
from dataclasses import dataclass, field, asdict, replace
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any

HIGH = "High"
MEDIUM = "Medium"
LOW = "Low"

DEFAULT_TITLE = "Untitled Test Case"
DEFAULT_PRIORITY = MEDIUM


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def new_record_id(index: int = 0) -> str:
    """Returns a process-local unique identifier for the record at block position `index`."""
    return f"tc-{uuid.uuid4().hex[:12]}-{index}"


def default_case_id(index: int) -> str:
    """Sequence label for the block at 0-based position `index`, e.g. TC-001."""
    return f"TC-{index + 1:03d}"


@dataclass
class TestCaseRecord:
    """
    Represents a single test case.

    Attributes:
        case_id (str): Short human-readable identifier, e.g. "TC-001". Not enforced unique.
        title (str): Short title of the test case.
        description (str): Free-text description. Empty string when absent.
        test_steps (List[str]): Ordered steps; list order is execution order.
        expected_results (str): Free-text expected outcome. Empty string when absent.
        priority (str): "High", "Medium", "Low" or any non-standard value from the source.
        requirements_trace (Optional[str]): Traceability to the source requirements, if given.
        record_id (str): Process-local identifier for caller bookkeeping. Not part of equality.
        version (int): Revision counter, starts at 1. Not part of equality.
        created_at (str): ISO-8601 creation timestamp. Not part of equality.
        updated_at (str): ISO-8601 timestamp of the last revision. Not part of equality.
    """
    __test__ = False  # keep pytest from collecting this class

    case_id: str
    title: str = DEFAULT_TITLE
    description: str = ""
    test_steps: List[str] = field(default_factory=list)
    expected_results: str = ""
    priority: str = DEFAULT_PRIORITY
    requirements_trace: Optional[str] = None
    record_id: str = field(default_factory=new_record_id, compare=False)
    version: int = field(default=1, compare=False)
    created_at: str = field(default_factory=_now, compare=False)
    updated_at: str = field(default_factory=_now, compare=False)

    def revise(self, **changes: Any) -> "TestCaseRecord":
        """
        Returns a modified copy of this record with the version incremented.
        The original record is left untouched.

        Args:
            **changes: Field values to replace, e.g. title="New title".

        Returns:
            TestCaseRecord: The revised copy.
        """
        changes.setdefault("version", self.version + 1)
        changes.setdefault("updated_at", _now())
        if "test_steps" in changes:
            changes["test_steps"] = list(changes["test_steps"])
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Returns a JSON-serializable dictionary with every field of the record."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TestCaseRecord":
        """Rebuilds a record from `to_dict()` output, ignoring unknown keys."""
        known = {name for name in cls.__dataclass_fields__}
        return cls(**{key: value for key, value in data.items() if key in known})
