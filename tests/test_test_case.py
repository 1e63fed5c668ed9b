"""
This module contains unit tests for the `TestCaseRecord` model.
"""
from models.test_case import TestCaseRecord, default_case_id

def _record():
    return TestCaseRecord(
        case_id="TC-003",
        title="Allergy alert",
        description="Alert shown for known allergies",
        test_steps=["Open prescription form", "Select penicillin"],
        expected_results="Allergy warning is displayed",
        priority="High",
    )

def test_equality_ignores_bookkeeping_fields():
    """
    Tests that two records with the same content are equal even with different identifiers.
    """
    first, second = _record(), _record()
    assert first.record_id != second.record_id
    assert first == second

def test_revise_returns_new_version():
    """
    Tests that revising a record returns a copy with an incremented version.
    """
    original = _record()
    revised = original.revise(priority="Low")
    assert revised.priority == "Low"
    assert revised.version == 2
    assert revised.record_id == original.record_id
    assert original.priority == "High"
    assert original.version == 1

def test_revise_copies_steps():
    """
    Tests that the revised copy does not share its step list with the caller's list.
    """
    steps = ["Step A"]
    revised = _record().revise(test_steps=steps)
    steps.append("Step B")
    assert revised.test_steps == ["Step A"]

def test_dict_round_trip():
    """
    Tests that to_dict/from_dict preserve every field, unknown keys ignored.
    """
    record = _record()
    data = record.to_dict()
    data["unexpected"] = "ignored"
    restored = TestCaseRecord.from_dict(data)
    assert restored == record
    assert restored.record_id == record.record_id
    assert restored.created_at == record.created_at

def test_default_case_id():
    assert default_case_id(0) == "TC-001"
    assert default_case_id(41) == "TC-042"
