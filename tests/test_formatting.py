"""
This module contains unit tests for the display helpers in `testcases.formatting`.
"""
from testcases.formatting import strip_markdown_formatting

def test_strip_labels_and_headings():
    """
    Tests that bold labels and heading markers are removed from a serialized test case.
    """
    text = "### Case ID: TC-001\n**Title:** Login Test\n**Priority:** High"
    assert strip_markdown_formatting(text) == "Case ID: TC-001\nTitle: Login Test\nPriority: High"

def test_strip_links_code_and_quotes():
    """
    Tests that links, images, inline code and block quotes are reduced to their text.
    """
    text = "See [the guide](https://example.com) ![logo](logo.png)\n> Run `pytest -q`"
    assert strip_markdown_formatting(text) == "See the guide logo\nRun pytest -q"

def test_bullets_rules_and_blank_lines():
    """
    Tests that bullets are normalized, horizontal rules dropped and blank lines collapsed.
    """
    text = "- first\n* second\n\n---\n\n\n_italic_ and *emphasis*"
    assert strip_markdown_formatting(text) == "• first\n• second\n\nitalic and emphasis"

def test_empty_text_is_returned_unchanged():
    assert strip_markdown_formatting("") == ""
    assert strip_markdown_formatting(None) is None
