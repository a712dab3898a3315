"""
Tests for output formatters (to_json, to_markdown, to_summary).
"""

import json

import pytest

from smithy.calculator import (
    Severity,
    ValidationMessage,
    ValidationResult,
    to_json,
    to_markdown,
    to_summary,
    validate_thread,
)
from smithy.calculator.output import SCHEMA_VERSION


@pytest.fixture
def failing_result():
    """A failing validation result with errors, warnings, and infos."""
    return ValidationResult(
        valid=False,
        messages=[
            ValidationMessage(
                severity=Severity.ERROR,
                code="MINOR_DIAMETER_NOT_POSITIVE",
                message="Minor diameter is not positive",
                suggestion="Use a finer thread",
            ),
            ValidationMessage(
                severity=Severity.WARNING,
                code="NON_STANDARD_THREAD",
                message="Not a standard thread",
            ),
            ValidationMessage(
                severity=Severity.INFO,
                code="ENGAGEMENT_LENGTH_NON_STANDARD",
                message="Length of engagement is 5.0P",
            ),
        ],
    )


class TestToJson:
    """Tests for to_json()."""

    def test_structure(self, quarter_20_2a):
        data = json.loads(to_json(quarter_20_2a))
        assert data["schema_version"] == SCHEMA_VERSION
        assert data["designation"] == "0.2500-20 UN-2A"
        assert data["thread"]["thread_class"] == "2A"
        assert data["thread"]["series"] == "UN"
        assert data["thread"]["pitch"] == 0.05
        assert "validation" not in data

    def test_full_precision_by_default(self, quarter_20_2a):
        data = json.loads(to_json(quarter_20_2a))
        assert data["thread"]["allowance"] == quarter_20_2a.allowance

    def test_rounded(self, quarter_20_2a):
        data = json.loads(to_json(quarter_20_2a, digits=4))
        assert data["thread"]["major_diameter_max"] == 0.2488
        assert data["thread"]["allowance"] == 0.0012
        assert data["thread"]["thread_class"] == "2A"

    def test_with_validation(self, quarter_20_2a, failing_result):
        data = json.loads(to_json(quarter_20_2a, validation=failing_result))
        assert data["validation"]["valid"] is False
        codes = [m["code"] for m in data["validation"]["messages"]]
        assert codes == [
            "MINOR_DIAMETER_NOT_POSITIVE",
            "NON_STANDARD_THREAD",
            "ENGAGEMENT_LENGTH_NON_STANDARD",
        ]
        assert data["validation"]["messages"][0]["severity"] == "error"


class TestToMarkdown:
    """Tests for to_markdown()."""

    def test_sections(self, quarter_20_2a):
        md = to_markdown(quarter_20_2a)
        assert md.startswith("# UTS External Thread: 0.2500-20 UN-2A")
        assert "## Limits of Size" in md
        assert "| Major | 0.2488 in |" in md
        assert "## Validation" not in md

    def test_unr_minor(self, quarter_20_3a):
        md = to_markdown(quarter_20_3a)
        assert "| Minor (UNR) |" in md

    def test_valid_status(self, quarter_20_2a):
        md = to_markdown(quarter_20_2a, validate_thread(quarter_20_2a))
        assert "Thread is valid" in md

    def test_failing_status(self, quarter_20_2a, failing_result):
        md = to_markdown(quarter_20_2a, failing_result)
        assert "Thread has errors" in md
        assert "### Errors" in md
        assert "*Suggestion*: Use a finer thread" in md
        assert "### Warnings" in md
        assert "### Information" in md


class TestToSummary:
    """Tests for to_summary()."""

    def test_lines(self, quarter_20_2a):
        summary = to_summary(quarter_20_2a)
        assert summary.splitlines()[0] == "═══ 0.2500-20 UN-2A ═══"
        assert "Major dia:  0.2488 / 0.2407 in" in summary
        assert "Minor dia:" in summary
