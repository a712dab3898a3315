"""
Tests for thread validation rules.

All tests call the public validators with calculator output or plain
numbers; no fixtures beyond the reference threads in conftest.
"""

from smithy.calculator import (
    Severity,
    ValidationMessage,
    ValidationResult,
    uts_external_thread,
    validate_thread,
    validate_thread_inputs,
)


def _codes(result):
    """Extract code strings from a ValidationResult."""
    return [m.code for m in result.messages]


class TestValidateInputs:
    """Tests for validate_thread_inputs()."""

    def test_standard_thread_clean(self):
        result = validate_thread_inputs(0.25, 20)
        assert result.valid
        assert result.messages == []

    def test_non_standard_thread_warns(self):
        result = validate_thread_inputs(0.25, 24)
        assert result.valid
        assert _codes(result) == ["NON_STANDARD_THREAD"]
        warning = result.warnings[0]
        assert warning.severity == Severity.WARNING
        assert "1/4" in warning.suggestion
        assert "20 UNC" in warning.suggestion
        assert "28 UNF" in warning.suggestion

    def test_non_positive_diameter(self):
        result = validate_thread_inputs(0.0, 20)
        assert not result.valid
        assert _codes(result) == ["DIAMETER_NOT_POSITIVE"]

    def test_non_positive_tpi(self):
        result = validate_thread_inputs(0.25, 0)
        assert not result.valid
        assert _codes(result) == ["TPI_NOT_POSITIVE"]

    def test_non_positive_engagement(self):
        result = validate_thread_inputs(0.25, 20, engagement_length=-0.1)
        assert not result.valid
        assert "ENGAGEMENT_LENGTH_NOT_POSITIVE" in _codes(result)

    def test_collects_all_errors(self):
        result = validate_thread_inputs(-1.0, -4, engagement_length=0.0)
        assert len(result.errors) == 3


class TestValidateThread:
    """Tests for validate_thread()."""

    def test_reference_thread_valid(self, quarter_20_2a):
        result = validate_thread(quarter_20_2a)
        assert result.valid
        assert result.messages == []

    def test_short_engagement_is_info(self):
        thread = uts_external_thread(0.5, 13, "2A", engagement_length_multiple=5)
        result = validate_thread(thread)
        assert result.valid
        assert _codes(result) == ["ENGAGEMENT_LENGTH_NON_STANDARD"]
        assert result.infos[0].severity == Severity.INFO
        assert "5.0P" in result.infos[0].message

    def test_coarse_pitch_small_diameter(self):
        thread = uts_external_thread(0.06, 8, "2A")
        result = validate_thread(thread)
        assert not result.valid
        assert "MINOR_DIAMETER_NOT_POSITIVE" in _codes(result)
        assert "NON_STANDARD_THREAD" in _codes(result)

    def test_negative_diameter(self):
        thread = uts_external_thread(-0.25, 20, "3A")
        result = validate_thread(thread)
        assert not result.valid
        assert "DIAMETER_NOT_POSITIVE" in _codes(result)

    def test_inverted_limits(self):
        """A large negative diameter drives T, and so 1A Td and Td2, below zero."""
        thread = uts_external_thread(-50.0, 20, "1A")
        result = validate_thread(thread)
        assert not result.valid
        assert _codes(result) == [
            "DIAMETER_NOT_POSITIVE",
            "MINOR_DIAMETER_NOT_POSITIVE",
            "MAJOR_DIAMETER_LIMITS_INVERTED",
            "PITCH_DIAMETER_LIMITS_INVERTED",
        ]
        assert all(m.severity == Severity.ERROR for m in result.messages)


class TestValidationResult:
    """Tests for ValidationResult grouping."""

    def test_grouping(self):
        result = ValidationResult(valid=False, messages=[
            ValidationMessage(Severity.ERROR, "A", "error"),
            ValidationMessage(Severity.WARNING, "B", "warning"),
            ValidationMessage(Severity.INFO, "C", "info"),
            ValidationMessage(Severity.WARNING, "D", "warning"),
        ])
        assert [m.code for m in result.errors] == ["A"]
        assert [m.code for m in result.warnings] == ["B", "D"]
        assert [m.code for m in result.infos] == ["C"]
