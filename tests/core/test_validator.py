"""
Unit Tests for Schema Validation

Tests for the record validator module.
"""

import pytest

from quiz_toolkit.core.schemas.validator import (
    validate_record,
    ValidationError,
)


class TestValidateRecord:
    """Tests for validate_record function."""

    def test_validate_when_valid_data_then_no_error(self, sample_record_data):
        """Valid record data should pass validation."""
        # Should not raise
        validate_record(sample_record_data, strict=False)

    def test_validate_when_strict_and_valid_then_no_error(self, sample_record_data):
        validate_record(sample_record_data, strict=True)

    def test_validate_when_missing_question_text_then_raises_error(self, sample_record_data):
        """Missing required field should raise ValidationError."""
        del sample_record_data["question_text"]

        with pytest.raises(ValidationError, match="Missing required fields"):
            validate_record(sample_record_data)

    def test_validate_when_blank_question_text_then_raises_error(self, sample_record_data):
        sample_record_data["question_text"] = "   "

        with pytest.raises(ValidationError, match="question_text"):
            validate_record(sample_record_data)

    def test_validate_when_one_option_then_raises_error(self, sample_record_data):
        sample_record_data["options"] = sample_record_data["options"][:1]

        with pytest.raises(ValidationError, match="at least 2 options"):
            validate_record(sample_record_data)

    def test_validate_when_invalid_label_then_raises_error(self, sample_record_data):
        sample_record_data["options"][0]["label"] = "a"

        with pytest.raises(ValidationError, match="Invalid option label") as exc:
            validate_record(sample_record_data)
        assert exc.value.path == "options[0].label"

    def test_validate_when_duplicate_label_then_raises_error(self, sample_record_data):
        sample_record_data["options"][1]["label"] = "A"

        with pytest.raises(ValidationError, match="Duplicate option label"):
            validate_record(sample_record_data)

    def test_validate_when_empty_option_text_then_raises_error(self, sample_record_data):
        sample_record_data["options"][1]["text"] = ""

        with pytest.raises(ValidationError, match="empty text"):
            validate_record(sample_record_data)

    def test_validate_when_legacy_list_answers_then_raises_error(self, sample_record_data):
        """Only the canonical shape is written; legacy shapes are rejected."""
        sample_record_data["correct_answers"] = ["B"]

        with pytest.raises(ValidationError, match="must be a dict"):
            validate_record(sample_record_data)

    def test_validate_when_string_boolean_then_raises_error(self, sample_record_data):
        sample_record_data["correct_answers"]["B"] = "true"

        with pytest.raises(ValidationError, match="must be a boolean"):
            validate_record(sample_record_data)

    def test_validate_when_answer_label_without_option_then_raises_error(self, sample_record_data):
        sample_record_data["correct_answers"]["C"] = True

        with pytest.raises(ValidationError, match="without options"):
            validate_record(sample_record_data)

    def test_validate_when_option_missing_from_answers_then_raises_error(self, sample_record_data):
        del sample_record_data["correct_answers"]["A"]

        with pytest.raises(ValidationError, match="missing options"):
            validate_record(sample_record_data)

    def test_validate_when_no_correct_option_then_raises_error(self, sample_record_data):
        sample_record_data["correct_answers"]["B"] = False

        with pytest.raises(ValidationError, match="At least one option must be correct"):
            validate_record(sample_record_data)

    def test_validate_when_legacy_string_explanation_then_raises_error(self, sample_record_data):
        sample_record_data["explanation"]["correct"] = "Paris"

        with pytest.raises(ValidationError, match="correct must be a dict"):
            validate_record(sample_record_data)

    def test_validate_when_explanation_for_unknown_label_then_raises_error(self, sample_record_data):
        sample_record_data["explanation"]["incorrect_choices"]["D"] = "??"

        with pytest.raises(ValidationError, match="unknown option") as exc:
            validate_record(sample_record_data)
        assert exc.value.path == "explanation.incorrect_choices.D"

    def test_validate_when_strict_and_wrong_status_type_then_raises_error(self, sample_record_data):
        """Schema-only constraint: status must be a string or null."""
        sample_record_data["status"] = 3

        validate_record(sample_record_data, strict=False)
        with pytest.raises(ValidationError, match="Schema validation failed"):
            validate_record(sample_record_data, strict=True)
