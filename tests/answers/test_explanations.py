"""
Unit Tests for the Explanation Normalizer
"""

import pytest

from quiz_toolkit.answers import explanation_for, normalize_explanation
from quiz_toolkit.core.models import Explanation


class TestNormalizeExplanation:
    """Tests for normalize_explanation."""

    def test_normalize_when_legacy_string_then_copied_to_every_correct_label(self):
        result = normalize_explanation({"correct": "Because X"}, ["A", "C"])

        assert result.correct == {"A": "Because X", "C": "Because X"}
        assert result.incorrect_choices == {}

    def test_normalize_when_legacy_string_and_boolean_map_then_uses_true_labels(self):
        result = normalize_explanation(
            {"correct": "Because X", "incorrect_choices": {"B": "Not B"}},
            {"A": "true", "B": "false"},
        )

        assert result.correct == {"A": "Because X"}
        assert result.incorrect_choices == {"B": "Not B"}

    def test_normalize_when_mapping_then_passed_through(self):
        raw = {"correct": {"A": "yes", "B": "also"}, "incorrect_choices": {"C": "no"}}

        result = normalize_explanation(raw, ["A"])

        assert result.correct == {"A": "yes", "B": "also"}
        assert result.incorrect_choices == {"C": "no"}

    @pytest.mark.parametrize("correct", [None, "", "   ", {}])
    def test_normalize_when_correct_empty_then_empty_mapping(self, correct):
        result = normalize_explanation({"correct": correct}, ["A"])

        assert result.correct == {}

    def test_normalize_when_correct_absent_then_empty_mapping(self):
        assert normalize_explanation({}, ["A"]).correct == {}

    def test_normalize_when_no_correct_labels_then_legacy_string_discarded(self, caplog):
        result = normalize_explanation({"correct": "orphan text"}, [])

        assert result.correct == {}
        assert "Discarding legacy correct explanation" in caplog.text

    @pytest.mark.parametrize("raw", [None, "text", 5])
    def test_normalize_when_explanation_not_mapping_then_empty(self, raw):
        assert normalize_explanation(raw, ["A"]) == Explanation()

    def test_normalize_when_canonical_explanation_then_returned_unchanged(self):
        canonical = Explanation(correct={"A": "why"}, incorrect_choices={"B": "no"})

        assert normalize_explanation(canonical, {"A": True, "B": False}) == canonical

    def test_normalize_when_canonical_explanation_and_option_labels_then_filtered(self):
        canonical = Explanation(correct={"A": "why"}, incorrect_choices={"Z": "stray"})

        result = normalize_explanation(canonical, ["A"], option_labels=["A", "B"])

        assert result == Explanation(correct={"A": "why"})

    def test_normalize_when_incorrect_not_mapping_then_empty(self):
        result = normalize_explanation({"incorrect_choices": "oops"}, ["A"])

        assert result.incorrect_choices == {}

    def test_normalize_when_option_labels_given_then_strays_dropped(self):
        raw = {"correct": {"A": "yes", "Z": "stray"}, "incorrect_choices": {"B": "no", "Y": "x"}}

        result = normalize_explanation(raw, ["A"], option_labels=["A", "B"])

        assert result.correct == {"A": "yes"}
        assert result.incorrect_choices == {"B": "no"}

    def test_normalize_when_reconcile_then_misfiled_entry_moves_to_correct(self):
        raw = {"correct": {}, "incorrect_choices": {"A": "A is right", "B": "B is wrong", "C": " "}}

        result = normalize_explanation(raw, ["A"], reconcile=True)

        assert result.correct == {"A": "A is right"}
        assert result.incorrect_choices == {"B": "B is wrong"}

    def test_normalize_when_reconcile_and_correct_has_text_then_existing_text_kept(self):
        raw = {"correct": {"A": "original"}, "incorrect_choices": {"A": "misfiled"}}

        result = normalize_explanation(raw, ["A"], reconcile=True)

        assert result.correct == {"A": "original"}
        assert result.incorrect_choices == {}

    def test_normalize_when_not_reconciling_then_incorrect_passes_through(self):
        raw = {"incorrect_choices": {"A": "misfiled"}}

        result = normalize_explanation(raw, ["A"])

        assert result.incorrect_choices == {"A": "misfiled"}


class TestExplanationFor:
    """Tests for explanation_for."""

    @pytest.fixture
    def explanation(self) -> dict:
        return {"correct": {"A": "A is right"}, "incorrect_choices": {"B": "B is wrong"}}

    def test_explanation_for_when_correct_label_then_reads_correct_bucket(self, explanation):
        assert explanation_for(explanation, ["A"], "A") == "A is right"

    def test_explanation_for_when_incorrect_label_then_reads_incorrect_bucket(self, explanation):
        assert explanation_for(explanation, ["A"], "B") == "B is wrong"

    def test_explanation_for_when_no_entry_then_none(self, explanation):
        assert explanation_for(explanation, ["A"], "C") is None

    def test_explanation_for_when_label_in_wrong_bucket_then_none(self):
        raw = {"correct": {}, "incorrect_choices": {"A": "misfiled"}}

        assert explanation_for(raw, ["A"], "A") is None

    def test_explanation_for_when_legacy_string_then_expanded(self):
        raw = {"correct": "Both work"}

        assert explanation_for(raw, {"A": "true", "B": "true"}, "B") == "Both work"

    def test_explanation_for_when_canonical_explanation_then_used_directly(self):
        canonical = Explanation(correct={"A": "yes"})

        assert explanation_for(canonical, ["A"], "A") == "yes"
