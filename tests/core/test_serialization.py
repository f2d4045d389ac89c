"""
Unit Tests for record serialization

Reading must accept every historical wire shape and yield a canonical
record.
"""

import pytest

from quiz_toolkit.core.models import Option
from quiz_toolkit.core.schemas import ValidationError
from quiz_toolkit.core.utils import deserialize_record, serialize_record


class TestDeserializeRecord:
    """Tests for deserialize_record."""

    def test_deserialize_when_canonical_then_round_trips(self, sample_record_data):
        record = deserialize_record(sample_record_data)

        assert serialize_record(record, validate=True) == sample_record_data

    def test_deserialize_when_list_answers_then_enumerated(self, sample_record_data):
        sample_record_data["correct_answers"] = ["B"]

        record = deserialize_record(sample_record_data)

        assert record.correct_answers == {"A": False, "B": True}

    def test_deserialize_when_string_booleans_then_converted(self, sample_record_data):
        sample_record_data["correct_answers"] = {"A": "false", "B": "true"}

        record = deserialize_record(sample_record_data)

        assert record.correct_answers == {"A": False, "B": True}

    def test_deserialize_when_explanation_map_then_keys_are_correct(self, sample_record_data):
        sample_record_data["correct_answers"] = {"B": "Paris is the capital"}

        record = deserialize_record(sample_record_data)

        assert record.correct_labels == ["B"]

    def test_deserialize_when_legacy_string_explanation_then_expanded(self, sample_record_data):
        sample_record_data["correct_answers"] = ["B"]
        sample_record_data["explanation"] = {"correct": "Paris", "incorrect_choices": {}}

        record = deserialize_record(sample_record_data)

        assert record.explanation.correct == {"B": "Paris"}

    def test_deserialize_when_options_are_strings_then_labelled_by_position(self, sample_record_data):
        sample_record_data["options"] = ["London", "Paris"]

        record = deserialize_record(sample_record_data)

        assert record.options == (Option("A", "London"), Option("B", "Paris"))

    def test_deserialize_when_unknown_keys_then_kept_in_extra(self, sample_record_data):
        sample_record_data["_id"] = "abc"

        record = deserialize_record(sample_record_data)

        assert record.extra == {"_id": "abc"}
        assert record.to_dict()["_id"] == "abc"

    def test_deserialize_when_reconcile_then_misfiled_explanation_moved(self, sample_record_data):
        sample_record_data["explanation"] = {"correct": {}, "incorrect_choices": {"B": "misfiled"}}

        record = deserialize_record(sample_record_data, reconcile=True)

        assert record.explanation.correct == {"B": "misfiled"}
        assert record.explanation.incorrect_choices == {}

    def test_deserialize_when_no_correct_answer_then_raises_error(self, sample_record_data):
        sample_record_data["correct_answers"] = {"A": "false", "B": "false"}

        with pytest.raises(ValidationError, match="Invalid record"):
            deserialize_record(sample_record_data)

    @pytest.mark.parametrize("options", [None, "A", [1, 2]])
    def test_deserialize_when_options_malformed_then_raises_error(self, sample_record_data, options):
        sample_record_data["options"] = options

        with pytest.raises(ValidationError):
            deserialize_record(sample_record_data)

    def test_deserialize_when_not_dict_then_raises_error(self):
        with pytest.raises(ValidationError, match="must be a dict"):
            deserialize_record(["not", "a", "record"])
