"""
Serialization Utilities

to/from wire dictionaries for QuestionRecord.

Writing always produces the canonical shape. Reading accepts any record a
historical version may have written: ``correct_answers`` as a list, a
string-boolean map or an explanation map, and ``explanation.correct`` as a
bare string. Both fields go through the ``answers`` normalizers so nothing
downstream sees a legacy shape.
"""

from __future__ import annotations

from typing import Any

from quiz_toolkit.answers import enumerate_correct_answers, normalize_explanation
from quiz_toolkit.common.labels import label_for_index

from ..models.options import Option
from ..models.records import QuestionRecord
from ..schemas.validator import ValidationError, validate_record


_RECORD_KEYS = {
    "question_text", "options", "correct_answers", "explanation",
    "test_id", "difficulty", "status",
}


def serialize_record(record: QuestionRecord, *, validate: bool = False) -> dict[str, Any]:
    """
    Serialize a QuestionRecord to its wire dictionary.

    Args:
        record: Record to serialize
        validate: Run strict schema validation on the output

    Returns:
        Dictionary suitable for the persistence API

    Raises:
        ValidationError: If validate=True and the output is invalid
    """
    data = record.to_dict()
    if validate:
        validate_record(data, strict=True)
    return data


def _read_option(raw: Any, index: int) -> Option:
    """Options were once stored as bare strings labelled by position."""
    if isinstance(raw, str):
        return Option(label=label_for_index(index), text=raw)
    if not raw.get("label"):
        return Option(label=label_for_index(index), text=raw.get("text") or "")
    return Option.from_dict(raw)


def deserialize_record(data: dict[str, Any], *, reconcile: bool = False) -> QuestionRecord:
    """
    Read a persisted record of any historical version.

    Args:
        data: Wire dictionary
        reconcile: Move incorrect_choices text filed under a correct label
            into explanation.correct (see ``normalize_explanation``)

    Returns:
        Canonical QuestionRecord

    Raises:
        ValidationError: If the record cannot be made canonical (missing
            question text, fewer than 2 options, no correct option)
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Record must be a dict, got {type(data).__name__}")

    question_text = data.get("question_text")
    if not isinstance(question_text, str) or not question_text.strip():
        raise ValidationError("question_text must be a non-empty string", path="question_text")

    raw_options = data.get("options")
    if not isinstance(raw_options, list):
        raise ValidationError("options must be a list", path="options")
    try:
        options = tuple(_read_option(opt, idx) for idx, opt in enumerate(raw_options))
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Invalid option: {e}", path="options") from e

    labels = [opt.label for opt in options]
    raw_answers = data.get("correct_answers")
    correct_answers = enumerate_correct_answers(raw_answers, labels)
    explanation = normalize_explanation(
        data.get("explanation"),
        raw_answers,
        option_labels=labels,
        reconcile=reconcile,
    )

    try:
        return QuestionRecord(
            question_text=question_text,
            options=options,
            correct_answers=correct_answers,
            explanation=explanation,
            test_id=data.get("test_id"),
            difficulty=data.get("difficulty"),
            status=data.get("status"),
            extra={k: v for k, v in data.items() if k not in _RECORD_KEYS},
        )
    except ValueError as e:
        raise ValidationError(f"Invalid record: {e}", errors=[str(e)]) from e
