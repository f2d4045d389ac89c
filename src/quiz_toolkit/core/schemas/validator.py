"""
Schema Validation Utilities

Validates question record dictionaries before they are handed to the
persistence API.

Two levels:
- Basic (default): required fields, label format and cross-field label
  consistency. These are the checks JSON Schema cannot express, such as
  "every correct_answers key is an option label".
- Strict: additionally validates against ``question_record.schema.json``
  with jsonschema.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from quiz_toolkit.common.labels import is_label

RECORD_SCHEMA_NAME = "question_record"

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when a question draft or record fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_record(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a question record in wire shape.

    Only the canonical shape written by the builder is accepted here;
    legacy shapes are read through ``core.utils.serialization`` instead.

    Args:
        data: Record dictionary to validate
        strict: If True, also validate against the JSON schema

    Raises:
        ValidationError: If data is invalid
    """
    required = ["question_text", "options", "correct_answers", "explanation"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    question_text = data.get("question_text")
    if not isinstance(question_text, str) or not question_text.strip():
        raise ValidationError(
            "question_text must be a non-empty string",
            path="question_text"
        )

    labels = _validate_options(data["options"])
    _validate_correct_answers(data["correct_answers"], labels)
    _validate_explanation(data["explanation"], labels)

    if strict:
        schema = _load_schema(RECORD_SCHEMA_NAME)
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            )


def _validate_options(options: Any) -> list[str]:
    """Validate the options list and return its labels."""
    if not isinstance(options, list):
        raise ValidationError("options must be a list", path="options")
    if len(options) < 2:
        raise ValidationError(
            f"Need at least 2 options, got {len(options)}",
            path="options"
        )

    labels: list[str] = []
    for i, opt in enumerate(options):
        path = f"options[{i}]"
        if not isinstance(opt, dict) or "label" not in opt or "text" not in opt:
            raise ValidationError("Option must have label and text", path=path)
        label = opt["label"]
        if not is_label(label):
            raise ValidationError(f"Invalid option label: {label!r}", path=f"{path}.label")
        if label in labels:
            raise ValidationError(f"Duplicate option label: {label}", path=f"{path}.label")
        text = opt["text"]
        if not isinstance(text, str) or not text.strip():
            raise ValidationError(f"Option {label} has empty text", path=f"{path}.text")
        labels.append(label)
    return labels


def _validate_correct_answers(correct_answers: Any, labels: list[str]) -> None:
    """Validate the canonical correct_answers mapping."""
    if not isinstance(correct_answers, dict):
        raise ValidationError(
            f"correct_answers must be a dict, got {type(correct_answers).__name__}",
            path="correct_answers"
        )

    unknown = [k for k in correct_answers if k not in labels]
    if unknown:
        raise ValidationError(
            f"correct_answers has labels without options: {unknown}",
            path="correct_answers",
            errors=[f"Unknown label: {k}" for k in unknown]
        )
    absent = [label for label in labels if label not in correct_answers]
    if absent:
        raise ValidationError(
            f"correct_answers is missing options: {absent}",
            path="correct_answers",
            errors=[f"Missing label: {label}" for label in absent]
        )

    for label, value in correct_answers.items():
        if not isinstance(value, bool):
            raise ValidationError(
                f"correct_answers[{label}] must be a boolean, got {value!r}",
                path=f"correct_answers.{label}"
            )
    if not any(correct_answers.values()):
        raise ValidationError(
            "At least one option must be correct",
            path="correct_answers"
        )


def _validate_explanation(explanation: Any, labels: list[str]) -> None:
    """Validate the canonical explanation block."""
    if not isinstance(explanation, dict):
        raise ValidationError("explanation must be a dict", path="explanation")

    for bucket in ("correct", "incorrect_choices"):
        path = f"explanation.{bucket}"
        entries = explanation.get(bucket)
        if not isinstance(entries, dict):
            raise ValidationError(f"{bucket} must be a dict", path=path)
        for label, text in entries.items():
            if label not in labels:
                raise ValidationError(
                    f"Explanation for unknown option: {label!r}",
                    path=f"{path}.{label}"
                )
            if not isinstance(text, str):
                raise ValidationError(
                    f"Explanation for {label} must be a string",
                    path=f"{path}.{label}"
                )
