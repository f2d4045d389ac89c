"""
Module: records

Purpose:
    Provides the Explanation and QuestionRecord dataclasses - the canonical
    persisted shape of a multiple-choice question. Every record written by
    the builder fully enumerates correctness per option and keys every
    explanation by label.

Key Functions:
    - QuestionRecord.correct_labels: Correct labels in option order
    - QuestionRecord.to_dict(): Wire shape handed to the persistence API
    - Explanation.lookup(label, correct): Explanation text for one option

Dependencies:
    - dataclasses (std)
    - .options.Option

Used By:
    - answers.explanations (returns Explanation)
    - builder.record_builder
    - core.utils.serialization
    - export.text

Design Note:
    Reading a record back from the wire goes through
    core.utils.serialization.deserialize_record, which runs the answer and
    explanation normalizers so legacy shapes never reach this class.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .options import Option


@dataclass(frozen=True)
class Explanation:
    """
    Canonical explanation block.

    Attributes:
        correct: label -> text for correct options
        incorrect_choices: label -> text for incorrect options
    """

    correct: Dict[str, str] = field(default_factory=dict)
    incorrect_choices: Dict[str, str] = field(default_factory=dict)

    @property
    def labels(self) -> set[str]:
        """Every label that has explanation text in either bucket."""
        return set(self.correct) | set(self.incorrect_choices)

    def lookup(self, label: str, correct: bool) -> Optional[str]:
        """
        Find the explanation for ``label``.

        Args:
            label: Option label
            correct: Whether the option is correct; selects the bucket

        Returns:
            The text, or None when the bucket has no entry (not an error)
        """
        bucket = self.correct if correct else self.incorrect_choices
        return bucket.get(label)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {
            "correct": dict(self.correct),
            "incorrect_choices": dict(self.incorrect_choices),
        }


@dataclass(frozen=True)
class QuestionRecord:
    """
    Persisted multiple-choice question (immutable).

    Records are replaced whole, never patched field by field.

    Attributes:
        question_text: Question stem
        options: Surviving options in label order
        correct_answers: label -> bool for every option label
        explanation: Canonical explanation block
        test_id: Owning test, if known
        difficulty: Difficulty tag (e.g. "easy")
        status: Lifecycle status (e.g. "active")
        extra: Additional context keys passed through to the wire dict
        warnings: Non-fatal builder notes (not persisted)

    Invariants:
        - at least two options with unique labels
        - correct_answers keys equal the option labels
        - at least one label is correct
        - explanation labels are option labels
    """

    question_text: str
    options: Tuple[Option, ...]
    correct_answers: Dict[str, bool]
    explanation: Explanation = field(default_factory=Explanation)
    test_id: Optional[str] = None
    difficulty: Optional[str] = None
    status: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    warnings: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate record on construction."""
        labels = [opt.label for opt in self.options]
        if len(labels) < 2:
            raise ValueError(f"QuestionRecord needs at least 2 options, got {len(labels)}")
        if len(set(labels)) != len(labels):
            raise ValueError(f"Duplicate option labels: {labels}")
        if set(self.correct_answers) != set(labels):
            raise ValueError(
                f"correct_answers keys {sorted(self.correct_answers)} "
                f"do not match option labels {labels}"
            )
        if not any(self.correct_answers.values()):
            raise ValueError("QuestionRecord needs at least one correct option")
        stray = self.explanation.labels - set(labels)
        if stray:
            raise ValueError(f"Explanation for unknown options: {sorted(stray)}")

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def option_labels(self) -> list[str]:
        return [opt.label for opt in self.options]

    @property
    def correct_labels(self) -> list[str]:
        """Correct labels in option order."""
        return [opt.label for opt in self.options if self.correct_answers[opt.label]]

    def explanation_for(self, label: str) -> Optional[str]:
        return self.explanation.lookup(label, self.correct_answers.get(label, False))

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to the wire shape.

        Note: warnings are NOT included; they describe the build, not the
        question.
        """
        d: dict[str, Any] = dict(self.extra)
        d.update({
            "question_text": self.question_text,
            "options": [opt.to_dict() for opt in self.options],
            "correct_answers": dict(self.correct_answers),
            "explanation": self.explanation.to_dict(),
        })
        if self.test_id is not None:
            d["test_id"] = self.test_id
        if self.difficulty is not None:
            d["difficulty"] = self.difficulty
        if self.status is not None:
            d["status"] = self.status
        return d

    def __repr__(self) -> str:
        return (
            f"QuestionRecord({self.question_text!r}, options={len(self.options)}, "
            f"correct={self.correct_labels})"
        )
