"""
Module: drafts

Purpose:
    Provides the DraftQuestion dataclass - the output of the bulk text
    parser for one section of pasted text. A draft is already canonical
    (labels assigned, correct labels resolved) but is never persisted
    directly; the record builder turns it into a QuestionRecord.

Key Functions:
    - DraftQuestion.per_option_explanation: label -> explanation text
    - DraftQuestion.correct_explanations / incorrect_explanations
    - DraftQuestion.is_correct(label)

Dependencies:
    - dataclasses (std)
    - .options.Option, .options.OptionExplanation

Used By:
    - ingest.parser
    - builder.record_builder
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .options import Option, OptionExplanation


@dataclass(frozen=True)
class DraftQuestion:
    """
    Parsed multiple-choice question (immutable).

    Attributes:
        question_text: First line of the section, trimmed
        options: Answer choices in line order, labelled from "A"
        correct_labels: Correct labels in the order they were typed,
            without duplicates
        explanations: One entry per option that carried explanation text

    Invariants:
        - option labels are unique
        - correct_labels is non-empty and a subset of option labels
        - every explanation label is an option label and its is_correct
          tag agrees with correct_labels

    Example:
        >>> d = DraftQuestion(
        ...     question_text="Capital of France?",
        ...     options=(Option("A", "London"), Option("B", "Paris")),
        ...     correct_labels=("B",),
        ... )
        >>> d.is_correct("B")
        True
    """

    question_text: str
    options: Tuple[Option, ...]
    correct_labels: Tuple[str, ...]
    explanations: Tuple[OptionExplanation, ...] = ()

    def __post_init__(self) -> None:
        """Validate draft on construction."""
        labels = [opt.label for opt in self.options]
        if len(set(labels)) != len(labels):
            raise ValueError(f"Duplicate option labels: {labels}")
        if not self.correct_labels:
            raise ValueError("correct_labels must not be empty")
        unknown = [label for label in self.correct_labels if label not in labels]
        if unknown:
            raise ValueError(f"Correct labels without a matching option: {unknown}")
        correct = set(self.correct_labels)
        for note in self.explanations:
            if note.label not in labels:
                raise ValueError(f"Explanation for unknown option: {note.label}")
            if note.is_correct != (note.label in correct):
                raise ValueError(f"Explanation for {note.label} has the wrong correctness tag")

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def option_labels(self) -> list[str]:
        return [opt.label for opt in self.options]

    @property
    def per_option_explanation(self) -> Dict[str, str]:
        """Explanation text keyed by option label."""
        return {note.label: note.text for note in self.explanations}

    @property
    def correct_explanations(self) -> Dict[str, str]:
        return {note.label: note.text for note in self.explanations if note.is_correct}

    @property
    def incorrect_explanations(self) -> Dict[str, str]:
        return {note.label: note.text for note in self.explanations if not note.is_correct}

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def is_correct(self, label: str) -> bool:
        return label in self.correct_labels

    def get_option(self, label: str) -> Optional[Option]:
        for opt in self.options:
            if opt.label == label:
                return opt
        return None

    def __repr__(self) -> str:
        return (
            f"DraftQuestion({self.question_text!r}, options={len(self.options)}, "
            f"correct={list(self.correct_labels)})"
        )
