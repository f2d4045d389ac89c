"""
Module: options

Purpose:
    Provides the Option and OptionExplanation dataclasses - the smallest
    building blocks of a multiple-choice question. An Option is one
    labelled answer choice; an OptionExplanation is the explanation text
    an author attached to that choice, tagged with whether the choice is
    correct.

Key Functions:
    - Option.to_dict() / Option.from_dict(): Wire serialization

Dependencies:
    - dataclasses (std)
    - quiz_toolkit.common.labels

Used By:
    - core.models.drafts.DraftQuestion
    - core.models.records.QuestionRecord
    - ingest.parser
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from quiz_toolkit.common.labels import is_label


@dataclass(frozen=True, slots=True)
class Option:
    """
    One answer choice (immutable).

    Attributes:
        label: Single uppercase letter like "A"
        text: Option text as typed by the author. May be empty in a draft;
            the record builder filters empty options out.

    Example:
        >>> Option("A", "Paris").to_dict()
        {'label': 'A', 'text': 'Paris'}
    """

    label: str
    text: str

    def __post_init__(self) -> None:
        """Validate label on construction."""
        if not is_label(self.label):
            raise ValueError(f"Option label must be a single uppercase letter: {self.label!r}")

    @property
    def is_blank(self) -> bool:
        """True if the option has no visible text."""
        return not self.text.strip()

    def to_dict(self) -> dict[str, str]:
        return {"label": self.label, "text": self.text}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Option:
        return cls(label=data["label"], text=data.get("text") or "")


@dataclass(frozen=True, slots=True)
class OptionExplanation:
    """
    Explanation text attached to a single option.

    Tagged with correctness when parsed, since labels never change
    afterwards.

    Attributes:
        label: Label of the option the text belongs to
        text: Explanation text (non-empty)
        is_correct: Whether the option was marked correct
    """

    label: str
    text: str
    is_correct: bool

    def __post_init__(self) -> None:
        if not is_label(self.label):
            raise ValueError(f"Explanation label must be a single uppercase letter: {self.label!r}")
        if not self.text.strip():
            raise ValueError(f"Explanation text for {self.label} must not be empty")
