"""
Module: answers.grading

Purpose:
    Compare a test-taker's selected labels with a question's correct
    answers. A question counts as answered correctly only when the selected
    set equals the correct set exactly.

Key Functions:
    - grade_selection(correct_answers, selected): -> GradeResult

Dependencies:
    - .normalizer.correct_labels_of

Used By:
    - test-taking and review consumers
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

from .normalizer import correct_labels_of


@dataclass(frozen=True)
class GradeResult:
    """
    Outcome of grading one question.

    Attributes:
        is_correct: Selected set equals correct set
        correct_labels: Correct labels, sorted
        selected_labels: Selected labels, sorted and de-duplicated
        wrong_selected: Selected labels that are not correct
        missed: Correct labels that were not selected
    """

    is_correct: bool
    correct_labels: Tuple[str, ...]
    selected_labels: Tuple[str, ...]
    wrong_selected: Tuple[str, ...]
    missed: Tuple[str, ...]


def grade_selection(correct_answers: Any, selected: Optional[Iterable[str]]) -> GradeResult:
    """
    Grade a selection against any wire shape of ``correct_answers``.

    Args:
        correct_answers: Wire value from the record
        selected: Labels chosen by the test-taker (None means nothing chosen)

    Returns:
        GradeResult

    Example:
        >>> grade_selection({"A": True, "B": False}, ["A"]).is_correct
        True
    """
    correct = set(correct_labels_of(correct_answers))
    chosen = set(selected or ())
    return GradeResult(
        is_correct=correct == chosen,
        correct_labels=tuple(sorted(correct)),
        selected_labels=tuple(sorted(chosen)),
        wrong_selected=tuple(sorted(chosen - correct)),
        missed=tuple(sorted(correct - chosen)),
    )
