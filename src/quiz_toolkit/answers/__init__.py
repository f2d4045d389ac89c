"""
Module: answers

Purpose:
    Read-path normalizers. Any consumer of a persisted record feeds its
    ``correct_answers`` and ``explanation`` fields through this package to
    get canonical answers regardless of which historical version wrote the
    record.

Key Functions:
    - correct_labels_of(), is_correct(), normalize(): answer model
    - normalize_explanation(), explanation_for(): explanation model
    - grade_selection(): compare a selection with the correct answers

Dependencies:
    - quiz_toolkit.core.models: Explanation

Used By:
    - quiz_toolkit.core.utils.serialization
    - quiz_toolkit.export
"""

from .shapes import (
    ArrayShape,
    LegacyBooleanMap,
    ExplanationMap,
    UnknownShape,
    CorrectAnswersShape,
    classify_correct_answers,
)
from .normalizer import correct_labels_of, is_correct, normalize, enumerate_correct_answers
from .explanations import normalize_explanation, explanation_for
from .grading import grade_selection, GradeResult

__all__ = [
    # Shapes
    "ArrayShape",
    "LegacyBooleanMap",
    "ExplanationMap",
    "UnknownShape",
    "CorrectAnswersShape",
    "classify_correct_answers",
    # Answer model
    "correct_labels_of",
    "is_correct",
    "normalize",
    "enumerate_correct_answers",
    # Explanations
    "normalize_explanation",
    "explanation_for",
    # Grading
    "grade_selection",
    "GradeResult",
]
