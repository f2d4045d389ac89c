"""
Module: answers.explanations

Purpose:
    Reconcile the ``explanation`` wire field into the canonical
    per-label form.

    Legacy records stored ``explanation.correct`` as one bare string that
    explains every correct option at once. The canonical form keys the
    text by label, so the string is duplicated onto each label that
    ``correct_labels_of`` reports for the question.

Key Functions:
    - normalize_explanation(explanation, correct_answers): -> Explanation
    - explanation_for(explanation, correct_answers, label): Text lookup

Dependencies:
    - .normalizer (correct_labels_of, is_correct)
    - quiz_toolkit.core.models.records.Explanation

Used By:
    - core.utils.serialization
    - export.text
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional

from quiz_toolkit.core.models.records import Explanation

from .normalizer import correct_labels_of, is_correct

logger = logging.getLogger(__name__)


def normalize_explanation(
    explanation: Any,
    correct_answers: Any,
    *,
    option_labels: Optional[Iterable[str]] = None,
    reconcile: bool = False,
) -> Explanation:
    """
    Convert an explanation wire value to the canonical Explanation.

    Rules for ``correct``:
        - non-empty string: assigned to every label in
          ``correct_labels_of(correct_answers)``
        - mapping: passed through
        - absent, None or empty: ``{}``, even if some labels are correct

    ``incorrect_choices`` has no legacy form; a mapping passes through and
    anything else becomes ``{}``.

    Args:
        explanation: Wire value (dict or None) or an Explanation, which
            comes back unchanged apart from the filtering options
        correct_answers: Wire ``correct_answers`` of the same record
        option_labels: If given, entries for other labels are dropped
        reconcile: Move text filed under ``incorrect_choices`` for a label
            that is actually correct into ``correct`` (when ``correct`` has
            no text for it), and drop empty texts

    Returns:
        Canonical Explanation

    Example:
        >>> normalize_explanation({"correct": "Because X"}, ["A", "C"]).correct
        {'A': 'Because X', 'C': 'Because X'}
    """
    if isinstance(explanation, Explanation):
        explanation = explanation.to_dict()
    if not isinstance(explanation, Mapping):
        explanation = {}

    correct = _normalize_correct(explanation.get("correct"), correct_answers)
    incorrect_raw = explanation.get("incorrect_choices")
    incorrect = dict(incorrect_raw) if isinstance(incorrect_raw, Mapping) else {}

    if reconcile:
        correct, incorrect = _reconcile(correct, incorrect, correct_answers)

    if option_labels is not None:
        allowed = set(option_labels)
        stray = sorted((set(correct) | set(incorrect)) - allowed)
        if stray:
            logger.warning(f"Dropping explanations for unknown options: {stray}")
        correct = {k: v for k, v in correct.items() if k in allowed}
        incorrect = {k: v for k, v in incorrect.items() if k in allowed}

    return Explanation(correct=correct, incorrect_choices=incorrect)


def _normalize_correct(value: Any, correct_answers: Any) -> Dict[str, Any]:
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, str) and value.strip():
        labels = correct_labels_of(correct_answers)
        if not labels:
            # No correct label to carry the text, so it is discarded.
            logger.warning(
                f"Discarding legacy correct explanation with no correct labels: {value[:60]!r}"
            )
        return {label: value for label in labels}
    return {}


def _reconcile(
    correct: Dict[str, Any],
    incorrect: Dict[str, Any],
    correct_answers: Any,
) -> tuple[Dict[str, Any], Dict[str, Any]]:
    """Move misfiled incorrect_choices entries for correct labels into correct."""
    correct = dict(correct)
    kept: Dict[str, Any] = {}
    for label, text in incorrect.items():
        if not isinstance(text, str) or not text.strip():
            continue
        if is_correct(correct_answers, label):
            if not correct.get(label):
                correct[label] = text
        else:
            kept[label] = text
    return correct, kept


def explanation_for(explanation: Any, correct_answers: Any, label: str) -> Optional[str]:
    """
    Look up the explanation text for one option.

    Looks in ``correct`` when the label is correct, otherwise in
    ``incorrect_choices``. A miss returns None; it is not an error.

    Args:
        explanation: Wire value or an already canonical Explanation
        correct_answers: Wire ``correct_answers`` of the same record
        label: Option label

    Returns:
        Explanation text or None
    """
    if not isinstance(explanation, Explanation):
        explanation = normalize_explanation(explanation, correct_answers)
    return explanation.lookup(label, is_correct(correct_answers, label))
