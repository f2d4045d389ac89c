"""
Module: answers.normalizer

Purpose:
    One query surface over every historical shape of ``correct_answers``.
    Consumers (review screens, exporters, the explanation normalizer) call
    these functions instead of inspecting the wire value themselves.

Key Functions:
    - correct_labels_of(x): Labels that are correct
    - is_correct(x, label): Single-label query
    - normalize(x): Canonical label -> bool mapping (sparse for list input)
    - enumerate_correct_answers(x, option_labels): Full mapping over options

Invariant:
    For every shape and every label,
    ``is_correct(x, label) == (label in correct_labels_of(x))``.

Dependencies:
    - .shapes.classify_correct_answers

Used By:
    - answers.explanations
    - answers.grading
    - core.utils.serialization
    - export.text
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable

from .shapes import classify_correct_answers

logger = logging.getLogger(__name__)


def correct_labels_of(correct_answers: Any) -> list[str]:
    """
    Return the correct labels for any wire shape.

    List input is returned as-is (copied). Mapping input yields keys whose
    value is neither ``False`` nor ``"false"``, in key order.

    Examples:
        >>> correct_labels_of({"A": "true", "B": "false"})
        ['A']
        >>> correct_labels_of(None)
        []
    """
    return classify_correct_answers(correct_answers).correct_labels()


def is_correct(correct_answers: Any, label: str) -> bool:
    """
    Return whether ``label`` is correct for any wire shape.

    Example:
        >>> is_correct(["A", "B"], "C")
        False
    """
    return classify_correct_answers(correct_answers).is_correct(label)


def normalize(correct_answers: Any) -> Dict[str, bool]:
    """
    Convert any wire shape to the canonical label -> bool mapping.

    List input produces a sparse mapping: listed labels map to True and no
    entry is created for absent labels. Mapping input keeps every key.
    Idempotent.

    Example:
        >>> normalize(["A", "C"])
        {'A': True, 'C': True}
    """
    return classify_correct_answers(correct_answers).to_canonical()


def enumerate_correct_answers(correct_answers: Any, option_labels: Iterable[str]) -> Dict[str, bool]:
    """
    Full canonical mapping over ``option_labels``.

    Every option label gets an explicit entry; labels that are not options
    are dropped with a warning.

    Args:
        correct_answers: Any wire shape
        option_labels: Labels of the question's options, in order

    Returns:
        Mapping with exactly the option labels as keys
    """
    labels = list(option_labels)
    sparse = normalize(correct_answers)
    stray = [label for label in sparse if label not in labels]
    if stray:
        logger.warning(f"Dropping correct_answers entries without options: {stray}")
    return {label: sparse.get(label, False) for label in labels}
