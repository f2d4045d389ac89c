"""
Module: answers.shapes

Purpose:
    Resolve the polymorphic ``correct_answers`` wire field into an explicit
    tagged union, exactly once, at the read boundary.

    Three shapes have been written into the same persisted field over time:

    ======================  ======================================
    Shape                   Example
    ======================  ======================================
    ``ArrayShape``          ``["A", "C"]``
    ``LegacyBooleanMap``    ``{"A": "true", "B": "false"}``
    ``ExplanationMap``      ``{"A": "because ...", "B": "false"}``
    ======================  ======================================

    Anything else resolves to ``UnknownShape``, which has no correct labels.

Key Functions:
    - classify_correct_answers(raw): Wire value -> shape instance

Dependencies:
    - dataclasses (std)
    - collections.abc (std)

Used By:
    - answers.normalizer
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union

_TRUE_STRING = "true"
_FALSE_STRING = "false"


def is_false_marker(value: Any) -> bool:
    """
    True for the two values that mark a label as not correct.

    Only the boolean ``False`` and the exact string ``"false"`` count;
    ``0``, ``""``, ``None`` and ``"False"`` do not.
    """
    return value is False or (isinstance(value, str) and value == _FALSE_STRING)


def _is_boolean_like(value: Any) -> bool:
    return isinstance(value, bool) or value in (_TRUE_STRING, _FALSE_STRING)


@dataclass(frozen=True)
class ArrayShape:
    """List of correct labels. Absent labels are not correct."""

    labels: Tuple[Any, ...]

    def correct_labels(self) -> list:
        return list(self.labels)

    def is_correct(self, label: str) -> bool:
        return label in self.labels

    def to_canonical(self) -> Dict[Any, bool]:
        return {label: True for label in self.labels}


@dataclass(frozen=True)
class LegacyBooleanMap:
    """Mapping of label -> real boolean, string booleans already converted."""

    flags: Dict[Any, bool] = field(default_factory=dict)

    @classmethod
    def from_wire(cls, mapping: Mapping) -> LegacyBooleanMap:
        return cls(flags={key: not is_false_marker(value) for key, value in mapping.items()})

    def correct_labels(self) -> list:
        return [label for label, flag in self.flags.items() if flag]

    def is_correct(self, label: str) -> bool:
        return self.flags.get(label, False)

    def to_canonical(self) -> Dict[Any, bool]:
        return dict(self.flags)


@dataclass(frozen=True)
class ExplanationMap:
    """
    Mapping of label -> free-text explanation.

    A key counts as correct unless its value is a false marker, so a
    ``"false"`` value excludes the label even in this shape.
    """

    entries: Dict[Any, Any] = field(default_factory=dict)

    def correct_labels(self) -> list:
        return [label for label, value in self.entries.items() if not is_false_marker(value)]

    def is_correct(self, label: str) -> bool:
        return label in self.entries and not is_false_marker(self.entries[label])

    def to_canonical(self) -> Dict[Any, bool]:
        return {label: not is_false_marker(value) for label, value in self.entries.items()}


@dataclass(frozen=True)
class UnknownShape:
    """Absent or unrecognised value. Nothing is correct."""

    def correct_labels(self) -> list:
        return []

    def is_correct(self, label: str) -> bool:
        return False

    def to_canonical(self) -> Dict[Any, bool]:
        return {}


CorrectAnswersShape = Union[ArrayShape, LegacyBooleanMap, ExplanationMap, UnknownShape]

_SHAPE_TYPES = (ArrayShape, LegacyBooleanMap, ExplanationMap, UnknownShape)


def classify_correct_answers(raw: Any) -> CorrectAnswersShape:
    """
    Resolve a wire ``correct_answers`` value into its shape.

    Already-classified shapes are returned unchanged.

    Args:
        raw: Value read from a record

    Returns:
        One of ArrayShape, LegacyBooleanMap, ExplanationMap, UnknownShape

    Example:
        >>> classify_correct_answers({"A": "true", "B": "false"})
        LegacyBooleanMap(flags={'A': True, 'B': False})
    """
    if isinstance(raw, _SHAPE_TYPES):
        return raw
    if isinstance(raw, (list, tuple)):
        return ArrayShape(labels=tuple(raw))
    if isinstance(raw, Mapping):
        if all(_is_boolean_like(value) for value in raw.values()):
            return LegacyBooleanMap.from_wire(raw)
        return ExplanationMap(entries=dict(raw))
    return UnknownShape()
