"""Option label utilities.

Labels are single uppercase letters assigned to answer options in line
order: the first option is "A", the second "B", and so on up to "Z".
"""

from __future__ import annotations

import string

MAX_LABELS = len(string.ascii_uppercase)


def label_for_index(index: int) -> str:
    """Return the label for a zero-based option position.

    Examples:
        >>> label_for_index(0)
        'A'
        >>> label_for_index(3)
        'D'
    """
    if not (0 <= index < MAX_LABELS):
        raise ValueError(f"option index out of range: {index}")
    return string.ascii_uppercase[index]


def labels_upto(count: int) -> list[str]:
    """Return the first ``count`` labels.

    Examples:
        >>> labels_upto(3)
        ['A', 'B', 'C']
    """
    if count < 0:
        raise ValueError(f"count must be non-negative: {count}")
    return list(string.ascii_uppercase[:min(count, MAX_LABELS)])


def is_label(value: object) -> bool:
    """True if ``value`` is a single uppercase ASCII letter."""
    return isinstance(value, str) and len(value) == 1 and value in string.ascii_uppercase
