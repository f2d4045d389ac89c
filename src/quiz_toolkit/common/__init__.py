"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .labels import (
    MAX_LABELS,
    label_for_index,
    labels_upto,
    is_label,
)

__all__ = [
    "MAX_LABELS",
    "label_for_index",
    "labels_upto",
    "is_label",
]
