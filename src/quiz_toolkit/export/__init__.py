"""
Module: export

Purpose:
    Text rendering helpers shared by document exporters.
"""

from .text import (
    format_options,
    format_correct_answers,
    format_explanation,
    format_record,
)

__all__ = [
    "format_options",
    "format_correct_answers",
    "format_explanation",
    "format_record",
]
