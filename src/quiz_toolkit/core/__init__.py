"""
Quiz Toolkit Core Package

Shared data models and schema validation for multiple-choice ingestion.
These models are the single source of truth for the parser, the answer
normalizers and the record builder.
"""

from .models import Option, OptionExplanation, DraftQuestion, Explanation, QuestionRecord
from .schemas import ValidationError, validate_record

__all__ = [
    "Option",
    "OptionExplanation",
    "DraftQuestion",
    "Explanation",
    "QuestionRecord",
    "ValidationError",
    "validate_record",
]
