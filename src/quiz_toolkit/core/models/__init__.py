"""
Core Models Package

Immutable data models shared by the parser, normalizers and builder.

**DESIGN RATIONALE:**

All models in this package are frozen dataclasses. Drafts and records are
replaced, never patched, so a record handed to an exporter cannot change
underneath it.

| Model | Produced by | Consumed by |
|-------|-------------|-------------|
| `Option` | parser, builder | everything |
| `DraftQuestion` | `ingest.parser` | `builder.record_builder` |
| `Explanation` | `answers.explanations`, builder | review, export |
| `QuestionRecord` | `builder.record_builder`, serialization | persistence, export |
"""

from .options import Option, OptionExplanation
from .drafts import DraftQuestion
from .records import Explanation, QuestionRecord

__all__ = [
    "Option",
    "OptionExplanation",
    "DraftQuestion",
    "Explanation",
    "QuestionRecord",
]
