"""
Module: builder

Purpose:
    Write path: turn parser drafts into canonical QuestionRecords ready for
    the persistence API.

Key Functions:
    - build_record(): One draft -> one record
    - build_records(): Many drafts, failures collected

Key Classes:
    - BuilderConfig, RecordContext, BatchBuildResult
"""

from .config import BuilderConfig, RecordContext, DEFAULT_FALLBACK_EXPLANATION
from .record_builder import build_record, build_records, BatchBuildResult

__all__ = [
    "BuilderConfig",
    "RecordContext",
    "DEFAULT_FALLBACK_EXPLANATION",
    "build_record",
    "build_records",
    "BatchBuildResult",
]
