"""
Module: ingest

Purpose:
    Bulk text ingestion: split pasted text into Sections and parse each
    into a DraftQuestion.

Key Functions:
    - parse(): Main entry point
    - split_sections(), count_sections(): Section helpers

Key Classes:
    - ParserConfig, ParseResult, SectionParseError, FatalInputError
"""

from .config import ParserConfig
from .sections import split_sections, count_sections
from .parser import parse, ParseResult, SectionParseError, FatalInputError

__all__ = [
    "ParserConfig",
    "split_sections",
    "count_sections",
    "parse",
    "ParseResult",
    "SectionParseError",
    "FatalInputError",
]
