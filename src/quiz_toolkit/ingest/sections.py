"""
Module: ingest.sections

Purpose:
    Split raw pasted text into Sections: blank-line-delimited blocks of
    trimmed, non-empty lines. One Section describes one question.

Key Functions:
    - split_sections(text): -> list of Sections (list of lines)
    - count_sections(text): Number of Sections, for live previews

Dependencies:
    - re (std)
"""

from __future__ import annotations

import re

_NEWLINE_RE = re.compile(r"\r\n?")

Section = list[str]


def _normalize_newlines(text: str) -> str:
    return _NEWLINE_RE.sub("\n", text)


def split_sections(text: str) -> list[Section]:
    """
    Split text into Sections.

    A line counts as blank when ``str.strip()`` leaves nothing, so any
    Unicode whitespace (non-breaking or ideographic spaces included) on a
    separator line closes the Section. Leading, trailing or repeated blank
    lines never produce empty Sections.

    Args:
        text: Raw pasted text

    Returns:
        Sections in input order, each a list of stripped lines

    Example:
        >>> split_sections("Q1\\nA\\nB\\nA\\n\\n\\nQ2\\nX\\nY\\nB")
        [['Q1', 'A', 'B', 'A'], ['Q2', 'X', 'Y', 'B']]
    """
    sections: list[Section] = []
    current: Section = []
    for raw_line in _normalize_newlines(text).split("\n"):
        line = raw_line.strip()
        if line:
            current.append(line)
        elif current:
            sections.append(current)
            current = []
    if current:
        sections.append(current)
    return sections


def count_sections(text: str) -> int:
    """Number of Sections in ``text``."""
    return len(split_sections(text))
