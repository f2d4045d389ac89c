"""
Module: export.text

Purpose:
    Plain-text rendering of question records for exporters. Document
    generators (PDF/DOCX) call these to fill their cells, so the legacy
    explanation handling lives here once instead of in every exporter.

Key Functions:
    - format_options(record): "A. text" lines
    - format_correct_answers(correct_answers): "A, C"
    - format_explanation(explanation, correct_answers): Correct/Incorrect blocks
    - format_record(record): Complete question block

Dependencies:
    - quiz_toolkit.answers: correct_labels_of, normalize_explanation

Used By:
    - document exporters (external)
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from quiz_toolkit.answers import correct_labels_of, normalize_explanation
from quiz_toolkit.core.models import Explanation, Option, QuestionRecord

CORRECT_HEADING = "Correct:"
INCORRECT_HEADING = "Incorrect:"


def format_options(options: Iterable[Option] | QuestionRecord) -> str:
    """
    One "label. text" line per option.

    Example:
        >>> format_options([Option("A", "London"), Option("B", "Paris")])
        'A. London\\nB. Paris'
    """
    if isinstance(options, QuestionRecord):
        options = options.options
    return "\n".join(f"{opt.label}. {opt.text}" for opt in options)


def format_correct_answers(correct_answers: Any) -> str:
    """
    Comma-separated correct labels for any wire shape.

    Example:
        >>> format_correct_answers({"A": "true", "B": "false", "C": "true"})
        'A, C'
    """
    return ", ".join(str(label) for label in correct_labels_of(correct_answers))


def format_explanation(explanation: Any, correct_answers: Any) -> str:
    """
    Render explanations as a Correct block followed by an Incorrect block.

    Legacy string explanations are expanded per correct label first.
    Incorrect entries that belong to a correct label, or are blank, are
    skipped. Returns "" when there is nothing to show.
    """
    if not isinstance(explanation, Explanation):
        explanation = normalize_explanation(explanation, correct_answers)
    correct_labels = set(correct_labels_of(correct_answers))

    blocks: list[str] = []
    correct_lines = _lines(explanation.correct.items())
    if correct_lines:
        blocks.append("\n".join([CORRECT_HEADING, *correct_lines]))

    incorrect_lines = _lines(
        (label, text)
        for label, text in explanation.incorrect_choices.items()
        if label not in correct_labels
    )
    if incorrect_lines:
        blocks.append("\n".join([INCORRECT_HEADING, *incorrect_lines]))
    return "\n".join(blocks)


def _lines(entries: Iterable[tuple[str, Any]]) -> list[str]:
    return [
        f"{label}: {text}"
        for label, text in entries
        if isinstance(text, str) and text.strip()
    ]


def format_record(record: QuestionRecord, *, index: Optional[int] = None) -> str:
    """
    Render a full question block.

    Args:
        record: Record to render
        index: 1-based question number to prefix, if any

    Returns:
        Question text, options, answer line and explanation (if any)
    """
    heading = f"{index}. {record.question_text}" if index is not None else record.question_text
    parts = [
        heading,
        format_options(record),
        f"Answer: {format_correct_answers(record.correct_answers)}",
    ]
    explanation = format_explanation(record.explanation, record.correct_answers)
    if explanation:
        parts.append(explanation)
    return "\n".join(parts)
