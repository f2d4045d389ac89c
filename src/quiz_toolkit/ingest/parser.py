"""
Module: ingest.parser

Purpose:
    Turn free-form pasted text into DraftQuestion objects. Each
    blank-line-delimited Section holds one question:

        <question text>
        <option text>[;<explanation>]
        <option text>[;<explanation>]
        ...
        <correct letters, space separated>

    Malformed Sections never stop the batch: each one produces a
    SectionParseError in the result and parsing continues with the next.

Key Functions:
    - parse(raw_text, max_options): -> ParseResult

Key Classes:
    - ParseResult: Drafts, errors and warnings for one batch
    - SectionParseError: One malformed Section (data, never raised)
    - FatalInputError: Input is not text at all (raised)

Dependencies:
    - ingest.sections: Section splitting
    - ingest.config: ParserConfig
    - core.models: DraftQuestion, Option, OptionExplanation

Used By:
    - builder.record_builder (consumes drafts)
    - authoring UI (external)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from quiz_toolkit.common.labels import label_for_index, labels_upto
from quiz_toolkit.core.models import DraftQuestion, Option, OptionExplanation

from .config import MIN_OPTIONS, ParserConfig
from .sections import Section, split_sections

logger = logging.getLogger(__name__)

MSG_TOO_FEW_LINES = "need at least 3 lines: question + >=2 options + correct-answer line"
MSG_NO_CORRECT = "no valid correct-answer letter (expected {range})"
MSG_TOO_FEW_OPTIONS = "need at least 2 options"


class FatalInputError(Exception):
    """Raised when the parser input is not a string."""
    pass


@dataclass(frozen=True)
class SectionParseError:
    """
    A malformed Section. Collected in ParseResult, never raised.

    Attributes:
        section_number: 1-based position of the Section in the input
        message: What is wrong with it
        first_line: First line of the Section, to help the author find it
    """

    section_number: int
    message: str
    first_line: str = ""

    def __str__(self) -> str:
        return f"Section {self.section_number}: {self.message}"


@dataclass
class ParseResult:
    """
    Outcome of parsing one batch of text.

    Attributes:
        draft_questions: Drafts for every valid Section, in input order
        errors: One entry per rejected Section
        warnings: Non-fatal notes (dropped letters, dropped option lines)
    """

    draft_questions: List[DraftQuestion] = field(default_factory=list)
    errors: List[SectionParseError] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def error_messages(self) -> list[str]:
        return [str(e) for e in self.errors]

    @property
    def ok(self) -> bool:
        """True when no Section was rejected."""
        return not self.errors


def parse(
    raw_text: str,
    max_options: Optional[int] = None,
    *,
    config: Optional[ParserConfig] = None,
) -> ParseResult:
    """
    Parse pasted text into draft questions.

    Args:
        raw_text: Text to parse
        max_options: Answer lines beyond this count are dropped. Overrides
            ``config.max_options``; defaults to 26.
        config: Parser configuration

    Returns:
        ParseResult with drafts, per-Section errors and warnings

    Raises:
        FatalInputError: If raw_text is not a string
        ValueError: If max_options is outside 2-26

    Example:
        >>> result = parse("Capital of France?\\nLondon\\nParis\\nB")
        >>> result.draft_questions[0].correct_labels
        ('B',)
    """
    if not isinstance(raw_text, str):
        raise FatalInputError(
            f"Parser input must be a string, got {type(raw_text).__name__}"
        )

    config = config or ParserConfig()
    if max_options is not None and max_options != config.max_options:
        config = ParserConfig(max_options=max_options, option_separator=config.option_separator)

    result = ParseResult()
    for number, section in enumerate(split_sections(raw_text), start=1):
        draft = _parse_section(section, number, config, result)
        if draft is not None:
            result.draft_questions.append(draft)

    logger.info(
        f"Parsed {len(result.draft_questions)} questions, "
        f"{len(result.errors)} errors, {len(result.warnings)} warnings"
    )
    return result


def _parse_section(
    lines: Section,
    number: int,
    config: ParserConfig,
    result: ParseResult,
) -> Optional[DraftQuestion]:
    """Parse one Section, recording errors/warnings on ``result``."""

    def reject(message: str) -> None:
        logger.debug(f"Section {number} rejected: {message}")
        result.errors.append(SectionParseError(number, message, first_line=lines[0]))

    if len(lines) < 3:
        reject(MSG_TOO_FEW_LINES)
        return None

    question_text = lines[0]
    answer_lines = lines[1:-1]
    correct_line = lines[-1]

    if len(answer_lines) > config.max_options:
        result.warnings.append(
            f"Section {number}: dropped {len(answer_lines) - config.max_options} option line(s) "
            f"beyond {config.max_label}"
        )
        answer_lines = answer_lines[:config.max_options]

    options: list[Option] = []
    raw_explanations: list[tuple[str, str]] = []
    for idx, line in enumerate(answer_lines):
        label = label_for_index(idx)
        text, sep, explanation = line.partition(config.option_separator)
        options.append(Option(label=label, text=text.strip()))
        if sep and explanation.strip():
            raw_explanations.append((label, explanation.strip()))

    correct_labels = _parse_correct_line(correct_line, len(options), number, result)
    if not correct_labels:
        last = label_for_index(len(options) - 1)
        reject(MSG_NO_CORRECT.format(range=f"A-{last}" if last != "A" else "A"))
        return None

    if len(options) < MIN_OPTIONS:
        reject(MSG_TOO_FEW_OPTIONS)
        return None

    explanations = tuple(
        OptionExplanation(label=label, text=text, is_correct=label in correct_labels)
        for label, text in raw_explanations
    )
    logger.debug(f"Section {number}: {len(options)} options, correct {correct_labels}")
    return DraftQuestion(
        question_text=question_text,
        options=tuple(options),
        correct_labels=tuple(correct_labels),
        explanations=explanations,
    )


def _parse_correct_line(line: str, option_count: int, number: int, result: ParseResult) -> list[str]:
    """
    Extract correct labels from the last line of a Section.

    Tokens are upper-cased; only single letters within the option range
    survive. Dropped tokens become warnings.
    """
    valid = set(labels_upto(option_count))
    labels: list[str] = []
    dropped: list[str] = []
    for token in line.split():
        letter = token.upper()
        if letter in valid:
            if letter not in labels:
                labels.append(letter)
        else:
            dropped.append(token)
    if dropped:
        result.warnings.append(
            f"Section {number}: ignored correct-answer token(s) {dropped}"
        )
    return labels
