"""
Module: builder.record_builder

Purpose:
    Assemble the canonical QuestionRecord from a parser DraftQuestion.

    The write path always enumerates correctness for every option
    (explicit False entries), unlike the read-path ``normalize()`` which
    tolerates sparse input.

Key Functions:
    - build_record(draft, context): -> QuestionRecord
    - build_records(drafts, context): -> BatchBuildResult

Key Classes:
    - BatchBuildResult: Records plus per-draft failures

Dependencies:
    - core.models: DraftQuestion, QuestionRecord, Explanation
    - core.schemas: ValidationError, validate_record
    - builder.config: BuilderConfig, RecordContext

Used By:
    - authoring wizard (external)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from quiz_toolkit.core.models import DraftQuestion, Explanation, QuestionRecord
from quiz_toolkit.core.schemas import ValidationError, validate_record

from .config import BuilderConfig, RecordContext

logger = logging.getLogger(__name__)

ContextLike = Union[RecordContext, Dict[str, Any], None]


@dataclass
class BatchBuildResult:
    """
    Outcome of building many drafts.

    Attributes:
        records: Successfully built records, in draft order
        failures: (draft index, error) for each rejected draft
    """

    records: List[QuestionRecord] = field(default_factory=list)
    failures: List[Tuple[int, ValidationError]] = field(default_factory=list)

    @property
    def error_messages(self) -> list[str]:
        return [f"Question {idx + 1}: {err}" for idx, err in self.failures]


def _as_context(context: ContextLike) -> RecordContext:
    if context is None:
        return RecordContext()
    if isinstance(context, RecordContext):
        return context
    return RecordContext.from_dict(context)


def build_record(
    draft: DraftQuestion,
    context: ContextLike = None,
    *,
    config: Optional[BuilderConfig] = None,
) -> QuestionRecord:
    """
    Build a QuestionRecord from a draft.

    Steps:
        1. Drop options with blank text; correct labels that lose their
           option are dropped with a warning on the record
        2. Require >= 2 options and >= 1 correct label
        3. correct_answers maps every surviving label to True/False
        4. explanation.correct has text for every correct label (draft
           text or the fallback template)
        5. explanation.incorrect_choices has only non-empty draft texts

    Args:
        draft: Parsed draft question
        context: RecordContext or loose dict (test_id, difficulty, status, ...)
        config: Builder configuration

    Returns:
        QuestionRecord

    Raises:
        ValidationError: If the draft cannot produce a valid record
    """
    config = config or BuilderConfig()
    ctx = _as_context(context)
    warnings: list[str] = []

    if not draft.question_text.strip():
        raise ValidationError("Question text is empty", path="question_text")

    options = tuple(opt for opt in draft.options if not opt.is_blank)
    blank = [opt.label for opt in draft.options if opt.is_blank]
    if blank:
        logger.debug(f"Dropping blank options {blank} from {draft.question_text[:40]!r}")

    surviving = {opt.label for opt in options}
    correct = [label for label in draft.correct_labels if label in surviving]
    dangling = [label for label in draft.correct_labels if label not in surviving]
    if dangling:
        message = f"Dropped correct label(s) {dangling}: option text is empty"
        warnings.append(message)
        logger.warning(f"{draft.question_text[:40]!r}: {message}")

    if len(options) < 2:
        raise ValidationError(
            f"Need at least 2 options with text, got {len(options)}",
            path="options",
            errors=[f"Blank option: {label}" for label in blank],
        )
    if len(options) > config.max_options:
        raise ValidationError(
            f"Too many options: {len(options)} (max {config.max_options})",
            path="options"
        )
    if not correct:
        raise ValidationError(
            "No correct answer left after dropping blank options",
            path="correct_answers",
            errors=[f"Dropped label: {label}" for label in dangling],
        )

    correct_set = set(correct)
    notes = draft.per_option_explanation
    correct_answers = {opt.label: opt.label in correct_set for opt in options}
    explanation = Explanation(
        correct={
            label: notes.get(label) or config.fallback_for(label)
            for label in correct
        },
        incorrect_choices={
            opt.label: notes[opt.label]
            for opt in options
            if opt.label not in correct_set and notes.get(opt.label)
        },
    )

    record = QuestionRecord(
        question_text=draft.question_text.strip(),
        options=options,
        correct_answers=correct_answers,
        explanation=explanation,
        test_id=ctx.test_id,
        difficulty=ctx.difficulty,
        status=ctx.status,
        extra=dict(ctx.extra),
        warnings=tuple(warnings),
    )
    if config.validate:
        validate_record(record.to_dict(), strict=True)
    return record


def build_records(
    drafts: Iterable[DraftQuestion],
    context: ContextLike = None,
    *,
    config: Optional[BuilderConfig] = None,
) -> BatchBuildResult:
    """
    Build every draft independently, collecting failures.

    One bad draft never prevents the others from being built.

    Args:
        drafts: Drafts from the parser
        context: Shared context for all records
        config: Builder configuration

    Returns:
        BatchBuildResult
    """
    ctx = _as_context(context)
    result = BatchBuildResult()
    for idx, draft in enumerate(drafts):
        try:
            result.records.append(build_record(draft, ctx, config=config))
        except ValidationError as e:
            logger.warning(f"Question {idx + 1} rejected: {e}")
            result.failures.append((idx, e))
    logger.info(f"Built {len(result.records)} records, {len(result.failures)} rejected")
    return result
