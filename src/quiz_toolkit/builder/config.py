"""
Module: builder.config

Purpose:
    Configuration dataclasses for the question record builder.

Key Classes:
    - BuilderConfig: Option-count policy, fallback explanation, validation
    - RecordContext: Per-test context stamped onto every record

Dependencies:
    - dataclasses (std)

Used By:
    - builder.record_builder
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from quiz_toolkit.common.labels import MAX_LABELS

DEFAULT_FALLBACK_EXPLANATION = "Option {label} is correct"


@dataclass(frozen=True)
class BuilderConfig:
    """
    Configuration for building question records (immutable).

    Attributes:
        max_options: Drafts with more surviving options are rejected (2-26)
        fallback_explanation: Template used for a correct option without
            explanation text; ``{label}`` is replaced by the option label
        validate: Run strict schema validation on every built record

    Example:
        >>> BuilderConfig().fallback_for("B")
        'Option B is correct'
    """

    max_options: int = MAX_LABELS
    fallback_explanation: str = DEFAULT_FALLBACK_EXPLANATION
    validate: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not (2 <= self.max_options <= MAX_LABELS):
            raise ValueError(f"max_options must be 2-{MAX_LABELS}: {self.max_options}")
        if not self.fallback_explanation.strip():
            raise ValueError("fallback_explanation must not be empty")
        try:
            self.fallback_explanation.format(label="A")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(
                f"fallback_explanation may only use the {{label}} placeholder: {e}"
            ) from e

    def fallback_for(self, label: str) -> str:
        return self.fallback_explanation.format(label=label)


@dataclass(frozen=True)
class RecordContext:
    """
    Context shared by every record built for one test.

    Attributes:
        test_id: Owning test identifier
        difficulty: Difficulty tag
        status: Lifecycle status
        extra: Other keys copied into the wire dict (e.g. created_by)
    """

    test_id: Optional[str] = None
    difficulty: Optional[str] = "easy"
    status: Optional[str] = "active"
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> RecordContext:
        """Build a context from a loose dict; unknown keys land in ``extra``."""
        known = {"test_id", "difficulty", "status"}
        return cls(
            test_id=data.get("test_id"),
            difficulty=data.get("difficulty", "easy"),
            status=data.get("status", "active"),
            extra={k: v for k, v in data.items() if k not in known},
        )
