"""
Module: ingest.config

Purpose:
    Configuration dataclass for the bulk text parser. Immutable settings
    with validation on construction.

Key Classes:
    - ParserConfig: Option-count policy and separator

Dependencies:
    - dataclasses (std)

Used By:
    - ingest.parser
"""

from __future__ import annotations

from dataclasses import dataclass

from quiz_toolkit.common.labels import MAX_LABELS

MIN_OPTIONS = 2


@dataclass(frozen=True)
class ParserConfig:
    """
    Configuration for the bulk text parser (immutable).

    Attributes:
        max_options: Answer lines beyond this count are dropped (2-26)
        option_separator: First occurrence splits option text from its
            explanation

    Example:
        >>> ParserConfig(max_options=5).max_label
        'E'
    """

    max_options: int = MAX_LABELS
    option_separator: str = ";"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not (MIN_OPTIONS <= self.max_options <= MAX_LABELS):
            raise ValueError(
                f"max_options must be {MIN_OPTIONS}-{MAX_LABELS}: {self.max_options}"
            )
        if not self.option_separator or "\n" in self.option_separator:
            raise ValueError(f"option_separator must be a non-empty single-line string: {self.option_separator!r}")

    @property
    def max_label(self) -> str:
        """Highest label an option can receive."""
        return chr(ord("A") + self.max_options - 1)
