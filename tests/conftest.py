import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import quiz_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from quiz_toolkit.core.models import DraftQuestion, Option, OptionExplanation


# Common test fixtures
@pytest.fixture
def sample_draft() -> DraftQuestion:
    """Four options, A and C correct, explanations on A, B and C."""
    return DraftQuestion(
        question_text="Which are prime?",
        options=(
            Option("A", "2"),
            Option("B", "4"),
            Option("C", "7"),
            Option("D", "9"),
        ),
        correct_labels=("A", "C"),
        explanations=(
            OptionExplanation("A", "2 is the only even prime", True),
            OptionExplanation("B", "4 = 2 x 2", False),
            OptionExplanation("C", "7 has no divisors", True),
        ),
    )


@pytest.fixture
def sample_record_data() -> dict:
    """Canonical wire record."""
    return {
        "question_text": "Capital of France?",
        "options": [
            {"label": "A", "text": "London"},
            {"label": "B", "text": "Paris"},
        ],
        "correct_answers": {"A": False, "B": True},
        "explanation": {
            "correct": {"B": "Paris is the capital"},
            "incorrect_choices": {"A": "London is in England"},
        },
        "test_id": "t-1",
        "difficulty": "easy",
        "status": "active",
    }
