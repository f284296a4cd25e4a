import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import grading_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from grading_toolkit.grading.manager import SystemManager


# Common test fixtures
@pytest.fixture
def manager() -> SystemManager:
    """Return an empty manager."""
    return SystemManager()


@pytest.fixture
def midterm_manager() -> SystemManager:
    """
    Manager with exam 10 ("Midterm") holding one question of each kind.

    - Q1 true/false, 2 points, answer False
    - Q2 multiple choice, 4 points, answer {A, B}
    - Q3 fill in the blanks, 6 points, answer red/green/blue
    """
    m = SystemManager()
    m.add_exam(10, "Midterm")
    m.add_true_false_question(10, 1, "Abstract classes can be instantiated", 2, False)
    m.add_multiple_choice_question(10, 2, "Which statements are true?", 4, ["B", "A"])
    m.add_fill_in_the_blanks_question(10, 3, "Name the primary colors", 6, ["red", "green", "blue"])
    m.add_student("Smith,John")
    return m
