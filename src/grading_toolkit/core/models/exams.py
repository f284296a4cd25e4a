"""
Module: exams

Purpose:
    Provides the Exam class - an ordered collection of questions keyed by
    question number, with a calculated total score.

Key Functions:
    - Exam.add_question(q): Insert or replace a question by number
    - Exam.get_question(n): Look up a question by number
    - Exam.questions: Questions in ascending number order
    - Exam.total_score: Sum of question points (never stored)

Dependencies:
    - logging (std)
    - .questions.Question

Used By:
    - core.models.students.Student
    - grading.manager.SystemManager
    - output.text.render_key
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator

from ..errors import QuestionNotFoundError
from .questions import Question

logger = logging.getLogger(__name__)


class Exam:
    """
    Exam with questions indexed by question number.

    Questions live in a dict keyed by ``question_number`` and are always
    iterated in key order, so insertion order and gaps in the numbering
    cannot shift which question answers to which number.

    Attributes:
        exam_id: Unique exam identifier
        title: Human-readable title

    Example:
        >>> exam = Exam(1, "Midterm")
        >>> exam.add_question(Question.true_false(1, "Sky is blue", 2, True))
        >>> exam.total_score
        2.0
    """

    def __init__(self, exam_id: int, title: str):
        self.exam_id = exam_id
        self.title = title
        self._questions: Dict[int, Question] = {}

    # ─────────────────────────────────────────────────────────────────────────
    # Membership
    # ─────────────────────────────────────────────────────────────────────────

    def add_question(self, question: Question) -> None:
        """
        Add a question at its own number.

        An existing question with the same number is replaced.

        Args:
            question: Question to add
        """
        number = question.question_number
        if number in self._questions:
            logger.warning(f"Exam {self.exam_id}: replacing question #{number}")
        self._questions[number] = question

    def get_question(self, question_number: int) -> Question:
        """
        Get the question with the given number.

        Raises:
            QuestionNotFoundError: If the exam has no such question
        """
        try:
            return self._questions[question_number]
        except KeyError:
            raise QuestionNotFoundError(self.exam_id, question_number) from None

    def has_question(self, question_number: int) -> bool:
        return question_number in self._questions

    @property
    def questions(self) -> list[Question]:
        """Questions in ascending question-number order."""
        return [self._questions[n] for n in sorted(self._questions)]

    def __iter__(self) -> Iterator[Question]:
        return iter(self.questions)

    def __len__(self) -> int:
        return len(self._questions)

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def total_score(self) -> float:
        """
        Total points available on the exam.

        **IMPORTANT:** Always calculated from the questions, never stored.
        """
        return sum((q.points for q in self.questions), 0.0)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Serialize to dictionary (total_score NOT stored)."""
        return {
            "exam_id": self.exam_id,
            "title": self.title,
            "questions": [q.to_dict() for q in self.questions],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Exam:
        """Deserialize from dictionary."""
        exam = cls(data["exam_id"], data["title"])
        for question_data in data.get("questions", []):
            exam.add_question(Question.from_dict(question_data))
        return exam

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Exam):
            return NotImplemented
        return (
            self.exam_id == other.exam_id
            and self.title == other.title
            and self._questions == other._questions
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"Exam({self.exam_id}, {self.title!r}, questions={len(self)}, "
            f"total={self.total_score})"
        )
