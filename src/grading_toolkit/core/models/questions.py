"""
Module: questions

Purpose:
    Provides the Question dataclass - an immutable, tagged question record.
    The three supported kinds (true/false, multiple choice, fill in the
    blanks) share one record type; correctness and scoring rules are
    selected by an explicit dispatch on ``kind``.

Key Functions:
    - Question.true_false() / multiple_choice() / fill_in_the_blanks(): Factories
    - Question.is_correct_answer(response): Exact-correctness check
    - Question.compute_question_score(response): Score in [0, points]
    - Question.to_dict() / Question.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - enum (std)
    - ..errors.ResponseTypeError

Used By:
    - core.models.exams.Exam
    - core.models.students.Student
    - grading.manager.SystemManager
    - output.text
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

from ..errors import ResponseTypeError


# A stored response is either a boolean (true/false questions) or an
# ordered list of strings (choice and fill-in questions).
Response = Union[bool, Sequence[str]]


class QuestionKind(str, Enum):
    """Closed set of question variants."""
    TRUE_FALSE = "true_false"
    MULTIPLE_CHOICE = "multiple_choice"
    FILL_IN_THE_BLANKS = "fill_in_the_blanks"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Question:
    """
    Single exam question (immutable).

    Attributes:
        question_number: 1-based position within the exam
        text: Question text shown to students and in the key
        points: Points available for the question (non-negative)
        kind: Which scoring rule applies
        correct_answer: ``bool`` for TRUE_FALSE, otherwise a tuple of
            strings (the correct selections or the blank entries)

    Invariants:
        - question_number >= 1
        - points >= 0
        - correct_answer shape matches kind
        - choice/fill-in answers have at least one entry

    Example:
        >>> q = Question.fill_in_the_blanks(1, "Name two fruits", 4.0, ["apple", "pear"])
        >>> q.compute_question_score(["pear", "plum"])
        2.0
    """

    question_number: int
    text: str
    points: float
    kind: QuestionKind
    correct_answer: Union[bool, tuple[str, ...]]

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if self.question_number < 1:
            raise ValueError(f"question_number must be >= 1: {self.question_number}")
        if self.points < 0:
            raise ValueError(f"points cannot be negative: {self.points}")
        if self.kind is QuestionKind.TRUE_FALSE:
            if not isinstance(self.correct_answer, bool):
                raise ValueError(
                    f"True/false answer must be a bool: {self.correct_answer!r}"
                )
        else:
            if not isinstance(self.correct_answer, tuple) or not self.correct_answer:
                raise ValueError(
                    f"{self.kind} answer must be a non-empty tuple of strings: "
                    f"{self.correct_answer!r}"
                )

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def true_false(
        cls, question_number: int, text: str, points: float, answer: bool
    ) -> Question:
        """Create a true/false question."""
        return cls(question_number, text, float(points), QuestionKind.TRUE_FALSE, answer)

    @classmethod
    def multiple_choice(
        cls, question_number: int, text: str, points: float, answer: Sequence[str]
    ) -> Question:
        """
        Create a multiple choice question.

        Args:
            answer: Every correct selection. A response must match this
                set exactly to earn any points.
        """
        return cls(
            question_number, text, float(points),
            QuestionKind.MULTIPLE_CHOICE, tuple(answer),
        )

    @classmethod
    def fill_in_the_blanks(
        cls, question_number: int, text: str, points: float, answer: Sequence[str]
    ) -> Question:
        """
        Create a fill-in-the-blanks question.

        Each entry in ``answer`` is worth ``points / len(answer)``.
        """
        return cls(
            question_number, text, float(points),
            QuestionKind.FILL_IN_THE_BLANKS, tuple(answer),
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Scoring
    # ─────────────────────────────────────────────────────────────────────────

    def check_response(self, response: Response) -> None:
        """
        Ensure ``response`` has the shape this question kind expects.

        Raises:
            ResponseTypeError: On a bool for a choice/fill-in question,
                a sequence for a true/false question, or non-string entries
        """
        if self.kind is QuestionKind.TRUE_FALSE:
            if not isinstance(response, bool):
                raise ResponseTypeError(
                    f"Question #{self.question_number} expects a bool response, "
                    f"got {type(response).__name__}"
                )
            return

        if isinstance(response, (bool, str)) or not isinstance(response, (list, tuple)):
            raise ResponseTypeError(
                f"Question #{self.question_number} ({self.kind}) expects a list of "
                f"strings, got {type(response).__name__}"
            )
        for entry in response:
            if not isinstance(entry, str):
                raise ResponseTypeError(
                    f"Question #{self.question_number} response entries must be "
                    f"strings, got {type(entry).__name__}"
                )

    def is_correct_answer(self, response: Response) -> bool:
        """
        Check whether ``response`` is fully correct.

        Choice and fill-in responses are compared as sets, so order and
        repeated entries do not matter.
        """
        self.check_response(response)
        if self.kind is QuestionKind.TRUE_FALSE:
            return response == self.correct_answer
        return set(response) == set(self.correct_answer)

    def compute_question_score(self, response: Response) -> float:
        """
        Score ``response`` for this question.

        Returns:
            ``points`` or ``0.0`` for true/false and multiple choice.
            For fill in the blanks, ``points / n`` per distinct response
            entry found in the correct set, and exactly ``points`` when
            the response is fully correct.

        Raises:
            ResponseTypeError: If the response shape does not match
        """
        if self.is_correct_answer(response):
            return self.points

        if self.kind is QuestionKind.FILL_IN_THE_BLANKS:
            matched = set(response) & set(self.correct_answer)
            return len(matched) * (self.points / len(self.correct_answer))

        return 0.0

    def sorted_answer(self) -> list[str]:
        """Correct answer entries in lexicographic order (choice/fill-in only)."""
        if self.kind is QuestionKind.TRUE_FALSE:
            raise ValueError("True/false questions have no answer entries")
        return sorted(self.correct_answer)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON storage.

        Returns:
            Dict representation
        """
        answer = self.correct_answer
        return {
            "question_number": self.question_number,
            "text": self.text,
            "points": self.points,
            "kind": self.kind.value,
            "correct_answer": answer if isinstance(answer, bool) else list(answer),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Question:
        """
        Deserialize from dictionary.

        Args:
            data: Dict representation

        Returns:
            Question instance
        """
        kind = QuestionKind(data["kind"])
        answer = data["correct_answer"]
        return cls(
            question_number=data["question_number"],
            text=data["text"],
            points=float(data["points"]),
            kind=kind,
            correct_answer=answer if kind is QuestionKind.TRUE_FALSE else tuple(answer),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Question(#{self.question_number}, {self.kind.value}, points={self.points})"
