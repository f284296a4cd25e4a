"""
Module: students

Purpose:
    Provides the Student class - per-student response storage, running
    exam scores and grading report generation.

Key Functions:
    - Student.update_exam_score(exam, delta): Add a delta to the running score
    - Student.add_response(exam_id, n, response): Store (overwrite) a response
    - Student.get_exam_score(exam_id): Running score, 0.0 if none recorded
    - Student.get_grading_report(exam_id): Per-question breakdown text
    - Student.grading_rows(exam_id): The breakdown as (number, score, points)

Dependencies:
    - functools (std)
    - .exams.Exam
    - .questions.Question
    - output.text: report rendering (imported lazily)

Used By:
    - grading.manager.SystemManager
    - grading.statistics
    - core.utils.serialization

Note:
    The running score is the sum of every delta applied, so it can drift
    from the report's per-question scores when a question is answered
    more than once. Both values are kept and reported independently.
"""

from __future__ import annotations

from functools import total_ordering
from typing import Dict, Optional

from ..errors import ExamNotFoundError
from .exams import Exam
from .questions import Response


@total_ordering
class Student:
    """
    A student and everything recorded for them.

    Students order by name (plain string comparison), which is the sort
    key for course listings.

    Attributes:
        name: Unique student name, e.g. "Smith,John"
        responses: exam_id -> (question_number -> raw response)
        exam_scores: exam_id -> running score
        exams_taken: exam_id -> Exam (shared reference, not owned)
    """

    def __init__(self, name: str):
        self.name = name
        self.responses: Dict[int, Dict[int, Response]] = {}
        self.exam_scores: Dict[int, float] = {}
        self.exams_taken: Dict[int, Exam] = {}

    # ─────────────────────────────────────────────────────────────────────────
    # Exams Taken
    # ─────────────────────────────────────────────────────────────────────────

    def has_taken(self, exam_id: int) -> bool:
        return exam_id in self.exams_taken

    def add_to_exams_taken(self, exam: Exam) -> None:
        self.exams_taken[exam.exam_id] = exam

    # ─────────────────────────────────────────────────────────────────────────
    # Scores
    # ─────────────────────────────────────────────────────────────────────────

    def get_exam_score(self, exam_id: int) -> float:
        """Running score for the exam, or 0.0 if nothing was recorded."""
        return self.exam_scores.get(exam_id, 0.0)

    def has_exam_score(self, exam_id: int) -> bool:
        return exam_id in self.exam_scores

    def update_exam_score(self, exam: Exam, delta: float) -> None:
        """
        Apply a score delta to the running score for ``exam``.

        The first delta creates the score entry; later ones add to it.
        A zero delta still creates the entry, which makes the exam count
        toward the course grade.
        """
        exam_id = exam.exam_id
        self.exam_scores[exam_id] = self.exam_scores.get(exam_id, 0.0) + delta
        self.exams_taken[exam_id] = exam

    # ─────────────────────────────────────────────────────────────────────────
    # Responses
    # ─────────────────────────────────────────────────────────────────────────

    def add_response(self, exam_id: int, question_number: int, response: Response) -> None:
        """Record a raw response, replacing any earlier one for the same question."""
        if not isinstance(response, bool):
            response = list(response)
        self.responses.setdefault(exam_id, {})[question_number] = response

    def get_response(self, exam_id: int, question_number: int) -> Optional[Response]:
        """Stored response, or None if the question was never answered."""
        return self.responses.get(exam_id, {}).get(question_number)

    # ─────────────────────────────────────────────────────────────────────────
    # Reporting
    # ─────────────────────────────────────────────────────────────────────────

    def get_grading_report(self, exam_id: int) -> str:
        """
        Build the grading report for an exam this student attempted.

        Each question's score is recomputed from the latest stored
        response; unanswered questions score 0.0. The final line uses the
        running score, which is tracked separately.

        Args:
            exam_id: Exam to report on

        Returns:
            Report text, one "Question #..." line per question followed by
            "Final Score: <score> out of <total>"

        Raises:
            ExamNotFoundError: If the student never attempted the exam
        """
        from ...output.text import render_grading_report

        exam = self._taken_exam(exam_id)
        return render_grading_report(
            self.grading_rows(exam_id), self.get_exam_score(exam_id), exam.total_score
        )

    def grading_rows(self, exam_id: int) -> list[tuple[int, float, float]]:
        """
        ``(question_number, score, points)`` per question, in number order.

        Scores are recomputed from the latest stored responses.

        Raises:
            ExamNotFoundError: If the student never attempted the exam
        """
        rows = []
        for question in self._taken_exam(exam_id).questions:
            response = self.get_response(exam_id, question.question_number)
            score = 0.0 if response is None else question.compute_question_score(response)
            rows.append((question.question_number, score, question.points))
        return rows

    def _taken_exam(self, exam_id: int) -> Exam:
        exam = self.exams_taken.get(exam_id)
        if exam is None:
            raise ExamNotFoundError(exam_id)
        return exam

    # ─────────────────────────────────────────────────────────────────────────
    # Ordering
    # ─────────────────────────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other: Student) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.name < other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Student({self.name!r}, exams={sorted(self.exams_taken)})"
