"""
Module: grading.manager

Purpose:
    The aggregation root: owns exams, students and the grading curve, and
    runs the answer-submission protocol. A presentation layer (CLI, GUI)
    holds a SystemManager instance and calls into it; there is no global
    state.

Key Classes:
    - SystemManager: Exams, students, curve, submissions, grades, reports

Submission protocol (answer_* methods):
    1. Resolve the student and exam (NotFoundError if either is unknown)
    2. Resolve the question and check the response shape
    3. Register the exam against the student on first interaction
    4. Score the response with the question's rule
    5. Apply the per-kind score delta to the running exam score
    6. Store the raw response, replacing any earlier one

    Steps 1-2 finish before anything is mutated, so a failed lookup or a
    bad response leaves the state untouched.

Dependencies:
    - core.models: Exam, Question, Student
    - grading.config: GradingConfig, GradingCurve, ResubmissionPolicy
    - grading.statistics: grade and statistics calculations
    - output.text: key and listing rendering
    - core.utils.serialization: save/restore (imported lazily)

Used By:
    - Presentation layers (out of scope)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.errors import ExamNotFoundError, ResponseTypeError, StudentNotFoundError
from ..core.models.exams import Exam
from ..core.models.questions import Question, QuestionKind, Response
from ..core.models.students import Student
from ..output.text import render_course_grades, render_key
from . import statistics
from .config import GradingConfig, GradingCurve, ResubmissionPolicy

logger = logging.getLogger(__name__)


class SystemManager:
    """
    In-memory store and grading engine.

    Attributes:
        exams: exam_id -> Exam
        students: name -> Student
        curve: Grading curve, None until set_letter_grades_cutoffs is called
        config: Engine settings

    Example:
        >>> manager = SystemManager()
        >>> manager.add_exam(10, "Midterm")
        True
        >>> manager.add_student("Smith,John")
        True
        >>> manager.add_true_false_question(10, 1, "Abstract classes can be instantiated", 2, False)
        >>> manager.answer_true_false_question("Smith,John", 10, 1, False)
        >>> manager.get_exam_score("Smith,John", 10)
        2.0
    """

    def __init__(self, config: Optional[GradingConfig] = None):
        self.config = config or GradingConfig()
        self.exams: Dict[int, Exam] = {}
        self.students: Dict[str, Student] = {}
        self.curve: Optional[GradingCurve] = None

    # ─────────────────────────────────────────────────────────────────────────
    # Exams and Students
    # ─────────────────────────────────────────────────────────────────────────

    def add_exam(self, exam_id: int, title: str) -> bool:
        """
        Add an exam.

        Returns:
            False if an exam with this id already exists
        """
        if exam_id in self.exams:
            logger.warning(f"Exam {exam_id} already exists; not added")
            return False
        self.exams[exam_id] = Exam(exam_id, title)
        logger.debug(f"Added exam {exam_id} ({title!r})")
        return True

    def add_student(self, name: str) -> bool:
        """
        Add a student. Names are given as "LastName,FirstName".

        Returns:
            False if the student already exists
        """
        if name in self.students:
            logger.warning(f"Student {name!r} already exists; not added")
            return False
        self.students[name] = Student(name)
        logger.debug(f"Added student {name!r}")
        return True

    def get_exam(self, exam_id: int) -> Exam:
        try:
            return self.exams[exam_id]
        except KeyError:
            raise ExamNotFoundError(exam_id) from None

    def get_student(self, name: str) -> Student:
        try:
            return self.students[name]
        except KeyError:
            raise StudentNotFoundError(name) from None

    # ─────────────────────────────────────────────────────────────────────────
    # Questions
    # ─────────────────────────────────────────────────────────────────────────

    def add_true_false_question(
        self, exam_id: int, question_number: int, text: str, points: float, answer: bool
    ) -> None:
        """Add (or replace) a true/false question."""
        self.get_exam(exam_id).add_question(
            Question.true_false(question_number, text, points, answer)
        )

    def add_multiple_choice_question(
        self, exam_id: int, question_number: int, text: str, points: float,
        answer: Sequence[str],
    ) -> None:
        """Add (or replace) a multiple choice question. No partial credit."""
        self.get_exam(exam_id).add_question(
            Question.multiple_choice(question_number, text, points, answer)
        )

    def add_fill_in_the_blanks_question(
        self, exam_id: int, question_number: int, text: str, points: float,
        answer: Sequence[str],
    ) -> None:
        """
        Add (or replace) a fill-in-the-blanks question.

        Each correct entry is worth ``points / len(answer)``.
        """
        self.get_exam(exam_id).add_question(
            Question.fill_in_the_blanks(question_number, text, points, answer)
        )

    def get_key(self, exam_id: int) -> str:
        """
        Answer key: question text, points and correct answer per question.

        Raises:
            ExamNotFoundError: If the exam is unknown
        """
        return render_key(self.get_exam(exam_id))

    # ─────────────────────────────────────────────────────────────────────────
    # Answer Submission
    # ─────────────────────────────────────────────────────────────────────────

    def answer_true_false_question(
        self, student_name: str, exam_id: int, question_number: int, answer: bool
    ) -> None:
        """Record a true/false answer. Points are added only when correct."""
        self._submit(student_name, exam_id, question_number, answer, QuestionKind.TRUE_FALSE)

    def answer_multiple_choice_question(
        self, student_name: str, exam_id: int, question_number: int,
        answer: Sequence[str],
    ) -> None:
        """Record a multiple choice answer. Adds the points, or an explicit 0.0."""
        self._submit(
            student_name, exam_id, question_number, answer, QuestionKind.MULTIPLE_CHOICE
        )

    def answer_fill_in_the_blanks_question(
        self, student_name: str, exam_id: int, question_number: int,
        answer: Sequence[str],
    ) -> None:
        """Record a fill-in-the-blanks answer. Adds the points, or the partial credit."""
        self._submit(
            student_name, exam_id, question_number, answer, QuestionKind.FILL_IN_THE_BLANKS
        )

    def _submit(
        self,
        student_name: str,
        exam_id: int,
        question_number: int,
        response: Response,
        kind: QuestionKind,
    ) -> None:
        student = self.get_student(student_name)
        exam = self.get_exam(exam_id)
        question = exam.get_question(question_number)
        if question.kind is not kind:
            raise ResponseTypeError(
                f"Question #{question_number} in exam {exam_id} is {question.kind}, "
                f"not {kind}"
            )
        question.check_response(response)

        if not student.has_taken(exam_id):
            student.add_to_exams_taken(exam)
            logger.debug(f"{student_name!r} started exam {exam_id}")

        previous = student.get_response(exam_id, question_number)
        if (
            previous is not None
            and self.config.resubmission_policy is ResubmissionPolicy.REPLACE
        ):
            delta = (
                question.compute_question_score(response)
                - question.compute_question_score(previous)
            )
            # A wrong true/false answer never creates a score entry
            if delta or student.has_exam_score(exam_id):
                student.update_exam_score(exam, delta)
        else:
            self._apply_score(student, exam, question, response)

        student.add_response(exam_id, question_number, response)
        logger.debug(
            f"Recorded answer: student={student_name!r} exam={exam_id} "
            f"question={question_number} running={student.get_exam_score(exam_id)}"
        )

    @staticmethod
    def _apply_score(student: Student, exam: Exam, question: Question, response: Response) -> None:
        """Per-kind running score update for a submission."""
        correct = question.is_correct_answer(response)
        if question.kind is QuestionKind.TRUE_FALSE:
            # Incorrect answers record nothing
            if correct:
                student.update_exam_score(exam, question.points)
        elif question.kind is QuestionKind.MULTIPLE_CHOICE:
            student.update_exam_score(exam, question.points if correct else 0.0)
        else:
            student.update_exam_score(
                exam,
                question.points if correct else question.compute_question_score(response),
            )

    # ─────────────────────────────────────────────────────────────────────────
    # Exam Scores and Reports
    # ─────────────────────────────────────────────────────────────────────────

    def get_exam_score(self, student_name: str, exam_id: int) -> float:
        """Running score of the student on the exam (0.0 if none recorded)."""
        return self.get_student(student_name).get_exam_score(exam_id)

    def get_grading_report(self, student_name: str, exam_id: int) -> str:
        """
        Grading report for the student on the exam.

        Lines read "Question #<n> <score> points out of <points>" and the
        report ends with "Final Score: <score> out of <total>".
        """
        return self.get_student(student_name).get_grading_report(exam_id)

    # ─────────────────────────────────────────────────────────────────────────
    # Course Grades
    # ─────────────────────────────────────────────────────────────────────────

    def set_letter_grades_cutoffs(
        self, letter_grades: Sequence[str], cutoffs: Sequence[float]
    ) -> None:
        """
        Set the grading curve, e.g. ``["A", "B", "C", "D", "F"]`` with
        ``[90, 80, 70, 60, 0]``. Anyone at 90 or above gets an A, at 80 or
        above a B, and so on. Cutoffs must be in descending order.

        Raises:
            ValueError: If the sequences differ in length
        """
        self.curve = GradingCurve.from_sequences(letter_grades, cutoffs)
        logger.debug(f"Grading curve set: {self.curve}")

    def get_course_numeric_grade(self, student_name: str) -> float:
        """Numeric course grade (0-100) over every exam with a recorded score."""
        return statistics.course_numeric_grade(self.get_student(student_name), self.exams)

    def get_course_letter_grade(self, student_name: str) -> str:
        """
        Letter grade for the student's numeric course grade.

        Raises:
            CurveNotConfiguredError: If cutoffs were never set
        """
        numeric = self.get_course_numeric_grade(student_name)
        return statistics.course_letter_grade(
            numeric, self.curve, default=self.config.default_letter
        )

    def get_course_grades(self) -> List[Tuple[str, float, str]]:
        """
        ``(name, numeric_grade, letter_grade)`` for every student, sorted by name.

        Raises:
            CurveNotConfiguredError: If cutoffs were never set
        """
        return [
            (
                student.name,
                self.get_course_numeric_grade(student.name),
                self.get_course_letter_grade(student.name),
            )
            for student in sorted(self.students.values())
        ]

    def get_course_grades_report(self) -> str:
        """Course grades as "<name> <numeric> <letter>" lines, sorted by name."""
        return render_course_grades(self.get_course_grades())

    # ─────────────────────────────────────────────────────────────────────────
    # Exam Statistics
    # ─────────────────────────────────────────────────────────────────────────

    def get_max_score(self, exam_id: int) -> float:
        """Maximum running score on the exam among all students."""
        self.get_exam(exam_id)
        return statistics.max_score(exam_id, self.students.values())

    def get_min_score(self, exam_id: int) -> float:
        """Minimum running score on the exam; students who never took it count as 0.0."""
        self.get_exam(exam_id)
        return statistics.min_score(
            exam_id, self.students.values(), sentinel=self.config.min_score_sentinel
        )

    def get_average_score(self, exam_id: int) -> float:
        """Average running score on the exam over every registered student."""
        self.get_exam(exam_id)
        return statistics.average_score(exam_id, self.students.values())

    # ─────────────────────────────────────────────────────────────────────────
    # Persistence
    # ─────────────────────────────────────────────────────────────────────────

    def save(self, path: Path) -> None:
        """
        Write the full manager state to ``path`` as JSON.

        Raises:
            PersistenceError: On I/O failure (any existing file is left intact)
        """
        from ..core.utils.serialization import save_manager_json

        save_manager_json(self, Path(path))

    @classmethod
    def restore(cls, path: Path) -> SystemManager:
        """
        Build a new manager from a file written by :meth:`save`.

        Raises:
            PersistenceError: If the file cannot be read
            ValidationError: If the content is not valid manager state
        """
        from ..core.utils.serialization import load_manager_json

        return load_manager_json(Path(path))

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"SystemManager(exams={len(self.exams)}, students={len(self.students)})"
