"""
Module: core.errors

Purpose:
    Exception taxonomy for the grading core. Lookups of unknown entities,
    response shape mismatches, missing grading curves and persistence
    failures each get their own type so callers can branch on them.

Key Classes:
    - GradingError: Base class for every error raised by the toolkit
    - NotFoundError: Unknown exam, student or question
    - ResponseTypeError: Response shape does not match the question kind
    - CurveNotConfiguredError: Letter grade requested before cutoffs set
    - PersistenceError: I/O failure while saving or restoring state

Used By:
    - core.models (questions, exams, students)
    - grading.manager
    - core.utils.serialization

Note:
    Adding a duplicate exam or student is NOT an error. The manager
    reports it as a boolean result.
"""

from __future__ import annotations


class GradingError(Exception):
    """Base class for grading toolkit errors."""
    pass


class NotFoundError(GradingError, LookupError):
    """Referenced entity does not exist."""
    pass


class ExamNotFoundError(NotFoundError):
    """Raised when an exam id is unknown."""

    def __init__(self, exam_id: int):
        super().__init__(f"Exam not found: {exam_id}")
        self.exam_id = exam_id


class StudentNotFoundError(NotFoundError):
    """Raised when a student name is unknown."""

    def __init__(self, name: str):
        super().__init__(f"Student not found: {name!r}")
        self.name = name


class QuestionNotFoundError(NotFoundError):
    """Raised when an exam has no question with the given number."""

    def __init__(self, exam_id: int | None, question_number: int):
        super().__init__(f"Question #{question_number} not found in exam {exam_id}")
        self.exam_id = exam_id
        self.question_number = question_number


class ResponseTypeError(GradingError, TypeError):
    """Response shape does not match the question kind."""
    pass


class CurveNotConfiguredError(GradingError, RuntimeError):
    """Letter grades requested before the grading curve was set."""
    pass


class PersistenceError(GradingError):
    """
    Saving or restoring manager state failed at the I/O level.

    The original OSError is kept as ``__cause__``.
    """

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path
