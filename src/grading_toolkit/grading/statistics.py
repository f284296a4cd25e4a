"""
Module: grading.statistics

Purpose:
    Course-level grade aggregation and per-exam statistics across
    students. Pure functions over models; the manager owns the lookups.

Key Functions:
    - course_numeric_grade(): Equal-weight average of exam percentages
    - course_letter_grade(): Map a numeric grade through a curve
    - max_score() / min_score() / average_score(): Exam statistics

Dependencies:
    - core.models: Exam, Student
    - grading.config: GradingCurve

Used By:
    - grading.manager.SystemManager
"""

from __future__ import annotations

from typing import Collection, Mapping, Optional

from ..core.errors import CurveNotConfiguredError, ExamNotFoundError
from ..core.models.exams import Exam
from ..core.models.students import Student
from .config import GradingCurve


def course_numeric_grade(student: Student, exams: Mapping[int, Exam]) -> float:
    """
    Numeric course grade between 0 and 100, all exams weighted equally.

    Every exam with a recorded score contributes
    ``100 * score / exam_total`` and takes one slot of the denominator.
    An exam whose total is zero adds nothing to the sum but still takes
    its slot.

    Args:
        student: Student to grade
        exams: All exams by id, used to look up totals

    Returns:
        Average percentage, or 0.0 if the student has no recorded scores

    Raises:
        ExamNotFoundError: If a recorded score refers to an unknown exam
    """
    scores = student.exam_scores
    if not scores:
        return 0.0

    total_adjusted = 0.0
    for exam_id, score in scores.items():
        exam = exams.get(exam_id)
        if exam is None:
            raise ExamNotFoundError(exam_id)
        exam_total = exam.total_score
        if exam_total != 0.0:
            total_adjusted += 100 * score / exam_total

    return total_adjusted / len(scores)


def course_letter_grade(
    numeric_grade: float,
    curve: Optional[GradingCurve],
    default: str = "F",
) -> str:
    """
    Letter grade for a numeric course grade.

    Raises:
        CurveNotConfiguredError: If no curve has been set
    """
    if curve is None:
        raise CurveNotConfiguredError(
            "Letter grade cutoffs have not been set; call set_letter_grades_cutoffs first"
        )
    return curve.letter_for(numeric_grade, default=default)


# ─────────────────────────────────────────────────────────────────────────────
# Exam Statistics
# ─────────────────────────────────────────────────────────────────────────────
# Students who never took the exam count with a score of 0.0.

def max_score(exam_id: int, students: Collection[Student]) -> float:
    """Highest running score on the exam; the scan starts at 0.0."""
    best = 0.0
    for student in students:
        score = student.get_exam_score(exam_id)
        if score > best:
            best = score
    return best


def min_score(exam_id: int, students: Collection[Student], sentinel: float = 1000.0) -> float:
    """Lowest running score on the exam; the scan starts at ``sentinel``."""
    lowest = sentinel
    for student in students:
        score = student.get_exam_score(exam_id)
        if score < lowest:
            lowest = score
    return lowest


def average_score(exam_id: int, students: Collection[Student]) -> float:
    """
    Average running score over every registered student.

    The denominator is the whole roster, not just students who took the
    exam. An empty roster averages to 0.0.
    """
    if not students:
        return 0.0
    total = sum((s.get_exam_score(exam_id) for s in students), 0.0)
    return total / len(students)
