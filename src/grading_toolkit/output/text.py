"""
Module: output.text

Purpose:
    Deterministic text rendering for answer keys, grading reports and
    course grade listings.

Key Functions:
    - format_points(): Render a point value ("5.0", "2.5")
    - format_answer(): Render a question's correct answer
    - render_key(): Answer key for an exam
    - render_grading_report(): Per-question breakdown plus final score
    - render_course_grades(): "<name> <numeric> <letter>" listing

Dependencies:
    - core.models.questions: QuestionKind dispatch

Used By:
    - core.models.students.Student.get_grading_report
    - grading.manager.SystemManager
    - output.pdf
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence

from ..core.models.questions import Question, QuestionKind

if TYPE_CHECKING:
    from ..core.models.exams import Exam


def format_points(value: float) -> str:
    """
    Render a point value as a float literal.

    Integral values keep their trailing ".0" so reports read the same
    whether points were given as ints or floats.

    Example:
        >>> format_points(5)
        '5.0'
    """
    return repr(float(value))


def format_answer(question: Question) -> str:
    """
    Render the correct answer of ``question``.

    True/false answers render as "True"/"False". Choice and fill-in
    answers render sorted, comma-space separated, in single brackets:
    ``[apple, banana]``.
    """
    if question.kind is QuestionKind.TRUE_FALSE:
        return "True" if question.correct_answer else "False"
    return "[" + ", ".join(question.sorted_answer()) + "]"


def render_key(exam: Exam) -> str:
    """
    Render the answer key for an exam.

    One block per question in number order::

        Question Text: <text>
        Points: <points>
        Correct Answer: <answer>
    """
    lines = []
    for question in exam.questions:
        lines.append(f"Question Text: {question.text}\n")
        lines.append(f"Points: {format_points(question.points)}\n")
        lines.append(f"Correct Answer: {format_answer(question)}\n")
    return "".join(lines)


def render_grading_report(
    rows: Iterable[tuple[int, float, float]],
    final_score: float,
    total_points: float,
) -> str:
    """
    Render a grading report.

    Args:
        rows: ``(question_number, score, points)`` per question, in order
        final_score: Running exam score for the student
        total_points: Total points available on the exam

    Returns:
        Report text ending with "Final Score: <score> out of <total>"
        (no trailing newline)
    """
    lines = [
        f"Question #{number} {format_points(score)} points out of {format_points(points)}\n"
        for number, score, points in rows
    ]
    lines.append(f"Final Score: {format_points(final_score)} out of {format_points(total_points)}")
    return "".join(lines)


def render_course_grades(rows: Sequence[tuple[str, float, str]]) -> str:
    """Render ``(name, numeric, letter)`` rows, one "<name> <numeric> <letter>" line each."""
    return "".join(
        f"{name} {format_points(numeric)} {letter}\n" for name, numeric, letter in rows
    )
