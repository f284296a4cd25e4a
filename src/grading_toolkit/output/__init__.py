"""Rendering of answer keys, grading reports and course grade listings."""

from .text import (
    format_answer,
    format_points,
    render_course_grades,
    render_grading_report,
    render_key,
)

__all__ = [
    "format_answer",
    "format_points",
    "render_course_grades",
    "render_grading_report",
    "render_key",
]
