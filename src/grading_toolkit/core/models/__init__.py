"""
Core Models Package

Question, exam and student records.

| Model | Mutability | Notes |
|-------|------------|-------|
| `Question` | frozen | Tagged by `QuestionKind`, owns its scoring rule |
| `Exam` | append/replace questions | Totals calculated, never stored |
| `Student` | mutable | Responses, running scores, exams taken |
"""

from .questions import Question, QuestionKind, Response
from .exams import Exam
from .students import Student

__all__ = [
    "Question",
    "QuestionKind",
    "Response",
    "Exam",
    "Student",
]
