"""
Grading Core Package

Shared data models, error types, schemas and persistence for the grading
toolkit.

**DESIGN NOTES:**

1. **Tagged Questions**
   - One frozen ``Question`` record with a ``QuestionKind`` tag
   - Scoring rules selected by explicit dispatch on the tag

2. **Calculated Totals (Never Stored)**
   - ``Exam.total_score`` is always summed from the questions

3. **Keyed Question Storage**
   - Questions are keyed by number and iterated in order, so gaps or
     out-of-order insertion cannot misalign lookups

4. **Structured Persistence**
   - State is saved as validated JSON, not an object-graph dump
"""

from .models import Exam, Question, QuestionKind, Student

__all__ = [
    "Exam",
    "Question",
    "QuestionKind",
    "Student",
]
