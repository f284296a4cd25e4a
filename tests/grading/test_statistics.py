"""
Unit Tests for Grading Statistics

Tests for the pure aggregation functions.
"""

import pytest

from grading_toolkit.core.errors import CurveNotConfiguredError, ExamNotFoundError
from grading_toolkit.core.models.exams import Exam
from grading_toolkit.core.models.questions import Question
from grading_toolkit.core.models.students import Student
from grading_toolkit.grading import statistics
from grading_toolkit.grading.config import GradingCurve


def _exam(exam_id: int, points: float) -> Exam:
    exam = Exam(exam_id, f"Exam {exam_id}")
    exam.add_question(Question.true_false(1, "T", points, True))
    return exam


class TestCourseNumericGrade:
    """Tests for course_numeric_grade."""

    def test_numeric_when_two_exams_then_average_percentage(self):
        """45/50 and 18/20 are both 90%."""
        exams = {1: _exam(1, 50), 2: _exam(2, 20)}
        s = Student("A")
        s.update_exam_score(exams[1], 45.0)
        s.update_exam_score(exams[2], 18.0)

        assert statistics.course_numeric_grade(s, exams) == 90.0

    def test_numeric_when_uneven_percentages_then_unweighted_mean(self):
        """Exam size does not weight the average."""
        exams = {1: _exam(1, 100), 2: _exam(2, 10)}
        s = Student("A")
        s.update_exam_score(exams[1], 100.0)
        s.update_exam_score(exams[2], 5.0)

        assert statistics.course_numeric_grade(s, exams) == 75.0

    def test_numeric_when_score_for_unknown_exam_then_raises_not_found(self):
        s = Student("A")
        s.exam_scores[7] = 3.0
        with pytest.raises(ExamNotFoundError):
            statistics.course_numeric_grade(s, {})


class TestCourseLetterGrade:
    """Tests for course_letter_grade."""

    @pytest.fixture
    def curve(self) -> GradingCurve:
        return GradingCurve.from_sequences(["A", "B", "F"], [90, 80, 0])

    def test_letter_when_between_cutoffs_then_lower_letter(self, curve):
        assert statistics.course_letter_grade(85.0, curve) == "B"

    def test_letter_when_exactly_on_cutoff_then_that_letter(self, curve):
        assert statistics.course_letter_grade(90.0, curve) == "A"

    def test_letter_when_below_every_cutoff_then_default(self):
        curve = GradingCurve.from_sequences(["A", "B"], [90, 80])
        assert statistics.course_letter_grade(50.0, curve) == "F"

    def test_letter_when_curve_missing_then_raises_error(self):
        with pytest.raises(CurveNotConfiguredError):
            statistics.course_letter_grade(50.0, None)


class TestExamStatistics:
    """Tests for max_score/min_score/average_score."""

    def test_all_when_scores_given_then_expected_values(self):
        exam = _exam(1, 100)
        a, b, c = Student("a"), Student("b"), Student("c")
        a.update_exam_score(exam, 90.0)
        b.update_exam_score(exam, 60.0)
        roster = [a, b, c]

        assert statistics.max_score(1, roster) == 90.0
        assert statistics.min_score(1, roster) == 0.0
        assert statistics.average_score(1, roster) == 50.0

    def test_min_when_custom_sentinel_and_empty_then_sentinel(self):
        assert statistics.min_score(1, [], sentinel=500.0) == 500.0
