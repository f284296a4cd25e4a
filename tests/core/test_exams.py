"""
Unit Tests for Exam Model

Tests for keyed question storage, lookup and calculated totals.
"""

import logging

import pytest

from grading_toolkit.core.errors import NotFoundError, QuestionNotFoundError
from grading_toolkit.core.models.exams import Exam
from grading_toolkit.core.models.questions import Question


class TestExam:
    """Tests for Exam."""

    @pytest.fixture
    def exam(self) -> Exam:
        exam = Exam(1, "Quiz")
        exam.add_question(Question.true_false(1, "T1", 2, True))
        exam.add_question(Question.multiple_choice(2, "M2", 3.5, ["a"]))
        return exam

    def test_total_score_when_questions_added_then_sums_points(self, exam):
        """total_score should be calculated from questions."""
        assert exam.total_score == 5.5

    def test_total_score_when_empty_then_zero(self):
        """An exam with no questions totals 0.0."""
        assert Exam(2, "Empty").total_score == 0.0

    def test_get_question_when_present_then_returns_it(self, exam):
        """Lookup is by question number, not position."""
        assert exam.get_question(2).text == "M2"

    def test_get_question_when_missing_then_raises_not_found(self, exam):
        """Unknown numbers should raise QuestionNotFoundError."""
        with pytest.raises(QuestionNotFoundError) as exc_info:
            exam.get_question(7)
        assert exc_info.value.question_number == 7
        assert isinstance(exc_info.value, NotFoundError)

    def test_questions_when_added_out_of_order_then_sorted_by_number(self):
        """Insertion order should not affect iteration order."""
        exam = Exam(3, "Shuffled")
        exam.add_question(Question.true_false(3, "third", 1, True))
        exam.add_question(Question.true_false(1, "first", 1, True))
        exam.add_question(Question.true_false(2, "second", 1, True))

        assert [q.text for q in exam.questions] == ["first", "second", "third"]

    def test_questions_when_numbers_have_gaps_then_lookup_still_correct(self):
        """Gaps in numbering should not misalign lookups."""
        exam = Exam(4, "Gaps")
        exam.add_question(Question.true_false(1, "one", 1, True))
        exam.add_question(Question.true_false(5, "five", 1, True))

        assert exam.get_question(5).text == "five"
        assert [q.question_number for q in exam] == [1, 5]
        assert len(exam) == 2

    def test_add_question_when_number_exists_then_replaces_and_warns(self, exam, caplog):
        """Re-adding a number should overwrite the earlier question."""
        with caplog.at_level(logging.WARNING):
            exam.add_question(Question.true_false(1, "T1 v2", 4, False))

        assert exam.get_question(1).text == "T1 v2"
        assert exam.total_score == 7.5
        assert "replacing question #1" in caplog.text

    def test_from_dict_when_serialized_then_equal(self, exam):
        """to_dict/from_dict should preserve questions and title."""
        data = exam.to_dict()
        assert "total_score" not in data
        assert Exam.from_dict(data) == exam
