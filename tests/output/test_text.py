"""
Unit Tests for Text Rendering

Tests for point formatting, answer rendering and listings.
"""

from grading_toolkit.core.models.exams import Exam
from grading_toolkit.core.models.questions import Question
from grading_toolkit.output.text import (
    format_answer,
    format_points,
    render_course_grades,
    render_grading_report,
    render_key,
)


class TestFormatting:
    """Tests for format_points/format_answer."""

    def test_format_points_when_int_then_trailing_zero(self):
        assert format_points(5) == "5.0"

    def test_format_points_when_fraction_then_shortest_repr(self):
        assert format_points(2.5) == "2.5"

    def test_format_points_when_large_then_plain_decimal(self):
        """Large values keep Python's float repr rather than exponent notation."""
        assert format_points(1e7) == "10000000.0"

    def test_format_answer_when_true_false_then_capitalized_word(self):
        assert format_answer(Question.true_false(1, "T", 1, True)) == "True"
        assert format_answer(Question.true_false(1, "T", 1, False)) == "False"

    def test_format_answer_when_choice_then_sorted_brackets(self):
        """Multi-entry answers render sorted, regardless of input order."""
        q = Question.multiple_choice(1, "Fruit", 1, ["banana", "apple"])
        assert format_answer(q) == "[apple, banana]"

    def test_format_answer_when_single_entry_then_single_brackets(self):
        q = Question.fill_in_the_blanks(1, "Capital of France", 1, ["Paris"])
        assert format_answer(q) == "[Paris]"


class TestRendering:
    """Tests for render_key/render_grading_report/render_course_grades."""

    def test_render_key_when_added_out_of_order_then_number_order(self):
        exam = Exam(1, "Quiz")
        exam.add_question(Question.fill_in_the_blanks(2, "Colors", 3, ["red", "blue"]))
        exam.add_question(Question.true_false(1, "Sky is blue", 1.5, True))

        assert render_key(exam) == (
            "Question Text: Sky is blue\n"
            "Points: 1.5\n"
            "Correct Answer: True\n"
            "Question Text: Colors\n"
            "Points: 3.0\n"
            "Correct Answer: [blue, red]\n"
        )

    def test_render_key_when_no_questions_then_empty(self):
        assert render_key(Exam(1, "Empty")) == ""

    def test_render_grading_report_when_no_rows_then_final_line_only(self):
        assert render_grading_report([], 0.0, 0.0) == "Final Score: 0.0 out of 0.0"

    def test_render_course_grades_when_rows_then_one_line_each(self):
        rows = [("Adams,Amy", 92.5, "A"), ("Smith,John", 71.0, "C")]
        assert render_course_grades(rows) == "Adams,Amy 92.5 A\nSmith,John 71.0 C\n"
