"""
Unit Tests for PDF Export

Tests for laying out keys and reports with reportlab.
"""

from grading_toolkit.output.pdf import render_grading_report_pdf, render_key_pdf, render_text_pdf


class TestRenderTextPdf:
    """Tests for render_text_pdf."""

    def test_render_when_short_text_then_single_page_pdf(self, tmp_path):
        out = tmp_path / "nested" / "short.pdf"

        pages = render_text_pdf("line one\nline two", out, title="Title")

        assert pages == 1
        assert out.read_bytes().startswith(b"%PDF")

    def test_render_when_long_text_then_paginates(self, tmp_path):
        """42 lines fit on an A4 page without a title."""
        text = "\n".join(f"line {i}" for i in range(120))

        pages = render_text_pdf(text, tmp_path / "long.pdf")

        assert pages == 3


class TestManagerExports:
    """Tests for key and report exports."""

    def test_render_key_pdf_when_exam_given_then_file_written(self, midterm_manager, tmp_path):
        out = tmp_path / "key.pdf"
        assert render_key_pdf(midterm_manager.get_exam(10), out) == 1
        assert out.exists()

    def test_render_report_pdf_when_answered_then_file_written(self, midterm_manager, tmp_path):
        midterm_manager.answer_true_false_question("Smith,John", 10, 1, False)
        out = tmp_path / "report.pdf"

        assert render_grading_report_pdf(midterm_manager, "Smith,John", 10, out) == 1
        assert out.exists()
