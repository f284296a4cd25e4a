"""
Module: output.pdf

Purpose:
    Export answer keys and grading reports as printable PDFs.

Key Functions:
    - render_text_pdf(): Lay out rendered text lines on A4 pages
    - render_key_pdf(): Answer key for an exam
    - render_grading_report_pdf(): One student's grading report

Dependencies:
    - reportlab: PDF generation
    - output.text: the text being laid out
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from .text import render_key

if TYPE_CHECKING:
    from ..core.models.exams import Exam
    from ..grading.manager import SystemManager

logger = logging.getLogger(__name__)

# Constants
A4_WIDTH, A4_HEIGHT = A4
MARGIN = 50
LINE_HEIGHT = 18
TITLE_FONT = ("Helvetica-Bold", 14)
BODY_FONT = ("Helvetica", 11)


def render_text_pdf(text: str, output_path: Path, title: str = "") -> int:
    """
    Write ``text`` to a PDF, one text line per PDF line, paginating as needed.

    Args:
        text: Text to lay out (newline separated)
        output_path: Path to write the PDF
        title: Optional heading drawn at the top of the first page

    Returns:
        Number of pages written

    Example:
        >>> render_text_pdf(manager.get_key(10), Path("out/key.pdf"), "Midterm key")
        1
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)

    c = canvas.Canvas(str(output_path), pagesize=A4)
    y = A4_HEIGHT - MARGIN
    pages = 1

    if title:
        c.setFont(*TITLE_FONT)
        c.drawString(MARGIN, y, title)
        y -= LINE_HEIGHT * 2

    c.setFont(*BODY_FONT)
    for line in text.splitlines():
        if y < MARGIN:
            c.showPage()
            c.setFont(*BODY_FONT)
            y = A4_HEIGHT - MARGIN
            pages += 1
        c.drawString(MARGIN, y, line)
        y -= LINE_HEIGHT

    c.showPage()
    c.save()

    logger.info(f"Wrote {pages} page(s) to {output_path}")
    return pages


def render_key_pdf(exam: Exam, output_path: Path) -> int:
    """Write the answer key of ``exam`` to a PDF."""
    return render_text_pdf(
        render_key(exam), output_path, title=f"Answer Key: {exam.title}"
    )


def render_grading_report_pdf(
    manager: SystemManager,
    student_name: str,
    exam_id: int,
    output_path: Path,
) -> int:
    """
    Write a student's grading report for an exam to a PDF.

    Raises:
        StudentNotFoundError / ExamNotFoundError: As for get_grading_report
    """
    report = manager.get_grading_report(student_name, exam_id)
    exam = manager.get_exam(exam_id)
    return render_text_pdf(
        report, output_path, title=f"{exam.title}: {student_name}"
    )
