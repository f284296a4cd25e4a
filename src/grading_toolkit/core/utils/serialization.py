"""
Serialization Utilities

Explicit, structured JSON persistence for the whole manager state.

Layout (schema_version 1)::

    {
      "schema_version": 1,
      "config":   {"resubmission_policy": ..., "min_score_sentinel": ..., ...},
      "curve":    null | {"letter_grades": [...], "cutoffs": [...]},
      "exams":    [{"exam_id", "title", "questions": [...]}],
      "students": [{"name", "exams_taken": [ids],
                    "exam_scores": [{"exam_id", "score"}],
                    "responses":   [{"exam_id", "question_number", "response"}]}]
    }

- Exams are stored once; students refer to them by id
- Exam totals are NOT stored - always calculated on load
- Running scores ARE stored, since they cannot be rebuilt from responses
- Saving is atomic: a temporary file is written then moved into place
- Loading builds a brand new manager, so a failed load never touches an
  existing one
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from ..errors import PersistenceError, QuestionNotFoundError, ResponseTypeError
from ..models.exams import Exam
from ..models.students import Student
from ..schemas.validator import MANAGER_SCHEMA_VERSION, ValidationError, validate_manager_state
from ...grading.config import GradingConfig, GradingCurve
from ...grading.manager import SystemManager

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Manager Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_manager(manager: SystemManager) -> dict[str, Any]:
    """
    Serialize a SystemManager to a dictionary.

    The output can be written to JSON and will pass schema validation.

    Args:
        manager: Manager to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    return {
        "schema_version": MANAGER_SCHEMA_VERSION,
        "config": manager.config.to_dict(),
        "curve": manager.curve.to_dict() if manager.curve else None,
        "exams": [manager.exams[exam_id].to_dict() for exam_id in sorted(manager.exams)],
        "students": [
            serialize_student(manager.students[name]) for name in sorted(manager.students)
        ],
    }


def serialize_student(student: Student) -> dict[str, Any]:
    """Serialize a Student; exams are referenced by id only."""
    responses = []
    for exam_id in sorted(student.responses):
        for question_number, response in sorted(student.responses[exam_id].items()):
            responses.append({
                "exam_id": exam_id,
                "question_number": question_number,
                "response": response if isinstance(response, bool) else list(response),
            })

    return {
        "name": student.name,
        "exams_taken": sorted(student.exams_taken),
        "exam_scores": [
            {"exam_id": exam_id, "score": score}
            for exam_id, score in sorted(student.exam_scores.items())
        ],
        "responses": responses,
    }


def deserialize_manager(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = True,
) -> SystemManager:
    """
    Deserialize a SystemManager from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate before deserializing
        strict: Whether validation includes the full JSON Schema

    Returns:
        New SystemManager instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data cannot be turned into models
    """
    if validate:
        validate_manager_state(data, strict=strict)

    config_data = data.get("config") or {}
    manager = SystemManager(config=GradingConfig.from_dict(config_data))

    if data.get("curve"):
        manager.curve = GradingCurve.from_dict(data["curve"])

    for exam_data in data["exams"]:
        exam = Exam.from_dict(exam_data)
        manager.exams[exam.exam_id] = exam

    for student_data in data["students"]:
        student = _deserialize_student(student_data, manager.exams)
        manager.students[student.name] = student

    return manager


def _deserialize_student(data: dict[str, Any], exams: dict[int, Exam]) -> Student:
    """
    Deserialize a Student, linking exams taken to the shared Exam objects.

    Raises:
        ValidationError: If a response refers to an unknown question or
            does not fit its question's kind
    """
    student = Student(data["name"])
    for exam_id in data.get("exams_taken", []):
        student.add_to_exams_taken(exams[exam_id])
    for entry in data.get("exam_scores", []):
        student.exam_scores[entry["exam_id"]] = float(entry["score"])
    for entry in data.get("responses", []):
        exam_id, question_number = entry["exam_id"], entry["question_number"]
        try:
            question = exams[exam_id].get_question(question_number)
            question.check_response(entry["response"])
        except (QuestionNotFoundError, ResponseTypeError) as e:
            raise ValidationError(
                f"Invalid response for student {student.name!r}: {e}",
                path=f"responses.{exam_id}.{question_number}",
                errors=[str(e)]
            ) from e
        student.add_response(exam_id, question_number, entry["response"])
    return student


# ─────────────────────────────────────────────────────────────────────────────
# File Operations
# ─────────────────────────────────────────────────────────────────────────────

def save_manager_json(manager: SystemManager, path: Path) -> None:
    """
    Save manager state to a JSON file.

    The state is written to a temporary file in the same directory and
    then moved over ``path``, so readers never see a partial file.

    Args:
        manager: Manager to save
        path: Output path

    Raises:
        PersistenceError: On any I/O failure
    """
    data = serialize_manager(manager)

    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.",
            suffix=".tmp", delete=False,
        ) as f:
            tmp_name = f.name
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise PersistenceError(f"Failed to save manager to {path}: {e}", path=str(path)) from e

    logger.info(
        f"Saved manager ({len(manager.exams)} exams, {len(manager.students)} students) to {path}"
    )


def load_manager_json(path: Path, *, strict: bool = True) -> SystemManager:
    """
    Load manager state from a JSON file.

    Args:
        path: Path written by save_manager_json
        strict: Whether to run full JSON Schema validation

    Returns:
        New SystemManager instance

    Raises:
        PersistenceError: If the file cannot be read
        ValidationError: If the content is not valid manager state
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise PersistenceError(f"Failed to read manager from {path}: {e}", path=str(path)) from e

    try:
        data = json.loads(text)
        manager = deserialize_manager(data, validate=True, strict=strict)
    except json.JSONDecodeError as e:
        raise ValidationError(
            f"Corrupt manager file: {e}",
            path=str(path),
            errors=[str(e)]
        ) from e
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(
            f"Invalid manager state in {path}: {e}",
            path=str(path),
            errors=[str(e)]
        ) from e

    logger.info(
        f"Restored manager ({len(manager.exams)} exams, {len(manager.students)} students) "
        f"from {path}"
    )
    return manager
