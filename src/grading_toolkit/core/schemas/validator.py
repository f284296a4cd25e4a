"""
Schema Validation Utilities

Validates persisted manager state before it is turned back into models.

Two levels:
- Basic checks (always): required fields, schema version, question kinds,
  and that every score/response/exam-taken entry refers to a known exam.
- Strict checks (``strict=True``): full JSON Schema validation with
  ``jsonschema`` against ``manager.schema.json``.

Any failure raises ValidationError, which is how corrupt state files are
reported.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Schema version constants
MANAGER_SCHEMA_VERSION = 1


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_manager_state(data: Any, *, strict: bool = False) -> None:
    """
    Validate serialized manager state.

    Args:
        data: Decoded JSON document
        strict: If True, also validate against the JSON Schema

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Manager state must be an object, got {type(data).__name__}"
        )

    required = ["schema_version", "exams", "students"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    version = data.get("schema_version")
    if version != MANAGER_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported manager schema version: {version} (expected {MANAGER_SCHEMA_VERSION})",
            path="schema_version"
        )

    exams = data["exams"]
    if not isinstance(exams, list):
        raise ValidationError("exams must be a list", path="exams")

    exam_ids = set()
    for i, exam in enumerate(exams):
        path = f"exams[{i}]"
        _require(exam, ["exam_id", "title", "questions"], path)
        if exam["exam_id"] in exam_ids:
            raise ValidationError(f"Duplicate exam id: {exam['exam_id']}", path=f"{path}.exam_id")
        exam_ids.add(exam["exam_id"])
        for j, question in enumerate(exam["questions"]):
            _validate_question(question, f"{path}.questions[{j}]")

    students = data["students"]
    if not isinstance(students, list):
        raise ValidationError("students must be a list", path="students")

    names = set()
    for i, student in enumerate(students):
        path = f"students[{i}]"
        _require(student, ["name", "exams_taken", "exam_scores", "responses"], path)
        if student["name"] in names:
            raise ValidationError(f"Duplicate student: {student['name']!r}", path=f"{path}.name")
        names.add(student["name"])

        for field in ("exams_taken", "exam_scores", "responses"):
            if not isinstance(student[field], list):
                raise ValidationError(f"{field} must be a list", path=f"{path}.{field}")
        for j, entry in enumerate(student["exam_scores"]):
            _require(entry, ["exam_id", "score"], f"{path}.exam_scores[{j}]")
        for j, entry in enumerate(student["responses"]):
            _require(entry, ["exam_id", "question_number", "response"], f"{path}.responses[{j}]")

        referenced = list(student["exams_taken"])
        referenced += [entry["exam_id"] for entry in student["exam_scores"]]
        referenced += [entry["exam_id"] for entry in student["responses"]]
        unknown = sorted({str(e) for e in referenced if e not in exam_ids})
        if unknown:
            raise ValidationError(
                f"Student {student['name']!r} refers to unknown exams: {unknown}",
                path=path
            )

    # Full schema validation in strict mode
    if strict:
        schema = _load_schema("manager")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            )


def _require(data: Any, fields: list[str], path: str) -> None:
    if not isinstance(data, dict):
        raise ValidationError(f"{path} must be an object", path=path)
    missing = [f for f in fields if f not in data]
    if missing:
        raise ValidationError(
            f"{path} missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing]
        )


def _validate_question(data: Any, path: str) -> None:
    """Validate a question entry."""
    _require(data, ["question_number", "text", "points", "kind", "correct_answer"], path)

    kind = data.get("kind")
    if kind not in ("true_false", "multiple_choice", "fill_in_the_blanks"):
        raise ValidationError(
            f"Invalid question kind: {kind!r}",
            path=f"{path}.kind"
        )

    points = data.get("points")
    if isinstance(points, bool) or not isinstance(points, (int, float)) or points < 0:
        raise ValidationError(
            f"Invalid points: {points} (must be a non-negative number)",
            path=f"{path}.points"
        )

    answer = data.get("correct_answer")
    if kind == "true_false":
        if not isinstance(answer, bool):
            raise ValidationError(
                f"True/false answer must be a boolean: {answer!r}",
                path=f"{path}.correct_answer"
            )
    elif not isinstance(answer, list) or not answer:
        raise ValidationError(
            f"{kind} answer must be a non-empty list: {answer!r}",
            path=f"{path}.correct_answer"
        )
