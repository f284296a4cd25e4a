"""
Unit Tests for Schema Validation

Tests for basic and strict validation of persisted manager state.
"""

import pytest

from grading_toolkit.core.schemas.validator import (
    MANAGER_SCHEMA_VERSION,
    ValidationError,
    validate_manager_state,
)


@pytest.fixture
def valid_state() -> dict:
    return {
        "schema_version": MANAGER_SCHEMA_VERSION,
        "config": {"resubmission_policy": "accumulate", "min_score_sentinel": 1000.0,
                   "default_letter": "F"},
        "curve": None,
        "exams": [
            {
                "exam_id": 1,
                "title": "Quiz",
                "questions": [
                    {"question_number": 1, "text": "T", "points": 2.0,
                     "kind": "true_false", "correct_answer": True},
                    {"question_number": 2, "text": "F", "points": 3,
                     "kind": "fill_in_the_blanks", "correct_answer": ["a", "b"]},
                ],
            }
        ],
        "students": [
            {
                "name": "A",
                "exams_taken": [1],
                "exam_scores": [{"exam_id": 1, "score": 2.0}],
                "responses": [{"exam_id": 1, "question_number": 1, "response": True}],
            }
        ],
    }


class TestValidateManagerState:
    """Tests for validate_manager_state."""

    def test_validate_when_valid_then_passes_basic_and_strict(self, valid_state):
        """Well-formed state passes both levels."""
        validate_manager_state(valid_state)
        validate_manager_state(valid_state, strict=True)

    def test_validate_when_not_object_then_raises_error(self):
        with pytest.raises(ValidationError, match="must be an object"):
            validate_manager_state([])

    def test_validate_when_missing_fields_then_lists_them(self, valid_state):
        """Missing top-level fields are reported together."""
        del valid_state["exams"]
        with pytest.raises(ValidationError) as exc_info:
            validate_manager_state(valid_state)
        assert exc_info.value.errors == ["Missing field: exams"]

    def test_validate_when_wrong_version_then_raises_error(self, valid_state):
        valid_state["schema_version"] = 99
        with pytest.raises(ValidationError, match="Unsupported manager schema version"):
            validate_manager_state(valid_state)

    def test_validate_when_unknown_kind_then_raises_error(self, valid_state):
        valid_state["exams"][0]["questions"][0]["kind"] = "essay"
        with pytest.raises(ValidationError, match="Invalid question kind") as exc_info:
            validate_manager_state(valid_state)
        assert exc_info.value.path == "exams[0].questions[0].kind"

    def test_validate_when_true_false_answer_is_list_then_raises_error(self, valid_state):
        valid_state["exams"][0]["questions"][0]["correct_answer"] = ["True"]
        with pytest.raises(ValidationError, match="must be a boolean"):
            validate_manager_state(valid_state)

    def test_validate_when_duplicate_exam_then_raises_error(self, valid_state):
        valid_state["exams"].append(dict(valid_state["exams"][0]))
        with pytest.raises(ValidationError, match="Duplicate exam id"):
            validate_manager_state(valid_state)

    def test_validate_when_student_refers_to_unknown_exam_then_raises_error(self, valid_state):
        """Scores for exams that do not exist cannot be restored."""
        valid_state["students"][0]["exam_scores"].append({"exam_id": 7, "score": 1.0})
        with pytest.raises(ValidationError, match="unknown exams"):
            validate_manager_state(valid_state)

    def test_validate_when_score_not_number_and_strict_then_raises_error(self, valid_state):
        """Type errors only the JSON Schema catches need strict mode."""
        valid_state["students"][0]["exam_scores"][0]["score"] = "two"

        validate_manager_state(valid_state)  # basic checks pass
        with pytest.raises(ValidationError, match="Schema validation failed") as exc_info:
            validate_manager_state(valid_state, strict=True)
        assert exc_info.value.path == "students.0.exam_scores.0.score"

    def test_validate_when_score_entry_not_object_then_raises_error(self, valid_state):
        """Malformed score entries are reported, not left to fail later."""
        valid_state["students"][0]["exam_scores"] = [1]
        with pytest.raises(ValidationError, match="must be an object") as exc_info:
            validate_manager_state(valid_state)
        assert exc_info.value.path == "students[0].exam_scores[0]"

    def test_validate_when_response_entry_missing_fields_then_raises_error(self, valid_state):
        """Response entries need exam, question number and response."""
        valid_state["students"][0]["responses"] = [{"exam_id": 1}]
        with pytest.raises(ValidationError, match="missing required fields"):
            validate_manager_state(valid_state)

    def test_validate_when_exams_taken_not_list_then_raises_error(self, valid_state):
        """Per-student collections must be lists."""
        valid_state["students"][0]["exams_taken"] = 1
        with pytest.raises(ValidationError, match="exams_taken must be a list"):
            validate_manager_state(valid_state)
