"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_manager_state,
    ValidationError,
    MANAGER_SCHEMA_VERSION,
)

__all__ = [
    "validate_manager_state",
    "ValidationError",
    "MANAGER_SCHEMA_VERSION",
]
