"""
Utils Package

Serialization and utility functions.
"""

from .serialization import (
    serialize_manager,
    serialize_student,
    deserialize_manager,
    save_manager_json,
    load_manager_json,
)

__all__ = [
    "serialize_manager",
    "serialize_student",
    "deserialize_manager",
    "save_manager_json",
    "load_manager_json",
]
