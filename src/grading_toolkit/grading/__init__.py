"""
Grading Package

Answer submission, course-level aggregation and exam statistics.
"""

from .config import GradingConfig, GradingCurve, ResubmissionPolicy
from .manager import SystemManager

__all__ = [
    "GradingConfig",
    "GradingCurve",
    "ResubmissionPolicy",
    "SystemManager",
]
