"""
Module: grading.config

Purpose:
    Configuration dataclasses for the grading engine.
    Immutable configuration with validation on construction.

Key Classes:
    - ResubmissionPolicy: How a repeated answer affects the running score
    - GradingCurve: Letter grades and their numeric cutoffs
    - GradingConfig: Engine-wide settings

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - grading.manager: SystemManager
    - grading.statistics: letter grade lookup
    - core.utils.serialization: persisted curve and config
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class ResubmissionPolicy(str, Enum):
    """
    Effect of answering the same question more than once.

    ACCUMULATE: every submission adds its delta to the running score,
        so earlier contributions stay counted (the default).
    REPLACE: a submission first removes what the previous response for
        that question contributed.
    """
    ACCUMULATE = "accumulate"
    REPLACE = "replace"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GradingCurve:
    """
    Grading curve mapping numeric course grades to letters (immutable).

    Cutoffs are scanned in the order given; the first cutoff the grade
    meets decides the letter. Callers supply cutoffs in descending order.

    Attributes:
        letter_grades: Letters, e.g. ("A", "B", "C", "D", "F")
        cutoffs: Minimum numeric grade per letter, e.g. (90, 80, 70, 60, 0)

    Invariants:
        - len(letter_grades) == len(cutoffs)

    Example:
        >>> curve = GradingCurve.from_sequences(["A", "B", "F"], [90, 80, 0])
        >>> curve.letter_for(85.0)
        'B'
    """

    letter_grades: tuple[str, ...]
    cutoffs: tuple[float, ...]

    def __post_init__(self) -> None:
        """Validate curve on construction."""
        if len(self.letter_grades) != len(self.cutoffs):
            raise ValueError(
                f"letter_grades ({len(self.letter_grades)}) and cutoffs "
                f"({len(self.cutoffs)}) must have the same length"
            )

    @classmethod
    def from_sequences(
        cls, letter_grades: Sequence[str], cutoffs: Sequence[float]
    ) -> GradingCurve:
        return cls(tuple(letter_grades), tuple(float(c) for c in cutoffs))

    def letter_for(self, numeric_grade: float, default: str = "F") -> str:
        """
        Letter for ``numeric_grade``.

        Returns:
            The letter of the first cutoff met, or ``default`` if none is
        """
        for letter, cutoff in zip(self.letter_grades, self.cutoffs):
            if numeric_grade >= cutoff:
                return letter
        return default

    def to_dict(self) -> dict:
        return {"letter_grades": list(self.letter_grades), "cutoffs": list(self.cutoffs)}

    @classmethod
    def from_dict(cls, data: dict) -> GradingCurve:
        return cls.from_sequences(data["letter_grades"], data["cutoffs"])


@dataclass(frozen=True)
class GradingConfig:
    """
    Settings for the grading engine (immutable).

    Attributes:
        resubmission_policy: How repeated answers affect running scores
        min_score_sentinel: Starting value for the exam minimum scan;
            also what get_min_score returns for an empty roster
        default_letter: Letter given when no cutoff is met

    Invariants:
        - min_score_sentinel >= 0
    """

    resubmission_policy: ResubmissionPolicy = ResubmissionPolicy.ACCUMULATE
    min_score_sentinel: float = 1000.0
    default_letter: str = "F"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.min_score_sentinel < 0:
            raise ValueError(
                f"min_score_sentinel must be non-negative: {self.min_score_sentinel}"
            )
        if not self.default_letter:
            raise ValueError("default_letter must not be empty")

    def to_dict(self) -> dict:
        return {
            "resubmission_policy": self.resubmission_policy.value,
            "min_score_sentinel": self.min_score_sentinel,
            "default_letter": self.default_letter,
        }

    @classmethod
    def from_dict(cls, data: dict) -> GradingConfig:
        return cls(
            resubmission_policy=ResubmissionPolicy(
                data.get("resubmission_policy", ResubmissionPolicy.ACCUMULATE.value)
            ),
            min_score_sentinel=float(data.get("min_score_sentinel", 1000.0)),
            default_letter=data.get("default_letter", "F"),
        )
