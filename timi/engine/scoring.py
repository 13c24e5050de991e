"""Scoring engine: 15 yes/no answers -> 4-letter type code.

Functions:
  compute_type      — answers -> type code (raises LengthMismatchError)
  score_answers     — answers -> ScoringResult (type code + axis totals)
  compute_progress  — answers so far -> 0-100 percentage
  validate_answers  — defensive check on untrusted answer sequences

Scoring walks the fixed weight table.  For each entry of question ``q``::

    signed = (+1 if answers[q - 1] else -1) * entry.weight

In BALANCED mode (default) ``signed`` is added to the entry's letter,
primary or opposite.  In LEGACY mode the opposite letter (I, S, F, J)
receives ``abs(signed)`` instead, so it only ever grows.  Each pair then
picks the strictly greater total; ties go to the primary letter.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from timi.config.defaults import QUESTION_COUNT
from timi.engine.weights import AXIS_LETTERS, AXIS_PAIRS, WEIGHT_TABLE

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors & modes
# ---------------------------------------------------------------------------

class LengthMismatchError(ValueError):
    """Answer sequence length is not exactly QUESTION_COUNT."""

    def __init__(self, actual: int, expected: int = QUESTION_COUNT) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(f"{expected}개의 답변이 모두 필요합니다. (received {actual})")


class ScoringMode(Enum):
    """How an answer on an opposite-letter question is accumulated."""
    BALANCED = "balanced"   # signed for every letter
    LEGACY = "legacy"       # abs() for I/S/F/J


# ---------------------------------------------------------------------------
# Accumulators
# ---------------------------------------------------------------------------

@dataclass
class AxisScores:
    """Eight running totals, one per axis letter.  Lives for one scoring call."""

    totals: dict[str, float] = field(
        default_factory=lambda: {letter: 0.0 for letter in AXIS_LETTERS}
    )

    def add(self, axis: str, amount: float) -> None:
        self.totals[axis] += amount

    def __getitem__(self, axis: str) -> float:
        return self.totals[axis]

    def pick(self, pair: tuple[str, str]) -> str:
        """Strictly greater letter wins; a tie keeps the primary letter."""
        primary, opposite = pair
        return primary if self.totals[primary] >= self.totals[opposite] else opposite

    def is_tied(self, pair: tuple[str, str]) -> bool:
        primary, opposite = pair
        return self.totals[primary] == self.totals[opposite]

    def type_code(self) -> str:
        return "".join(self.pick(pair) for pair in AXIS_PAIRS)

    def to_dict(self) -> dict[str, float]:
        return dict(self.totals)


@dataclass(frozen=True)
class ScoringResult:
    """Type code plus the axis totals that produced it."""

    type_code: str
    scores: AxisScores
    mode: ScoringMode = ScoringMode.BALANCED

    def to_dict(self) -> dict[str, Any]:
        return {
            "type_code": self.type_code,
            "scores": self.scores.to_dict(),
            "mode": self.mode.value,
        }


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

def score_answers(
    answers: Sequence[bool],
    mode: ScoringMode | str = ScoringMode.BALANCED,
) -> ScoringResult:
    """Score a complete answer sequence.

    Raises LengthMismatchError unless exactly QUESTION_COUNT answers are
    given.  No padding or truncation happens here.
    """
    if len(answers) != QUESTION_COUNT:
        raise LengthMismatchError(len(answers))
    mode = ScoringMode(mode)

    scores = AxisScores()
    for index, answer in enumerate(answers):
        value = 1 if answer else -1
        for entry in WEIGHT_TABLE.get(index + 1, ()):
            signed = value * entry.weight
            if mode is ScoringMode.LEGACY and not entry.is_primary:
                signed = abs(signed)
            scores.add(entry.axis, signed)

    type_code = scores.type_code()
    for pair in AXIS_PAIRS:
        if scores.is_tied(pair):
            logger.debug("Tie on %s/%s, defaulting to %s", pair[0], pair[1], pair[0])
    logger.debug("Scored %s (%s): %s", type_code, mode.value, scores.to_dict())
    return ScoringResult(type_code=type_code, scores=scores, mode=mode)


def compute_type(
    answers: Sequence[bool],
    mode: ScoringMode | str = ScoringMode.BALANCED,
) -> str:
    """Return the 4-letter type code (``^[EI][NS][TF][PJ]$``) for 15 answers."""
    return score_answers(answers, mode).type_code


# ---------------------------------------------------------------------------
# Quiz helpers
# ---------------------------------------------------------------------------

def compute_progress(answers: Sequence[Any]) -> int:
    """Percentage of questions answered, rounded half-up (5 answers -> 33)."""
    return int(len(answers) * 100 / QUESTION_COUNT + 0.5)


def validate_answers(candidate: Any) -> bool:
    """True iff ``candidate`` is a list/tuple of at most 15 real bools.

    ``1``/``0``, strings and None are rejected.  Never raises.
    """
    if not isinstance(candidate, (list, tuple)):
        return False
    if len(candidate) > QUESTION_COUNT:
        return False
    return all(type(answer) is bool for answer in candidate)
