"""Scoring engine for the Timi type quiz.

Public API:
  compute_type        — 15 answers -> type code
  score_answers       — 15 answers -> ScoringResult (code + axis totals)
  compute_progress    — answers so far -> 0-100
  validate_answers    — defensive answer-sequence check
  get_question_weight — weight entries for a question position
"""

from timi.engine.scoring import (
    AxisScores,
    LengthMismatchError,
    ScoringMode,
    ScoringResult,
    compute_progress,
    compute_type,
    score_answers,
    validate_answers,
)
from timi.engine.weights import AXIS_PAIRS, WEIGHT_TABLE, AxisWeightEntry, get_question_weight

__all__ = [
    "AXIS_PAIRS",
    "AxisScores",
    "AxisWeightEntry",
    "LengthMismatchError",
    "ScoringMode",
    "ScoringResult",
    "WEIGHT_TABLE",
    "compute_progress",
    "compute_type",
    "get_question_weight",
    "score_answers",
    "validate_answers",
]
