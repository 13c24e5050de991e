"""QuizSession -- answers collected while a user walks through the quiz.

The scoring engine only accepts complete 15-answer sequences.  Preparing
that sequence (dropping extras, padding unanswered questions with "no")
is the caller's job, and this is the caller.

Usage::

    session = QuizSession()
    for question in QUESTIONS:
        session.answer(ask(question))
    type_code = session.finish()
"""

from __future__ import annotations

import logging
from typing import Any

from timi.config.defaults import QUESTION_COUNT, QUIZ_DEFAULTS, RETRY_MESSAGE
from timi.engine.scoring import (
    ScoringMode,
    ScoringResult,
    compute_progress,
    score_answers,
    validate_answers,
)
from timi.quiz.questions import QUESTIONS, Question

logger = logging.getLogger(__name__)

__all__ = ["QuizCompleteError", "QuizSession", "RETRY_MESSAGE"]


class QuizCompleteError(Exception):
    """All questions are already answered."""


class QuizSession:
    """Ordered answers for one quiz run.  Not shared between users."""

    def __init__(
        self,
        answers: list[bool] | None = None,
        mode: ScoringMode | str = ScoringMode.BALANCED,
        pad_missing_answers: bool = QUIZ_DEFAULTS["pad_missing_answers"],
    ) -> None:
        answers = list(answers or [])
        if not validate_answers(answers):
            raise ValueError(
                f"answers must be at most {QUESTION_COUNT} bools, got {answers!r}"
            )
        self._answers: list[bool] = answers
        self.mode = ScoringMode(mode)
        self.pad_missing_answers = pad_missing_answers

    @classmethod
    def from_config(cls, config: Any, answers: list[bool] | None = None) -> "QuizSession":
        """Build a session from a ``TimiConfig``."""
        return cls(
            answers=answers,
            mode=config.scoring.mode,
            pad_missing_answers=config.quiz.pad_missing_answers,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def answers(self) -> list[bool]:
        return list(self._answers)

    @property
    def current_index(self) -> int:
        """0-based index of the next question to answer."""
        return len(self._answers)

    @property
    def current_question(self) -> Question | None:
        if self.is_complete:
            return None
        return QUESTIONS[self.current_index]

    @property
    def is_complete(self) -> bool:
        return len(self._answers) >= QUESTION_COUNT

    @property
    def progress(self) -> int:
        return compute_progress(self._answers)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def answer(self, value: bool) -> None:
        """Record the answer to the current question and move forward."""
        if type(value) is not bool:
            raise TypeError(f"answer must be a bool, got {type(value).__name__}")
        if self.is_complete:
            raise QuizCompleteError(f"all {QUESTION_COUNT} questions are answered")
        self._answers.append(value)
        logger.debug("Q%d answered %s (%d%%)", self.current_index, value, self.progress)

    def back(self) -> None:
        """Step back one question, dropping its answer.  No-op at the start."""
        if self._answers:
            self._answers.pop()

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def final_answers(self) -> list[bool]:
        """Answers trimmed to QUESTION_COUNT, padded with False if allowed."""
        final = self._answers[:QUESTION_COUNT]
        missing = QUESTION_COUNT - len(final)
        if missing and self.pad_missing_answers:
            logger.warning(
                "Answer count %d != question count %d, padding %d with False",
                len(final), QUESTION_COUNT, missing,
            )
            final = final + [False] * missing
        return final

    def result(self) -> ScoringResult:
        """Score the session.  LengthMismatchError propagates when unpadded."""
        return score_answers(self.final_answers(), self.mode)

    def finish(self) -> str:
        """Score the session and return the type code."""
        return self.result().type_code
