"""Pydantic models for config.yaml validation."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from timi.config.defaults import QUIZ_DEFAULTS, SCORING_DEFAULTS


# ---------------------------------------------------------------------------
# Scoring Config
# ---------------------------------------------------------------------------

class ScoringConfig(BaseModel):
    mode: Literal["balanced", "legacy"] = SCORING_DEFAULTS["mode"]

    @model_validator(mode="before")
    @classmethod
    def normalize_mode(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("mode"), str):
            data = {**data, "mode": data["mode"].strip().lower()}
        return data


# ---------------------------------------------------------------------------
# Quiz Config
# ---------------------------------------------------------------------------

class QuizConfig(BaseModel):
    yes_label: str = QUIZ_DEFAULTS["yes_label"]
    no_label: str = QUIZ_DEFAULTS["no_label"]
    pad_missing_answers: bool = QUIZ_DEFAULTS["pad_missing_answers"]

    @model_validator(mode="after")
    def labels_differ(self) -> "QuizConfig":
        if self.yes_label.strip() == self.no_label.strip():
            raise ValueError(f"yes_label and no_label must differ, got {self.yes_label!r}")
        return self


# ---------------------------------------------------------------------------
# Top-Level Config
# ---------------------------------------------------------------------------

class TimiConfig(BaseModel):
    """Root configuration model for the Timi quiz."""

    version: int = 1
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    quiz: QuizConfig = Field(default_factory=QuizConfig)

    @model_validator(mode="before")
    @classmethod
    def coerce_none_to_defaults(cls, data: Any) -> Any:
        """YAML parses empty keys as None. Coerce to proper defaults."""
        if isinstance(data, dict):
            data = dict(data)
            for key in ("scoring", "quiz"):
                if key in data and data[key] is None:
                    data[key] = {}
        return data
