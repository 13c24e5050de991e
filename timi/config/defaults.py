"""Default values for the quiz and the scoring engine.

The weight table itself is not configurable; it lives in
``timi.engine.weights`` as a read-only constant.
"""

# ---------------------------------------------------------------------------
# Quiz shape
# ---------------------------------------------------------------------------
QUESTION_COUNT = 15

# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------
SCORING_DEFAULTS = {
    "mode": "balanced",  # "balanced" or "legacy"
}

# ---------------------------------------------------------------------------
# Quiz session / prompts
# ---------------------------------------------------------------------------
QUIZ_DEFAULTS = {
    "yes_label": "예",
    "no_label": "아니오",
    "pad_missing_answers": True,  # pad short sessions with "아니오" before scoring
}

RETRY_MESSAGE = "결과 분석 중 오류가 발생했습니다. 다시 시도해주세요."
