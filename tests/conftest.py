"""Shared test fixtures for Timi.

Answer-sequence fixtures for the scoring engine and a temp-dir config.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from timi.config.schema import TimiConfig

# ---------------------------------------------------------------------------
# Answer sequences
# ---------------------------------------------------------------------------

@pytest.fixture
def all_yes() -> list[bool]:
    return [True] * 15


@pytest.fixture
def all_no() -> list[bool]:
    return [False] * 15


@pytest.fixture
def intj_answers() -> list[bool]:
    """Mixed pattern leaning I, N, T, J (regression fixture)."""
    return [
        False, False, False,  # Q1-3: not extraverted
        True,                 # Q4: thinks alone first (I, J)
        True, True,           # Q5-6: intuition
        True, True,           # Q7-8: thinking
        False,                # Q9: not harmony-first
        True,                 # Q10: intuition
        False, False,         # Q11-12: not feeling
        False,                # Q13: not flexible
        False,                # Q14: not sensing
        False,                # Q15: deadline over polish
    ]


@pytest.fixture
def ns_tie_answers() -> list[bool]:
    """N and S totals are exactly equal (Q5 yes, Q6 no, Q10 yes, Q14 yes)."""
    answers = [False] * 15
    answers[4] = True   # Q5  N +1
    answers[5] = False  # Q6  N -1
    answers[9] = True   # Q10 N +1
    answers[13] = True  # Q14 S +1
    return answers


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Path for a temporary timi.yaml."""
    return tmp_path / "timi.yaml"


@pytest.fixture
def test_config() -> TimiConfig:
    return TimiConfig()
