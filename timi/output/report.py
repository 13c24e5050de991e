"""Plain-text result report.

Presentation metadata (nicknames, descriptions, imagery) belongs to the
UI.  The report only shows the type code, the route key the UI looks the
code up under, and optionally the per-axis totals.
"""

from __future__ import annotations

import re

from timi.engine.scoring import ScoringResult
from timi.engine.weights import AXIS_PAIRS

TYPE_CODE_PATTERN = re.compile(r"^[EI][NS][TF][PJ]$")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def result_path(type_code: str) -> str:
    """Return the ``/result/<CODE>`` route for a type code."""
    code = type_code.strip().upper()
    if not TYPE_CODE_PATTERN.match(code):
        raise ValueError(f"Not a type code: {type_code!r}")
    return f"/result/{code}"


def _axis_line(result: ScoringResult, pair: tuple[str, str]) -> str:
    primary, opposite = pair
    scores = result.scores
    winner = scores.pick(pair)
    tie = "  (tie)" if scores.is_tied(pair) else ""
    return (
        f"  {primary} {scores[primary]:+5.1f}  vs  {opposite} {scores[opposite]:+5.1f}"
        f"  -> {winner}{tie}"
    )


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

def render_report(result: ScoringResult, *, explain: bool = False) -> str:
    """Render a scoring result as plain text."""
    lines = [
        f"Type: {result.type_code}",
        f"Result: {result_path(result.type_code)}",
    ]
    if explain:
        lines.append(f"Axis totals ({result.mode.value}):")
        lines.extend(_axis_line(result, pair) for pair in AXIS_PAIRS)
    return "\n".join(lines)
