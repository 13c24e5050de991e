"""CLI command: timi weights -- inspect the fixed weight table."""

from __future__ import annotations

import click


@click.command("weights")
@click.argument("question", type=int, required=False)
def weights_cmd(question: int | None) -> None:
    """Show the weight table, or the entries for one QUESTION."""
    from timi.engine.weights import WEIGHT_TABLE, get_question_weight
    from timi.quiz.questions import get_question

    positions = [question] if question is not None else sorted(WEIGHT_TABLE)
    for position in positions:
        entries = get_question_weight(position)
        spec = ", ".join(f"{e.axis} {e.weight:.1f}" for e in entries) or "(none)"
        q = get_question(position)
        text = f"  {q.text}" if q is not None else ""
        click.echo(f"Q{position:<3d} {spec:<14s}{text}")
