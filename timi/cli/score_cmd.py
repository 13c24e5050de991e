"""CLI commands: timi score, timi progress."""

from __future__ import annotations

import json
import re
from typing import Any

import click

from timi.config.defaults import QUESTION_COUNT

_YES = {"y", "yes", "1", "t", "true", "o", "예", "네"}
_NO = {"n", "no", "0", "f", "false", "x", "아니오", "아니요"}
_SEPARATORS = re.compile(r"[\s,]+")


def parse_answers(text: str, yes_label: str = "예", no_label: str = "아니오") -> list[bool]:
    """Parse ``YNYN...``, ``1,0,1`` or ``예 아니오 ...`` into bools.

    Raises ValueError on an unrecognised token.
    """
    yes = _YES | {yes_label.strip().lower()}
    no = _NO | {no_label.strip().lower()}
    text = text.strip()
    tokens = [t for t in _SEPARATORS.split(text) if t]
    if len(tokens) == 1 and tokens[0].isascii() and tokens[0].lower() not in yes | no:
        tokens = list(tokens[0])

    answers: list[bool] = []
    for position, token in enumerate(tokens, start=1):
        key = token.lower()
        if key in yes:
            answers.append(True)
        elif key in no:
            answers.append(False)
        else:
            raise ValueError(f"Answer {position}: unrecognised token {token!r}")
    return answers


def _resolve_mode(ctx: click.Context, mode: str | None) -> tuple[str, Any]:
    from timi.config.loader import load_config

    config = load_config(ctx.obj.get("config_path"))
    return mode or config.scoring.mode, config


@click.command("score")
@click.argument("answers", nargs=-1, required=True)
@click.option(
    "--mode",
    type=click.Choice(["balanced", "legacy"]),
    default=None,
    help="Scoring mode (defaults to the configured mode)",
)
@click.option("--explain", is_flag=True, help="Show per-axis totals")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON")
@click.pass_context
def score_cmd(
    ctx: click.Context,
    answers: tuple[str, ...],
    mode: str | None,
    explain: bool,
    as_json: bool,
) -> None:
    """Score a complete answer sequence, e.g. ``timi score YYYNNYYNNYNNYNY``."""
    from timi.engine.scoring import LengthMismatchError, score_answers
    from timi.output.report import render_report

    mode, config = _resolve_mode(ctx, mode)
    try:
        parsed = parse_answers(" ".join(answers), config.quiz.yes_label, config.quiz.no_label)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="ANSWERS") from None

    try:
        result = score_answers(parsed, mode)
    except LengthMismatchError as e:
        raise click.ClickException(str(e)) from None

    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False))
    else:
        click.echo(render_report(result, explain=explain))


@click.command("progress")
@click.argument("answered", type=click.IntRange(0, QUESTION_COUNT))
def progress_cmd(answered: int) -> None:
    """Print the progress percentage after ANSWERED questions."""
    from timi.engine.scoring import compute_progress

    click.echo(f"{compute_progress([True] * answered)}%")
