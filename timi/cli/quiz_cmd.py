"""CLI command: timi quiz -- answer the questions interactively."""

from __future__ import annotations

import logging

import click

logger = logging.getLogger(__name__)

BACK = "b"
QUIT = "q"


@click.command("quiz")
@click.option(
    "--mode",
    type=click.Choice(["balanced", "legacy"]),
    default=None,
    help="Scoring mode (defaults to the configured mode)",
)
@click.option("--explain", is_flag=True, help="Show per-axis totals")
@click.pass_context
def quiz_cmd(ctx: click.Context, mode: str | None, explain: bool) -> None:
    """Walk through the 15 questions and print the resulting type.

    Answer with y/n (or the configured labels), ``b`` to go back,
    ``q`` to quit.
    """
    from timi.cli.score_cmd import parse_answers
    from timi.config.defaults import QUESTION_COUNT, RETRY_MESSAGE
    from timi.config.loader import load_config
    from timi.engine.scoring import LengthMismatchError, ScoringMode
    from timi.output.report import render_report
    from timi.quiz.session import QuizSession

    config = load_config(ctx.obj.get("config_path"))
    session = QuizSession.from_config(config)
    if mode:
        session.mode = ScoringMode(mode)

    yes_label, no_label = config.quiz.yes_label, config.quiz.no_label
    while not session.is_complete:
        question = session.current_question
        click.echo(f"\n[{question.id}/{QUESTION_COUNT}] {session.progress}%")
        click.echo(question.text)
        reply = click.prompt(f"{yes_label}(y) / {no_label}(n) / back(b) / quit(q)").strip()

        if reply.lower() == BACK:
            session.back()
            continue
        if reply.lower() == QUIT:
            click.echo("Quiz cancelled.")
            return
        try:
            parsed = parse_answers(reply, yes_label, no_label)
        except ValueError:
            parsed = []
        if len(parsed) != 1:
            click.echo(f"Please answer {yes_label} or {no_label}.")
            continue
        session.answer(parsed[0])

    try:
        result = session.result()
    except LengthMismatchError as e:
        logger.error("Scoring failed: %s", e)
        raise click.ClickException(RETRY_MESSAGE) from None

    click.echo("")
    click.echo(render_report(result, explain=explain))
