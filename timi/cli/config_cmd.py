"""Config CLI commands: show, validate."""

from __future__ import annotations

import json

import click


@click.group("config")
def config_group() -> None:
    """Manage configuration."""
    pass


@config_group.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Print the resolved configuration."""
    from timi.config.loader import load_config

    config = load_config(ctx.obj.get("config_path"))
    click.echo(json.dumps(config.model_dump(), indent=2, ensure_ascii=False))


@config_group.command("validate")
@click.pass_context
def config_validate(ctx: click.Context) -> None:
    """Validate a config file against the schema."""
    from pydantic import ValidationError

    from timi.config.loader import load_config

    try:
        config = load_config(ctx.obj.get("config_path"))
    except (ValidationError, OSError, ValueError) as e:
        click.echo(f"Config validation failed: {e}", err=True)
        raise SystemExit(1) from None

    click.echo("Config is valid.")
    click.echo(f"  Version: {config.version}")
    click.echo(f"  Scoring mode: {config.scoring.mode}")
    click.echo(f"  Labels: {config.quiz.yes_label} / {config.quiz.no_label}")
    click.echo(f"  Pad missing answers: {config.quiz.pad_missing_answers}")
