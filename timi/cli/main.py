"""Top-level CLI entry point for Timi."""

from __future__ import annotations

import logging

import click

from timi import __version__


@click.group()
@click.version_option(version=__version__, prog_name="timi")
@click.option(
    "--config",
    type=click.Path(),
    default=None,
    envvar="TIMI_CONFIG",
    help="Path to a timi.yaml config file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """Timi -- 15-question team-type quiz."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config

    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


# Register sub-commands
from timi.cli.config_cmd import config_group  # noqa: E402
from timi.cli.quiz_cmd import quiz_cmd  # noqa: E402
from timi.cli.score_cmd import progress_cmd, score_cmd  # noqa: E402
from timi.cli.weights_cmd import weights_cmd  # noqa: E402

cli.add_command(config_group, "config")
cli.add_command(progress_cmd, "progress")
cli.add_command(quiz_cmd, "quiz")
cli.add_command(score_cmd, "score")
cli.add_command(weights_cmd, "weights")
