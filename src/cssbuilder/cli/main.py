"""cssbuilder CLI entry point: Click group with subcommands."""

import logging

import click

from cssbuilder import __version__
from cssbuilder.config import LOG_LEVELS, CssBuilderConfig


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (defaults to CSSBUILDER_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """cssbuilder - build CSS selectors and small object helpers from the shell."""
    try:
        config = CssBuilderConfig.from_env()
    except ValueError as exc:
        raise click.UsageError(str(exc), ctx=ctx) from exc

    level = (log_level or config.log_level).upper()
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("cssbuilder").setLevel(level)
    ctx.obj = config


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402
from cssbuilder.cli.rect import rect  # noqa: E402

cli.add_command(build)
cli.add_command(rect)
