import logging

import click
from wantcheck_cli.commands.rules import rules
from wantcheck_cli.commands.run import run
from wantcheck_cli.commands.suite import suite
from wantcheck_core.config import WantcheckConfig
from wantcheck_core.log import configure_logger


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Verbosity of the wantcheck loggers (defaults to WANTCHECK_LOG_LEVEL, else WARNING).",
)
def cli(log_level: str | None) -> None:
    """Check analysis findings against 'want' comments in test sources."""
    if log_level is None:
        configure_logger(WantcheckConfig.from_env().log_level)
    else:
        configure_logger(getattr(logging, log_level.upper()))


# add cli commands here

cli.add_command(run)
cli.add_command(suite)
cli.add_command(rules)
