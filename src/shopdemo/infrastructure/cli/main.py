import click

from shopdemo.infrastructure.cli.demo_commands import demo
from shopdemo.infrastructure.logging_config import LOG_LEVELS, setup_logging


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Verbosity of the log written to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """shopdemo: products, customers, orders and payments.

    Runs the demo when no subcommand is given.
    """
    setup_logging(log_level)
    if ctx.invoked_subcommand is None:
        ctx.invoke(demo)


# Register subcommands
cli.add_command(demo)
