"""Command-line interface for appa."""

from typing import Tuple
import click
from rich.console import Console
from rich.markup import escape

from appa.config.settings import AppConfig, LoggingConfig
from appa.core.exceptions import ConfigurationError
from appa.core.greeter import greet, USAGE
from appa.utils.logging import setup_logging


# Diagnostics only; stdout is reserved for the greeting.
console = Console(stderr=True)


class GreetCommand(click.Command):
    """Command that treats every argument as a positional value.

    The first argument is always the name, even when it looks like an
    option or is a bare ``--``.
    """

    def parse_args(self, ctx, args):
        return super().parse_args(ctx, ["--", *args])


@click.command(cls=GreetCommand, add_help_option=False)
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
def cli(args: Tuple[str, ...]):
    """Print a greeting, personalized when NAME is given.

    Usage: appa [name]
    """
    logger = configure_logging()

    if args:
        name = args[0]
        logger.debug("Greeting supplied name (%d argument(s))", len(args))
        click.echo(greet(name))
    else:
        logger.debug("No name supplied, printing default greeting")
        click.echo(greet(None))
        click.echo(USAGE)


def configure_logging():
    """
    Load configuration and set up logging.

    Problems are reported on stderr and logging falls back to defaults, so a
    bad environment never prevents the greeting.
    """
    try:
        config = AppConfig.load_config()
    except (OSError, ValueError) as e:
        report_config_errors([f"Failed to load configuration: {e}"])
        config = AppConfig()

    errors = config.validate_config()
    if errors:
        report_config_errors(errors)
        config = AppConfig()

    try:
        return setup_logging(config.logging)
    except (ConfigurationError, OSError) as e:
        report_config_errors([str(e)])
        return setup_logging(LoggingConfig())


def report_config_errors(errors):
    """Print configuration problems to stderr."""
    console.print("[yellow]Configuration errors (using defaults):[/yellow]")
    for error in errors:
        console.print(f"  • {escape(error)}")


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
