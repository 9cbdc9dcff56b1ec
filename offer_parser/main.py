import sys

import click
from loguru import logger

from offer_parser.config import settings
from offer_parser.errors import OfferParseError
from offer_parser.parser import parse_offer_file
from offer_parser.render import render_offer

__version__ = "0.1.0"

USAGE = """\
offer-parser - CLI tool

Commands:
  parse <file>    Parse an .offer file
  help            Show help message
  credits         Show project credits"""

CREDITS = f"""\
offer-parser v{__version__}
Developed by Vlad"""


def _stderr_sink(message) -> None:
    # resolve sys.stderr per message so redirected streams are honoured
    sys.stderr.write(message)


def setup_logging() -> None:
    logger.remove()
    logger.add(_stderr_sink, level=settings.log_level, format="{level}: {message}")
    logger.enable("offer_parser")


class OfferCLI(click.Group):
    """Group that answers unknown commands with the usage text."""

    def resolve_command(self, ctx: click.Context, args: list[str]):
        if args and self.get_command(ctx, args[0]) is None:
            click.echo("Unknown command.\n", err=True)
            click.echo(USAGE, err=True)
            ctx.exit(2)
        return super().resolve_command(ctx, args)


@click.group(cls=OfferCLI, invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context):
    setup_logging()
    if ctx.invoked_subcommand is None:
        click.echo(USAGE)


@cli.command("parse")
@click.argument("path", required=False)
def parse_cmd(path: str | None):
    """Parse an .offer file"""
    if not path:
        click.echo("Error: missing file path.\n", err=True)
        click.echo(USAGE, err=True)
        sys.exit(2)

    logger.info("Parsing {}", path)
    try:
        record = parse_offer_file(path)
    except OfferParseError as err:
        logger.debug("{} failed at line {}", path, err.lineno)
        click.echo(f"Error: {err}", err=True)
        sys.exit(1)

    click.echo(render_offer(record))


@cli.command("help")
def help_cmd():
    """Show help message"""
    click.echo(USAGE)


@cli.command("credits")
def credits_cmd():
    """Show project credits"""
    click.echo(CREDITS)
