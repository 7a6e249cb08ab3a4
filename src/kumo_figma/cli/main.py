"""Kumo Figma CLI entry point: Click group with subcommands."""

import logging

import click

from kumo_figma import __version__
from kumo_figma.config import KumoFigmaConfig


@click.group()
@click.version_option(version=__version__, prog_name="kumo-figma")
@click.option("-v", "--verbose", is_flag=True, help="Log at DEBUG level")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Kumo Figma - parse Tailwind classes from the component registry for Figma generation."""
    config = KumoFigmaConfig.from_env()
    level = logging.DEBUG if verbose else getattr(logging, config.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


# Import and register subcommands
from kumo_figma.cli.parse import parse  # noqa: E402
from kumo_figma.cli.check import check  # noqa: E402
from kumo_figma.cli.theme import theme  # noqa: E402
from kumo_figma.cli.opacity import opacity  # noqa: E402

cli.add_command(parse)
cli.add_command(check)
cli.add_command(theme)
cli.add_command(opacity)
