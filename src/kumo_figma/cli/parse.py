"""CLI command: kumo-figma parse -- parse a Tailwind class string."""

from __future__ import annotations

import json

import click

from kumo_figma.cli.tables import kumo_css_option, resolve_tables, theme_css_option
from kumo_figma.tailwind import parse_tailwind_classes, unknown_tokens


@click.command()
@click.argument("classes", nargs=-1)
@theme_css_option
@kumo_css_option
@click.option("--show-unknown", is_flag=True, help="List the classes that were ignored")
@click.pass_obj
def parse(
    config, classes: tuple[str, ...], theme_css: str | None, kumo_css: str | None, show_unknown: bool
) -> None:
    """Parse Tailwind CLASSES and print the resolved style as JSON.

    Classes may be given as one quoted string or as separate arguments.
    """
    tables = resolve_tables(config, theme_css, kumo_css)
    class_string = " ".join(classes)

    style = parse_tailwind_classes(class_string, tables)
    click.echo(json.dumps(style.to_dict(), indent=2))

    if show_unknown:
        ignored = unknown_tokens(class_string, tables)
        click.echo()
        click.echo(f"Ignored: {' '.join(ignored) if ignored else '(none)'}")
