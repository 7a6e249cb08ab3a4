"""Shared CLI helpers for choosing lookup tables."""

from __future__ import annotations

import sys

import click

from kumo_figma.config import KumoFigmaConfig
from kumo_figma.tailwind.tables import DEFAULT_TABLES, ThemeTables
from kumo_figma.theme import ThemeParseError, build_tables, load_theme

theme_css_option = click.option(
    "--theme-css",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Tailwind theme.css to read spacing, radius, font and shadow values from",
)
kumo_css_option = click.option(
    "--kumo-css",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Kumo theme-kumo.css with font-size overrides",
)


def resolve_tables(
    config: KumoFigmaConfig | None, theme_css: str | None, kumo_css: str | None
) -> ThemeTables:
    """Tables from the given stylesheets, the configured ones, or the defaults."""
    if config is not None:
        theme_css = theme_css or config.tailwind_theme_css or None
        kumo_css = kumo_css or config.kumo_theme_css or None
    if not theme_css:
        return DEFAULT_TABLES
    try:
        return build_tables(load_theme(theme_css, kumo_css))
    except (OSError, ThemeParseError) as exc:
        click.echo(f"Theme error: {exc}", err=True)
        sys.exit(1)
