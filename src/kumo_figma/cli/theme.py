"""CLI command: kumo-figma theme -- extract theme data from CSS."""

from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from pathlib import Path

import click

from kumo_figma.theme import ThemeParseError, load_theme


@click.command()
@click.argument("tailwind_css", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--kumo-css",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Kumo theme-kumo.css with font-size overrides",
)
@click.option(
    "-o", "--output", type=click.Path(dir_okay=False), default=None, help="Write JSON here"
)
def theme(tailwind_css: str, kumo_css: str | None, output: str | None) -> None:
    """Read token values from TAILWIND_CSS (and Kumo overrides) as JSON theme data."""
    try:
        data = load_theme(tailwind_css, kumo_css)
    except ThemeParseError as exc:
        click.echo(f"Theme error: {exc}", err=True)
        sys.exit(1)

    sources = [tailwind_css] + ([kumo_css] if kumo_css else [])
    payload = {
        "_generated": datetime.now(timezone.utc).isoformat(),
        "_sources": sources,
        **data.to_dict(),
    }
    text = json.dumps(payload, indent=2)

    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text + "\n", encoding="utf-8")
        click.echo(f"Wrote {out_path}")
    else:
        click.echo(text)
