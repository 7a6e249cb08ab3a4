"""CLI command: kumo-figma opacity -- list opacity modifiers used in source files."""

from __future__ import annotations

from pathlib import Path

import click

from kumo_figma.opacity import extract_opacity_modifiers_from_sources


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def opacity(files: tuple[str, ...]) -> None:
    """Scan FILES for classes like bg-kumo-brand/70 and list the opacity variables they need."""
    sources = [Path(f).read_text(encoding="utf-8") for f in files]
    modifiers = extract_opacity_modifiers_from_sources(sources)

    if not modifiers:
        click.echo("No opacity modifiers found")
        return

    for mod in modifiers:
        click.echo(f"  {mod.variable_name}  token={mod.token} opacity={mod.opacity}")
    click.echo()
    click.echo(f"{len(modifiers)} opacity variable(s)")
