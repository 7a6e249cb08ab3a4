"""CLI command: kumo-figma check -- parse and check every registry class string."""

from __future__ import annotations

import sys

import click

from kumo_figma.cli.tables import kumo_css_option, resolve_tables, theme_css_option
from kumo_figma.model.diagnostic import Severity
from kumo_figma.registry import RegistryError, load_registry
from kumo_figma.validation import validate_registry


@click.command()
@click.argument("registry_file", type=click.Path(exists=True, dir_okay=False), required=False)
@click.option("--strict", is_flag=True, help="Report ignored classes as warnings")
@click.option("--report-unknown", is_flag=True, help="Report ignored classes as info")
@theme_css_option
@kumo_css_option
@click.pass_obj
def check(
    config,
    registry_file: str | None,
    strict: bool,
    report_unknown: bool,
    theme_css: str | None,
    kumo_css: str | None,
) -> None:
    """Parse every class string in a component registry and check the results.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    registry_path = registry_file or (config.registry_path if config else "component-registry.json")
    strict = strict or bool(config and config.strict)
    report_unknown = report_unknown or bool(config and config.report_unknown)

    try:
        registry = load_registry(registry_path)
    except RegistryError as exc:
        click.echo(f"Registry error: {exc}", err=True)
        sys.exit(1)

    tables = resolve_tables(config, theme_css, kumo_css)
    diagnostics = validate_registry(
        registry, tables, strict=strict, report_unknown=report_unknown
    )

    if not diagnostics:
        click.echo(f"OK: {len(registry.components)} component(s) parsed cleanly (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
