"""Registry validator: parses every registry class string and reports diagnostics."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable

from kumo_figma.model.diagnostic import Diagnostic, Severity
from kumo_figma.registry.model import ClassString, ComponentRegistry
from kumo_figma.registry.loader import iter_class_strings
from kumo_figma.tailwind.model import ParsedStyle
from kumo_figma.tailwind.parser import classify, parse_tailwind_classes
from kumo_figma.tailwind.tables import DEFAULT_TABLES, ThemeTables
from kumo_figma.tailwind.tokens import Unknown
from kumo_figma.validation.rules import ALL_RULES

log = logging.getLogger("kumo_figma.validation")


class ValidationError(Exception):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


RuleFunc = Callable[[ParsedStyle], list[Diagnostic]]


def validate_style(
    style: ParsedStyle, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run all soundness rules against *style* and each of its states."""
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(style))
    if style.is_set("states"):
        for state, state_style in style.states.items():
            for diag in validate_style(state_style, extra_rules):
                diagnostics.append(replace(diag, message=f"{state}: {diag.message}"))
    return diagnostics


def _check_class_string(
    entry: ClassString,
    tables: ThemeTables,
    strict: bool,
    report_unknown: bool,
    extra_rules: list[RuleFunc] | None,
) -> list[Diagnostic]:
    located = {"component": entry.component, "origin": entry.origin}
    try:
        style = parse_tailwind_classes(entry.classes, tables)
    except Exception as exc:  # the parser must never raise; report it if it does
        return [
            Diagnostic(
                rule="parse_never_raises",
                severity=Severity.ERROR,
                message=f"Parser raised {type(exc).__name__}: {exc}",
                **located,
            )
        ]

    diagnostics = [replace(d, **located) for d in validate_style(style, extra_rules)]

    if strict or report_unknown:
        severity = Severity.WARNING if strict else Severity.INFO
        for token in classify(entry.classes, tables):
            if isinstance(token, Unknown):
                diagnostics.append(
                    Diagnostic(
                        rule="unknown_token",
                        severity=severity,
                        message=f"Unrecognized class {token.raw!r} was ignored",
                        token=token.raw,
                        **located,
                    )
                )
    return diagnostics


def validate_registry(
    registry: ComponentRegistry,
    tables: ThemeTables = DEFAULT_TABLES,
    *,
    strict: bool = False,
    report_unknown: bool = False,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Parse every class string in *registry* and check each result.

    Unrecognized tokens are reported as INFO when *report_unknown* is set,
    and as WARNING in *strict* mode.  Returns the full list of diagnostics.
    """
    diagnostics: list[Diagnostic] = []
    checked = 0
    for entry in iter_class_strings(registry):
        checked += 1
        diagnostics.extend(
            _check_class_string(entry, tables, strict, report_unknown, extra_rules)
        )
    errors = sum(1 for d in diagnostics if d.is_error)
    log.info(
        "Checked %d class strings across %d components: %d error(s), %d other finding(s)",
        checked,
        len(registry.components),
        errors,
        len(diagnostics) - errors,
    )
    return diagnostics


def validate_registry_or_raise(
    registry: ComponentRegistry,
    tables: ThemeTables = DEFAULT_TABLES,
    *,
    strict: bool = False,
    report_unknown: bool = False,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run validation; raises :class:`ValidationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = validate_registry(
        registry,
        tables,
        strict=strict,
        report_unknown=report_unknown,
        extra_rules=extra_rules,
    )
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
