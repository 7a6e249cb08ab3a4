"""Soundness rules for parsed styles.

Each rule is a function taking a ParsedStyle and returning a list of
Diagnostic objects describing any issues found.  Rules only look at the
record; registry context (component, origin) is attached by the validator.
"""

from __future__ import annotations

from numbers import Real

from kumo_figma.model.diagnostic import Diagnostic, Severity
from kumo_figma.tailwind.model import BorderStyle, ParsedStyle

# ---------------------------------------------------------------------------
# Field groups
# ---------------------------------------------------------------------------

# Measured or weighted quantities: must be > 0 when present.
POSITIVE_FIELDS = ("font_size", "font_weight", "stroke_weight")

# Layout amounts: must be >= 0 when present.
NON_NEGATIVE_FIELDS = (
    "height",
    "width",
    "min_width",
    "min_height",
    "max_width",
    "max_height",
    "padding_x",
    "padding_y",
    "gap",
    "border_radius",
)

OPACITY_FIELDS = ("fill_opacity", "text_opacity", "stroke_opacity")

# (field, may be None)
VARIABLE_FIELDS = (
    ("fill_variable", True),
    ("text_variable", True),
    ("stroke_variable", False),
)


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


# ---------------------------------------------------------------------------
# Numeric rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_positive_values(style: ParsedStyle) -> list[Diagnostic]:
    """Font size, font weight and stroke weight are numbers above zero."""
    diagnostics: list[Diagnostic] = []
    for name in POSITIVE_FIELDS:
        if not style.is_set(name):
            continue
        value = getattr(style, name)
        if not _is_number(value) or value <= 0:
            diagnostics.append(
                Diagnostic(
                    rule="check_positive_values",
                    severity=Severity.ERROR,
                    message=f"{name} must be a positive number, got {value!r}",
                )
            )
    return diagnostics


def check_non_negative_values(style: ParsedStyle) -> list[Diagnostic]:
    """Sizes, paddings, gap and radius are numbers at or above zero."""
    diagnostics: list[Diagnostic] = []
    for name in NON_NEGATIVE_FIELDS:
        if not style.is_set(name):
            continue
        value = getattr(style, name)
        if not _is_number(value) or value < 0:
            diagnostics.append(
                Diagnostic(
                    rule="check_non_negative_values",
                    severity=Severity.ERROR,
                    message=f"{name} must be a non-negative number, got {value!r}",
                )
            )
    return diagnostics


def check_opacity_range(style: ParsedStyle) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for name in OPACITY_FIELDS:
        if not style.is_set(name):
            continue
        value = getattr(style, name)
        if not _is_number(value) or not 0 <= value <= 1:
            diagnostics.append(
                Diagnostic(
                    rule="check_opacity_range",
                    severity=Severity.ERROR,
                    message=f"{name} must be between 0 and 1, got {value!r}",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Variable and border rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_variable_names(style: ParsedStyle) -> list[Diagnostic]:
    """Variable fields hold a non-empty name, or None where allowed."""
    diagnostics: list[Diagnostic] = []
    for name, nullable in VARIABLE_FIELDS:
        if not style.is_set(name):
            continue
        value = getattr(style, name)
        if value is None and nullable:
            continue
        if not isinstance(value, str) or not value:
            expected = "a non-empty string or None" if nullable else "a non-empty string"
            diagnostics.append(
                Diagnostic(
                    rule="check_variable_names",
                    severity=Severity.ERROR,
                    message=f"{name} must be {expected}, got {value!r}",
                )
            )
    return diagnostics


def check_white_text(style: ParsedStyle) -> list[Diagnostic]:
    """White text is a literal color and never carries a text variable."""
    if style.is_white_text is True and style.text_variable is not None:
        return [
            Diagnostic(
                rule="check_white_text",
                severity=Severity.ERROR,
                message="is_white_text is set but text_variable is not None",
            )
        ]
    return []


def check_border_weight(style: ParsedStyle) -> list[Diagnostic]:
    """A border that is on always has a stroke weight."""
    if style.has_border is True and not style.is_set("stroke_weight"):
        return [
            Diagnostic(
                rule="check_border_weight",
                severity=Severity.ERROR,
                message="has_border is set without a stroke_weight",
            )
        ]
    return []


def check_dash_pattern(style: ParsedStyle) -> list[Diagnostic]:
    """``dash_pattern`` is present exactly when the border is dashed."""
    dashed = style.border_style is BorderStyle.DASHED
    has_pattern = style.is_set("dash_pattern")
    if dashed and not has_pattern:
        message = "border_style is dashed but dash_pattern is missing"
    elif has_pattern and not dashed:
        message = "dash_pattern is set on a border that is not dashed"
    elif has_pattern and (
        not style.dash_pattern or not all(_is_number(n) for n in style.dash_pattern)
    ):
        message = f"dash_pattern must be a non-empty list of numbers, got {style.dash_pattern!r}"
    else:
        return []
    return [Diagnostic(rule="check_dash_pattern", severity=Severity.ERROR, message=message)]


ALL_RULES = [
    check_positive_values,
    check_non_negative_values,
    check_opacity_range,
    check_variable_names,
    check_white_text,
    check_border_weight,
    check_dash_pattern,
]
