"""Read design-token values out of Tailwind v4 and Kumo theme stylesheets.

Tailwind ships its defaults as CSS custom properties in ``theme.css``::

    --spacing: 0.25rem;
    --radius-lg: 0.5rem;
    --text-sm: 0.875rem;
    --font-weight-medium: 500;
    --shadow-lg: 0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1);

Kumo's ``theme-kumo.css`` overrides some font sizes in pixels
(``--text-sm: 13px``).  The values read here feed :func:`build_tables`, so the
class parser resolves against the same numbers the CSS build uses.

Every ``parse_*`` function accepts stylesheet text or the declarations already
read from it by :func:`~kumo_figma.theme.stylesheet.read_declarations`.  When a
property is declared more than once, the first declaration is used.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence, Union

from kumo_figma.tailwind.tables import (
    ShadowLayer,
    ShadowPreset,
    ThemeTables,
    make_spacing_scale,
    px,
)
from kumo_figma.theme.errors import ThemeParseError
from kumo_figma.theme.stylesheet import Declaration, lookup, read_declarations

__all__ = [
    "TailwindSpacing",
    "ThemeData",
    "build_tables",
    "generate_spacing_scale",
    "load_theme",
    "parse_border_radius",
    "parse_font_size",
    "parse_font_weight",
    "parse_kumo_font_sizes",
    "parse_shadow_string",
    "parse_shadows",
    "parse_spacing",
    "parse_theme",
    "rem_to_px",
]

log = logging.getLogger("kumo_figma.theme")

RADIUS_NAMES = ("xs", "sm", "md", "lg", "xl", "2xl", "3xl", "4xl")
FONT_SIZE_NAMES = (
    "xs", "sm", "base", "lg", "xl", "2xl", "3xl", "4xl", "5xl", "6xl", "7xl", "8xl", "9xl",
)
FONT_WEIGHT_NAMES = (
    "thin", "extralight", "light", "normal", "medium", "semibold", "bold", "extrabold", "black",
)
SHADOW_NAMES = ("2xs", "xs", "sm", "md", "lg", "xl", "2xl")

Stylesheet = Union[str, Sequence[Declaration]]

_REM_RE = re.compile(r"^(\d+(?:\.\d+)?|\.\d+)rem$")
_PX_RE = re.compile(r"^(\d+(?:\.\d+)?)px$")
_INT_RE = re.compile(r"^\d+$")

# Layers are separated by a comma followed by the next layer's first number.
_LAYER_SPLIT_RE = re.compile(r",\s*(?=-?\d)")

# One shadow layer: x y blur [spread] rgb(r g b / alpha)
_LAYER_RE = re.compile(
    r"""
    (?P<x>-?[\d.]+)(?:px)?\s+            # offset x
    (?P<y>-?[\d.]+)(?:px)?               # offset y
    (?:\s+(?P<blur>-?[\d.]+)(?:px)?)?    # blur radius (optional)
    (?:\s+(?P<spread>-?[\d.]+)(?:px)?)?  # spread (optional)
    \s+rgb\([^/)]+/\s*(?P<alpha>[\d.]+)\)  # color with alpha
    """,
    re.VERBOSE,
)


def rem_to_px(value: str | float, rem_px: float = 16) -> int:
    """Convert ``"0.25rem"`` (or ``0.25``) to whole pixels."""
    if isinstance(value, str):
        value = float(value.strip().removesuffix("rem"))
    return round(value * rem_px)


def _number(raw: str | None, default: float = 0) -> int | float:
    if raw is None:
        return default
    return px(float(raw))


def _declarations(css: Stylesheet) -> tuple[Declaration, ...]:
    if isinstance(css, str):
        return read_declarations(css)
    return tuple(css)


def _require(declarations: tuple[Declaration, ...], variable: str) -> str:
    declaration = lookup(declarations, variable)
    if declaration is None:
        raise ThemeParseError(f"Could not find {variable} in theme.css", variable=variable)
    return declaration.value


def _require_match(
    declarations: tuple[Declaration, ...], variable: str, pattern: re.Pattern[str], kind: str
) -> re.Match[str]:
    value = _require(declarations, variable)
    match = pattern.match(value)
    if not match:
        raise ThemeParseError(f"Expected {kind} for {variable}, got {value!r}", variable=variable)
    return match


@dataclass(frozen=True)
class TailwindSpacing:
    """Base spacing unit: ``--spacing: 0.25rem`` is 4px."""

    base_unit: float
    base_unit_px: int


def parse_spacing(css: Stylesheet) -> TailwindSpacing:
    match = _require_match(_declarations(css), "--spacing", _REM_RE, "a rem value")
    base_unit = float(match.group(1))
    return TailwindSpacing(base_unit=base_unit, base_unit_px=rem_to_px(base_unit))


def generate_spacing_scale(base_unit_px: float) -> dict[str, int | float]:
    """Spacing scale for the standard keys, e.g. ``{"1.5": 6, "px": 1}``."""
    return make_spacing_scale(base_unit_px)


def _rem_values(css: Stylesheet, prefix: str, names: Sequence[str]) -> dict[str, int]:
    declarations = _declarations(css)
    values: dict[str, int] = {}
    for name in names:
        match = _require_match(declarations, f"--{prefix}-{name}", _REM_RE, "a rem value")
        values[name] = rem_to_px(match.group(1))
    return values


def parse_border_radius(css: Stylesheet) -> dict[str, int]:
    """``--radius-*`` values in pixels, plus the fixed ``none`` and ``full``."""
    radii = _rem_values(css, "radius", RADIUS_NAMES)
    radii["none"] = 0
    radii["full"] = 9999
    return radii


def parse_font_size(css: Stylesheet) -> dict[str, int]:
    """Tailwind's default ``--text-*`` sizes in pixels."""
    return _rem_values(css, "text", FONT_SIZE_NAMES)


def parse_kumo_font_sizes(css: Stylesheet) -> dict[str, int | float]:
    """Font-size overrides from ``theme-kumo.css``.

    Pixel declarations win; rem declarations only fill names not already seen.
    Sizes the stylesheet does not mention are simply absent.
    """
    px_sizes: dict[str, int | float] = {}
    rem_sizes: dict[str, int] = {}
    for declaration in _declarations(css):
        name = declaration.name.removeprefix("--text-")
        if name == declaration.name or name not in FONT_SIZE_NAMES:
            continue
        px_match = _PX_RE.match(declaration.value)
        rem_match = _REM_RE.match(declaration.value)
        if px_match:
            px_sizes.setdefault(name, px(float(px_match.group(1))))
        elif rem_match:
            rem_sizes.setdefault(name, rem_to_px(rem_match.group(1)))
    sizes: dict[str, int | float] = dict(px_sizes)
    for name, value in rem_sizes.items():
        sizes.setdefault(name, value)
    return sizes


def parse_font_weight(css: Stylesheet) -> dict[str, int]:
    declarations = _declarations(css)
    weights: dict[str, int] = {}
    for name in FONT_WEIGHT_NAMES:
        match = _require_match(declarations, f"--font-weight-{name}", _INT_RE, "an integer")
        weights[name] = int(match.group(0))
    return weights


def parse_shadow_string(value: str, name: str = "") -> ShadowPreset:
    """Parse a CSS box-shadow value into a :class:`ShadowPreset`.

    ``"0 1px 2px 0 rgb(0 0 0 / 0.05)"`` becomes one layer with
    ``offset_y=1, blur=2, opacity=0.05``.  Layers that do not match the
    ``x y [blur] [spread] rgb(... / alpha)`` shape are skipped.
    """
    layers: list[ShadowLayer] = []
    for layer in _LAYER_SPLIT_RE.split(value.strip()):
        match = _LAYER_RE.search(layer)
        if not match:
            continue
        layers.append(
            ShadowLayer(
                offset_x=_number(match.group("x")),
                offset_y=_number(match.group("y")),
                blur=_number(match.group("blur")),
                spread=_number(match.group("spread")),
                opacity=float(match.group("alpha")),
            )
        )
    return ShadowPreset(name=name, layers=tuple(layers))


def parse_shadows(css: Stylesheet) -> dict[str, ShadowPreset]:
    declarations = _declarations(css)
    return {
        name: parse_shadow_string(_require(declarations, f"--shadow-{name}"), name=name)
        for name in SHADOW_NAMES
    }


@dataclass(frozen=True)
class ThemeData:
    """Token values read from the theme stylesheets.

    ``font_size`` already has the Kumo overrides applied; the untouched
    Tailwind defaults stay available in ``tailwind_font_size``.
    """

    spacing: TailwindSpacing
    spacing_scale: dict[str, int | float]
    border_radius: dict[str, int]
    tailwind_font_size: dict[str, int]
    font_size: dict[str, int | float]
    font_weight: dict[str, int]
    shadows: dict[str, ShadowPreset]
    kumo_font_size: dict[str, int | float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "tailwind": {
                "spacing": {
                    "baseUnitPx": self.spacing.base_unit_px,
                    "scale": dict(self.spacing_scale),
                },
                "borderRadius": dict(self.border_radius),
                "fontSize": dict(self.tailwind_font_size),
                "fontWeight": dict(self.font_weight),
                "shadows": {
                    name: {"layers": preset.to_dict()["layers"]}
                    for name, preset in self.shadows.items()
                },
            },
            "kumo": {"fontSize": dict(self.kumo_font_size)},
            "computed": {"fontSize": dict(self.font_size)},
        }


def parse_theme(tailwind_css: str, kumo_css: str | None = None) -> ThemeData:
    """Parse Tailwind's ``theme.css`` and, optionally, Kumo's overrides."""
    declarations = read_declarations(tailwind_css)
    spacing = parse_spacing(declarations)
    border_radius = parse_border_radius(declarations)
    tailwind_sizes = parse_font_size(declarations)
    font_weight = parse_font_weight(declarations)
    shadows = parse_shadows(declarations)
    kumo_sizes = parse_kumo_font_sizes(kumo_css) if kumo_css else {}

    log.info(
        "Parsed theme: %d declarations, base unit %spx, %d radii, %d font sizes "
        "(%d Kumo overrides), %d font weights, %d shadows",
        len(declarations),
        spacing.base_unit_px,
        len(border_radius),
        len(tailwind_sizes),
        len(kumo_sizes),
        len(font_weight),
        len(shadows),
    )

    return ThemeData(
        spacing=spacing,
        spacing_scale=generate_spacing_scale(spacing.base_unit_px),
        border_radius=border_radius,
        tailwind_font_size=tailwind_sizes,
        font_size={**tailwind_sizes, **kumo_sizes},
        font_weight=font_weight,
        shadows=shadows,
        kumo_font_size=kumo_sizes,
    )


def load_theme(tailwind_path: str | Path, kumo_path: str | Path | None = None) -> ThemeData:
    """Read the stylesheets from disk and parse them."""
    tailwind_css = Path(tailwind_path).read_text(encoding="utf-8")
    kumo_css = Path(kumo_path).read_text(encoding="utf-8") if kumo_path else None
    return parse_theme(tailwind_css, kumo_css)


def build_tables(theme: ThemeData) -> ThemeTables:
    """Lookup tables for the class parser, resolved from *theme*."""
    radius = dict(theme.border_radius)
    radius[""] = radius["sm"]  # bare "rounded"
    return ThemeTables(
        base_unit_px=theme.spacing.base_unit_px,
        spacing=theme.spacing_scale,
        radius=radius,
        font_size=theme.font_size,
        font_weight=theme.font_weight,
        shadows=theme.shadows,
    )
