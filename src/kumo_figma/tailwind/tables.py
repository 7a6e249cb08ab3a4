"""Immutable lookup tables for resolving Tailwind utility classes.

The defaults mirror the Tailwind v4 ``theme.css`` values plus the Kumo
overrides from ``theme-kumo.css``.  :func:`kumo_figma.theme.build_tables`
produces an equivalent :class:`ThemeTables` straight from those stylesheets.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

__all__ = [
    "DEFAULT_TABLES",
    "ShadowLayer",
    "ShadowPreset",
    "ThemeTables",
    "make_spacing_scale",
    "px",
]

BASE_UNIT_PX = 4
REM_PX = 16

# Tailwind spacing keys, plus the Kumo custom 6.5 step.
SPACING_KEYS = (
    "0.5", "1", "1.5", "2", "2.5", "3", "3.5", "4", "4.5", "5", "6", "6.5",
    "7", "8", "9", "10", "11", "12", "14", "16", "20", "24", "28", "32",
    "36", "40", "44", "48", "52", "56", "60", "64", "72", "80", "96",
)

DEFAULT_RADIUS = {
    "none": 0,
    "xs": 2,
    "sm": 4,
    "": 4,  # bare "rounded"
    "md": 6,
    "lg": 8,
    "xl": 12,
    "2xl": 16,
    "3xl": 24,
    "4xl": 32,
    "full": 9999,
}

# Kumo: xs=12, sm=13, base=14, lg=16; the rest are Tailwind v4 defaults.
DEFAULT_FONT_SIZE = {
    "xs": 12,
    "sm": 13,
    "base": 14,
    "lg": 16,
    "xl": 20,
    "2xl": 24,
    "3xl": 30,
    "4xl": 36,
    "5xl": 48,
    "6xl": 60,
    "7xl": 72,
    "8xl": 96,
    "9xl": 128,
}

DEFAULT_FONT_WEIGHT = {
    "thin": 100,
    "extralight": 200,
    "light": 300,
    "normal": 400,
    "medium": 500,
    "semibold": 600,
    "bold": 700,
    "extrabold": 800,
    "black": 900,
}

DEFAULT_DASH_PATTERN = (4, 4)


def px(value: float) -> int | float:
    """Normalise a pixel amount: integral floats become ints."""
    if float(value).is_integer():
        return int(value)
    return value


def make_spacing_scale(base_unit_px: float) -> dict[str, int | float]:
    """Build the spacing scale (``"1.5" -> 6``) for a base unit in pixels."""
    scale: dict[str, int | float] = {"0": 0, "px": 1}
    for key in SPACING_KEYS:
        scale[key] = round(float(key) * base_unit_px)
    return scale


@dataclass(frozen=True)
class ShadowLayer:
    """One drop-shadow layer, in pixels (opacity 0-1)."""

    offset_x: float
    offset_y: float
    blur: float
    spread: float
    opacity: float

    def to_dict(self) -> dict[str, float]:
        return {
            "offsetX": self.offset_x,
            "offsetY": self.offset_y,
            "blur": self.blur,
            "spread": self.spread,
            "opacity": self.opacity,
        }


@dataclass(frozen=True)
class ShadowPreset:
    """A named shadow (``shadow-lg``) made of one or more layers."""

    name: str
    layers: tuple[ShadowLayer, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, "layers": [layer.to_dict() for layer in self.layers]}


def _shadow(name: str, *layers: tuple[float, float, float, float, float]) -> ShadowPreset:
    return ShadowPreset(name=name, layers=tuple(ShadowLayer(*layer) for layer in layers))


DEFAULT_SHADOWS = {
    "2xs": _shadow("2xs", (0, 1, 0, 0, 0.05)),
    "xs": _shadow("xs", (0, 1, 2, 0, 0.05)),
    "sm": _shadow("sm", (0, 1, 3, 0, 0.1), (0, 1, 2, -1, 0.1)),
    "md": _shadow("md", (0, 4, 6, -1, 0.1), (0, 2, 4, -2, 0.1)),
    "lg": _shadow("lg", (0, 10, 15, -3, 0.1), (0, 4, 6, -4, 0.1)),
    "xl": _shadow("xl", (0, 20, 25, -5, 0.1), (0, 8, 10, -6, 0.1)),
    "2xl": _shadow("2xl", (0, 25, 50, -12, 0.25)),
}


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class ThemeTables:
    """Every table the class parser reads, bundled as one immutable value.

    Pass a custom instance to :func:`~kumo_figma.tailwind.parse_tailwind_classes`
    to resolve classes against a different theme.
    """

    base_unit_px: float = BASE_UNIT_PX
    rem_px: float = REM_PX
    spacing: Mapping[str, int | float] = field(
        default_factory=lambda: _frozen(make_spacing_scale(BASE_UNIT_PX))
    )
    radius: Mapping[str, int | float] = field(
        default_factory=lambda: _frozen(DEFAULT_RADIUS)
    )
    font_size: Mapping[str, int | float] = field(
        default_factory=lambda: _frozen(DEFAULT_FONT_SIZE)
    )
    font_weight: Mapping[str, int] = field(
        default_factory=lambda: _frozen(DEFAULT_FONT_WEIGHT)
    )
    shadows: Mapping[str, ShadowPreset] = field(
        default_factory=lambda: _frozen(DEFAULT_SHADOWS)
    )
    dash_pattern: tuple[float, ...] = DEFAULT_DASH_PATTERN

    def __post_init__(self) -> None:
        # Accept plain dicts from callers but never hold a mutable reference.
        for name in ("spacing", "radius", "font_size", "font_weight", "shadows"):
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, _frozen(value))
        object.__setattr__(self, "dash_pattern", tuple(self.dash_pattern))

    def spacing_px(self, key: str) -> int | float | None:
        """Resolve a spacing scale key (``"2"``, ``"1.5"``, ``"px"``).

        Keys missing from the table but shaped like a number are multiplied
        by the base unit.  Anything else resolves to ``None``.
        """
        if key in self.spacing:
            return self.spacing[key]
        try:
            multiplier = float(key)
        except ValueError:
            return None
        value = multiplier * self.base_unit_px
        if multiplier < 0 or not math.isfinite(value):
            return None
        return px(value)


DEFAULT_TABLES = ThemeTables()
