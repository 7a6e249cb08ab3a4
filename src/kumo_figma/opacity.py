"""Find Tailwind opacity modifiers in component source code.

``bg-kumo-brand/70`` in a component's class strings means the Figma side
needs an ``opacity-kumo-brand-70`` variable.  This module collects those
pairs so the variables can be created up front.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

__all__ = [
    "OpacityModifier",
    "extract_opacity_modifiers",
    "extract_opacity_modifiers_from_sources",
    "opacity_variable_name",
]

_OPACITY_PATTERN = re.compile(
    r"(?<![\w-])!?(?:bg|text|border|ring)-(?P<token>[a-z0-9]+(?:-[a-z0-9]+)*)/(?P<opacity>\d{1,3})\b"
)


@dataclass(frozen=True)
class OpacityModifier:
    """``token`` is the color name (``kumo-brand``), ``opacity`` a percentage."""

    token: str
    opacity: int
    variable_name: str


def opacity_variable_name(token: str, opacity: int) -> str:
    return f"opacity-{token}-{opacity}"


def extract_opacity_modifiers(source_code: str) -> list[OpacityModifier]:
    """Return the unique opacity modifiers in *source_code*, in order of appearance."""
    modifiers: list[OpacityModifier] = []
    seen: set[str] = set()
    for match in _OPACITY_PATTERN.finditer(source_code):
        opacity = int(match.group("opacity"))
        if opacity > 100:
            continue
        token = match.group("token")
        name = opacity_variable_name(token, opacity)
        if name in seen:
            continue
        seen.add(name)
        modifiers.append(OpacityModifier(token=token, opacity=opacity, variable_name=name))
    return modifiers


def extract_opacity_modifiers_from_sources(sources: Iterable[str]) -> list[OpacityModifier]:
    """Like :func:`extract_opacity_modifiers`, deduplicated across *sources*."""
    modifiers: list[OpacityModifier] = []
    seen: set[str] = set()
    for source in sources:
        for modifier in extract_opacity_modifiers(source):
            if modifier.variable_name not in seen:
                seen.add(modifier.variable_name)
                modifiers.append(modifier)
    return modifiers
