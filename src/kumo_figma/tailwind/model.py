"""ParsedStyle: the structured result of parsing a utility-class string."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Union

from kumo_figma.tailwind.tables import ShadowPreset

__all__ = ["UNSET", "Unset", "BorderStyle", "ParsedStyle", "STATE_VARIANTS"]


class Unset(Enum):
    """Marker type for "no class token touched this field".

    Distinct from ``None``, which is a real value meaning "explicitly no
    value" (``bg-transparent``, ``text-white``).
    """

    UNSET = "UNSET"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET = Unset.UNSET


class BorderStyle(Enum):
    """Non-default border line style. Solid borders leave the field unset."""

    DASHED = "dashed"


# Interaction-state prefixes (``hover:bg-kumo-brand``) collected into ``states``.
STATE_VARIANTS = ("hover", "focus", "focus-visible", "active", "disabled", "pressed")

Number = Union[int, float]

# Python field name -> key used by to_dict() and the JSON-facing tooling.
_CAMEL_KEYS = {
    "height": "height",
    "width": "width",
    "min_width": "minWidth",
    "min_height": "minHeight",
    "max_width": "maxWidth",
    "max_height": "maxHeight",
    "padding_x": "paddingX",
    "padding_y": "paddingY",
    "gap": "gap",
    "font_size": "fontSize",
    "font_weight": "fontWeight",
    "border_radius": "borderRadius",
    "has_border": "hasBorder",
    "stroke_weight": "strokeWeight",
    "border_style": "borderStyle",
    "dash_pattern": "dashPattern",
    "fill_variable": "fillVariable",
    "fill_opacity": "fillOpacity",
    "text_variable": "textVariable",
    "text_opacity": "textOpacity",
    "is_white_text": "isWhiteText",
    "stroke_variable": "strokeVariable",
    "stroke_opacity": "strokeOpacity",
    "shadow": "shadow",
    "states": "states",
}


@dataclass(frozen=True)
class ParsedStyle:
    """Style descriptor built from a Tailwind class string.

    Every field defaults to :data:`UNSET`.  A field is only populated when a
    class token for its dimension was present, with the last such token in
    the string deciding the value.
    """

    # Sizing
    height: Number | Unset = UNSET
    width: Number | Unset = UNSET
    min_width: Number | Unset = UNSET
    min_height: Number | Unset = UNSET
    max_width: Number | Unset = UNSET
    max_height: Number | Unset = UNSET

    # Spacing
    padding_x: Number | Unset = UNSET
    padding_y: Number | Unset = UNSET
    gap: Number | Unset = UNSET

    # Typography
    font_size: Number | Unset = UNSET
    font_weight: int | Unset = UNSET

    # Corners and borders
    border_radius: Number | Unset = UNSET
    has_border: bool | Unset = UNSET
    stroke_weight: Number | Unset = UNSET
    border_style: BorderStyle | Unset = UNSET
    dash_pattern: tuple[Number, ...] | Unset = UNSET

    # Colors
    fill_variable: str | None | Unset = UNSET
    fill_opacity: float | Unset = UNSET
    text_variable: str | None | Unset = UNSET
    text_opacity: float | Unset = UNSET
    is_white_text: bool | Unset = UNSET
    stroke_variable: str | Unset = UNSET
    stroke_opacity: float | Unset = UNSET

    # Effects
    shadow: ShadowPreset | Unset = UNSET

    # Interaction states (hover, focus, ...)
    states: Mapping[str, ParsedStyle] | Unset = UNSET

    def __post_init__(self) -> None:
        if isinstance(self.states, Mapping) and not isinstance(self.states, MappingProxyType):
            object.__setattr__(self, "states", MappingProxyType(dict(self.states)))
        if isinstance(self.dash_pattern, list):
            object.__setattr__(self, "dash_pattern", tuple(self.dash_pattern))

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def is_set(self, name: str) -> bool:
        """Return True if a class token populated *name*."""
        return getattr(self, name) is not UNSET

    def get(self, name: str, default: Any = None) -> Any:
        """Return the value of *name*, or *default* when it was never set."""
        value = getattr(self, name)
        return default if value is UNSET else value

    def set_fields(self) -> dict[str, Any]:
        """Return ``{field_name: value}`` for every populated field."""
        return {
            name: getattr(self, name)
            for name in self.field_names()
            if getattr(self, name) is not UNSET
        }

    @property
    def is_empty(self) -> bool:
        return not self.set_fields()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dict of populated fields with camelCase keys."""
        result: dict[str, Any] = {}
        for name, value in self.set_fields().items():
            key = _CAMEL_KEYS[name]
            if isinstance(value, BorderStyle):
                result[key] = value.value
            elif isinstance(value, ShadowPreset):
                result[key] = value.to_dict()
            elif name == "dash_pattern":
                result[key] = list(value)
            elif name == "states":
                result[key] = {state: style.to_dict() for state, style in value.items()}
            else:
                result[key] = value
        return result
