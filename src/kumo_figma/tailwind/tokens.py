"""Tokenizer and per-dimension classifiers for Tailwind utility classes.

Every token is classified into exactly one tagged variant.  Each variant
knows which :class:`~kumo_figma.tailwind.model.ParsedStyle` fields it
assigns (:meth:`Classified.updates`); assigning :data:`UNSET` clears a field.
Tokens nobody recognizes become :class:`Unknown` and assign nothing.

Classifiers, tried in order::

    h-9  w-[32rem]  size-3.5  min-w-72      -> Sizing
    p-2  px-1.5  py-0.5  gap-2              -> Sizing (spacing)
    rounded  rounded-lg                     -> Radius
    text-sm  font-medium                    -> Typography
    border  border-2  ring  ring-2          -> BorderWidth
    border-dashed  border-solid             -> BorderLine
    shadow  shadow-lg  shadow-none          -> Shadow
    bg-kumo-brand  text-white  ring-kumo-x  -> Color
    hover:bg-kumo-brand                     -> StateVariant
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union

from kumo_figma.tailwind.model import STATE_VARIANTS, UNSET, BorderStyle
from kumo_figma.tailwind.tables import ShadowPreset, ThemeTables, px

__all__ = [
    "BorderLine",
    "BorderWidth",
    "Classified",
    "Color",
    "ColorChannel",
    "Radius",
    "Shadow",
    "Sizing",
    "StateVariant",
    "Token",
    "Typography",
    "Unknown",
    "classify_token",
    "parse_arbitrary_value",
    "tokenize",
]


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------


def tokenize(class_string: Optional[str]) -> tuple[str, ...]:
    """Split *class_string* on whitespace, dropping empty tokens.

    ``None`` and non-string input produce an empty tuple.
    """
    if not class_string or not isinstance(class_string, str):
        return ()
    return tuple(class_string.split())


# ---------------------------------------------------------------------------
# Classified token variants
# ---------------------------------------------------------------------------


class ColorChannel(Enum):
    """Which paint a color token targets."""

    FILL = "fill"
    TEXT = "text"
    STROKE = "stroke"


@dataclass(frozen=True)
class Classified:
    """Base for all classified tokens. ``raw`` is the token as written."""

    raw: str

    def updates(self) -> dict[str, Any]:
        return {}


@dataclass(frozen=True)
class Sizing(Classified):
    """Width/height/min/max sizes, paddings and gap, in pixels."""

    fields: tuple[str, ...]
    value: int | float

    def updates(self) -> dict[str, Any]:
        return {name: self.value for name in self.fields}


@dataclass(frozen=True)
class Radius(Classified):
    value: int | float

    def updates(self) -> dict[str, Any]:
        return {"border_radius": self.value}


@dataclass(frozen=True)
class Typography(Classified):
    """``font_size`` or ``font_weight``."""

    field: str
    value: int | float

    def updates(self) -> dict[str, Any]:
        return {self.field: self.value}


@dataclass(frozen=True)
class BorderWidth(Classified):
    """``border``/``ring`` widths. Width 0 turns the border off."""

    width: int

    def updates(self) -> dict[str, Any]:
        if self.width <= 0:
            return {"has_border": False, "stroke_weight": UNSET}
        return {"has_border": True, "stroke_weight": self.width}


@dataclass(frozen=True)
class BorderLine(Classified):
    """Border line style. ``style=None`` is solid, which clears the dash."""

    style: BorderStyle | None
    dash_pattern: tuple[int | float, ...] = ()

    def updates(self) -> dict[str, Any]:
        if self.style is None:
            return {"border_style": UNSET, "dash_pattern": UNSET}
        return {"border_style": self.style, "dash_pattern": self.dash_pattern}


@dataclass(frozen=True)
class Shadow(Classified):
    preset: ShadowPreset

    def updates(self) -> dict[str, Any]:
        return {"shadow": self.preset}


@dataclass(frozen=True)
class Color(Classified):
    """A color reference on one channel.

    ``variable`` is a design-variable name, or ``None`` for the literal
    sentinels (``bg-transparent``, ``text-white``).
    """

    channel: ColorChannel
    variable: str | None
    opacity: float | None = None
    white: bool = False

    def updates(self) -> dict[str, Any]:
        opacity = UNSET if self.opacity is None else self.opacity
        if self.channel is ColorChannel.FILL:
            return {"fill_variable": self.variable, "fill_opacity": opacity}
        if self.channel is ColorChannel.TEXT:
            return {
                "text_variable": self.variable,
                "text_opacity": opacity,
                "is_white_text": True if self.white else UNSET,
            }
        return {"stroke_variable": self.variable, "stroke_opacity": opacity}


@dataclass(frozen=True)
class StateVariant(Classified):
    """A token behind an interaction-state prefix, e.g. ``hover:``."""

    state: str
    inner: Classified

    def updates(self) -> dict[str, Any]:
        # Applied to ParsedStyle.states by the accumulator, not the base style.
        return {}


@dataclass(frozen=True)
class Unknown(Classified):
    """A token no classifier recognized. Kept for diagnostics only."""


Token = Union[
    Sizing, Radius, Typography, BorderWidth, BorderLine, Shadow, Color, StateVariant, Unknown
]


# ---------------------------------------------------------------------------
# Value resolution
# ---------------------------------------------------------------------------

# Spacing keys: 2, 1.5, 96, px
_SCALE_KEY_RE = re.compile(r"^(?:\d+(?:\.\d+)?|px)$")

# Arbitrary values: [32rem], [10px], [250]
_ARBITRARY_RE = re.compile(r"^\[(?P<number>\d+(?:\.\d+)?|\.\d+)(?P<unit>[a-zA-Z%]*)\]$")

# Semantic color names after "kumo-": brand, line, fill-hover
_SEMANTIC_RE = re.compile(r"^kumo-(?P<name>[a-z0-9]+(?:-[a-z0-9]+)*)$")

_OPACITY_RE = re.compile(r"^\d{1,3}$")

_WIDTH_RE = re.compile(r"^\d+$")


def parse_arbitrary_value(raw: str, tables: ThemeTables) -> int | float | None:
    """Resolve a bracketed value (``[32rem]``) to pixels.

    ``px`` and unit-less numbers are taken as pixels, ``rem`` is multiplied
    by ``tables.rem_px``.  Other units, malformed brackets and values too large
    for a float give ``None``.
    """
    match = _ARBITRARY_RE.match(raw)
    if not match:
        return None
    unit = match.group("unit").lower()
    if unit in ("", "px"):
        value = float(match.group("number"))
    elif unit == "rem":
        value = float(match.group("number")) * tables.rem_px
    else:
        return None
    if not math.isfinite(value):
        return None
    return px(value)


def _scale_value(key: str, tables: ThemeTables) -> int | float | None:
    if not _SCALE_KEY_RE.match(key):
        return None
    return tables.spacing_px(key)


# ---------------------------------------------------------------------------
# Dimension classifiers
# ---------------------------------------------------------------------------

# Longest prefixes first so "min-w-" is not read as "w-".
_SIZE_PREFIXES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("min-w-", ("min_width",)),
    ("min-h-", ("min_height",)),
    ("max-w-", ("max_width",)),
    ("max-h-", ("max_height",)),
    ("size-", ("width", "height")),
    ("h-", ("height",)),
    ("w-", ("width",)),
)

# Arbitrary values are not honoured on paddings and gap.
_SPACING_PREFIXES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("px-", ("padding_x",)),
    ("py-", ("padding_y",)),
    ("p-", ("padding_x", "padding_y")),
    ("gap-", ("gap",)),
)


def _classify_sizing(token: str, tables: ThemeTables) -> Classified | None:
    for prefix, fields in _SIZE_PREFIXES:
        if token.startswith(prefix):
            rest = token[len(prefix):]
            if rest.startswith("["):
                value = parse_arbitrary_value(rest, tables)
            else:
                value = _scale_value(rest, tables)
            if value is None:
                return None
            return Sizing(raw=token, fields=fields, value=value)
    return None


def _classify_spacing(token: str, tables: ThemeTables) -> Classified | None:
    for prefix, fields in _SPACING_PREFIXES:
        if token.startswith(prefix):
            value = _scale_value(token[len(prefix):], tables)
            if value is None:
                return None
            return Sizing(raw=token, fields=fields, value=value)
    return None


def _classify_radius(token: str, tables: ThemeTables) -> Classified | None:
    # Only the unqualified keyword; rounded-t-lg and friends stay unknown.
    if token == "rounded":
        keyword = ""
    elif token.startswith("rounded-"):
        keyword = token[len("rounded-"):]
        if not keyword:
            return None
    else:
        return None
    if keyword not in tables.radius:
        return None
    return Radius(raw=token, value=tables.radius[keyword])


def _classify_typography(token: str, tables: ThemeTables) -> Classified | None:
    if token.startswith("text-"):
        size = tables.font_size.get(token[len("text-"):])
        if size is not None:
            return Typography(raw=token, field="font_size", value=size)
    elif token.startswith("font-"):
        weight = tables.font_weight.get(token[len("font-"):])
        if weight is not None:
            return Typography(raw=token, field="font_weight", value=weight)
    return None


def _classify_border(token: str, tables: ThemeTables) -> Classified | None:
    if token in ("border", "ring"):
        return BorderWidth(raw=token, width=1)
    if token == "border-dashed":
        return BorderLine(raw=token, style=BorderStyle.DASHED, dash_pattern=tables.dash_pattern)
    if token == "border-solid":
        return BorderLine(raw=token, style=None)
    for prefix in ("border-", "ring-"):
        if token.startswith(prefix):
            width = token[len(prefix):]
            if _WIDTH_RE.match(width):
                return BorderWidth(raw=token, width=int(width))
    return None


def _classify_shadow(token: str, tables: ThemeTables) -> Classified | None:
    if token == "shadow":
        preset = tables.shadows.get("sm")
    elif token == "shadow-none":
        preset = ShadowPreset(name="none")
    elif token.startswith("shadow-"):
        preset = tables.shadows.get(token[len("shadow-"):])
    else:
        return None
    if preset is None:
        return None
    return Shadow(raw=token, preset=preset)


_COLOR_CHANNELS = {
    "bg": ColorChannel.FILL,
    "text": ColorChannel.TEXT,
    "border": ColorChannel.STROKE,
    "ring": ColorChannel.STROKE,
}

_FILL_NONE = frozenset({"transparent", "inherit"})


def variable_name(channel: ColorChannel, name: str) -> str:
    """Design-variable name for semantic color *name* on *channel*.

    Text colors live in their own ``text-color-*`` collection.
    """
    if channel is ColorChannel.TEXT:
        return f"text-color-kumo-{name}"
    return f"color-kumo-{name}"


def _classify_color(token: str, tables: ThemeTables) -> Classified | None:
    prefix, sep, body = token.partition("-")
    channel = _COLOR_CHANNELS.get(prefix)
    if channel is None or not sep or not body:
        return None

    opacity: float | None = None
    suffix = ""
    if "/" in body:
        body, _, modifier = body.partition("/")
        if not _OPACITY_RE.match(modifier) or int(modifier) > 100:
            return None
        opacity = int(modifier) / 100
        suffix = f"/{modifier}"

    semantic = _SEMANTIC_RE.match(body)
    if semantic:
        # The modifier stays on the name: "color-kumo-info/20"
        name = variable_name(channel, semantic.group("name")) + suffix
        return Color(raw=token, channel=channel, variable=name, opacity=opacity)
    if channel is ColorChannel.FILL and body in _FILL_NONE:
        return Color(raw=token, channel=channel, variable=None, opacity=opacity)
    if channel is ColorChannel.TEXT and body == "white":
        return Color(raw=token, channel=channel, variable=None, opacity=opacity, white=True)
    return None


_CLASSIFIERS: tuple[Callable[[str, ThemeTables], Optional[Classified]], ...] = (
    _classify_sizing,
    _classify_spacing,
    _classify_radius,
    _classify_typography,
    _classify_border,
    _classify_shadow,
    _classify_color,
)


def _strip_important(token: str) -> str:
    # Tailwind v3 writes !text-white, v4 writes text-white!
    if token.startswith("!"):
        token = token[1:]
    if token.endswith("!"):
        token = token[:-1]
    return token


def _classify_utility(token: str, tables: ThemeTables) -> Classified | None:
    utility = _strip_important(token)
    for classifier in _CLASSIFIERS:
        result = classifier(utility, tables)
        if result is not None:
            return result
    return None


def classify_token(token: str, tables: ThemeTables) -> Token:
    """Classify a single utility-class token. Never raises."""
    if ":" in token:
        state, _, rest = token.partition(":")
        if state in STATE_VARIANTS and ":" not in rest:
            inner = _classify_utility(rest, tables)
            if inner is not None:
                return StateVariant(raw=token, state=state, inner=inner)
        return Unknown(raw=token)
    result = _classify_utility(token, tables)
    if result is None:
        return Unknown(raw=token)
    return result  # type: ignore[return-value]
