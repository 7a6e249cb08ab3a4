from kumo_figma.tailwind.model import UNSET, STATE_VARIANTS, BorderStyle, ParsedStyle, Unset
from kumo_figma.tailwind.parser import (
    accumulate,
    classify,
    parse,
    parse_base_styles,
    parse_tailwind_classes,
    unknown_tokens,
)
from kumo_figma.tailwind.tables import (
    DEFAULT_TABLES,
    ShadowLayer,
    ShadowPreset,
    ThemeTables,
    make_spacing_scale,
)
from kumo_figma.tailwind.tokens import ColorChannel, classify_token, tokenize

__all__ = [
    "DEFAULT_TABLES",
    "STATE_VARIANTS",
    "UNSET",
    "BorderStyle",
    "ColorChannel",
    "ParsedStyle",
    "ShadowLayer",
    "ShadowPreset",
    "ThemeTables",
    "Unset",
    "accumulate",
    "classify",
    "classify_token",
    "make_spacing_scale",
    "parse",
    "parse_base_styles",
    "parse_tailwind_classes",
    "tokenize",
    "unknown_tokens",
]
