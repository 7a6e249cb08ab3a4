from kumo_figma.theme.errors import ThemeParseError
from kumo_figma.theme.stylesheet import Declaration, read_declarations
from kumo_figma.theme.parser import (
    ThemeData,
    TailwindSpacing,
    build_tables,
    generate_spacing_scale,
    load_theme,
    parse_border_radius,
    parse_font_size,
    parse_font_weight,
    parse_kumo_font_sizes,
    parse_shadow_string,
    parse_shadows,
    parse_spacing,
    parse_theme,
    rem_to_px,
)

__all__ = [
    "Declaration",
    "TailwindSpacing",
    "ThemeData",
    "ThemeParseError",
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
    "read_declarations",
    "rem_to_px",
]
