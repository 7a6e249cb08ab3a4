"""Kumo Figma: Tailwind utility-class parsing for design-tool component generation."""

__version__ = "0.4.0"

from kumo_figma.tailwind import (  # noqa: E402
    UNSET,
    BorderStyle,
    ParsedStyle,
    parse,
    parse_base_styles,
    parse_tailwind_classes,
)

__all__ = [
    "__version__",
    "UNSET",
    "BorderStyle",
    "ParsedStyle",
    "parse",
    "parse_base_styles",
    "parse_tailwind_classes",
]
