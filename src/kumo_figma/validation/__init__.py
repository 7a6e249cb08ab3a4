from kumo_figma.validation.rules import ALL_RULES
from kumo_figma.validation.validator import (
    ValidationError,
    validate_registry,
    validate_registry_or_raise,
    validate_style,
)

__all__ = [
    "ALL_RULES",
    "ValidationError",
    "validate_registry",
    "validate_registry_or_raise",
    "validate_style",
]
