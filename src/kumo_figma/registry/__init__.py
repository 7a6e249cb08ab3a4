from kumo_figma.registry.loader import (
    RegistryError,
    get_component_colors,
    get_component_spec,
    get_components_by_category,
    get_default_value,
    get_variant_descriptions,
    get_variant_values,
    iter_class_strings,
    load_registry,
    parse_component_registry,
)
from kumo_figma.registry.model import (
    ClassString,
    ComponentRegistry,
    ComponentSpec,
    PropSchema,
    SubComponentSchema,
)

__all__ = [
    "ClassString",
    "ComponentRegistry",
    "ComponentSpec",
    "PropSchema",
    "RegistryError",
    "SubComponentSchema",
    "get_component_colors",
    "get_component_spec",
    "get_components_by_category",
    "get_default_value",
    "get_variant_descriptions",
    "get_variant_values",
    "iter_class_strings",
    "load_registry",
    "parse_component_registry",
]
