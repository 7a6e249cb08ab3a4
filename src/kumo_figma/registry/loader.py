"""Load ``component-registry.json`` and query component metadata.

The registry is the source of every class string the Figma generators
parse.  Expected shape (abridged)::

    {
      "components": {
        "Button": {
          "name": "Button",
          "category": "Action",
          "baseStyles": "flex items-center h-9 px-3 rounded-lg",
          "colors": ["bg-kumo-brand", "text-white"],
          "props": {
            "variant": {
              "type": "enum",
              "values": ["primary", "secondary"],
              "default": "primary",
              "classes": {"primary": "bg-kumo-brand text-white", ...},
              "stateClasses": {"primary": {"hover": "hover:bg-kumo-brand/70"}}
            }
          }
        }
      }
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator, Mapping

from kumo_figma.registry.model import (
    ClassString,
    ComponentRegistry,
    ComponentSpec,
    PropSchema,
    SubComponentSchema,
)

__all__ = [
    "RegistryError",
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

# styling keys that hold Tailwind class strings
_STYLING_CLASS_KEYS = ("dimensions", "borderRadius")


class RegistryError(Exception):
    """Raised when registry JSON is malformed."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


def _mapping(raw: Any) -> Mapping[str, Any]:
    return raw if isinstance(raw, Mapping) else {}


def _string_map(raw: Any) -> dict[str, str]:
    return {str(k): v for k, v in _mapping(raw).items() if isinstance(v, str)}


def _string_list(raw: Any, where: str) -> tuple[str, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, (list, tuple)):
        raise RegistryError(f"{where} must be a list, got {type(raw).__name__}")
    return tuple(str(v) for v in raw)


def _parse_prop(name: str, raw: Any, owner: str) -> PropSchema:
    if not isinstance(raw, Mapping):
        return PropSchema(name=name)
    state_classes = {
        str(value): _string_map(states)
        for value, states in _mapping(raw.get("stateClasses")).items()
        if isinstance(states, Mapping)
    }
    return PropSchema(
        name=name,
        type=str(raw.get("type", "")),
        default=raw.get("default"),
        description=str(raw.get("description", "")),
        values=_string_list(raw.get("values"), f"{owner}.props.{name}.values"),
        descriptions=_string_map(raw.get("descriptions")),
        classes=_string_map(raw.get("classes")),
        state_classes=state_classes,
    )


def _parse_props(raw: Any, owner: str) -> dict[str, PropSchema]:
    if not isinstance(raw, Mapping):
        return {}
    return {str(name): _parse_prop(str(name), prop, owner) for name, prop in raw.items()}


def _parse_component(name: str, raw: Any) -> ComponentSpec:
    if not isinstance(raw, Mapping):
        raise RegistryError(f"Component {name!r} is not an object")
    sub_components = {
        str(sub_name): SubComponentSchema(
            name=str(sub.get("name", sub_name)),
            description=str(sub.get("description", "")),
            props=_parse_props(sub.get("props"), f"{name}.subComponents.{sub_name}"),
        )
        for sub_name, sub in _mapping(raw.get("subComponents")).items()
        if isinstance(sub, Mapping)
    }
    base_styles = raw.get("baseStyles")
    styling = raw.get("styling")
    return ComponentSpec(
        name=str(raw.get("name", name)),
        type=str(raw.get("type", "component")),
        description=str(raw.get("description", "")),
        category=str(raw.get("category", "")),
        import_path=str(raw.get("importPath", "")),
        props=_parse_props(raw.get("props"), name),
        colors=_string_list(raw.get("colors"), f"{name}.colors"),
        base_styles=base_styles if isinstance(base_styles, str) else None,
        sub_components=sub_components,
        styling=dict(styling) if isinstance(styling, Mapping) else {},
    )


def parse_component_registry(source: str | Mapping[str, Any]) -> ComponentRegistry:
    """Build a :class:`ComponentRegistry` from a JSON string or decoded dict.

    Raises :class:`RegistryError` for invalid JSON or a missing
    ``components`` object.
    """
    if isinstance(source, str):
        try:
            data = json.loads(source)
        except json.JSONDecodeError as exc:
            raise RegistryError(f"Invalid registry JSON: {exc}") from exc
    else:
        data = source

    if not isinstance(data, Mapping) or not isinstance(data.get("components"), Mapping):
        raise RegistryError("Registry must be an object with a 'components' object")

    components = {
        str(name): _parse_component(str(name), raw)
        for name, raw in data["components"].items()
    }
    return ComponentRegistry(components=components, version=str(data.get("version", "")))


def load_registry(path: str | Path) -> ComponentRegistry:
    """Read and parse a registry JSON file."""
    registry_path = Path(path)
    if not registry_path.exists():
        raise RegistryError(f"Registry file not found: {registry_path}", path=str(registry_path))
    try:
        text = registry_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RegistryError(
            f"Could not read registry file {registry_path}: {exc}", path=str(registry_path)
        ) from exc
    try:
        return parse_component_registry(text)
    except RegistryError as exc:
        raise RegistryError(str(exc), path=str(registry_path)) from exc


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


def get_component_spec(registry: ComponentRegistry, component_name: str) -> ComponentSpec | None:
    return registry.components.get(component_name)


def get_variant_values(spec: ComponentSpec, prop_name: str) -> tuple[str, ...] | None:
    """Values of an enum prop (``("primary", "secondary", ...)``); None otherwise."""
    prop = spec.props.get(prop_name)
    if prop is not None and prop.is_enum and prop.values:
        return prop.values
    return None


def get_default_value(spec: ComponentSpec, prop_name: str) -> Any:
    prop = spec.props.get(prop_name)
    return prop.default if prop is not None else None


def get_variant_descriptions(spec: ComponentSpec, prop_name: str) -> dict[str, str] | None:
    prop = spec.props.get(prop_name)
    if prop is None or not prop.descriptions:
        return None
    return dict(prop.descriptions)


def get_component_colors(spec: ComponentSpec) -> list[str]:
    """Semantic color classes used by the component (``bg-kumo-brand``, ...)."""
    return list(spec.colors)


def get_components_by_category(registry: ComponentRegistry, category: str) -> list[ComponentSpec]:
    return [spec for spec in registry.components.values() if spec.category == category]


def _prop_class_strings(
    component: str, prefix: str, props: Mapping[str, PropSchema]
) -> Iterator[ClassString]:
    for prop in props.values():
        for value, classes in prop.classes.items():
            yield ClassString(component, f"{prefix}props.{prop.name}.classes.{value}", classes)
        for value, states in prop.state_classes.items():
            for state, classes in states.items():
                yield ClassString(
                    component, f"{prefix}props.{prop.name}.stateClasses.{value}.{state}", classes
                )


def iter_class_strings(registry: ComponentRegistry) -> Iterator[ClassString]:
    """Yield every Tailwind class string in *registry*, in registry order.

    Covers base styles, per-value prop classes (variants, sizes, shapes),
    state classes, sub-component prop classes, and class-valued styling
    entries.
    """
    for name, spec in registry.components.items():
        if spec.base_styles is not None:
            yield ClassString(name, "baseStyles", spec.base_styles)
        yield from _prop_class_strings(name, "", spec.props)
        for sub_name, sub in spec.sub_components.items():
            yield from _prop_class_strings(name, f"subComponents.{sub_name}.", sub.props)
        for key in _STYLING_CLASS_KEYS:
            value = spec.styling.get(key)
            if isinstance(value, str):
                yield ClassString(name, f"styling.{key}", value)
