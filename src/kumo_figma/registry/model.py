"""Registry model: component, prop, and sub-component schemas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PropSchema:
    """One component prop.

    Enum props carry ``values`` plus per-value ``classes`` (Tailwind class
    strings) and optional per-value ``state_classes`` (``{"primary":
    {"hover": "bg-kumo-brand/70"}}``).
    """

    name: str
    type: str = ""
    default: Any = None
    description: str = ""
    values: tuple[str, ...] = ()
    descriptions: dict[str, str] = field(default_factory=dict)
    classes: dict[str, str] = field(default_factory=dict)
    state_classes: dict[str, dict[str, str]] = field(default_factory=dict)

    @property
    def is_enum(self) -> bool:
        return self.type == "enum"


@dataclass(frozen=True)
class SubComponentSchema:
    name: str
    description: str = ""
    props: dict[str, PropSchema] = field(default_factory=dict)


@dataclass(frozen=True)
class ComponentSpec:
    """A single registry component (``Button``, ``Badge``, ...)."""

    name: str
    type: str = "component"  # "component" or "block"
    description: str = ""
    category: str = ""
    import_path: str = ""
    props: dict[str, PropSchema] = field(default_factory=dict)
    colors: tuple[str, ...] = ()
    base_styles: str | None = None
    sub_components: dict[str, SubComponentSchema] = field(default_factory=dict)
    styling: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ComponentRegistry:
    components: dict[str, ComponentSpec]
    version: str = ""


@dataclass(frozen=True)
class ClassString:
    """A class string found in the registry, with where it came from.

    ``origin`` is a dotted path inside the component, e.g. ``baseStyles`` or
    ``props.variant.classes.primary``.
    """

    component: str
    origin: str
    classes: str
