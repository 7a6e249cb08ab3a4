"""Tests for loading and querying the component registry."""

import json

import pytest

from kumo_figma.registry import (
    ComponentSpec,
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


@pytest.fixture
def registry(registry_path):
    return load_registry(registry_path)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class TestLoadRegistry:
    def test_components(self, registry):
        assert list(registry.components) == ["Button", "Badge", "Dialog", "Tabs"]
        assert registry.version == "1.0.0"

    def test_component_fields(self, registry):
        button = registry.components["Button"]
        assert button.name == "Button"
        assert button.category == "Action"
        assert button.import_path == "@cloudflare/kumo"
        assert button.base_styles.startswith("group flex")

    def test_prop_fields(self, registry):
        variant = registry.components["Button"].props["variant"]
        assert variant.is_enum
        assert variant.default == "primary"
        assert variant.classes["ghost"] == "bg-transparent text-kumo-default"
        assert variant.state_classes["primary"]["hover"] == "hover:bg-kumo-brand/70"

    def test_defaults_for_missing_keys(self, registry):
        tabs = registry.components["Tabs"]
        assert tabs.type == "component"
        assert tabs.base_styles is None
        assert tabs.colors == ()
        assert tabs.sub_components["Tab"].name == "Tabs.Tab"

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.json"
        with pytest.raises(RegistryError) as exc_info:
            load_registry(missing)
        assert exc_info.value.path == str(missing)

    def test_invalid_file_keeps_path(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        with pytest.raises(RegistryError, match="Invalid registry JSON") as exc_info:
            load_registry(bad)
        assert exc_info.value.path == str(bad)

    def test_undecodable_file(self, tmp_path):
        bad = tmp_path / "latin1.json"
        bad.write_bytes(b'{"components": {"\xff": {}}}')
        with pytest.raises(RegistryError, match="Could not read registry file") as exc_info:
            load_registry(bad)
        assert exc_info.value.path == str(bad)

    def test_directory(self, tmp_path):
        with pytest.raises(RegistryError, match="Could not read registry file") as exc_info:
            load_registry(tmp_path)
        assert exc_info.value.path == str(tmp_path)


class TestParseComponentRegistry:
    def test_from_string(self):
        registry = parse_component_registry(json.dumps({"components": {"Box": {"baseStyles": "p-2"}}}))
        assert registry.components["Box"] == ComponentSpec(name="Box", base_styles="p-2")

    def test_from_mapping(self):
        registry = parse_component_registry({"components": {}})
        assert registry.components == {}

    @pytest.mark.parametrize("data", [[], {"version": "1"}, {"components": []}])
    def test_missing_components(self, data):
        with pytest.raises(RegistryError, match="'components'"):
            parse_component_registry(data)

    def test_component_must_be_object(self):
        with pytest.raises(RegistryError, match="'Box'"):
            parse_component_registry({"components": {"Box": "p-2"}})

    def test_malformed_props_are_tolerated(self):
        registry = parse_component_registry(
            {
                "components": {
                    "Box": {
                        "props": {
                            "size": "sm",
                            "tone": {"type": "enum", "classes": {"a": "p-2", "b": 3}},
                        },
                        "baseStyles": 12,
                    }
                }
            }
        )
        box = registry.components["Box"]
        assert box.props["size"].type == ""
        assert box.props["tone"].classes == {"a": "p-2"}
        assert box.base_styles is None

    @pytest.mark.parametrize("values", [5, "primary", {"a": 1}])
    def test_prop_values_must_be_a_list(self, values):
        data = {"components": {"Button": {"props": {"variant": {"values": values}}}}}
        with pytest.raises(RegistryError, match=r"Button\.props\.variant\.values must be a list"):
            parse_component_registry(data)

    def test_sub_component_prop_values_must_be_a_list(self):
        data = {
            "components": {
                "Tabs": {"subComponents": {"Tab": {"props": {"variant": {"values": 3}}}}}
            }
        }
        with pytest.raises(RegistryError, match=r"Tabs\.subComponents\.Tab\.props\.variant\.values"):
            parse_component_registry(data)

    @pytest.mark.parametrize("colors", [5, "bg-kumo-brand"])
    def test_colors_must_be_a_list(self, colors):
        with pytest.raises(RegistryError, match=r"Button\.colors must be a list"):
            parse_component_registry({"components": {"Button": {"colors": colors}}})

    def test_null_lists_are_empty(self):
        registry = parse_component_registry(
            {"components": {"Button": {"colors": None, "props": {"variant": {"values": None}}}}}
        )
        button = registry.components["Button"]
        assert button.colors == ()
        assert button.props["variant"].values == ()


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


class TestQueries:
    def test_get_component_spec(self, registry):
        assert get_component_spec(registry, "Badge").category == "Display"
        assert get_component_spec(registry, "Nope") is None

    def test_get_variant_values(self, registry):
        button = registry.components["Button"]
        assert get_variant_values(button, "variant") == ("primary", "secondary", "ghost", "outline")
        assert get_variant_values(button, "disabled") is None
        assert get_variant_values(button, "missing") is None

    def test_get_default_value(self, registry):
        button = registry.components["Button"]
        assert get_default_value(button, "size") == "base"
        assert get_default_value(button, "disabled") is False
        assert get_default_value(button, "missing") is None

    def test_get_variant_descriptions(self, registry):
        assert get_variant_descriptions(registry.components["Button"], "size")["lg"] == "Large"
        assert get_variant_descriptions(registry.components["Badge"], "variant") is None

    def test_get_component_colors(self, registry):
        assert get_component_colors(registry.components["Badge"]) == ["bg-kumo-info", "text-kumo-link"]

    def test_get_components_by_category(self, registry):
        assert [c.name for c in get_components_by_category(registry, "Overlay")] == ["Dialog"]
        assert get_components_by_category(registry, "Nope") == []


# ---------------------------------------------------------------------------
# Class strings
# ---------------------------------------------------------------------------


class TestIterClassStrings:
    def test_button_origins(self, registry):
        origins = [e.origin for e in iter_class_strings(registry) if e.component == "Button"]
        assert origins == [
            "baseStyles",
            "props.variant.classes.primary",
            "props.variant.classes.secondary",
            "props.variant.classes.ghost",
            "props.variant.classes.outline",
            "props.variant.stateClasses.primary.hover",
            "props.variant.stateClasses.primary.disabled",
            "props.size.classes.xs",
            "props.size.classes.sm",
            "props.size.classes.base",
            "props.size.classes.lg",
        ]

    def test_sub_components_and_styling(self, registry):
        entries = [e for e in iter_class_strings(registry) if e.component == "Tabs"]
        assert [e.origin for e in entries] == [
            "subComponents.Tab.props.variant.classes.segmented",
            "styling.dimensions",
            "styling.borderRadius",
        ]
        assert entries[1].classes == "h-9 gap-1"

    def test_classes(self, registry):
        entry = next(e for e in iter_class_strings(registry) if e.origin == "props.size.classes.lg")
        assert entry.classes == "h-10 gap-2 px-4 text-base"
