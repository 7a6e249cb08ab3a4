"""Tests for the lookup tables and the ParsedStyle record."""

import dataclasses

import pytest

from kumo_figma.tailwind import (
    DEFAULT_TABLES,
    UNSET,
    BorderStyle,
    ParsedStyle,
    ShadowLayer,
    ShadowPreset,
    ThemeTables,
    make_spacing_scale,
)
from kumo_figma.tailwind.tables import px


# ---------------------------------------------------------------------------
# Spacing scale
# ---------------------------------------------------------------------------


class TestSpacingScale:
    def test_default_values(self):
        scale = make_spacing_scale(4)
        assert scale["0"] == 0
        assert scale["px"] == 1
        assert scale["0.5"] == 2
        assert scale["1.5"] == 6
        assert scale["6.5"] == 26
        assert scale["96"] == 384

    def test_other_base_unit(self):
        assert make_spacing_scale(5)["2"] == 10

    def test_spacing_px_lookup(self):
        assert DEFAULT_TABLES.spacing_px("4") == 16
        assert DEFAULT_TABLES.spacing_px("px") == 1

    def test_spacing_px_fallback(self):
        assert DEFAULT_TABLES.spacing_px("13") == 52
        assert DEFAULT_TABLES.spacing_px("8.5") == 34
        assert DEFAULT_TABLES.spacing_px("0.25") == 1

    @pytest.mark.parametrize("key", ["full", "-1", "nan", "inf", ""])
    def test_spacing_px_rejects(self, key):
        assert DEFAULT_TABLES.spacing_px(key) is None


class TestPx:
    def test_integral_float_becomes_int(self):
        assert px(16.0) == 16
        assert isinstance(px(16.0), int)

    def test_fraction_is_kept(self):
        assert px(12.5) == 12.5


# ---------------------------------------------------------------------------
# ThemeTables
# ---------------------------------------------------------------------------


class TestThemeTables:
    def test_defaults(self):
        assert DEFAULT_TABLES.base_unit_px == 4
        assert DEFAULT_TABLES.rem_px == 16
        assert DEFAULT_TABLES.radius["lg"] == 8
        assert DEFAULT_TABLES.font_size["sm"] == 13
        assert DEFAULT_TABLES.font_weight["medium"] == 500
        assert DEFAULT_TABLES.dash_pattern == (4, 4)
        assert set(DEFAULT_TABLES.shadows) == {"2xs", "xs", "sm", "md", "lg", "xl", "2xl"}

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_TABLES.radius["lg"] = 10
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_TABLES.base_unit_px = 8

    def test_caller_dicts_are_copied(self):
        sizes = {"sm": 15}
        tables = ThemeTables(font_size=sizes)
        sizes["sm"] = 99
        assert tables.font_size["sm"] == 15

    def test_dash_pattern_is_tuple(self):
        assert ThemeTables(dash_pattern=[3, 1]).dash_pattern == (3, 1)


class TestShadowPreset:
    def test_to_dict(self):
        preset = ShadowPreset("xs", (ShadowLayer(0, 1, 2, 0, 0.05),))
        assert preset.to_dict() == {
            "name": "xs",
            "layers": [{"offsetX": 0, "offsetY": 1, "blur": 2, "spread": 0, "opacity": 0.05}],
        }

    def test_default_sm_has_two_layers(self):
        layers = DEFAULT_TABLES.shadows["sm"].layers
        assert len(layers) == 2
        assert layers[1].spread == -1


# ---------------------------------------------------------------------------
# ParsedStyle
# ---------------------------------------------------------------------------


class TestUnset:
    def test_falsy(self):
        assert not UNSET

    def test_repr(self):
        assert repr(UNSET) == "UNSET"

    def test_distinct_from_none(self):
        assert UNSET is not None
        assert UNSET != None  # noqa: E711


class TestParsedStyle:
    def test_defaults_unset(self):
        style = ParsedStyle()
        assert style.is_empty
        assert style.height is UNSET
        assert style.to_dict() == {}

    def test_is_set_distinguishes_none(self):
        style = ParsedStyle(fill_variable=None)
        assert style.is_set("fill_variable")
        assert not style.is_set("text_variable")
        assert not style.is_empty

    def test_get(self):
        style = ParsedStyle(height=36)
        assert style.get("height") == 36
        assert style.get("width") is None
        assert style.get("width", 0) == 0

    def test_set_fields(self):
        style = ParsedStyle(height=36, has_border=True, stroke_weight=1)
        assert style.set_fields() == {"height": 36, "has_border": True, "stroke_weight": 1}

    def test_frozen(self):
        style = ParsedStyle(height=36)
        with pytest.raises(dataclasses.FrozenInstanceError):
            style.height = 40

    def test_dash_pattern_list_becomes_tuple(self):
        style = ParsedStyle(border_style=BorderStyle.DASHED, dash_pattern=[4, 4])
        assert style.dash_pattern == (4, 4)

    def test_states_copied_and_read_only(self):
        states = {"hover": ParsedStyle(fill_variable="color-kumo-tint")}
        style = ParsedStyle(states=states)
        states["focus"] = ParsedStyle()
        assert set(style.states) == {"hover"}
        with pytest.raises(TypeError):
            style.states["focus"] = ParsedStyle()

    def test_to_dict_camel_case(self):
        style = ParsedStyle(
            min_width=512,
            padding_x=12,
            border_style=BorderStyle.DASHED,
            dash_pattern=(4, 4),
            is_white_text=True,
            text_variable=None,
        )
        assert style.to_dict() == {
            "minWidth": 512,
            "paddingX": 12,
            "borderStyle": "dashed",
            "dashPattern": [4, 4],
            "textVariable": None,
            "isWhiteText": True,
        }

    def test_to_dict_nested_states_and_shadow(self):
        style = ParsedStyle(
            shadow=ShadowPreset("none"),
            states={"hover": ParsedStyle(fill_opacity=0.7)},
        )
        assert style.to_dict() == {
            "shadow": {"name": "none", "layers": []},
            "states": {"hover": {"fillOpacity": 0.7}},
        }

    def test_field_names(self):
        names = ParsedStyle.field_names()
        assert names[0] == "height"
        assert names[-1] == "states"
        assert "stroke_opacity" in names
