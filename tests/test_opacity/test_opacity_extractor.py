"""Tests for finding opacity modifiers in component source."""

from kumo_figma.opacity import (
    OpacityModifier,
    extract_opacity_modifiers,
    extract_opacity_modifiers_from_sources,
    opacity_variable_name,
)


class TestExtractOpacityModifiers:
    def test_background(self):
        assert extract_opacity_modifiers('className="bg-kumo-brand/70"') == [
            OpacityModifier(token="kumo-brand", opacity=70, variable_name="opacity-kumo-brand-70")
        ]

    def test_all_color_prefixes(self):
        source = "bg-kumo-a/10 text-kumo-b/20 border-kumo-c/30 ring-kumo-d/40"
        assert [m.variable_name for m in extract_opacity_modifiers(source)] == [
            "opacity-kumo-a-10",
            "opacity-kumo-b-20",
            "opacity-kumo-c-30",
            "opacity-kumo-d-40",
        ]

    def test_state_and_important_prefixes(self):
        source = "hover:bg-kumo-brand/70 disabled:!text-kumo-default/50"
        assert [(m.token, m.opacity) for m in extract_opacity_modifiers(source)] == [
            ("kumo-brand", 70),
            ("kumo-default", 50),
        ]

    def test_duplicates_removed_in_order(self):
        source = "bg-kumo-brand/70 bg-kumo-info/20 hover:bg-kumo-brand/70"
        assert [m.variable_name for m in extract_opacity_modifiers(source)] == [
            "opacity-kumo-brand-70",
            "opacity-kumo-info-20",
        ]

    def test_out_of_range_ignored(self):
        assert extract_opacity_modifiers("bg-kumo-brand/150") == []

    def test_not_a_color_utility(self):
        assert extract_opacity_modifiers("w-1/2 my-bg-kumo-brand/70 bg-kumo-brand") == []

    def test_no_modifiers(self):
        assert extract_opacity_modifiers("bg-kumo-brand text-white") == []
        assert extract_opacity_modifiers("") == []


class TestFromSources:
    def test_dedupes_across_sources(self):
        modifiers = extract_opacity_modifiers_from_sources(
            ["bg-kumo-brand/70", "text-kumo-link/50 bg-kumo-brand/70"]
        )
        assert [m.variable_name for m in modifiers] == [
            "opacity-kumo-brand-70",
            "opacity-kumo-link-50",
        ]

    def test_fixture_file(self, fixtures_dir):
        source = (fixtures_dir / "button.tsx").read_text()
        names = [m.variable_name for m in extract_opacity_modifiers_from_sources([source])]
        assert names == [
            "opacity-kumo-brand-70",
            "opacity-kumo-brand-50",
            "opacity-kumo-default-70",
            "opacity-kumo-danger-70",
        ]


def test_opacity_variable_name():
    assert opacity_variable_name("kumo-brand", 70) == "opacity-kumo-brand-70"
