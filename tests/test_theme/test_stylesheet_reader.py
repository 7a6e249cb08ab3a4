"""Tests for collecting custom-property declarations from stylesheets."""

import pytest

from kumo_figma.theme import Declaration, ThemeParseError, parse_spacing, read_declarations
from kumo_figma.theme.stylesheet import lookup


def _pairs(css):
    return [(d.name, d.value) for d in read_declarations(css)]


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


class TestDeclarations:
    def test_top_level(self):
        assert _pairs("--spacing: 0.25rem;\n--radius-sm: 0.25rem;") == [
            ("--spacing", "0.25rem"),
            ("--radius-sm", "0.25rem"),
        ]

    def test_theme_block(self):
        assert _pairs("@theme default {\n  --spacing: 0.25rem;\n}") == [("--spacing", "0.25rem")]

    def test_last_declaration_without_semicolon(self):
        assert _pairs("@theme { --spacing: 0.25rem }") == [("--spacing", "0.25rem")]

    def test_empty_value(self):
        assert _pairs("--x: ;") == [("--x", "")]

    def test_value_with_commas_and_functions(self):
        css = "--shadow-sm: 0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1);"
        assert _pairs(css) == [
            ("--shadow-sm", "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)")
        ]

    def test_quoted_semicolon(self):
        assert _pairs('--font-sans: "A;B", sans-serif;') == [("--font-sans", '"A;B", sans-serif')]

    def test_semicolon_inside_parentheses(self):
        css = "@theme {\n  --icon: url(data:image/png;base64,iVBORw0KGgo=);\n  --spacing: 0.25rem;\n}"
        assert _pairs(css) == [
            ("--icon", "url(data:image/png;base64,iVBORw0KGgo=)"),
            ("--spacing", "0.25rem"),
        ]

    def test_nested_parentheses(self):
        assert _pairs("--shadow-x: 0 1px rgb(0 0 0 / var(--a));") == [
            ("--shadow-x", "0 1px rgb(0 0 0 / var(--a))")
        ]

    def test_line_numbers(self):
        declarations = read_declarations("@theme {\n  --a: 1;\n\n  --b: 2;\n}")
        assert [d.line for d in declarations] == [2, 4]

    def test_empty_stylesheet(self):
        assert read_declarations("") == ()
        assert read_declarations("/* nothing */") == ()


class TestNesting:
    def test_keyframes_inside_theme(self):
        css = """
        @theme default {
          --animate-spin: spin 1s linear infinite;
          @keyframes spin {
            to {
              transform: rotate(360deg);
            }
          }
          --spacing: 0.25rem;
        }
        """
        assert _pairs(css) == [
            ("--animate-spin", "spin 1s linear infinite"),
            ("transform", "rotate(360deg)"),
            ("--spacing", "0.25rem"),
        ]

    def test_selector_blocks(self):
        css = '.dark, [data-mode="dark"] { --text-color-kumo-default: #fff; }\na:hover { color: red; }'
        assert _pairs(css) == [("--text-color-kumo-default", "#fff"), ("color", "red")]

    def test_at_statements_are_skipped(self):
        css = '@import "tailwindcss";\n@layer theme, base;\n@theme { --spacing: 0.25rem; }'
        assert _pairs(css) == [("--spacing", "0.25rem")]

    def test_comments_are_skipped(self):
        css = "/* Spacing */\n@theme {\n  /* base unit */\n  --spacing: 0.25rem; /* 4px */\n}"
        assert _pairs(css) == [("--spacing", "0.25rem")]


class TestLookup:
    def test_first_declaration_wins(self):
        declarations = read_declarations("--spacing: 0.25rem;\n.dense { --spacing: 0.2rem; }")
        assert lookup(declarations, "--spacing") == Declaration("--spacing", "0.25rem", line=1)
        assert parse_spacing(declarations).base_unit_px == 4

    def test_missing(self):
        assert lookup(read_declarations("--a: 1;"), "--b") is None


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestMalformed:
    @pytest.mark.parametrize("css", ["@theme { --spacing: 0.25rem;", "--spacing: 0.25rem; }"])
    def test_raises_theme_parse_error(self, css):
        with pytest.raises(ThemeParseError, match="Malformed stylesheet"):
            read_declarations(css)

    def test_non_rem_spacing(self):
        with pytest.raises(ThemeParseError, match="Expected a rem value for --spacing") as exc_info:
            parse_spacing("--spacing: 4px;")
        assert exc_info.value.variable == "--spacing"
