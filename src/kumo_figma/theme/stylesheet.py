"""Lark Transformer that collects custom-property declarations from CSS."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer, UnexpectedInput

from kumo_figma.theme.errors import ThemeParseError

GRAMMAR_PATH = Path(__file__).parent / "stylesheet.lark"


@dataclass(frozen=True)
class Declaration:
    """One ``name: value`` declaration, value stripped of surrounding space."""

    name: str
    value: str
    line: int | None = None


class DeclarationCollector(Transformer):  # type: ignore[type-arg]
    """Flatten a stylesheet parse tree into its declarations, in source order."""

    def declaration(self, items: list[Token]) -> list[Declaration]:
        name = items[0]
        value = str(items[1]).strip() if len(items) > 1 else ""
        return [Declaration(name=str(name), value=value, line=name.line)]

    def block(self, items: list[object]) -> list[Declaration]:
        # items[0] is the prelude (``@theme default``, ``.dark``, ...)
        return [d for item in items[1:] if isinstance(item, list) for d in item]

    def start(self, items: list[object]) -> tuple[Declaration, ...]:
        return tuple(d for item in items if isinstance(item, list) for d in item)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )


def read_declarations(css: str) -> tuple[Declaration, ...]:
    """Parse *css* and return every declaration, nested blocks included."""
    try:
        tree = _parser().parse(css)
    except UnexpectedInput as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ThemeParseError(
            f"Malformed stylesheet: {e}", line=line, column=column
        ) from e
    return DeclarationCollector().transform(tree)


def lookup(declarations: tuple[Declaration, ...], name: str) -> Declaration | None:
    """Return the first declaration of *name*, or None."""
    for declaration in declarations:
        if declaration.name == name:
            return declaration
    return None
