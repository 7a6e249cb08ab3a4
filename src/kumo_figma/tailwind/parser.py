"""Parse Tailwind utility-class strings into :class:`ParsedStyle` records.

Example::

    >>> parse_tailwind_classes("h-9 px-3 bg-kumo-brand text-white border").to_dict()
    {'height': 36, 'paddingX': 12, 'hasBorder': True, 'strokeWeight': 1,
     'fillVariable': 'color-kumo-brand', 'textVariable': None, 'isWhiteText': True}

Parsing is a pure, single-pass transform: tokenize, classify each token, then
fold the classified tokens left to right so that a later token overrides an
earlier one for the same field.  Unrecognized tokens are dropped (and logged
at DEBUG); nothing in here raises for string input.
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import Any, Iterable, Mapping, Optional

from kumo_figma.tailwind.model import UNSET, ParsedStyle
from kumo_figma.tailwind.tables import DEFAULT_TABLES, ThemeTables
from kumo_figma.tailwind.tokens import (
    Classified,
    StateVariant,
    Token,
    Unknown,
    classify_token,
    tokenize,
)

__all__ = [
    "accumulate",
    "classify",
    "parse",
    "parse_base_styles",
    "parse_tailwind_classes",
    "unknown_tokens",
]

log = logging.getLogger("kumo_figma.tailwind")


def classify(class_string: Optional[str], tables: ThemeTables = DEFAULT_TABLES) -> tuple[Token, ...]:
    """Tokenize *class_string* and classify every token, preserving order."""
    return tuple(classify_token(token, tables) for token in tokenize(class_string))


def unknown_tokens(class_string: Optional[str], tables: ThemeTables = DEFAULT_TABLES) -> tuple[str, ...]:
    """Return the raw tokens of *class_string* that no classifier recognized."""
    return tuple(t.raw for t in classify(class_string, tables) if isinstance(t, Unknown))


def _apply(fields: Mapping[str, Any], token: Classified) -> dict[str, Any]:
    """One fold step: overlay *token*'s assignments onto *fields*."""
    merged = dict(fields)
    for name, value in token.updates().items():
        if value is UNSET:
            merged.pop(name, None)
        else:
            merged[name] = value
    return merged


def accumulate(tokens: Iterable[Classified]) -> ParsedStyle:
    """Fold classified tokens into a :class:`ParsedStyle`, last one wins.

    State-variant tokens are folded separately per state; a state whose
    tokens assign nothing is left out.
    """
    tokens = tuple(tokens)
    base = reduce(_apply, (t for t in tokens if not isinstance(t, StateVariant)), {})

    by_state: dict[str, list[Classified]] = {}
    for token in tokens:
        if isinstance(token, StateVariant):
            by_state.setdefault(token.state, []).append(token.inner)

    states: dict[str, ParsedStyle] = {}
    for state, inner_tokens in by_state.items():
        state_style = accumulate(inner_tokens)
        if not state_style.is_empty:
            states[state] = state_style
    if states:
        base["states"] = states

    return ParsedStyle(**base)


def parse_tailwind_classes(
    class_string: Optional[str], tables: ThemeTables = DEFAULT_TABLES
) -> ParsedStyle:
    """Parse a space-separated Tailwind class string.

    Returns a fresh :class:`ParsedStyle`; empty or ``None`` input yields one
    with every field unset.
    """
    tokens = classify(class_string, tables)
    for token in tokens:
        if isinstance(token, Unknown):
            log.debug("Ignoring unrecognized class token: %s", token.raw)
    return accumulate(tokens)


def parse_base_styles(
    base_styles: Optional[str], tables: ThemeTables = DEFAULT_TABLES
) -> ParsedStyle:
    """Parse a registry ``baseStyles`` string. Same rules as :func:`parse_tailwind_classes`."""
    return parse_tailwind_classes(base_styles, tables)


parse = parse_tailwind_classes
