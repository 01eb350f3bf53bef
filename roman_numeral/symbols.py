"""
Symbol table: glyph ↔ symbol ↔ value.

Seven cardinal symbols carry a value. Three marker symbols modify how
neighbouring symbols are read:

    $   cifrão — multiplies everything before it by 1,000
    |   apostrophus divider
    Ͻ   mirrored C closing an apostrophus group (``)`` is accepted too)

Both lookup tables are built once at import and never modified.
"""

from __future__ import annotations

import string
from bisect import bisect_right
from enum import Enum

from .exceptions import InvalidMagnitude, UnknownSymbol


class Symbol(Enum):
    """A numeral symbol with its value, canonical glyph and alias glyphs."""

    M = (1000, "M")
    D = (500, "D")
    C = (100, "C")
    L = (50, "L")
    X = (10, "X")
    V = (5, "V")
    I = (1, "I")  # noqa: E741
    CIFRAO = (0, "$")
    DIVIDER = (0, "|")
    CLOSER = (0, "Ͻ", ")")

    def __init__(self, amount: int, glyph: str, *aliases: str):
        self.amount = amount
        self.glyph = glyph
        self.aliases = aliases

    @property
    def is_marker(self) -> bool:
        """True for symbols that modify other values instead of carrying one."""
        return self.amount == 0

    def __str__(self) -> str:
        return self.glyph


# ─── Lookup Tables ───────────────────────────────────────────────────


def _build_glyph_table() -> dict[str, Symbol]:
    table: dict[str, Symbol] = {}
    for symbol in Symbol:
        for glyph in (symbol.glyph, *symbol.aliases):
            if glyph in table:
                raise RuntimeError(
                    f"Glyph {glyph!r} mapped to both {table[glyph].name} and {symbol.name}"
                )
            table[glyph] = symbol
    return table


_BY_GLYPH: dict[str, Symbol] = _build_glyph_table()

# Cardinals in ascending value order, with a parallel list for bisection
CARDINALS: tuple[Symbol, ...] = tuple(
    sorted((s for s in Symbol if not s.is_marker), key=lambda s: s.amount)
)
_CARDINAL_AMOUNTS: list[int] = [s.amount for s in CARDINALS]

# Only ASCII letters and the mirrored C change case; str.upper() would also
# turn the dotless ı into I
_CASE_FOLD = str.maketrans(string.ascii_lowercase + "ͻ", string.ascii_uppercase + "Ͻ")


# ─── Lookups ─────────────────────────────────────────────────────────


def fold_case(text: str) -> str:
    """Upper-case the numeral glyphs in ``text``, leaving other characters alone."""
    return text.translate(_CASE_FOLD)


def symbol_of(glyph: str, offset: int = -1) -> Symbol:
    """Return the symbol for a single glyph (case-insensitive).

    Raises:
        UnknownSymbol: If the glyph is not a cardinal, marker or alias glyph.
    """
    if len(glyph) != 1:
        raise UnknownSymbol(glyph, offset)
    symbol = _BY_GLYPH.get(fold_case(glyph))
    if symbol is None:
        raise UnknownSymbol(glyph, offset)
    return symbol


def best_symbol_for(value: int) -> Symbol:
    """Return the cardinal symbol with the greatest value ≤ ``value``.

    This is the floor lookup the greedy formatter is built on.

    Raises:
        InvalidMagnitude: If ``value`` is smaller than 1.
    """
    if value < 1:
        raise InvalidMagnitude(
            f"Values must be strictly positive: {value}", {"value": value}
        )
    return CARDINALS[bisect_right(_CARDINAL_AMOUNTS, value) - 1]
