"""
Render integers as roman numerals.

Values below 5,000 are always written with the simple repetition
algorithm. Larger values use the notation chosen by ``LargeMode``:

    SIMPLE       12,345 → MMMMMMMMMMMMCCCXLV
    APOSTROPHUS  12,345 → CC|ϽϽC|ϽC|ϽCCCXLV
    CIFRAO       12,345 → XII$CCCXLV
"""

from __future__ import annotations

from .exceptions import InvalidMagnitude
from .modes import MAX_VALUE, LargeMode, SymbolMode
from .symbols import Symbol, best_symbol_for

# Textual contractions turning four-fold repetitions into subtractive
# pairs. Order matters: each is applied once, left to right.
_CONTRACTIONS: tuple[tuple[str, str], ...] = (
    ("DCCCC", "CM"),
    ("CCCC", "CD"),
    ("LXXXX", "XC"),
    ("XXXX", "XL"),
    ("VIIII", "IX"),
    ("IIII", "IV"),
)

_LARGE_THRESHOLD = 5000


def number_to_roman(
    value: int,
    large_mode: LargeMode = LargeMode.SIMPLE,
    symbol_mode: SymbolMode = SymbolMode.STRICT,
) -> str:
    """Return the roman numeral for ``value``.

    Args:
        value: Integer in ``[0, 2**31 - 1]``. Zero renders as an empty string.
        large_mode: Notation for values of 5,000 and above.
        symbol_mode: PRIMITIVE keeps four-fold repetitions (IIII), the other
            modes contract them into subtractive pairs (IV).

    Raises:
        InvalidMagnitude: If ``value`` is negative or above the ceiling.
    """
    if value < 0:
        raise InvalidMagnitude(f"Number must be non-negative: {value}", {"value": value})
    if value > MAX_VALUE:
        raise InvalidMagnitude(
            f"Value is too large (> {MAX_VALUE}): {value}",
            {"value": value, "max_value": MAX_VALUE},
        )

    large_mode = LargeMode(large_mode)
    symbol_mode = SymbolMode(symbol_mode)
    if large_mode is LargeMode.APOSTROPHUS:
        return _format_apostrophus(value, symbol_mode)
    if large_mode is LargeMode.CIFRAO:
        return _format_cifrao(value, symbol_mode)
    return _format_simple(value, symbol_mode)


# ─── Simple Repetition ───────────────────────────────────────────────


def _contract(numeral: str) -> str:
    for long_form, short_form in _CONTRACTIONS:
        numeral = numeral.replace(long_form, short_form)
    return numeral


def _format_simple(value: int, symbol_mode: SymbolMode) -> str:
    """Greedy floor-lookup rendering, contracted unless PRIMITIVE."""
    parts: list[str] = []
    remainder = value
    while remainder > 0:
        symbol = best_symbol_for(remainder)
        parts.append(symbol.glyph)
        remainder -= symbol.amount
        if remainder < 0:
            raise RuntimeError(f"Error in calculations: remainder={remainder}")

    numeral = "".join(parts)
    if symbol_mode is SymbolMode.PRIMITIVE:
        return numeral
    return _contract(numeral)


# ─── Apostrophus ─────────────────────────────────────────────────────


def apostrophus_group(digit: int, arcs: int) -> str:
    """Return the bracket group for one decimal digit of the thousands part.

    ``arcs`` is the digit position (1 = thousands, 2 = ten-thousands, …).
    A one is ``C…|Ͻ…`` with ``arcs`` marks on each side; a five is
    ``|Ͻ…`` with ``arcs + 1`` closers. Other digits are concatenations:
    four is four ones, eight is a five followed by three ones.
    """
    if not 1 <= digit <= 9:
        raise ValueError(f"Invalid digit for apostrophus group: {digit}")

    closer = Symbol.CLOSER.glyph
    one = Symbol.C.glyph * arcs + Symbol.DIVIDER.glyph + closer * arcs
    if digit < 5:
        return one * digit
    five = Symbol.DIVIDER.glyph + closer * (arcs + 1)
    return five + one * (digit - 5)


def _format_apostrophus(value: int, symbol_mode: SymbolMode) -> str:
    if value < _LARGE_THRESHOLD:
        return _format_simple(value, symbol_mode)

    groups: list[str] = []
    thousands = value // 1000
    arcs = 1
    while thousands > 0:
        digit = thousands % 10
        if digit:
            groups.append(apostrophus_group(digit, arcs))
        thousands //= 10
        arcs += 1

    # Collected least significant first
    groups.reverse()
    return "".join(groups) + _format_simple(value % 1000, symbol_mode)


# ─── Cifrão ──────────────────────────────────────────────────────────


def _format_cifrao(value: int, symbol_mode: SymbolMode) -> str:
    if value < _LARGE_THRESHOLD:
        return _format_simple(value, symbol_mode)

    segments: list[str] = []
    while value > 1000:
        segments.append(_format_simple(value % 1000, symbol_mode))
        segments.append(Symbol.CIFRAO.glyph)
        value //= 1000
    segments.append(_format_simple(value, symbol_mode))

    segments.reverse()
    return "".join(segments)
