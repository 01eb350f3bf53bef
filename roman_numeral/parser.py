"""
Parse roman numerals into integers.

Flow:
    text ─► grammar check ─► normalise ─► glyphs → symbols ─► buffer scan ─► int

The scan walks the symbols left to right and collects runs of related
symbols in a ParseBuffer:

    - a run of one cardinal (``CCC``) resolves to value × length and is
      subtracted when the next symbol is worth more (``IX``), added otherwise;
    - an apostrophus group (``CC|ϽϽ``) resolves to 50 or 100 × 10^closers
      and is always added;
    - a cifrão (``$``) closes the current run and multiplies everything
      read so far by 1,000.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from .exceptions import (
    InvalidMagnitude,
    MalformedApostrophusGroup,
    MixedSymbolGroup,
    UnbalancedApostrophusGroup,
)
from .grammar import normalize, validate_roman
from .modes import MAX_VALUE, LargeMode, SymbolMode
from .symbols import Symbol, symbol_of

logger = logging.getLogger(__name__)


# ─── Parse Buffer ────────────────────────────────────────────────────


@dataclass
class ParseBuffer:
    """A run of related symbols awaiting resolution into a value.

    ``start`` is the offset of the first buffered symbol in the normalised
    text; error offsets are reported relative to it.
    """

    symbols: list[Symbol] = field(default_factory=list)
    start: int = 0

    @property
    def last(self) -> Symbol | None:
        return self.symbols[-1] if self.symbols else None

    @property
    def is_apostrophus(self) -> bool:
        return self.last is Symbol.CLOSER

    def append(self, symbol: Symbol, offset: int) -> None:
        if not self.symbols:
            self.start = offset
        self.symbols.append(symbol)

    def flush_before(self, incoming: Symbol) -> int:
        """Resolve the run ahead of a different symbol, returning a signed value.

        A simple run worth less than the incoming symbol is subtracted.
        """
        last = self.last
        subtractive = (
            last is not None
            and not self.is_apostrophus
            and last.amount < incoming.amount
        )
        value = self.resolve()
        return -value if subtractive else value

    def resolve(self) -> int:
        """Return the value of the buffered run and empty the buffer."""
        if not self.symbols:
            logger.debug("Evaluating empty symbol buffer at position %d", self.start)
            return 0

        if self.is_apostrophus or Symbol.DIVIDER in self.symbols:
            value = self._apostrophus_value()
        else:
            value = self._simple_value()
        self.symbols.clear()
        return value

    def _simple_value(self) -> int:
        first = self.symbols[0]
        if first.is_marker:
            raise MixedSymbolGroup(
                f"Illegal marker symbol {first} in a simple group", self.start
            )
        for index, symbol in enumerate(self.symbols):
            if symbol is not first:
                raise MixedSymbolGroup(
                    "Character group contains different characters.",
                    self.start + index,
                    {"expected": first.glyph, "found": symbol.glyph},
                )
        return first.amount * len(self.symbols)

    def _apostrophus_value(self) -> int:
        """Read the group backwards: closers, one divider, then hundreds."""
        closing = 0
        opening = 0
        in_closing = True

        for index in range(len(self.symbols) - 1, -1, -1):
            symbol = self.symbols[index]
            if in_closing:
                if symbol is Symbol.CLOSER:
                    closing += 1
                elif symbol is Symbol.DIVIDER:
                    in_closing = False
                else:
                    raise MalformedApostrophusGroup(
                        f"Invalid character {symbol} in apostrophus group - "
                        f"expecting {Symbol.CLOSER} or {Symbol.DIVIDER}",
                        self.start + index,
                    )
            elif symbol is Symbol.C:
                opening += 1
            else:
                raise MalformedApostrophusGroup(
                    f"Invalid character {symbol} in apostrophus group - "
                    f"expecting {Symbol.C}",
                    self.start + index,
                )

        if in_closing:
            raise MalformedApostrophusGroup(
                f"Apostrophus group without {Symbol.DIVIDER}", self.start
            )
        if not closing:
            raise MalformedApostrophusGroup(
                f"Apostrophus group without {Symbol.CLOSER}",
                self.start + len(self.symbols) - 1,
            )
        if opening and opening != closing:
            raise UnbalancedApostrophusGroup(
                "Number of opening/closing characters in apostrophus group "
                f"does not match ({opening}/{closing})",
                self.start,
                {"opening": opening, "closing": closing},
            )
        return 10**closing * (100 if opening else 50)


# ─── Symbol Scan ─────────────────────────────────────────────────────


def evaluate_symbols(symbols: Sequence[Symbol]) -> int:
    """Compute the value of an already tokenised numeral.

    Raises:
        MalformedApostrophusGroup: Divider or closer in an impossible position.
        UnbalancedApostrophusGroup: ``CC|Ͻ`` style groups.
        MixedSymbolGroup: A run that cannot be read as one symbol repeated.
    """
    total = 0
    buffer = ParseBuffer()

    for offset, symbol in enumerate(symbols):
        last = buffer.last

        if symbol is Symbol.CIFRAO:
            total = (total + buffer.resolve()) * 1000
            continue

        if symbol is Symbol.DIVIDER:
            if last is Symbol.CLOSER:
                # A finished group followed by a half value: CC|ϽϽ|ϽϽ
                total += buffer.resolve()
            elif last is not None and last is not Symbol.C:
                raise MalformedApostrophusGroup(
                    f"Invalid apostrophus after {last}", offset
                )
        elif symbol is Symbol.CLOSER:
            if last is not Symbol.DIVIDER and last is not Symbol.CLOSER:
                raise MalformedApostrophusGroup(
                    f"Invalid character {symbol} not following "
                    f"{Symbol.DIVIDER} or {Symbol.CLOSER}",
                    offset,
                )
        elif last is not None and symbol is not last:
            total += buffer.flush_before(symbol)

        buffer.append(symbol, offset)

    return total + buffer.resolve()


# ─── Main Parser ─────────────────────────────────────────────────────


def roman_to_number(
    text: str,
    symbol_mode: SymbolMode = SymbolMode.STRICT,
    large_mode: LargeMode = LargeMode.SIMPLE,
) -> int:
    """Parse a roman numeral into an integer.

    Args:
        text: e.g. "MCMXCIV", "cc|ϽϽ c|Ͻ", "XII$CCCXLV". Whitespace is
            ignored and case does not matter. The empty string is zero.
        symbol_mode: Accepted ordering discipline.
        large_mode: Accepted large-number notation.

    Raises:
        GrammarError: The text does not match the mode pair's grammar.
        NumeralParseError: A symbol run cannot be resolved (see subclasses).
        InvalidMagnitude: The result falls outside ``[0, 2**31 - 1]``.
    """
    validate_roman(text, symbol_mode, large_mode)

    symbols = [symbol_of(glyph, offset) for offset, glyph in enumerate(normalize(text))]
    value = evaluate_symbols(symbols)

    if not 0 <= value <= MAX_VALUE:
        raise InvalidMagnitude(
            f"{text!r} evaluates to {value}, outside [0, {MAX_VALUE}]",
            {"text": text, "value": value},
        )
    return value
