"""
Pydantic models: the immutable numeral value and the conversion reports
produced by the converter service.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from .exceptions import InvalidMagnitude
from .formatter import number_to_roman
from .modes import MAX_VALUE, LargeMode, SymbolMode
from .parser import roman_to_number


# ─── Numeral Value ──────────────────────────────────────────────────


class NumeralValue(BaseModel):
    """An immutable non-negative integer with roman renderings.

    Usage:
        year = NumeralValue(1994)
        str(year)                                          # "MCMXCIV"
        year.to_roman(LargeMode.CIFRAO, SymbolMode.PRIMITIVE)
        NumeralValue.parse("XII$CCCXLV", large_mode=LargeMode.CIFRAO)
    """

    model_config = ConfigDict(frozen=True)

    value: StrictInt  # "12", True and 3.0 are rejected, not coerced

    def __init__(self, value: int, **data):
        super().__init__(value=value, **data)
        if not 0 <= self.value <= MAX_VALUE:
            raise InvalidMagnitude(
                f"Invalid value for a roman numeral: {self.value}",
                {"value": self.value, "max_value": MAX_VALUE},
            )

    @classmethod
    def parse(
        cls,
        text: str,
        symbol_mode: SymbolMode = SymbolMode.STRICT,
        large_mode: LargeMode = LargeMode.SIMPLE,
    ) -> NumeralValue:
        return cls(roman_to_number(text, symbol_mode, large_mode))

    def to_roman(
        self,
        large_mode: LargeMode = LargeMode.SIMPLE,
        symbol_mode: SymbolMode = SymbolMode.STRICT,
    ) -> str:
        return number_to_roman(self.value, large_mode, symbol_mode)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return self.to_roman()


# ─── Conversion Reports ─────────────────────────────────────────────


class ConversionFinding(BaseModel):
    """Why a conversion failed: machine-readable code plus context."""

    code: str  # e.g. "GRAMMAR_ERROR", "UNBALANCED_APOSTROPHUS_GROUP"
    message: str
    offset: Optional[int] = None  # Position in the normalised text, if known
    details: dict = Field(default_factory=dict)


class ConversionReport(BaseModel):
    """The outcome of parsing (or grammar-checking) one numeral."""

    text: str
    symbol_mode: SymbolMode
    large_mode: LargeMode
    is_valid: bool
    value: Optional[int] = None
    findings: list[ConversionFinding] = Field(default_factory=list)
