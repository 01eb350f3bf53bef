"""
Conversion service — wraps the engine in typed, loggable reports.

Flow (parse):
  ┌──────────┐
  │   Text   │
  └────┬─────┘
       │
  ┌────▼─────┐
  │ Grammar  │   ← Whole-string acceptance check (fails fast)
  └────┬─────┘
       │
  ┌────▼─────┐
  │  Parser  │   ← Buffer scan, apostrophus groups, cifrão multiply
  └────┬─────┘
       │
  ┌────▼─────┐
  │  Report  │   ← Value or typed finding, never an exception
  └──────────┘

Design principles:
  - The library functions raise; the service reports.
  - Defaults come from ConverterSettings; every call may override them.
  - Formatting errors (bad magnitudes) are caller errors and still raise.
"""

from __future__ import annotations

import logging

from .config import ConverterSettings
from .exceptions import NumeralError
from .formatter import number_to_roman
from .grammar import validate_roman
from .models import ConversionFinding, ConversionReport
from .modes import LargeMode, SymbolMode
from .parser import roman_to_number

logger = logging.getLogger(__name__)


class NumeralConverter:
    """Parses and formats numerals with configurable default modes.

    Usage:
        converter = NumeralConverter()
        report = converter.parse("MCMXCIV")
        if report.is_valid:
            print(report.value)
        else:
            for finding in report.findings:
                print(finding.code, finding.message)
    """

    def __init__(self, settings: ConverterSettings | None = None):
        self.settings = settings or ConverterSettings()

    # ─── Parsing ─────────────────────────────────────────────────────

    def parse(
        self,
        text: str,
        symbol_mode: SymbolMode | None = None,
        large_mode: LargeMode | None = None,
    ) -> ConversionReport:
        """Parse ``text`` and report the value or the reason it failed."""
        symbol_mode, large_mode = self._modes(symbol_mode, large_mode)
        logger.debug("Parsing %r (%s/%s)", text, symbol_mode.value, large_mode.value)

        try:
            value = roman_to_number(text, symbol_mode, large_mode)
        except NumeralError as exc:
            logger.info("Rejected %r: %s", text, exc.code)
            return self._failed(text, symbol_mode, large_mode, exc)

        return ConversionReport(
            text=text,
            symbol_mode=symbol_mode,
            large_mode=large_mode,
            is_valid=True,
            value=value,
        )

    def check(
        self,
        text: str,
        symbol_mode: SymbolMode | None = None,
        large_mode: LargeMode | None = None,
    ) -> ConversionReport:
        """Run only the grammar check; the report carries no value."""
        symbol_mode, large_mode = self._modes(symbol_mode, large_mode)
        logger.debug("Checking %r (%s/%s)", text, symbol_mode.value, large_mode.value)

        try:
            validate_roman(text, symbol_mode, large_mode)
        except NumeralError as exc:
            return self._failed(text, symbol_mode, large_mode, exc)

        return ConversionReport(
            text=text, symbol_mode=symbol_mode, large_mode=large_mode, is_valid=True
        )

    # ─── Formatting ──────────────────────────────────────────────────

    def format(
        self,
        value: int,
        large_mode: LargeMode | None = None,
        symbol_mode: SymbolMode | None = None,
    ) -> str:
        """Render ``value``; raises InvalidMagnitude outside ``[0, 2**31 - 1]``."""
        symbol_mode, large_mode = self._modes(symbol_mode, large_mode)
        numeral = number_to_roman(value, large_mode, symbol_mode)
        logger.debug("Formatted %d as %r (%s/%s)", value, numeral, large_mode.value, symbol_mode.value)
        return numeral

    def render_all(self, value: int) -> dict[str, str]:
        """Render ``value`` under every mode pair, keyed ``"LARGE/SYMBOL"``."""
        return {
            f"{large_mode.value}/{symbol_mode.value}": number_to_roman(
                value, large_mode, symbol_mode
            )
            for large_mode in LargeMode
            for symbol_mode in SymbolMode
        }

    # ─── Internal Helpers ────────────────────────────────────────────

    def _modes(
        self, symbol_mode: SymbolMode | None, large_mode: LargeMode | None
    ) -> tuple[SymbolMode, LargeMode]:
        return (
            SymbolMode(symbol_mode or self.settings.symbol_mode),
            LargeMode(large_mode or self.settings.large_mode),
        )

    @staticmethod
    def _failed(
        text: str,
        symbol_mode: SymbolMode,
        large_mode: LargeMode,
        exc: NumeralError,
    ) -> ConversionReport:
        offset = getattr(exc, "offset", None)
        finding = ConversionFinding(
            code=exc.code,
            message=exc.message,
            offset=offset if offset is not None and offset >= 0 else None,
            details={k: v for k, v in exc.details.items() if k != "offset"},
        )
        return ConversionReport(
            text=text,
            symbol_mode=symbol_mode,
            large_mode=large_mode,
            is_valid=False,
            findings=[finding],
        )
