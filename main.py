#!/usr/bin/env python3
"""
Roman Numeral Engine — Entry Point
==================================

Checks ``I$`` against the (Strict, Simple) grammar, logs the rejection,
then prints a table of sample values under every notation.

Usage:
    python main.py
    ROMAN_LOG_LEVEL=DEBUG python main.py
"""

from __future__ import annotations

import logging
import sys

from roman_numeral.config import ConverterSettings
from roman_numeral.converter import NumeralConverter
from roman_numeral.exceptions import GrammarError
from roman_numeral.grammar import validate_roman
from roman_numeral.modes import LargeMode, SymbolMode

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass

logger = logging.getLogger("roman_numeral.demo")

SAMPLE_VALUES = (4, 1994, 4999, 5000, 12_345, 388_888, 1_001_000)


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


def _print_table(converter: NumeralConverter) -> None:
    print(f"\n{_BOLD}{'─' * _WIDTH}{_RESET}")
    print(f"{_BOLD}  SAMPLE RENDERINGS (symbol mode: {converter.settings.symbol_mode.value}){_RESET}")
    print(f"{_BOLD}{'─' * _WIDTH}{_RESET}")
    for value in SAMPLE_VALUES:
        print(f"\n  {_CYAN}{value:,}{_RESET}")
        for large_mode in LargeMode:
            numeral = converter.format(value, large_mode)
            report = converter.parse(numeral, large_mode=large_mode)
            mark = f"{_GREEN}✓{_RESET}" if report.value == value else f"{_RED}✗{_RESET}"
            shown = numeral if len(numeral) <= 48 else numeral[:45] + "..."
            print(f"    {_DIM}{large_mode.value:<12}{_RESET} {mark} {shown}")


def main() -> int:
    settings = ConverterSettings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        validate_roman("I$", SymbolMode.STRICT, LargeMode.SIMPLE)
    except GrammarError as exc:
        logger.error("Rejected %r: %s", exc.text, exc)

    _print_table(NumeralConverter(settings))
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
