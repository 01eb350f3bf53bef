"""
Processing modes for numeral formatting and parsing.

A conversion is always described by a pair of modes:

    SymbolMode  — how the seven letters may be ordered (subtraction rule)
    LargeMode   — how values beyond the letter range are written
"""

from __future__ import annotations

from enum import Enum

# Largest value the engine formats or accepts (signed 32-bit ceiling).
MAX_VALUE = 2**31 - 1


class SymbolMode(str, Enum):
    """Ordering discipline for the cardinal symbols."""

    PRIMITIVE = "PRIMITIVE"  # Non-increasing run, no subtraction at all
    STRICT = "STRICT"  # Only IV IX XL XC CD CM style pairs
    RELAXED = "RELAXED"  # Any smaller symbol before a larger one subtracts


class LargeMode(str, Enum):
    """Notation for values of five thousand and above."""

    SIMPLE = "SIMPLE"  # Plain repetition of M
    APOSTROPHUS = "APOSTROPHUS"  # C|Ͻ = 1,000   |ϽϽ = 5,000   CC|ϽϽ = 10,000
    CIFRAO = "CIFRAO"  # V$ = 5,000   X$$ = 10,000,000
