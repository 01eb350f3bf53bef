"""
Roman Numeral Engine — Parse, validate and format roman numerals.

Architecture: Grammar check → Symbol scan → Value    (parse)
              Greedy symbols → Large-number notation (format)
Modes:        Symbol order (Primitive / Strict / Relaxed) × large numbers
              (Simple / Apostrophus / Cifrão)
"""

__version__ = "1.0.0"
