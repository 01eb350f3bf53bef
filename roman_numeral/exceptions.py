"""
Custom exception hierarchy for numeral conversion.

Each exception type maps to one category of failure and carries a
machine-readable ``code`` so callers (and the HTTP layer) can branch on
the kind of error rather than on its message.
"""

from __future__ import annotations


class NumeralError(Exception):
    """Base exception for all numeral conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidMagnitude(NumeralError):
    """The value is negative or above the supported ceiling."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_MAGNITUDE", message, details)


class GrammarError(NumeralError):
    """The text does not match the grammar of the requested mode pair."""

    def __init__(self, text: str | None, message: str, details: dict | None = None):
        self.text = text
        super().__init__("GRAMMAR_ERROR", message, {"text": text, **(details or {})})


class UnknownSymbol(NumeralError):
    """A character has no symbol mapping."""

    def __init__(self, glyph: str, offset: int = -1, details: dict | None = None):
        self.glyph = glyph
        self.offset = offset
        super().__init__(
            "UNKNOWN_SYMBOL",
            f"Not a roman numeral character: {glyph!r}",
            {"glyph": glyph, "offset": offset, **(details or {})},
        )


class NumeralParseError(NumeralError):
    """Semantic failure while resolving a symbol run into a value.

    ``offset`` is the approximate character position (in the normalised
    text) at which the inconsistency was detected.
    """

    def __init__(self, code: str, message: str, offset: int, details: dict | None = None):
        self.offset = offset
        super().__init__(code, message, {"offset": offset, **(details or {})})


class MixedSymbolGroup(NumeralParseError):
    """A simple run contains more than one kind of symbol."""

    def __init__(self, message: str, offset: int, details: dict | None = None):
        super().__init__("MIXED_SYMBOL_GROUP", message, offset, details)


class MalformedApostrophusGroup(NumeralParseError):
    """Divider or closer appears where an apostrophus group cannot continue."""

    def __init__(self, message: str, offset: int, details: dict | None = None):
        super().__init__("MALFORMED_APOSTROPHUS_GROUP", message, offset, details)


class UnbalancedApostrophusGroup(NumeralParseError):
    """Opening and closing runs of an apostrophus group differ in length."""

    def __init__(self, message: str, offset: int, details: dict | None = None):
        super().__init__("UNBALANCED_APOSTROPHUS_GROUP", message, offset, details)
