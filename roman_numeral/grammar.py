"""
Grammar validation — the whole-string acceptance check that runs before
any semantic parsing.

Every (SymbolMode × LargeMode) pair owns one compiled pattern. The symbol
grammar describes how the seven letters may be ordered; the large-number
grammar wraps it in a prefix (apostrophus groups) or a repetition
(cifrão-separated thousands groups).

The nine patterns are compiled once at import and shared by every caller.
"""

from __future__ import annotations

import re

from .exceptions import GrammarError
from .modes import LargeMode, SymbolMode
from .symbols import fold_case

# ─── Symbol Grammars ─────────────────────────────────────────────────

SYMBOL_GRAMMARS: dict[SymbolMode, str] = {
    SymbolMode.PRIMITIVE: r"M*D*C*L*X*V*I*",
    # Thousands repeat freely (MMMM = 4,000); below that at most three of
    # a kind and only the IV IX XL XC CD CM pairs
    SymbolMode.STRICT: r"M*(?:CM|CD|D?C{0,3})(?:XC|XL|L?X{0,3})(?:IX|IV|V?I{0,3})",
    SymbolMode.RELAXED: r"[MDCLXVI]*",
}

# ─── Large-Number Wrappers ───────────────────────────────────────────
# ``{0}`` is replaced by the symbol grammar.

LARGE_GRAMMARS: dict[LargeMode, str] = {
    LargeMode.SIMPLE: r"{0}",
    # Zero or more C…|Ͻ… groups (a half value has no leading C)
    LargeMode.APOSTROPHUS: r"(?:C*\|[Ͻ)]+)*{0}",
    LargeMode.CIFRAO: r"(?:(?:{0})\$+)*(?:{0})",
}

_WHITESPACE = re.compile(r"\s+")


def _compile(symbol_mode: SymbolMode, large_mode: LargeMode) -> re.Pattern[str]:
    return re.compile(LARGE_GRAMMARS[large_mode].format(SYMBOL_GRAMMARS[symbol_mode]))


_PATTERNS: dict[tuple[SymbolMode, LargeMode], re.Pattern[str]] = {
    (symbol_mode, large_mode): _compile(symbol_mode, large_mode)
    for symbol_mode in SymbolMode
    for large_mode in LargeMode
}


# ─── Public API ──────────────────────────────────────────────────────


def normalize(text: str) -> str:
    """Drop all whitespace and upper-case the numeral glyphs."""
    return fold_case(_WHITESPACE.sub("", text))


def grammar_pattern(symbol_mode: SymbolMode, large_mode: LargeMode) -> re.Pattern[str]:
    """Return the compiled acceptance pattern for a mode pair.

    The pattern expects normalised input (see :func:`normalize`).
    """
    return _PATTERNS[(SymbolMode(symbol_mode), LargeMode(large_mode))]


def validate_roman(
    text: str | None,
    symbol_mode: SymbolMode = SymbolMode.STRICT,
    large_mode: LargeMode = LargeMode.SIMPLE,
) -> None:
    """Check that ``text`` is a well-formed numeral for the mode pair.

    Interior whitespace is ignored and matching is case-insensitive.

    Raises:
        GrammarError: If the text is None or does not match from start to end.
    """
    if text is None:
        raise GrammarError(None, "Numeral must not be None.")

    pattern = grammar_pattern(symbol_mode, large_mode)
    if pattern.fullmatch(normalize(text)) is None:
        raise GrammarError(
            text,
            f"{text!r} is not a valid roman numeral "
            f"({SymbolMode(symbol_mode).value}/{LargeMode(large_mode).value}).",
            {
                "symbol_mode": SymbolMode(symbol_mode).value,
                "large_mode": LargeMode(large_mode).value,
            },
        )


def is_valid_roman(
    text: str | None,
    symbol_mode: SymbolMode = SymbolMode.STRICT,
    large_mode: LargeMode = LargeMode.SIMPLE,
) -> bool:
    """Boolean form of :func:`validate_roman`."""
    try:
        validate_roman(text, symbol_mode, large_mode)
    except GrammarError:
        return False
    return True
