"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from roman_numeral.converter import NumeralConverter  # noqa: E402


@pytest.fixture
def converter() -> NumeralConverter:
    """A converter with default settings (Strict symbols, Simple notation)."""
    return NumeralConverter()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep ROMAN_* variables from the developer's shell out of the tests."""
    for name in ("ROMAN_SYMBOL_MODE", "ROMAN_LARGE_MODE", "ROMAN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
