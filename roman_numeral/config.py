"""
Runtime settings for the converter service, read from the environment.

    ROMAN_SYMBOL_MODE   PRIMITIVE | STRICT | RELAXED        (default STRICT)
    ROMAN_LARGE_MODE    SIMPLE | APOSTROPHUS | CIFRAO       (default SIMPLE)
    ROMAN_LOG_LEVEL     DEBUG | INFO | WARNING | ERROR | CRITICAL  (default INFO)

Entry points load a ``.env`` file first when python-dotenv is installed.
"""

from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, field_validator

from .modes import LargeMode, SymbolMode

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConverterSettings(BaseModel):
    """Default modes and log level for a NumeralConverter."""

    symbol_mode: SymbolMode = SymbolMode.STRICT
    large_mode: LargeMode = LargeMode.SIMPLE
    log_level: LogLevel = "INFO"

    @field_validator("symbol_mode", "large_mode", "log_level", mode="before")
    @classmethod
    def _upper(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    @classmethod
    def from_env(cls) -> ConverterSettings:
        """Build settings from ``ROMAN_*`` environment variables.

        Raises:
            pydantic.ValidationError: If a variable holds an unknown mode or
                log level name.
        """
        overrides = {
            field: os.environ[name]
            for field, name in (
                ("symbol_mode", "ROMAN_SYMBOL_MODE"),
                ("large_mode", "ROMAN_LARGE_MODE"),
                ("log_level", "ROMAN_LOG_LEVEL"),
            )
            if os.environ.get(name)
        }
        return cls(**overrides)
