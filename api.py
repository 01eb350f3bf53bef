"""
Roman Numeral Engine — FastAPI Server
=====================================

RESTful API for converting between integers and roman numerals.

Endpoints:
    POST /format              Render an integer as a roman numeral
    POST /parse               Parse a roman numeral into an integer
    POST /validate            Grammar check only
    GET  /renderings/{value}  Every mode-pair rendering of a value
    GET  /health              Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from roman_numeral import __version__
from roman_numeral.config import ConverterSettings
from roman_numeral.converter import NumeralConverter
from roman_numeral.exceptions import InvalidMagnitude
from roman_numeral.models import ConversionReport
from roman_numeral.modes import MAX_VALUE, LargeMode, SymbolMode

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Application Lifespan (pre-warm converter) ──────────────────────

_converter: NumeralConverter | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the converter from ROMAN_* settings on startup."""
    global _converter  # noqa: PLW0603
    _converter = NumeralConverter(ConverterSettings.from_env())
    yield
    _converter = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Roman Numeral Engine API",
    description=(
        "Parse, validate and format roman numerals. Strict, relaxed and "
        "primitive symbol ordering; simple, apostrophus and cifrão notation "
        "for large numbers."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class FormatRequest(BaseModel):
    """Request body for the /format endpoint."""

    value: int = Field(..., description="Integer to render (range checked by the engine).")
    large_mode: Optional[LargeMode] = None
    symbol_mode: Optional[SymbolMode] = None

    model_config = {"json_schema_extra": {"example": {
        "value": 12345,
        "large_mode": "APOSTROPHUS",
        "symbol_mode": "STRICT",
    }}}


class FormatResponse(BaseModel):
    value: int
    numeral: str
    large_mode: LargeMode
    symbol_mode: SymbolMode


class NumeralRequest(BaseModel):
    """Request body for the /parse and /validate endpoints."""

    text: str = Field(
        ...,
        max_length=4096,
        description="Roman numeral text; whitespace ignored, case-insensitive.",
        json_schema_extra={"example": "MCMXCIV"},
    )
    symbol_mode: Optional[SymbolMode] = None
    large_mode: Optional[LargeMode] = None


class ReportOut(ConversionReport):
    """API-facing report (inherits all fields from ConversionReport)."""

    model_config = {"json_schema_extra": {"example": {
        "text": "IIII",
        "symbol_mode": "STRICT",
        "large_mode": "SIMPLE",
        "is_valid": False,
        "value": None,
        "findings": [
            {
                "code": "GRAMMAR_ERROR",
                "message": "'IIII' is not a valid roman numeral (STRICT/SIMPLE).",
                "offset": None,
                "details": {"text": "IIII"},
            }
        ],
    }}}


class RenderingsResponse(BaseModel):
    value: int
    renderings: dict[str, str]


class HealthResponse(BaseModel):
    status: str
    version: str
    symbol_mode: SymbolMode
    large_mode: LargeMode
    max_value: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_converter() -> NumeralConverter:
    if _converter is None:
        raise HTTPException(status_code=503, detail="Converter not initialised")
    return _converter


def _magnitude_error(exc: InvalidMagnitude) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"code": exc.code, "message": exc.message, "details": exc.details},
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/format",
    summary="Render an integer as a roman numeral",
    tags=["Conversion"],
    responses={
        422: {"description": "Value negative or above 2**31 - 1"},
        503: {"description": "Converter not yet initialised"},
    },
)
def format_value(request: FormatRequest) -> FormatResponse:
    """Render `value` using the requested (or configured default) modes."""
    converter = _get_converter()
    large_mode = request.large_mode or converter.settings.large_mode
    symbol_mode = request.symbol_mode or converter.settings.symbol_mode
    try:
        numeral = converter.format(request.value, large_mode, symbol_mode)
    except InvalidMagnitude as exc:
        raise _magnitude_error(exc)

    return FormatResponse(
        value=request.value,
        numeral=numeral,
        large_mode=large_mode,
        symbol_mode=symbol_mode,
    )


@app.post(
    "/parse",
    summary="Parse a roman numeral",
    tags=["Conversion"],
    responses={503: {"description": "Converter not yet initialised"}},
)
def parse_numeral(request: NumeralRequest) -> ReportOut:
    """Parse `text` into an integer.

    Returns a report with:
    - **is_valid**: `true` if the numeral was accepted
    - **value**: the parsed integer (null when invalid)
    - **findings**: the typed reason for rejection, with the offending offset
    """
    converter = _get_converter()
    report = converter.parse(request.text, request.symbol_mode, request.large_mode)
    return ReportOut.model_validate(report, from_attributes=True)


@app.post(
    "/validate",
    summary="Check a roman numeral against the mode grammar",
    tags=["Conversion"],
    responses={503: {"description": "Converter not yet initialised"}},
)
def validate_numeral(request: NumeralRequest) -> ReportOut:
    """Grammar check only: no value is computed."""
    converter = _get_converter()
    report = converter.check(request.text, request.symbol_mode, request.large_mode)
    return ReportOut.model_validate(report, from_attributes=True)


@app.get(
    "/renderings/{value}",
    summary="Render a value under every mode pair",
    tags=["Conversion"],
    responses={
        422: {"description": "Value negative or above 2**31 - 1"},
        503: {"description": "Converter not yet initialised"},
    },
)
def renderings(value: int) -> RenderingsResponse:
    converter = _get_converter()
    try:
        rendered = converter.render_all(value)
    except InvalidMagnitude as exc:
        raise _magnitude_error(exc)
    return RenderingsResponse(value=value, renderings=rendered)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Converter not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    converter = _get_converter()
    return HealthResponse(
        status="healthy",
        version=__version__,
        symbol_mode=converter.settings.symbol_mode,
        large_mode=converter.settings.large_mode,
        max_value=MAX_VALUE,
    )
