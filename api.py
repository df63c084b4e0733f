"""
Indian Numerals — FastAPI Server
=================================

RESTful API for converting between numerals and Indian-system English words.

Endpoints:
    POST /to-words          Numeral text -> words + grouped numeral
    POST /to-number         Words text -> grouped numeral
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import os
from typing import Optional

from fastapi import FastAPI
from pydantic import BaseModel, Field

from indian_numerals import __version__
from indian_numerals.converter import convert_number, convert_words
from indian_numerals.models import ConversionResult, ErrorKind

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass

MAX_INPUT_LENGTH = int(os.environ.get("MAX_INPUT_LENGTH", "500"))


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Indian Numerals API",
    description=(
        "Converts numerals to spoken English with Indian place values "
        "(thousand, lakh, crore, arab, kharab) and back, with 12,34,567-style grouping."
    ),
    version=__version__,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for both conversion endpoints."""

    text: str = Field(
        ...,
        min_length=1,
        max_length=MAX_INPUT_LENGTH,
        description="Raw user text: a numeral for /to-words, number words for /to-number.",
        json_schema_extra={"example": "1234567"},
    )


class ConvertResponse(BaseModel):
    """Outcome of a single conversion. Failures are results, not HTTP errors."""

    input: str
    ok: bool
    result: Optional[str] = None
    error_code: Optional[ErrorKind] = None
    message: Optional[str] = None

    model_config = {"json_schema_extra": {"example": {
        "input": "1234567",
        "ok": True,
        "result": "Twelve Lakh Thirty Four Thousand Five Hundred Sixty Seven (12,34,567)",
        "error_code": None,
        "message": None,
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _build_response(text: str, result: ConversionResult) -> ConvertResponse:
    return ConvertResponse(
        input=text,
        ok=result.ok,
        result=result.value,
        error_code=result.error,
        message=result.message,
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post("/to-words", summary="Convert a numeral to words", tags=["Conversion"])
def to_words(request: ConvertRequest) -> ConvertResponse:
    """Spell out a numeral such as `1234567.05`.

    - **result**: e.g. `Twelve Lakh ... Seven Point Zero Five (12,34,567.05)`
    - **error_code**: `INVALID_NUMBER` or `NUMBER_TOO_LARGE` on failure
    """
    return _build_response(request.text, convert_number(request.text))


@app.post("/to-number", summary="Convert words to a numeral", tags=["Conversion"])
def to_number(request: ConvertRequest) -> ConvertResponse:
    """Parse number words such as `twelve lakh thirty four thousand`.

    - **result**: e.g. `12,34,000`
    - **error_code**: `INVALID_WORD`, `INVALID_DECIMAL_WORD` or `NUMBER_TOO_LARGE`
    """
    return _build_response(request.text, convert_words(request.text))


@app.get("/health", summary="Health check", tags=["System"])
def health_check() -> HealthResponse:
    """Returns service status and version."""
    return HealthResponse(status="healthy", version=__version__)
