"""
Numeral Speller — FastAPI Server
=================================

RESTful API for spelling out numbers in English.

Endpoints:
    POST /spell             Spell a number given in the JSON body
    GET  /spell/{number}    Spell a number given in the path
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from numeral_speller import __version__
from numeral_speller.exceptions import SpellError
from numeral_speller.models import SpellResult
from numeral_speller.speller import NumeralSpeller

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass

logging.basicConfig(level=os.environ.get("NUMERAL_SPELLER_LOG_LEVEL", "WARNING").upper())
logger = logging.getLogger(__name__)

MAX_INPUT_LENGTH = int(os.environ.get("NUMERAL_SPELLER_MAX_INPUT_LENGTH", "1024"))


# ─── Application Lifespan ────────────────────────────────────────────

_speller: NumeralSpeller | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the shared speller on startup."""
    global _speller  # noqa: PLW0603
    _speller = NumeralSpeller()
    yield
    _speller = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Numeral Speller API",
    description=(
        "Spells out positive integers of up to 102 digits in English words "
        "and in a mixed words-and-digits form, using US scale names up to "
        "duotrigintillion."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class SpellRequest(BaseModel):
    """Request body for the /spell endpoint."""

    number: str = Field(
        ...,
        min_length=1,
        max_length=MAX_INPUT_LENGTH,
        description="Digits to spell out; commas are allowed as separators.",
        json_schema_extra={"example": "1,000,001"},
    )


class SpellResponse(SpellResult):
    """API-facing result (inherits all fields from SpellResult)."""

    model_config = {"json_schema_extra": {"example": {
        "digits": "1000001",
        "words": "one million one",
        "words_and_digits": "1 million 1",
        "digit_count": 7,
    }}}


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict = Field(default_factory=dict)


class HealthResponse(BaseModel):
    status: str
    version: str
    max_digits: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_speller() -> NumeralSpeller:
    if _speller is None:
        raise HTTPException(status_code=503, detail="Speller not initialised")
    return _speller


def _spell(number: str) -> SpellResponse:
    result = _get_speller().spell(number)
    return SpellResponse.model_validate(result, from_attributes=True)


@app.exception_handler(SpellError)
async def spell_error_handler(request: Request, exc: SpellError) -> JSONResponse:
    """Report conversion failures as 422 with the error's code and details."""
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.code)
    body = ErrorResponse(code=exc.code, message=exc.message, details=exc.details)
    return JSONResponse(status_code=422, content=body.model_dump())


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/spell",
    summary="Spell a number from the request body",
    tags=["Spelling"],
    responses={
        422: {"model": ErrorResponse, "description": "Not a valid number"},
        503: {"description": "Speller not yet initialised"},
    },
)
def spell_number(request: SpellRequest) -> SpellResponse:
    """Spell out the number in the request body.

    Returns:
    - **words**: the number in English words
    - **words_and_digits**: non-zero groups as digits followed by scale names
    - **digit_count**: digits in the number after removing commas and leading zeros
    """
    return _spell(request.number)


@app.get(
    "/spell/{number}",
    summary="Spell a number from the URL path",
    tags=["Spelling"],
    responses={
        422: {"model": ErrorResponse, "description": "Not a valid number"},
        503: {"description": "Speller not yet initialised"},
    },
)
def spell_number_from_path(number: str) -> SpellResponse:
    """Same as `POST /spell`, with the number taken from the path."""
    if len(number) > MAX_INPUT_LENGTH:
        raise HTTPException(status_code=422, detail="Number text too long")
    return _spell(number)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Speller not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    speller = _get_speller()
    return HealthResponse(
        status="healthy",
        version=__version__,
        max_digits=speller.max_digits,
    )
