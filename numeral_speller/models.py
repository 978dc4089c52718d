"""
Pydantic models for spelling results.

A SpellResult is built once per conversion and frozen: callers read it,
they never patch it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ─── Spell Result ───────────────────────────────────────────────────


class SpellResult(BaseModel):
    """The output of one conversion: words, mixed words/digits, and length."""

    model_config = ConfigDict(frozen=True)

    digits: str  # Sanitized digit string, e.g. "1000" for "1,000"
    words: str  # e.g. "one thousand"
    words_and_digits: str  # e.g. "1 thousand"
    digit_count: int = Field(ge=1)
