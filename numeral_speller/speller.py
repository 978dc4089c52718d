"""
Spelling pipeline — orchestrates the full conversion.

Flow:
  ┌───────────┐
  │ Raw input │   "1,000,001"
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │ Sanitize  │   ← Drop commas and leading zeros, validate
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │ Bucketize │   ← "001", "000", "001"
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │ Translate │   ← Per-bucket words + value
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │ Assemble  │   ← Scale names, mixed form
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │  Result   │   "one million one" / "1 million 1"
  └───────────┘

Design principles:
  - Validation happens once, at the boundary; later stages are total.
  - Every stage is a pure function; the pipeline holds no per-call state.
  - A failed validation returns nothing partial: it raises.
"""

from __future__ import annotations

import logging

from .exceptions import InvalidNumberError
from .models import SpellResult
from .number_to_words import (
    MAX_DIGITS,
    assemble,
    bucketize,
    sanitize_and_validate,
    translate_bucket,
)

logger = logging.getLogger(__name__)


class NumeralSpeller:
    """Orchestrates the digit-string → words conversion.

    Usage:
        speller = NumeralSpeller()
        result = speller.spell("1,250")
        print(result.words)             # one thousand two hundred fifty
        print(result.words_and_digits)  # 1 thousand 250

    Instances are stateless and safe to share between threads.
    """

    max_digits = MAX_DIGITS

    def spell(self, raw: str) -> SpellResult:
        """Execute the full conversion on a raw digit string.

        Args:
            raw: Digits, optionally with commas, e.g. "1,000".

        Returns:
            SpellResult with both spelled forms and the digit count.

        Raises:
            InvalidNumberError: If the input fails validation.
        """
        # ── Step 1: Sanitize + validate ─────────────────────────────
        try:
            digits = sanitize_and_validate(raw)
        except InvalidNumberError as e:
            logger.info("Rejected input %r: %s", raw, e.details.get("reason"))
            raise

        # ── Step 2: Split into 3-digit buckets ──────────────────────
        buckets = bucketize(digits)
        logger.debug("Spelling %d digit(s) in %d bucket(s)", len(digits), len(buckets))

        # ── Step 3: Translate each bucket ───────────────────────────
        translations = [translate_bucket(bucket) for bucket in buckets]

        # ── Step 4: Assemble both outputs ───────────────────────────
        return assemble(buckets, translations)


_default_speller = NumeralSpeller()


def spell(raw: str) -> SpellResult:
    """Spell out `raw` with a shared NumeralSpeller. See NumeralSpeller.spell."""
    return _default_speller.spell(raw)
