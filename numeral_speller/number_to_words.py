"""
Convert a digit string to its English spelled-out form.

Supported patterns:
    "7"          → "seven"                      / "7"
    "123"        → "one hundred twenty three"   / "123"
    "1,000"      → "one thousand"               / "1 thousand"
    "1001"       → "one thousand one"           / "1 thousand 1"
    "100000"     → "one hundred thousand"       / "100 thousand"

Scale names follow the US short scale up to "duotrigintillion" (10^99),
so the longest accepted input is 102 digits.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .exceptions import InvalidNumberError
from .models import SpellResult

# ─── Word Lookup Tables ──────────────────────────────────────────────

ONES: tuple[str, ...] = (
    "", "one", "two", "three", "four",
    "five", "six", "seven", "eight", "nine",
)

# Indexed by (n - 10) for n in 11..19; slot 0 is never read.
TEENS: tuple[str, ...] = (
    "", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)

TENS: tuple[str, ...] = (
    "", "ten", "twenty", "thirty", "forty",
    "fifty", "sixty", "seventy", "eighty", "ninety",
)

SCALE_NAMES: tuple[str, ...] = (
    "", "thousand", "million", "billion",
    "trillion", "quadrillion", "quintillion",
    "sextillion", "septillion", "octillion",
    "nonillion", "decillion", "undecillion",
    "duodecillion", "tredecillion", "quattuordecillion",
    "quindecillion", "sexdecillion", "septendecillion",
    "octodecillion", "novemdecillion", "vigintillion",
    "unvigintillion", "duovigintillion", "trevigintillion",
    "quattuorvigintillion", "quinvigintillion", "sexvigintillion",
    "septenvigintillion", "octovigintillion", "novemvigintillion",
    "trigintillion", "untrigintillion", "duotrigintillion",
)

# ─── Limits ──────────────────────────────────────────────────────────

BUCKET_WIDTH = 3
DIGIT_SEPARATOR = ","

# duotrigintillion = 1 followed by 99 zeros; up to 999 of them is 102 digits
MAX_DIGITS = 99 + 3

_DIGITS_RE = re.compile(r"[0-9]+")


def number_constraints() -> str:
    """Human-readable rule every accepted input must satisfy."""
    return (
        "Number must be a non-zero positive integer, should not exceed "
        f"{MAX_DIGITS} digits and may contain commas as digit separator."
    )


# ─── Data Structures ────────────────────────────────────────────────


@dataclass(frozen=True)
class Bucket:
    """A zero-padded 3-digit group of the input."""

    digits: str  # Always BUCKET_WIDTH characters, e.g. "007"
    position: int  # 0 = most significant group

    @property
    def value(self) -> int:
        return int(self.digits)


# ─── Sanitizer / Validator ───────────────────────────────────────────


def sanitize_and_validate(raw: str) -> str:
    """Strip digit separators and leading zeros, then validate what remains.

    Args:
        raw: e.g. "0,001,250"

    Returns:
        The sanitized digit string, e.g. "1250".

    Raises:
        InvalidNumberError: If nothing is left after sanitizing (this includes
            all-zero input such as "0"), a non-digit character remains, or
            the result is longer than MAX_DIGITS.
    """
    sanitized = raw.replace(DIGIT_SEPARATOR, "").lstrip("0")

    if not sanitized:
        raise InvalidNumberError(
            number_constraints(), {"reason": "empty", "input": raw}
        )

    if not _DIGITS_RE.fullmatch(sanitized):
        raise InvalidNumberError(
            number_constraints(), {"reason": "non_digit", "input": raw}
        )

    if len(sanitized) > MAX_DIGITS:
        raise InvalidNumberError(
            number_constraints(),
            {
                "reason": "too_long",
                "digit_count": len(sanitized),
                "max_digits": MAX_DIGITS,
            },
        )

    return sanitized


# ─── Bucketizer ──────────────────────────────────────────────────────


def bucketize(digits: str) -> list[Bucket]:
    """Left-pad to a multiple of three and split into 3-digit buckets.

    "1001" → ["001", "001"]; the most significant bucket comes first.
    """
    pad = -len(digits) % BUCKET_WIDTH
    padded = "0" * pad + digits

    return [
        Bucket(digits=padded[start:start + BUCKET_WIDTH], position=position)
        for position, start in enumerate(range(0, len(padded), BUCKET_WIDTH))
    ]


# ─── Bucket Translator ───────────────────────────────────────────────


def translate_bucket(bucket: Bucket) -> tuple[str, int]:
    """Spell out one bucket.

    Returns:
        (words, value), e.g. ("one hundred twenty three", 123).
        A "000" bucket yields ("", 0).
    """
    value = bucket.value
    fragments: list[str] = []

    hundreds = value // 100
    if hundreds > 0:
        fragments.append(f"{ONES[hundreds]} hundred")

    remainder = value % 100
    if 10 < remainder < 20:
        fragments.append(TEENS[remainder - 10])
        remainder = 0  # ones digit already spoken
    elif remainder >= 10:
        fragments.append(TENS[remainder // 10])

    ones = remainder % 10
    if ones > 0:
        fragments.append(ONES[ones])

    return " ".join(fragments), value


# ─── Assembler ───────────────────────────────────────────────────────


def assemble(
    buckets: list[Bucket], translations: list[tuple[str, int]]
) -> SpellResult:
    """Join translated buckets with their scale names.

    Args:
        buckets: Output of bucketize(), most significant first.
        translations: translate_bucket() output, one per bucket, same order.

    Algorithm:
        Walk the buckets once carrying two pieces of state:
        - `scale_index`: starts at len(buckets) - 1, drops by one per bucket
        - `show_scale_name`: raised by a non-zero bucket, lowered once its
          scale name has been emitted

        Zero buckets emit nothing but still consume a scale slot, which is
        how "1,000,001" skips the thousands and reads "one million one".
    """
    if len(buckets) != len(translations):
        raise ValueError(
            f"Got {len(translations)} translations for {len(buckets)} buckets"
        )

    words: list[str] = []
    words_and_digits: list[str] = []

    scale_index = len(buckets) - 1
    show_scale_name = False

    for fragment, value in translations:
        if value != 0:
            show_scale_name = True
            words_and_digits.append(str(value))

        if fragment:
            words.append(fragment)

        if show_scale_name:
            scale_name = SCALE_NAMES[scale_index]
            if scale_name:
                words.append(scale_name)
                words_and_digits.append(scale_name)
            show_scale_name = False

        scale_index -= 1

    digits = "".join(bucket.digits for bucket in buckets).lstrip("0")

    return SpellResult(
        digits=digits,
        words=" ".join(words),
        words_and_digits=" ".join(words_and_digits),
        digit_count=len(digits),
    )
