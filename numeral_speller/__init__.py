"""
Numeral Speller — Spell out digit strings as English words.

Architecture: Sanitize → Validate → Bucketize → Translate → Assemble
Scale names: US short scale, "thousand" through "duotrigintillion" (10^99).
"""

from .exceptions import InvalidNumberError, SpellError
from .models import SpellResult
from .speller import NumeralSpeller, spell

__version__ = "1.0.0"

__all__ = [
    "InvalidNumberError",
    "NumeralSpeller",
    "SpellError",
    "SpellResult",
    "spell",
]
