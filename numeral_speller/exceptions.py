"""
Custom exception hierarchy for number spelling.

Each exception carries a machine-readable code and a details dict so the
CLI and the HTTP API can report failures without parsing messages.
"""

from __future__ import annotations


class SpellError(Exception):
    """Base exception for all spelling failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidNumberError(SpellError):
    """The input is not a non-zero positive integer of at most MAX_DIGITS digits."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_NUMBER", message, details)
