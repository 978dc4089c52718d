#!/usr/bin/env python3
"""
Numeral Speller — Entry Point
==============================

Spells out a number given on the command line, or read from stdin.

Usage:
    python main.py 1,000,001          # Spell the argument
    python main.py                    # Prompt for a number on stdin
    python main.py --help             # Show usage
"""

from __future__ import annotations

import logging
import os
import sys

from numeral_speller.exceptions import InvalidNumberError
from numeral_speller.number_to_words import number_constraints
from numeral_speller.speller import NumeralSpeller

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Usage ───────────────────────────────────────────────────────────


def print_usage(program: str) -> None:
    """Print the usage line and the input constraints."""
    print(f"Usage: \n {program} the_number_to_spell \n")
    print(number_constraints())


# ─── Input ───────────────────────────────────────────────────────────


def read_number(argv: list[str]) -> str:
    """Take the number from argv[1], or prompt for one on stdin."""
    if len(argv) > 1:
        return argv[1]

    print(">", end="", flush=True)
    tokens = sys.stdin.readline().split()
    return tokens[0] if tokens else ""


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Spell the requested number and print the result.

    Returns:
        0 on success or when usage is shown, 1 if the number is invalid.
    """
    argv = sys.argv if argv is None else argv
    logging.basicConfig(
        level=os.environ.get("NUMERAL_SPELLER_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if len(argv) > 1 and argv[1].startswith("-"):
        print_usage(argv[0])
        return 0

    number = read_number(argv)

    try:
        result = NumeralSpeller().spell(number)
    except InvalidNumberError as e:
        print(e.message, file=sys.stderr)
        return 1

    print(f"In words: {result.words}")
    print(f"In words and digits: {result.words_and_digits}")
    print(f"Number length: {result.digit_count} digits")
    return 0


if __name__ == "__main__":
    sys.exit(main())
