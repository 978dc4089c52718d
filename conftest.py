"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from numeral_speller.speller import NumeralSpeller  # noqa: E402


@pytest.fixture
def speller() -> NumeralSpeller:
    """A fresh speller per test; instances carry no state between calls."""
    return NumeralSpeller()
