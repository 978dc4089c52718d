"""
FastAPI endpoint tests for the Numeral Speller API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from numeral_speller.speller import NumeralSpeller

client = TestClient(app)

CONSTRAINTS = (
    "Number must be a non-zero positive integer, should not exceed 102 digits "
    "and may contain commas as digit separator."
)


@pytest.fixture(scope="module", autouse=True)
def _warm_speller() -> None:
    """Initialise the speller once for all API tests (bypasses lifespan)."""
    api._speller = NumeralSpeller()
    yield  # type: ignore[misc]
    api._speller = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["max_digits"] == 102

    def test_health_without_speller_returns_503(self) -> None:
        api._speller = None
        try:
            resp = client.get("/health")
        finally:
            api._speller = NumeralSpeller()
        assert resp.status_code == 503


class TestSpellEndpoint:
    def test_spells_number(self) -> None:
        resp = client.post("/spell", json={"number": "1,000,001"})
        assert resp.status_code == 200
        assert resp.json() == {
            "digits": "1000001",
            "words": "one million one",
            "words_and_digits": "1 million 1",
            "digit_count": 7,
        }

    def test_spells_simple_number(self) -> None:
        data = client.post("/spell", json={"number": "123"}).json()
        assert data["words"] == "one hundred twenty three"
        assert data["words_and_digits"] == "123"

    def test_invalid_number_returns_422_with_code(self) -> None:
        resp = client.post("/spell", json={"number": "12a"})
        assert resp.status_code == 422
        data = resp.json()
        assert data["code"] == "INVALID_NUMBER"
        assert data["message"] == CONSTRAINTS
        assert data["details"]["reason"] == "non_digit"

    def test_all_zero_returns_422(self) -> None:
        resp = client.post("/spell", json={"number": "000"})
        assert resp.status_code == 422
        assert resp.json()["details"]["reason"] == "empty"

    def test_too_many_digits_returns_422(self) -> None:
        resp = client.post("/spell", json={"number": "1" * 103})
        assert resp.status_code == 422
        assert resp.json()["details"]["max_digits"] == 102


class TestSpellPathEndpoint:
    def test_spells_number_from_path(self) -> None:
        resp = client.get("/spell/100000")
        assert resp.status_code == 200
        data = resp.json()
        assert data["words"] == "one hundred thousand"
        assert data["words_and_digits"] == "100 thousand"

    def test_commas_in_path(self) -> None:
        data = client.get("/spell/1,000").json()
        assert data["words"] == "one thousand"

    def test_invalid_path_number(self) -> None:
        resp = client.get("/spell/abc")
        assert resp.status_code == 422
        assert resp.json()["code"] == "INVALID_NUMBER"


class TestRequestValidation:
    def test_empty_body_returns_422(self) -> None:
        resp = client.post("/spell", json={})
        assert resp.status_code == 422

    def test_empty_number_returns_422(self) -> None:
        resp = client.post("/spell", json={"number": ""})
        assert resp.status_code == 422

    def test_oversized_number_returns_422(self) -> None:
        resp = client.post("/spell", json={"number": "1" * (api.MAX_INPUT_LENGTH + 1)})
        assert resp.status_code == 422

    def test_missing_content_type_returns_422(self) -> None:
        resp = client.post("/spell")
        assert resp.status_code == 422
