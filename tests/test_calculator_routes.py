"""Tests for the calculator HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

from src.config import Settings, get_settings
from src.diagnostics import get_diagnostic_logger
from src.main import app

client = TestClient(app)


@pytest.fixture
def diagnostics(recording_logger):
    """Route diagnostics into an in-memory recorder."""
    app.dependency_overrides[get_diagnostic_logger] = lambda: recording_logger
    yield recording_logger
    app.dependency_overrides.pop(get_diagnostic_logger, None)


@pytest.fixture
def corrected_division():
    """Serve requests with the corrected division-by-zero grouping."""
    app.dependency_overrides[get_settings] = lambda: Settings(LEGACY_DIVISION_CHECK=False)
    yield
    app.dependency_overrides.pop(get_settings, None)


class TestArithmetic:
    """Successful calculations."""

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/add?num1=2&num2=3", 5),
            ("/sub?num1=2&num2=3", -1),
            ("/mul?num1=2.5&num2=4", 10),
            ("/exp?num1=2&num2=3", 8),
            ("/sqrt?num1=16", 4),
            ("/mod?num1=10&num2=3", 1),
        ],
    )
    def test_results(self, path, expected, diagnostics):
        response = client.get(path)
        assert response.status_code == 200
        assert response.json() == {"result": expected}

    def test_exact_ieee_sum(self, diagnostics):
        response = client.get("/add?num1=0.1&num2=0.2")
        assert response.json() == {"result": 0.1 + 0.2}

    def test_integral_result_is_json_integer(self, diagnostics):
        response = client.get("/mul?num1=2&num2=4")
        assert response.text == '{"result":8}'

    def test_overflowing_result_is_null(self, diagnostics):
        response = client.get("/exp?num1=10&num2=400")
        assert response.status_code == 200
        assert response.json() == {"result": None}

    def test_info_diagnostic(self, diagnostics):
        client.get("/sub?num1=10&num2=4")
        assert diagnostics.events("info") == ["Subtraction: 10 - 4 = 6"]
        assert diagnostics.events("error") == []

    def test_idempotent(self, diagnostics):
        first = client.get("/exp?num1=1.5&num2=2.5")
        second = client.get("/exp?num1=1.5&num2=2.5")
        assert first.status_code == second.status_code == 200
        assert first.content == second.content


class TestRejections:
    """Rejected operands answer 400 with a message."""

    @pytest.mark.parametrize(
        "path, message",
        [
            ("/add?num1=abc&num2=1", "num1 and num2 must be numbers"),
            ("/add?num1=1", "num1 and num2 must be numbers"),
            ("/sub?num1=1e309&num2=1", "Either numbers are too large or too small"),
            ("/add?num1=1e309&num2=1", "Either numbers are too large or too small"),
            ("/mul?num1=9007199254740992&num2=1", "Either numbers are too large or too small"),
            ("/div?num1=10&num2=0", "Denominator cannot be 0 in division"),
            ("/mod?num1=10&num2=0", "Denominator cannot be 0 in modulo"),
            ("/exp?num1=-2&num2=0.5", "If base is negative, exponent cannot be a fraction"),
            ("/exp?num1=0&num2=-0.5", "If base is 0, exponent cannot be a negative fraction"),
            ("/sqrt?num1=-4", "Square root of negative numbers is not supported"),
            ("/sqrt?num1=abc", "num1 must be a number"),
            ("/sqrt", "num1 must be a number"),
            ("/sqrt?num1=-1e309", "Numbers is too large or too small"),
        ],
    )
    def test_messages(self, path, message, diagnostics):
        response = client.get(path)
        assert response.status_code == 400
        assert response.json() == {"message": message}

    def test_rejection_logs_one_error(self, diagnostics):
        client.get("/mod?num1=10&num2=0")
        assert diagnostics.levels() == ["error"]
        assert diagnostics.events() == ["Zero division: Division by 0 is not possible"]


class TestDivisionGrouping:
    """The division-by-zero rule rejects every division unless corrected."""

    def test_legacy_rejects_nonzero_denominator(self, diagnostics):
        # Regression marker: the original grouping flags all divisions
        response = client.get("/div?num1=10&num2=5")
        assert response.status_code == 400
        assert response.json() == {"message": "Denominator cannot be 0 in division"}

    def test_corrected_divides(self, diagnostics, corrected_division):
        response = client.get("/div?num1=10&num2=5")
        assert response.status_code == 200
        assert response.json() == {"result": 2}

    def test_corrected_still_rejects_zero(self, diagnostics, corrected_division):
        response = client.get("/div?num1=10&num2=0")
        assert response.status_code == 400
        assert response.json() == {"message": "Denominator cannot be 0 in division"}


class TestRepeatedParameters:
    """A repeated query parameter resolves to its first value."""

    def test_first_value_wins(self, diagnostics):
        response = client.get("/add?num1=1&num1=5&num2=1")
        assert response.status_code == 200
        assert response.json() == {"result": 2}

    def test_first_value_is_validated(self, diagnostics):
        response = client.get("/sqrt?num1=abc&num1=4")
        assert response.status_code == 400
        assert response.json() == {"message": "num1 must be a number"}
