"""
Tests for the HTTP API.
"""

import logging
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from atm_withdrawal import __version__
from atm_withdrawal.domain.calculator import NoteCalculator
from atm_withdrawal.domain.denominations import DenominationSet
from atm_withdrawal.main import app
from atm_withdrawal.services.withdrawal import WithdrawalService, get_withdrawal_service


def decimals(values) -> list[Decimal]:
    return [Decimal(str(v)) for v in values]


class TestWithdraw:

    @pytest.mark.parametrize(
        ("amount", "notes"),
        [
            (30, [20, 10]),
            (80, [50, 20, 10]),
            (100, [100]),
            ("1000", [100] * 10),
            ("30.00", [20, 10]),
        ],
    )
    def test_successful_withdrawal(self, client, amount, notes):
        response = client.post("/api/withdrawal", json={"amount": amount})

        assert response.status_code == 200
        body = response.json()
        assert decimals(body["notes"]) == decimals(notes)
        assert Decimal(str(body["totalAmount"])) == Decimal(str(amount))
        assert body["noteCount"] == len(notes)

    @pytest.mark.parametrize("payload", [{"amount": None}, {"amount": 0}, {}])
    def test_absent_or_zero_amount(self, client, payload):
        response = client.post("/api/withdrawal", json=payload)

        assert response.status_code == 200
        body = response.json()
        assert body["notes"] == []
        assert Decimal(str(body["totalAmount"])) == 0
        assert body["noteCount"] == 0

    def test_negative_amount(self, client):
        response = client.post("/api/withdrawal", json={"amount": -130})

        assert response.status_code == 400
        assert response.json() == {
            "message": "Amount cannot be negative. Provided: R-130.00",
            "errorType": "InvalidArgument",
            "statusCode": 400,
        }

    def test_unavailable_amount(self, client):
        response = client.post("/api/withdrawal", json={"amount": 125})

        assert response.status_code == 400
        body = response.json()
        assert body["errorType"] == "NoteUnavailable"
        assert body["statusCode"] == 400
        assert "R125.00" in body["message"]

    def test_amount_at_maximum(self, client):
        response = client.post("/api/withdrawal", json={"amount": "100000"})

        assert response.status_code == 200
        assert response.json()["noteCount"] == 1000

    @pytest.mark.parametrize("amount", ["100010", "1E+15", "1E+30"])
    def test_amount_above_maximum(self, client, amount):
        response = client.post("/api/withdrawal", json={"amount": amount})

        assert response.status_code == 400
        body = response.json()
        assert body["errorType"] == "InvalidArgument"
        assert body["statusCode"] == 400
        assert body["message"].startswith("Amount exceeds the maximum withdrawal of R100000.00.")

    def test_message_keeps_requested_precision(self, client):
        response = client.post("/api/withdrawal", json={"amount": "30.001"})

        assert response.status_code == 400
        assert response.json()["message"].startswith("Cannot dispense R30.001.")

    def test_malformed_amount(self, client):
        response = client.post("/api/withdrawal", json={"amount": "lots"})

        assert response.status_code == 400
        body = response.json()
        assert body["errorType"] == "ValidationError"
        assert body["statusCode"] == 400

    def test_malformed_body(self, client):
        response = client.post(
            "/api/withdrawal",
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["errorType"] == "ValidationError"

    def test_unexpected_error_is_not_leaked(self, caplog):
        class BrokenService(WithdrawalService):
            async def withdraw(self, amount):
                raise RuntimeError("database password is hunter2")

        app.dependency_overrides[get_withdrawal_service] = lambda: BrokenService(NoteCalculator())
        try:
            with (
                caplog.at_level(logging.INFO, logger="atm_withdrawal.main"),
                TestClient(app, raise_server_exceptions=False) as client,
            ):
                response = client.post("/api/withdrawal", json={"amount": 30})
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {
            "message": "An unexpected error occurred. Please try again later.",
            "errorType": "InternalServerError",
            "statusCode": 500,
        }
        assert "POST /api/withdrawal -> 500" in caplog.text
        assert "hunter2" not in response.text

    def test_uses_injected_denominations(self):
        calculator = NoteCalculator(DenominationSet((200, 100, 50, 20, 10)))
        app.dependency_overrides[get_withdrawal_service] = lambda: WithdrawalService(calculator)
        try:
            with TestClient(app) as client:
                response = client.post("/api/withdrawal", json={"amount": 400})
        finally:
            app.dependency_overrides.clear()

        assert decimals(response.json()["notes"]) == decimals([200, 200])


class TestInfoEndpoints:

    def test_withdrawal_health(self, client):
        response = client.get("/api/withdrawal/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "ATM Withdrawal API"}

    def test_app_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == __version__
        assert decimals(body["denominations"]) == decimals([100, 50, 20, 10])

    def test_config(self, client):
        response = client.get("/api/withdrawal/config")

        assert response.status_code == 200
        body = response.json()
        assert body["currencySymbol"] == "R"
        assert body["currencyCode"] == "ZAR"
        assert decimals(body["denominations"]) == decimals([100, 50, 20, 10])
        assert body["strategy"] == "greedy"
        assert Decimal(str(body["maxAmount"])) == Decimal(100000)

    def test_cors_preflight(self, client):
        response = client.options(
            "/api/withdrawal",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
