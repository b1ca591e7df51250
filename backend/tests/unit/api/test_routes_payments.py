"""Unit tests for payment API routes.

Tests for:
- POST /api/payments/quote - Payment-choice breakdowns
- POST /api/payments/charge - Charge for a confirmed choice
"""

from typing import Any

import pytest
from fastapi.testclient import TestClient
from starlette.status import (
    HTTP_200_OK,
    HTTP_400_BAD_REQUEST,
    HTTP_409_CONFLICT,
)


@pytest.fixture
def policy() -> dict[str, Any]:
    return {
        "requireDeposit": True,
        "depositType": "percentage",
        "depositPercentage": 50,
        "allowFullPayment": True,
        "platformFeePercent": 10,
    }


@pytest.fixture
def booking() -> dict[str, Any]:
    return {
        "courtName": "Cancha 1",
        "establishmentName": "Club Norte",
        "date": "2026-11-02",
        "startTime": "19:00",
        "durationMinutes": 60,
        "hourlyRate": 10000,
    }


class TestQuote:
    """Tests for POST /api/payments/quote."""

    def test_quote_both_options(self, client: TestClient, policy: dict[str, Any]) -> None:
        response = client.post("/api/payments/quote", json={"fullPrice": 10000, "policy": policy})
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["availableOptions"] == ["deposit", "full"]
        assert data["feePercent"] == 10
        assert data["deposit"] == {
            "paymentType": "deposit",
            "baseAmount": 5000,
            "fee": 500,
            "generalFee": 500,
            "totalAmount": 5500,
            "remainingAmount": 5000,
            "depositPercent": 50,
        }
        assert data["full"]["totalAmount"] == 11000

    def test_quote_with_discount_and_debts(self, client: TestClient, policy: dict[str, Any]) -> None:
        response = client.post(
            "/api/payments/quote",
            json={
                "fullPrice": 10000,
                "policy": policy,
                "feeDiscount": {"hasDiscount": True, "discountPercent": 100},
                "debts": [
                    {"id": "debt-1", "amount": 1500, "reason": "no_show"},
                    {"id": "debt-2", "amount": 2000, "reason": "late_cancellation"},
                ],
            },
        )
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["deposit"]["fee"] == 0
        assert data["deposit"]["totalAmount"] == 5000
        assert data["pendingDebt"]["hasDebt"] is True
        assert data["pendingDebt"]["totalDebt"] == 3500

    def test_missing_settings_take_defaults(self, client: TestClient) -> None:
        """Defaults: 50% deposit, deposits only."""
        response = client.post("/api/payments/quote", json={"fullPrice": 8000, "policy": {}})
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["availableOptions"] == ["deposit"]
        assert data["full"] is None
        assert data["deposit"]["baseAmount"] == 4000

    def test_no_payment_option(self, client: TestClient) -> None:
        response = client.post(
            "/api/payments/quote",
            json={"fullPrice": 8000, "policy": {"requireDeposit": False, "allowFullPayment": False}},
        )

        assert response.status_code == HTTP_409_CONFLICT
        assert response.json()["error_code"] == "ERR_CFG_004"

    def test_missing_full_price(self, client: TestClient, policy: dict[str, Any]) -> None:
        response = client.post("/api/payments/quote", json={"policy": policy})

        assert response.status_code == 422


class TestCharge:
    """Tests for POST /api/payments/charge."""

    def test_deposit_charge_with_debt(
        self, client: TestClient, policy: dict[str, Any], booking: dict[str, Any]
    ) -> None:
        response = client.post(
            "/api/payments/charge",
            json={
                "booking": booking,
                "policy": policy,
                "paymentType": "deposit",
                "debts": [{"id": "debt-1", "amount": 1500}],
            },
        )
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["amount"] == 7000
        assert data["debtAmount"] == 1500
        assert data["debtIds"] == ["debt-1"]
        assert data["currency"] == "ARS"
        assert data["title"] == "Seña - Cancha 1 (Club Norte) + Deuda"
        assert data["breakdown"]["remainingAmount"] == 5000

    def test_full_payment_not_allowed(self, client: TestClient, booking: dict[str, Any]) -> None:
        response = client.post(
            "/api/payments/charge",
            json={"booking": booking, "policy": {"allowFullPayment": False}, "paymentType": "full"},
        )

        assert response.status_code == HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["error_code"] == "ERR_POL_002"
        assert data["audience"] == "customer"

    def test_unknown_payment_type(
        self, client: TestClient, policy: dict[str, Any], booking: dict[str, Any]
    ) -> None:
        response = client.post(
            "/api/payments/charge",
            json={"booking": booking, "policy": policy, "paymentType": "installments"},
        )

        assert response.status_code == 422
