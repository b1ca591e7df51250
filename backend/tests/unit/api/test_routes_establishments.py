"""Unit tests for establishment API routes.

Tests for:
- POST /api/establishments/policy - Settings preview
"""

from typing import Any

from fastapi.testclient import TestClient
from starlette.status import HTTP_200_OK, HTTP_409_CONFLICT


class TestPolicyPreview:
    """Tests for POST /api/establishments/policy."""

    def test_resolves_document(self, client: TestClient, establishment_document: dict[str, Any]) -> None:
        response = client.post("/api/establishments/policy", json=establishment_document)
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["policy"]["depositPercentage"] == 50
        assert data["policy"]["depositFixedAmount"] == 5000
        assert data["policy"]["platformFeePercent"] == 10
        assert data["availableOptions"] == ["deposit", "full"]
        assert data["defaultOption"] == "deposit"
        assert "Deposit: 50% of the total." in data["description"]
        assert data["cancellationDescription"].startswith("Cancellation Policy:")

    def test_full_payment_only(self, client: TestClient) -> None:
        response = client.post(
            "/api/establishments/policy",
            json={"requireDeposit": False, "allowFullPayment": True},
        )
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["availableOptions"] == ["full"]
        assert data["defaultOption"] == "full"

    def test_percentage_penalty_without_percentage(self, client: TestClient) -> None:
        response = client.post(
            "/api/establishments/policy",
            json={"noShowPenaltyType": "percentage", "noShowPenaltyPercentage": -5},
        )

        assert response.status_code == HTTP_409_CONFLICT
        data = response.json()
        assert data["error_code"] == "ERR_CFG_003"
        assert data["details"] == {"no_show_penalty_percentage": "-5"}
