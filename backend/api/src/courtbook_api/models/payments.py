"""API models for payment endpoints.

Policies arrive as establishment documents and are resolved with
EstablishmentPolicy.from_establishment(), so missing settings get the
platform defaults instead of failing validation.
"""

from typing import Any

from pydantic import BaseModel, Field

from courtbook.models import CourtBooking, DebtItem, FeeDiscount, PaymentType
from courtbook.models.common import CAMEL_CASE_CONFIG


class QuoteRequest(BaseModel):
    """Request for both payment-choice cards of a booking."""

    model_config = CAMEL_CASE_CONFIG | {
        "json_schema_extra": {
            "examples": [
                {
                    "fullPrice": 10000,
                    "policy": {
                        "requireDeposit": True,
                        "depositType": "percentage",
                        "depositPercentage": 50,
                        "allowFullPayment": True,
                    },
                    "feeDiscount": {"hasDiscount": False},
                    "debts": [],
                }
            ]
        }
    }

    full_price: int = Field(..., gt=0, description="Full booking price", examples=[10000])
    policy: dict[str, Any] = Field(..., description="Establishment settings document")
    fee_discount: FeeDiscount | None = Field(default=None)
    debts: list[DebtItem] = Field(default_factory=list, description="Client's pending debts")


class ChargeRequest(BaseModel):
    """Request for the charge of a confirmed payment choice."""

    model_config = CAMEL_CASE_CONFIG | {
        "json_schema_extra": {
            "examples": [
                {
                    "booking": {
                        "courtName": "Cancha 1",
                        "establishmentName": "Club Norte",
                        "date": "2026-11-02",
                        "startTime": "19:00",
                        "durationMinutes": 90,
                        "hourlyRate": 10000,
                    },
                    "policy": {"requireDeposit": True, "depositPercentage": 50},
                    "paymentType": "deposit",
                    "debts": [{"id": "debt-1", "amount": 1500, "reason": "no_show"}],
                }
            ]
        }
    }

    booking: CourtBooking
    policy: dict[str, Any] = Field(..., description="Establishment settings document")
    payment_type: PaymentType
    fee_discount: FeeDiscount | None = Field(default=None)
    debts: list[DebtItem] = Field(default_factory=list, description="Client's pending debts")
