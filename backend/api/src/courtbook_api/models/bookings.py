"""API models for booking window and cancellation endpoints."""

import datetime as dt
from typing import Any

from pydantic import BaseModel, Field

from courtbook.models import BookingWindowReason, RefundDecision, RefundMode
from courtbook.models.common import CAMEL_CASE_CONFIG, Percent


class WindowCheckRequest(BaseModel):
    """Booking attempt checked against an establishment's window rules."""

    model_config = CAMEL_CASE_CONFIG | {
        "json_schema_extra": {
            "examples": [
                {
                    "date": "2026-11-02",
                    "time": "19:00",
                    "now": "2026-11-02T15:00:00",
                    "policy": {"minAdvanceBookingHours": 2, "allowSameDayBooking": True},
                }
            ]
        }
    }

    date: dt.date = Field(..., description="Requested date (YYYY-MM-DD)")
    time: dt.time = Field(..., description="Requested start time (HH:MM)")
    now: dt.datetime | None = Field(
        default=None,
        description="Current establishment-local time; server time when omitted",
    )
    policy: dict[str, Any] = Field(..., description="Establishment settings document")


class WindowViolationDetail(BaseModel):
    """One window rule the attempt breaks."""

    model_config = CAMEL_CASE_CONFIG

    reason: BookingWindowReason
    message: str


class WindowCheckResponse(BaseModel):
    """Whether the attempt is bookable, and why not."""

    model_config = CAMEL_CASE_CONFIG

    allowed: bool
    violations: list[WindowViolationDetail] = Field(default_factory=list)


class CancellationRequest(BaseModel):
    """Cancellation (or no-show check) of a booking."""

    model_config = CAMEL_CASE_CONFIG | {
        "json_schema_extra": {
            "examples": [
                {
                    "bookingStart": "2026-11-02T19:00:00",
                    "now": "2026-11-02T10:00:00",
                    "policy": {"cancellationDeadlineHours": 24, "noShowPenaltyType": "deposit_only"},
                    "amountPaid": 5000,
                    "depositAmount": 5000,
                }
            ]
        }
    }

    booking_start: dt.datetime
    now: dt.datetime | None = Field(
        default=None,
        description="Time of the cancellation; server time when omitted",
    )
    policy: dict[str, Any] = Field(..., description="Establishment settings document")
    amount_paid: int | None = Field(
        default=None,
        ge=0,
        description="Amount paid online, fee excluded; refund amounts are computed when given",
    )
    deposit_amount: int = Field(default=0, ge=0)


class RefundAmountResponse(BaseModel):
    """A refund decision applied to the amount paid."""

    model_config = CAMEL_CASE_CONFIG

    refund_amount: int
    retained_amount: int
    refund_percentage: Percent
    mode: RefundMode
    description: str


class CancellationResponse(BaseModel):
    """Refund decision and, when the amount paid is known, the refund."""

    model_config = CAMEL_CASE_CONFIG

    decision: RefundDecision
    refund: RefundAmountResponse | None = None
