"""Booking attempt, court booking and refund decision models."""

import datetime as dt

from pydantic import BaseModel, Field

from .common import FROZEN_CAMEL_CASE_CONFIG, Percent
from .enums import RefundMode, Retention


class BookingAttempt(BaseModel):
    """A customer's request to book a slot; validated, never persisted here."""

    model_config = FROZEN_CAMEL_CASE_CONFIG

    date: dt.date
    time: dt.time
    created_at: dt.datetime | None = Field(
        default=None,
        description="When the attempt was made; the validator's current time when none is passed",
    )

    @property
    def starts_at(self) -> dt.datetime:
        """Start of the booked slot."""
        return dt.datetime.combine(self.date, self.time)


class CourtBooking(BaseModel):
    """The court, slot and duration a customer is paying for."""

    model_config = FROZEN_CAMEL_CASE_CONFIG

    court_name: str
    establishment_name: str
    date: dt.date
    start_time: dt.time
    duration_minutes: int = Field(..., gt=0)
    hourly_rate: int = Field(..., gt=0, description="Court price per hour")


class RefundDecision(BaseModel):
    """Outcome of evaluating a cancellation against the establishment policy."""

    model_config = FROZEN_CAMEL_CASE_CONFIG

    refund_percent: Percent = Field(..., ge=0, le=100)
    mode: RefundMode
    applies_no_show_penalty: bool
    is_late: bool
    is_no_show: bool = False
    retention: Retention = Retention.NONE
    hours_before_start: float
    description: str = ""
