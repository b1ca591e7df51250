"""Booking endpoints for window checks and cancellations.

Provides REST endpoints for:
- Checking a booking attempt against the establishment's booking window
- Evaluating a cancellation (or no-show) and the resulting refund

Times are establishment-local. When `now` is omitted the server clock is
used.
"""

import datetime as dt

from fastapi import APIRouter, Depends, Query

from courtbook.models import BookingAttempt, EstablishmentPolicy
from courtbook.services import BookingWindowValidator, CancellationPolicyEvaluator
from courtbook_api.dependencies import get_booking_window_validator, get_cancellation_evaluator
from courtbook_api.models.bookings import (
    CancellationRequest,
    CancellationResponse,
    RefundAmountResponse,
    WindowCheckRequest,
    WindowCheckResponse,
    WindowViolationDetail,
)

router = APIRouter(tags=["bookings"])


@router.post(
    "/bookings/window-check",
    summary="Check booking window",
    description="""
Check whether a date and start time can be booked at an establishment.

Rules, in evaluation order:
- `too_far_in_advance`: date is more than `maxAdvanceBookingDays` ahead
- `too_soon`: slot starts less than `minAdvanceBookingHours` from now
- `same_day_disallowed`: date is today and same-day booking is disabled

**Notes:**
- `now` must be a naive local datetime like `date` and `time`
- With `strict=true` the first violation is returned as a 400 error
""",
    response_description="Whether the attempt is allowed and every broken rule",
    response_model=WindowCheckResponse,
    responses={
        200: {
            "description": "Window checked",
            "content": {
                "application/json": {
                    "example": {
                        "allowed": False,
                        "violations": [
                            {
                                "reason": "too_soon",
                                "message": "Bookings must be made at least 2 hours before the start time",
                            }
                        ],
                    }
                }
            },
        },
        400: {"description": "Strict check failed or invalid datetimes"},
    },
)
async def check_booking_window(
    body: WindowCheckRequest,
    strict: bool = Query(
        default=False,
        description="Return the first violation as an error response",
    ),
    validator: BookingWindowValidator = Depends(get_booking_window_validator),
) -> WindowCheckResponse:
    """Check a booking attempt against the booking window."""
    policy = EstablishmentPolicy.from_establishment(body.policy)
    # Server time of the attempt; an explicit now overrides it
    attempt = BookingAttempt(date=body.date, time=body.time, created_at=dt.datetime.now())
    now = body.now

    if strict:
        validator.validate(attempt, now, policy)
        return WindowCheckResponse(allowed=True)

    reasons = validator.violations(attempt, now, policy)
    return WindowCheckResponse(
        allowed=not reasons,
        violations=[
            WindowViolationDetail(reason=reason, message=validator.describe_violation(reason, policy))
            for reason in reasons
        ],
    )


@router.post(
    "/bookings/cancellation",
    summary="Evaluate cancellation",
    description="""
Decide the refund for cancelling a booking.

Cancellations at least `cancellationDeadlineHours` before the start follow
the cancellation policy. Later cancellations and no-shows follow the
no-show penalty when it is enabled.

When `amountPaid` is given, the decision is applied to it and the refund
and retained amounts are returned as well.
""",
    response_description="Refund decision and optional refund amounts",
    response_model=CancellationResponse,
    responses={
        400: {"description": "Invalid datetimes or amounts"},
        409: {"description": "Establishment cancellation settings are inconsistent"},
    },
)
async def evaluate_cancellation(
    body: CancellationRequest,
    evaluator: CancellationPolicyEvaluator = Depends(get_cancellation_evaluator),
) -> CancellationResponse:
    """Evaluate a cancellation against the establishment policy."""
    policy = EstablishmentPolicy.from_establishment(body.policy)
    now = body.now or dt.datetime.now(body.booking_start.tzinfo)

    decision = evaluator.evaluate_cancellation(body.booking_start, now, policy)

    refund = None
    if body.amount_paid is not None:
        calculation = evaluator.calculate_refund_amount(
            decision, body.amount_paid, body.deposit_amount
        )
        refund = RefundAmountResponse.model_validate(calculation)

    return CancellationResponse(decision=decision, refund=refund)
