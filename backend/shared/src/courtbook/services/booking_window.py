"""Booking window validation.

A booking attempt must satisfy every window rule of the establishment:
- TOO_FAR_IN_ADVANCE: date is more than max_advance_booking_days ahead
- TOO_SOON: slot starts less than min_advance_booking_hours from now
  (a slot exactly at the minimum notice is accepted)
- SAME_DAY_DISALLOWED: date is today and same-day booking is disabled

validate() raises the first violation in that order so error messages are
deterministic; violations() returns all of them.
"""

import datetime as dt

from courtbook.models import (
    BookingAttempt,
    BookingWindowReason,
    BookingWindowViolation,
    EstablishmentPolicy,
    InvalidArgumentError,
)
from courtbook.utils.logging import get_logger, log_policy_decision

logger = get_logger(__name__)


def _is_aware(value: dt.datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None


class BookingWindowValidator:
    """Checks booking attempts against an establishment's window rules."""

    def violations(
        self,
        attempt: BookingAttempt,
        now: dt.datetime | None,
        policy: EstablishmentPolicy,
    ) -> list[BookingWindowReason]:
        """All window rules the attempt breaks, in evaluation order.

        Args:
            attempt: Requested date and start time
            now: Current time, in the establishment's local time; the
                attempt's created_at when None
            policy: Resolved establishment policy

        Returns:
            Empty list when the attempt is allowed
        """
        now = self._reference_time(attempt, now)
        starts_at = attempt.starts_at
        if _is_aware(starts_at) != _is_aware(now):
            raise InvalidArgumentError(
                "Booking start and current time must both be naive or both timezone-aware",
                {"starts_at": starts_at.isoformat(), "now": now.isoformat()},
            )

        reasons: list[BookingWindowReason] = []

        days_ahead = (attempt.date - now.date()).days
        if days_ahead > policy.max_advance_booking_days:
            reasons.append(BookingWindowReason.TOO_FAR_IN_ADVANCE)

        if starts_at - now < dt.timedelta(hours=policy.min_advance_booking_hours):
            reasons.append(BookingWindowReason.TOO_SOON)

        if attempt.date == now.date() and not policy.allow_same_day_booking:
            reasons.append(BookingWindowReason.SAME_DAY_DISALLOWED)

        return reasons

    def validate(
        self,
        attempt: BookingAttempt,
        now: dt.datetime | None,
        policy: EstablishmentPolicy,
    ) -> None:
        """Accept the attempt or raise its first window violation.

        Raises:
            BookingWindowViolation: with the first failing reason
            InvalidArgumentError: naive and aware datetimes were mixed,
                or neither now nor created_at was given
        """
        reasons = self.violations(attempt, now, policy)
        if not reasons:
            log_policy_decision(
                logger,
                "booking_window",
                outcome="accepted",
                date=attempt.date.isoformat(),
                time=attempt.time.isoformat(timespec="minutes"),
            )
            return

        reason = reasons[0]
        log_policy_decision(
            logger,
            "booking_window",
            outcome="rejected",
            reason=reason.value,
            date=attempt.date.isoformat(),
            time=attempt.time.isoformat(timespec="minutes"),
        )
        raise BookingWindowViolation(
            reason,
            self.describe_violation(reason, policy),
            {"date": attempt.date.isoformat(), "time": attempt.time.isoformat(timespec="minutes")},
        )

    def is_bookable(
        self,
        attempt: BookingAttempt,
        now: dt.datetime | None,
        policy: EstablishmentPolicy,
    ) -> bool:
        """Whether the attempt passes every window rule."""
        return not self.violations(attempt, now, policy)

    def bookable_dates(self, today: dt.date, policy: EstablishmentPolicy) -> list[dt.date]:
        """Dates a customer can pick in the booking calendar.

        Starts today (tomorrow when same-day booking is disabled) and ends
        max_advance_booking_days ahead, inclusive.
        """
        first = 0 if policy.allow_same_day_booking else 1
        return [
            today + dt.timedelta(days=offset)
            for offset in range(first, policy.max_advance_booking_days + 1)
        ]

    def describe_violation(self, reason: BookingWindowReason, policy: EstablishmentPolicy) -> str:
        """Customer-facing explanation of a broken window rule."""
        if reason is BookingWindowReason.TOO_FAR_IN_ADVANCE:
            return (
                f"Bookings can be made at most {policy.max_advance_booking_days} "
                f"days in advance"
            )
        if reason is BookingWindowReason.TOO_SOON:
            return (
                f"Bookings must be made at least {policy.min_advance_booking_hours} "
                f"hours before the start time"
            )
        return "This establishment does not accept same-day bookings"

    def _reference_time(self, attempt: BookingAttempt, now: dt.datetime | None) -> dt.datetime:
        if now is not None:
            return now
        if attempt.created_at is None:
            raise InvalidArgumentError(
                "The current time is required when the attempt has no created_at",
                {"date": attempt.date.isoformat()},
            )
        return attempt.created_at
