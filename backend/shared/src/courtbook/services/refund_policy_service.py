"""Cancellation policy evaluation and refund calculation.

A cancellation made at least cancellation_deadline_hours before the booking
starts is on time and follows the establishment's cancellation policy:
- full_refund: 100% back in cash
- partial_refund: refund_percentage back in cash
- no_refund: nothing back
- credit: 100% back as credit for future bookings

A later cancellation, or a booking that started without being cancelled
(no-show), triggers the no-show penalty when enabled:
- full_charge: nothing back, the full price is retained
- deposit_only: nothing back beyond what exceeds the deposit
- percentage: 100 - no_show_penalty_percentage back

All amounts are whole currency units.
"""

import datetime as dt
from decimal import Decimal
from typing import TypedDict

from courtbook.models import (
    CancellationPolicy,
    EstablishmentPolicy,
    InvalidArgumentError,
    NoShowPenaltyType,
    RefundDecision,
    RefundMode,
    Retention,
)
from courtbook.utils.logging import get_logger, log_policy_decision
from courtbook.utils.money import HUNDRED, percent_of

logger = get_logger(__name__)


class RefundCalculation(TypedDict):
    """Result of applying a RefundDecision to an amount paid."""

    refund_amount: int
    retained_amount: int
    refund_percentage: float
    mode: str  # "cash", "credit" or "none"
    description: str


class CancellationPolicyEvaluator:
    """Service for evaluating cancellations against establishment policy."""

    FULL_REFUND_PERCENT = HUNDRED
    NO_REFUND_PERCENT = Decimal(0)

    def evaluate_cancellation(
        self,
        booking_start: dt.datetime,
        now: dt.datetime,
        policy: EstablishmentPolicy,
    ) -> RefundDecision:
        """Decide the refund for cancelling a booking at ``now``.

        Args:
            booking_start: When the booked slot starts
            now: Time of the cancellation (or of the no-show check)
            policy: Resolved establishment policy

        Returns:
            RefundDecision with refund percentage, mode and penalty flags
        """
        try:
            until_start = booking_start - now
        except TypeError as exc:
            raise InvalidArgumentError(
                "Booking start and current time must both be naive or both timezone-aware",
                {"booking_start": booking_start.isoformat(), "now": now.isoformat()},
            ) from exc

        hours_before = until_start.total_seconds() / 3600
        # A booking whose start has passed without a cancellation is a no-show
        is_no_show = until_start < dt.timedelta(0)
        # The deadline itself counts as on time
        is_late = is_no_show or until_start < dt.timedelta(hours=policy.cancellation_deadline_hours)

        if is_late and policy.no_show_penalty:
            decision = self._penalty_decision(policy, hours_before, is_no_show)
        else:
            decision = self._policy_decision(policy, hours_before, is_late, is_no_show)

        log_policy_decision(
            logger,
            "cancellation",
            outcome=decision.mode.value,
            reason=decision.retention.value,
            refund_percent=str(decision.refund_percent),
            hours_before_start=round(hours_before, 2),
            is_late=is_late,
            is_no_show=is_no_show,
        )
        return decision

    def calculate_refund_amount(
        self,
        decision: RefundDecision,
        amount_paid: int,
        deposit_amount: int = 0,
    ) -> RefundCalculation:
        """Apply a decision to what the customer actually paid.

        Args:
            decision: Result of evaluate_cancellation()
            amount_paid: Amount paid online for the booking (fee excluded)
            deposit_amount: Deposit part of the booking, used when only the
                deposit is retained

        Returns:
            RefundCalculation with refund and retained amounts
        """
        if amount_paid < 0 or deposit_amount < 0:
            raise InvalidArgumentError(
                "Amounts must not be negative",
                {"amount_paid": amount_paid, "deposit_amount": deposit_amount},
            )

        if decision.retention is Retention.DEPOSIT:
            # Customers who paid more than the deposit get the excess back
            refund_amount = max(amount_paid - deposit_amount, 0)
        else:
            refund_amount = percent_of(amount_paid, decision.refund_percent)

        if not refund_amount:
            mode = RefundMode.NONE
        elif decision.mode is RefundMode.NONE:
            mode = RefundMode.CASH
        else:
            mode = decision.mode

        return RefundCalculation(
            refund_amount=refund_amount,
            retained_amount=amount_paid - refund_amount,
            refund_percentage=float(decision.refund_percent),
            mode=mode.value,
            description=decision.description,
        )

    def get_policy_description(self, policy: EstablishmentPolicy) -> str:
        """Get human-readable description of the cancellation policy."""
        deadline = policy.cancellation_deadline_hours
        on_time = {
            CancellationPolicy.FULL_REFUND: "Full refund (100%)",
            CancellationPolicy.PARTIAL_REFUND: f"Partial refund ({policy.refund_percentage}%)",
            CancellationPolicy.NO_REFUND: "No refund",
            CancellationPolicy.CREDIT: "Credit for future bookings (100%)",
        }[policy.cancellation_policy]

        if not policy.no_show_penalty:
            late = on_time + ", no penalty"
        else:
            late = {
                NoShowPenaltyType.FULL_CHARGE: "No refund, full price charged",
                NoShowPenaltyType.DEPOSIT_ONLY: "Deposit retained",
                NoShowPenaltyType.PERCENTAGE: (
                    f"{policy.no_show_penalty_percentage}% charged, "
                    f"{HUNDRED - policy.no_show_penalty_percentage}% refunded"
                ),
            }[policy.no_show_penalty_type]

        return (
            "Cancellation Policy:\n"
            f"• {deadline}+ hours before start: {on_time}\n"
            f"• Less than {deadline} hours before start: {late}\n"
            f"• No-show: {late}"
        )

    def _policy_decision(
        self,
        policy: EstablishmentPolicy,
        hours_before: float,
        is_late: bool,
        is_no_show: bool,
    ) -> RefundDecision:
        if policy.cancellation_policy is CancellationPolicy.FULL_REFUND:
            percent, mode = self.FULL_REFUND_PERCENT, RefundMode.CASH
            description = "Full refund (100%)"
        elif policy.cancellation_policy is CancellationPolicy.PARTIAL_REFUND:
            percent, mode = Decimal(policy.refund_percentage), RefundMode.CASH
            description = f"Partial refund ({percent}%)"
        elif policy.cancellation_policy is CancellationPolicy.CREDIT:
            percent, mode = self.FULL_REFUND_PERCENT, RefundMode.CREDIT
            description = "Refund as credit for future bookings (100%)"
        else:
            percent, mode = self.NO_REFUND_PERCENT, RefundMode.NONE
            description = "No refund (0%)"

        if is_late:
            description += (
                f": cancelled {hours_before:.1f} hours before start, "
                "no late-cancellation penalty configured"
            )
        else:
            description += (
                f": cancelled {hours_before:.1f} hours before start "
                f"(deadline {policy.cancellation_deadline_hours} hours)"
            )

        return RefundDecision(
            refund_percent=percent,
            mode=mode if percent else RefundMode.NONE,
            applies_no_show_penalty=False,
            is_late=is_late,
            is_no_show=is_no_show,
            retention=self._retention_for(percent),
            hours_before_start=hours_before,
            description=description,
        )

    def _penalty_decision(
        self,
        policy: EstablishmentPolicy,
        hours_before: float,
        is_no_show: bool,
    ) -> RefundDecision:
        penalty_type = policy.no_show_penalty_type
        if penalty_type is NoShowPenaltyType.FULL_CHARGE:
            percent, retention = self.NO_REFUND_PERCENT, Retention.FULL
            description = "No refund: full price charged"
        elif penalty_type is NoShowPenaltyType.DEPOSIT_ONLY:
            percent, retention = self.NO_REFUND_PERCENT, Retention.DEPOSIT
            description = "Deposit retained"
        else:
            penalty = Decimal(policy.no_show_penalty_percentage)
            percent, retention = HUNDRED - penalty, Retention.PERCENTAGE
            description = f"{penalty}% charged, {percent}% refunded"

        if is_no_show:
            description += ": no-show"
        else:
            description += (
                f": late cancellation {hours_before:.1f} hours before start "
                f"(deadline {policy.cancellation_deadline_hours} hours)"
            )

        return RefundDecision(
            refund_percent=percent,
            mode=RefundMode.CASH if percent else RefundMode.NONE,
            applies_no_show_penalty=True,
            is_late=True,
            is_no_show=is_no_show,
            retention=retention,
            hours_before_start=hours_before,
            description=description,
        )

    def _retention_for(self, refund_percent: Decimal) -> Retention:
        if refund_percent >= HUNDRED:
            return Retention.NONE
        if refund_percent <= 0:
            return Retention.FULL
        return Retention.PERCENTAGE
