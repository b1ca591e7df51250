"""Enumeration types for Courtbook policy and payment models."""

from enum import Enum


class DepositType(str, Enum):
    """How the online deposit is computed."""

    PERCENTAGE = "percentage"
    FIXED = "fixed"


class CancellationPolicy(str, Enum):
    """What a customer gets back when cancelling before the deadline."""

    FULL_REFUND = "full_refund"
    PARTIAL_REFUND = "partial_refund"
    NO_REFUND = "no_refund"
    CREDIT = "credit"  # Refunded as credit for future bookings


class NoShowPenaltyType(str, Enum):
    """What the establishment keeps on a late cancellation or no-show."""

    FULL_CHARGE = "full_charge"
    DEPOSIT_ONLY = "deposit_only"
    PERCENTAGE = "percentage"


class PaymentType(str, Enum):
    """Payment options offered on the payment page."""

    DEPOSIT = "deposit"
    FULL = "full"


class DebtReason(str, Enum):
    """Why a client owes money to an establishment."""

    LATE_CANCELLATION = "late_cancellation"
    NO_SHOW = "no_show"
    OTHER = "other"


class RefundMode(str, Enum):
    """How a refund is settled."""

    CASH = "cash"
    CREDIT = "credit"
    NONE = "none"


class Retention(str, Enum):
    """What the establishment retains after a cancellation."""

    NONE = "none"
    FULL = "full"
    DEPOSIT = "deposit"
    PERCENTAGE = "percentage"


class BookingWindowReason(str, Enum):
    """Reasons a booking attempt falls outside the allowed window."""

    TOO_FAR_IN_ADVANCE = "too_far_in_advance"
    TOO_SOON = "too_soon"
    SAME_DAY_DISALLOWED = "same_day_disallowed"
