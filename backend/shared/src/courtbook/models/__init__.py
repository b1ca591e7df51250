"""Pydantic models for the Courtbook payment and policy resolver."""

from .booking import BookingAttempt, CourtBooking, RefundDecision
from .debt import DebtItem, PendingDebt
from .enums import (
    BookingWindowReason,
    CancellationPolicy,
    DebtReason,
    DepositType,
    NoShowPenaltyType,
    PaymentType,
    RefundMode,
    Retention,
)
from .errors import (
    BookingWindowViolation,
    ConfigurationError,
    DebtSourceUnavailableError,
    ERROR_AUDIENCE,
    ERROR_MESSAGES,
    ERROR_RECOVERY,
    ErrorAudience,
    ErrorCode,
    ErrorResponse,
    InvalidArgumentError,
    PolicyError,
    PolicyViolation,
)
from .payment import FeeDiscount, FeeQuote, PaymentBreakdown, PaymentCharge
from .policy import EstablishmentPolicy

__all__ = [
    # Enums
    "BookingWindowReason",
    "CancellationPolicy",
    "DebtReason",
    "DepositType",
    "NoShowPenaltyType",
    "PaymentType",
    "RefundMode",
    "Retention",
    # Policy
    "EstablishmentPolicy",
    # Payment
    "FeeDiscount",
    "FeeQuote",
    "PaymentBreakdown",
    "PaymentCharge",
    # Debt
    "DebtItem",
    "PendingDebt",
    # Booking
    "BookingAttempt",
    "CourtBooking",
    "RefundDecision",
    # Errors
    "BookingWindowViolation",
    "ConfigurationError",
    "DebtSourceUnavailableError",
    "ERROR_AUDIENCE",
    "ERROR_MESSAGES",
    "ERROR_RECOVERY",
    "ErrorAudience",
    "ErrorCode",
    "ErrorResponse",
    "InvalidArgumentError",
    "PolicyError",
    "PolicyViolation",
]
