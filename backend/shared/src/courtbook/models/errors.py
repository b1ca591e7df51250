"""Standard error codes for the payment and policy resolver.

Every failure raised by the core carries an ErrorCode, a specific message
naming the rule that failed, a recovery hint, and the audience that has to
act on it (establishment admin, end customer, or the calling developer).
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from .enums import BookingWindowReason


class ErrorCode(str, Enum):
    """Standard error codes returned by the core and the API."""

    # Establishment configuration errors (ERR_CFG_001-ERR_CFG_005)
    INVALID_DEPOSIT_CONFIG = "ERR_CFG_001"
    INVALID_REFUND_CONFIG = "ERR_CFG_002"
    INVALID_NO_SHOW_CONFIG = "ERR_CFG_003"
    NO_PAYMENT_OPTION = "ERR_CFG_004"
    INVALID_FEE_CONFIG = "ERR_CFG_005"

    # Policy violations (ERR_POL_001-ERR_POL_002)
    DEPOSIT_NOT_OFFERED = "ERR_POL_001"
    FULL_PAYMENT_NOT_ALLOWED = "ERR_POL_002"

    # Booking window violations (ERR_WIN_001-ERR_WIN_003)
    TOO_FAR_IN_ADVANCE = "ERR_WIN_001"
    TOO_SOON = "ERR_WIN_002"
    SAME_DAY_DISALLOWED = "ERR_WIN_003"

    # Caller errors
    INVALID_ARGUMENT = "ERR_ARG_001"
    DEBT_SOURCE_UNAVAILABLE = "ERR_DEBT_001"


class ErrorAudience(str, Enum):
    """Who has to act on an error."""

    ADMIN = "admin"
    CUSTOMER = "customer"
    DEVELOPER = "developer"


# Default messages, used when the raiser has nothing more specific
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_DEPOSIT_CONFIG: "The deposit configuration is incomplete or out of range",
    ErrorCode.INVALID_REFUND_CONFIG: "The refund percentage is missing or out of range",
    ErrorCode.INVALID_NO_SHOW_CONFIG: "The no-show penalty percentage is missing or out of range",
    ErrorCode.NO_PAYMENT_OPTION: "No payment option is enabled for this establishment",
    ErrorCode.INVALID_FEE_CONFIG: "The platform fee percentage is out of range",
    ErrorCode.DEPOSIT_NOT_OFFERED: "This establishment does not take deposit payments",
    ErrorCode.FULL_PAYMENT_NOT_ALLOWED: "This establishment does not allow paying the full amount online",
    ErrorCode.TOO_FAR_IN_ADVANCE: "The booking date is too far in advance",
    ErrorCode.TOO_SOON: "The booking starts too soon",
    ErrorCode.SAME_DAY_DISALLOWED: "Same-day bookings are not allowed",
    ErrorCode.INVALID_ARGUMENT: "Invalid argument",
    ErrorCode.DEBT_SOURCE_UNAVAILABLE: "Pending debts could not be loaded",
}

ERROR_RECOVERY: dict[ErrorCode, str] = {
    ErrorCode.INVALID_DEPOSIT_CONFIG: "Set a deposit percentage between 0 and 100 or a non-negative fixed amount",
    ErrorCode.INVALID_REFUND_CONFIG: "Set a refund percentage between 0 and 100 for partial refunds",
    ErrorCode.INVALID_NO_SHOW_CONFIG: "Set a no-show penalty percentage between 0 and 100",
    ErrorCode.NO_PAYMENT_OPTION: "Enable deposits or full online payment in the establishment settings",
    ErrorCode.INVALID_FEE_CONFIG: "Set a platform fee percentage between 0 and 100",
    ErrorCode.DEPOSIT_NOT_OFFERED: "Choose the full payment option",
    ErrorCode.FULL_PAYMENT_NOT_ALLOWED: "Choose the deposit payment option",
    ErrorCode.TOO_FAR_IN_ADVANCE: "Choose an earlier date",
    ErrorCode.TOO_SOON: "Choose a later time slot",
    ErrorCode.SAME_DAY_DISALLOWED: "Choose a date from tomorrow onwards",
    ErrorCode.INVALID_ARGUMENT: "Fix the request parameters and try again",
    ErrorCode.DEBT_SOURCE_UNAVAILABLE: "Continue without pending debts",
}

ERROR_AUDIENCE: dict[ErrorCode, ErrorAudience] = {
    ErrorCode.INVALID_DEPOSIT_CONFIG: ErrorAudience.ADMIN,
    ErrorCode.INVALID_REFUND_CONFIG: ErrorAudience.ADMIN,
    ErrorCode.INVALID_NO_SHOW_CONFIG: ErrorAudience.ADMIN,
    ErrorCode.NO_PAYMENT_OPTION: ErrorAudience.ADMIN,
    ErrorCode.INVALID_FEE_CONFIG: ErrorAudience.ADMIN,
    ErrorCode.DEPOSIT_NOT_OFFERED: ErrorAudience.CUSTOMER,
    ErrorCode.FULL_PAYMENT_NOT_ALLOWED: ErrorAudience.CUSTOMER,
    ErrorCode.TOO_FAR_IN_ADVANCE: ErrorAudience.CUSTOMER,
    ErrorCode.TOO_SOON: ErrorAudience.CUSTOMER,
    ErrorCode.SAME_DAY_DISALLOWED: ErrorAudience.CUSTOMER,
    ErrorCode.INVALID_ARGUMENT: ErrorAudience.DEVELOPER,
    ErrorCode.DEBT_SOURCE_UNAVAILABLE: ErrorAudience.DEVELOPER,
}

WINDOW_REASON_CODES: dict[BookingWindowReason, ErrorCode] = {
    BookingWindowReason.TOO_FAR_IN_ADVANCE: ErrorCode.TOO_FAR_IN_ADVANCE,
    BookingWindowReason.TOO_SOON: ErrorCode.TOO_SOON,
    BookingWindowReason.SAME_DAY_DISALLOWED: ErrorCode.SAME_DAY_DISALLOWED,
}


class ErrorResponse(BaseModel):
    """Standard error response body for policy failures."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: ErrorCode
    message: str
    recovery: str
    audience: ErrorAudience
    details: Optional[dict[str, str]] = None


class PolicyError(Exception):
    """Base exception for every failure raised by the resolver.

    Subclasses fix the error family; the code picks the specific rule.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message or ERROR_MESSAGES[code]
        self.recovery = ERROR_RECOVERY[code]
        self.audience = ERROR_AUDIENCE[code]
        self.details = {k: str(v) for k, v in details.items()} if details else None
        super().__init__(self.message)

    def to_error_response(self) -> ErrorResponse:
        """Convert this exception to an ErrorResponse for API responses."""
        return ErrorResponse(
            error_code=self.code,
            message=self.message,
            recovery=self.recovery,
            audience=self.audience,
            details=self.details,
        )


class ConfigurationError(PolicyError):
    """The establishment policy is inconsistent or enables no payment option.

    Not recoverable by retrying; surfaced to the establishment admin.
    """


class PolicyViolation(PolicyError):
    """The caller asked for something the establishment policy disallows."""


class BookingWindowViolation(PolicyError):
    """A booking attempt falls outside the allowed scheduling window."""

    def __init__(
        self,
        reason: BookingWindowReason,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.reason = reason
        super().__init__(WINDOW_REASON_CODES[reason], message, details)


class InvalidArgumentError(PolicyError, ValueError):
    """Malformed input; always a bug in the caller."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(ErrorCode.INVALID_ARGUMENT, message, details)


class DebtSourceUnavailableError(PolicyError):
    """Raised by debt loaders when the backend cannot be reached."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(ErrorCode.DEBT_SOURCE_UNAVAILABLE, message)
