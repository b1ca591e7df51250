"""API request/response models.

Modules:
- common: error responses shared by every endpoint
- payments: fee quotes and charges
- bookings: booking window checks and cancellations
- establishments: establishment settings preview
"""

from courtbook_api.models.bookings import (
    CancellationRequest,
    CancellationResponse,
    RefundAmountResponse,
    WindowCheckRequest,
    WindowCheckResponse,
    WindowViolationDetail,
)
from courtbook_api.models.common import ValidationErrorDetail, ValidationErrorResponse
from courtbook_api.models.establishments import PolicyPreviewResponse
from courtbook_api.models.payments import ChargeRequest, QuoteRequest

__all__ = [
    "CancellationRequest",
    "CancellationResponse",
    "ChargeRequest",
    "PolicyPreviewResponse",
    "QuoteRequest",
    "RefundAmountResponse",
    "ValidationErrorDetail",
    "ValidationErrorResponse",
    "WindowCheckRequest",
    "WindowCheckResponse",
    "WindowViolationDetail",
]
