"""Shared API request/response models.

Error response wrappers and validation error formatting. Domain models
(EstablishmentPolicy, PaymentBreakdown, etc.) live in courtbook.models and
are reused by the endpoint models; this module covers HTTP concerns only.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Re-export ErrorResponse for convenience - this is the standard error format
from courtbook.models.errors import ErrorCode, ErrorResponse

__all__ = [
    "ErrorCode",
    "ErrorResponse",
    "ValidationErrorResponse",
    "ValidationErrorDetail",
    "format_validation_errors",
]


class ValidationErrorDetail(BaseModel):
    """Detail of a single validation error."""

    model_config = ConfigDict(strict=True)

    loc: list[str | int] = Field(
        ...,
        description="Path to the field that failed validation",
        examples=[["maxAdvanceBookingDays"]],
    )
    msg: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Input should be greater than or equal to 0"],
    )
    type: str = Field(
        ...,
        description="Error type identifier",
        examples=["greater_than_equal"],
    )


class ValidationErrorResponse(BaseModel):
    """Response format for establishment document validation errors (HTTP 422)."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: str = "ERR_VALIDATION"
    message: str = "Establishment settings failed validation"
    recovery: str = "Check the establishment settings and try again"
    details: list[ValidationErrorDetail] = Field(default_factory=list)


def format_validation_errors(errors: list[Any]) -> ValidationErrorResponse:
    """Convert Pydantic validation errors to ValidationErrorResponse.

    Args:
        errors: List of error dicts from Pydantic's ValidationError.errors()

    Returns:
        ValidationErrorResponse ready for JSON serialization.
    """
    details = [
        ValidationErrorDetail(
            loc=[str(loc) for loc in error.get("loc", [])],
            msg=error.get("msg", ""),
            type=error.get("type", ""),
        )
        for error in errors
    ]
    return ValidationErrorResponse(details=details)
