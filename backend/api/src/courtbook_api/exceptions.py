"""FastAPI exception handlers for converting PolicyError to HTTP responses.

Domain errors raised by the resolver become JSON responses with the
ErrorResponse structure. The ErrorCode-to-HTTP status mapping:
- 400 Bad Request: policy and booking window violations, invalid arguments
- 409 Conflict: establishment configuration errors (the request is fine,
  the stored configuration is not)
- 422 Unprocessable Entity: establishment documents with invalid field values
- 503 Service Unavailable: a collaborator the caller relied on is down

Usage:
    from courtbook_api.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_503_SERVICE_UNAVAILABLE,
)
from pydantic import ValidationError

from courtbook.models.errors import ErrorCode, PolicyError
from courtbook_api.models.common import format_validation_errors

logger = logging.getLogger(__name__)

ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    # Configuration errors -> 409 Conflict
    ErrorCode.INVALID_DEPOSIT_CONFIG: HTTP_409_CONFLICT,
    ErrorCode.INVALID_REFUND_CONFIG: HTTP_409_CONFLICT,
    ErrorCode.INVALID_NO_SHOW_CONFIG: HTTP_409_CONFLICT,
    ErrorCode.NO_PAYMENT_OPTION: HTTP_409_CONFLICT,
    ErrorCode.INVALID_FEE_CONFIG: HTTP_409_CONFLICT,
    # Policy violations -> 400 Bad Request
    ErrorCode.DEPOSIT_NOT_OFFERED: HTTP_400_BAD_REQUEST,
    ErrorCode.FULL_PAYMENT_NOT_ALLOWED: HTTP_400_BAD_REQUEST,
    # Booking window violations -> 400 Bad Request
    ErrorCode.TOO_FAR_IN_ADVANCE: HTTP_400_BAD_REQUEST,
    ErrorCode.TOO_SOON: HTTP_400_BAD_REQUEST,
    ErrorCode.SAME_DAY_DISALLOWED: HTTP_400_BAD_REQUEST,
    # Caller errors
    ErrorCode.INVALID_ARGUMENT: HTTP_400_BAD_REQUEST,
    ErrorCode.DEBT_SOURCE_UNAVAILABLE: HTTP_503_SERVICE_UNAVAILABLE,
}


def get_http_status_for_error(code: ErrorCode) -> int:
    """Get HTTP status code for an ErrorCode, 400 if not explicitly mapped."""
    return ERROR_CODE_TO_HTTP_STATUS.get(code, HTTP_400_BAD_REQUEST)


async def policy_error_handler(request: Request, exc: PolicyError) -> JSONResponse:
    """Handle PolicyError exceptions and convert to JSON response.

    Args:
        request: The incoming request (unused but required by FastAPI)
        exc: The PolicyError exception

    Returns:
        JSONResponse with error details and appropriate status code.
    """
    status_code = get_http_status_for_error(exc.code)
    logger.info(
        "Policy error %s (%s): %s", exc.code.value, exc.audience.value, exc.message
    )

    return JSONResponse(
        status_code=status_code,
        content=exc.to_error_response().model_dump(mode="json"),
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Handle model validation failures raised inside route handlers.

    Establishment documents are validated in the handler, not by FastAPI,
    so their field errors arrive here instead of as RequestValidationError.
    """
    return JSONResponse(
        status_code=422,
        content=format_validation_errors(exc.errors()).model_dump(mode="json"),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback for uncaught exceptions with a generic error body."""
    logger.exception("Unhandled exception: %s", exc)

    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error_code": "ERR_INTERNAL",
            "message": "An unexpected error occurred",
            "recovery": "Please try again later or contact support",
            "audience": "developer",
            "details": None,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(PolicyError, policy_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)
