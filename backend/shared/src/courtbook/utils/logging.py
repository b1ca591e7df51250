"""Structured logging utilities with correlation ID support.

Provides:
- Correlation ID context management for request tracing
- Structured logging formatter for consistent log output
- Helper functions for payment and policy decision logging

Usage:
    from courtbook.utils.logging import get_logger, set_correlation_id

    # In middleware/request handler:
    set_correlation_id(request.headers.get("X-Correlation-ID"))

    # In service code:
    logger = get_logger(__name__)
    logger.info("Computed breakdown", extra={"payment_type": "deposit"})
"""

import logging
import uuid
from contextvars import ContextVar
from typing import Any

# Context variable for correlation ID - thread-safe and async-safe
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def generate_correlation_id() -> str:
    """Generate a new correlation ID.

    Returns:
        UUID-based correlation ID string
    """
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set the correlation ID for the current request context.

    Args:
        correlation_id: Optional existing correlation ID. If None, generates new one.

    Returns:
        The correlation ID that was set
    """
    cid = correlation_id or generate_correlation_id()
    _correlation_id.set(cid)
    return cid


def get_correlation_id() -> str | None:
    """Get the current correlation ID."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID context."""
    _correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """Logging filter that adds correlation_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "no-correlation-id"
        return True


class StructuredFormatter(logging.Formatter):
    """Formatter that prefixes every line with the correlation ID."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = get_correlation_id() or "no-correlation-id"

        base = super().format(record)

        # Prefix for easy grep/filtering
        return f"[{record.correlation_id}] {base}"


def get_logger(name: str) -> logging.Logger:
    """Get a logger with correlation ID support.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not any(isinstance(f, CorrelationIdFilter) for f in logger.filters):
        logger.addFilter(CorrelationIdFilter())

    return logger


def configure_logging(level: int | str = logging.INFO) -> None:
    """Send root logs to stderr with correlation IDs.

    Safe to call more than once; the structured handler is installed once.
    """
    root = logging.getLogger()
    root.setLevel(level)
    if any(isinstance(h.formatter, StructuredFormatter) for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(StructuredFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)


def _format_context(prefix: str, context: dict[str, Any], skip: str) -> str:
    msg_parts = [prefix]
    for key, value in context.items():
        if key != skip:
            msg_parts.append(f"{key}={value}")
    return " | ".join(msg_parts)


def log_payment_operation(
    logger: logging.Logger,
    operation: str,
    *,
    establishment_id: str | None = None,
    payment_type: str | None = None,
    amount: int | None = None,
    error: str | None = None,
    **extra: Any,
) -> None:
    """Log a payment computation with structured context.

    Args:
        logger: Logger instance
        operation: Operation name (e.g., "quote", "prepare_charge")
        establishment_id: Establishment ID if available
        payment_type: "deposit" or "full" if relevant
        amount: Amount in whole currency units if relevant
        error: Error message if operation failed
        **extra: Additional context fields
    """
    context: dict[str, Any] = {"operation": operation}

    if establishment_id:
        context["establishment_id"] = establishment_id
    if payment_type:
        context["payment_type"] = payment_type
    if amount is not None:
        context["amount"] = amount
    if error:
        context["error"] = error

    context.update(extra)

    message = _format_context(f"Payment operation: {operation}", context, "operation")

    if error:
        logger.error(message, extra=context)
    else:
        logger.info(message, extra=context)


def log_policy_decision(
    logger: logging.Logger,
    decision: str,
    *,
    outcome: str,
    reason: str | None = None,
    **extra: Any,
) -> None:
    """Log a policy evaluation (booking window, cancellation) outcome.

    Rejections are logged at warning level so they stand out from
    routine accepted decisions.

    Args:
        logger: Logger instance
        decision: Decision name (e.g., "booking_window", "cancellation")
        outcome: "accepted", "rejected" or a decision-specific label
        reason: Rule that produced the outcome
        **extra: Additional context fields
    """
    context: dict[str, Any] = {"decision": decision, "outcome": outcome}
    if reason:
        context["reason"] = reason
    context.update(extra)

    message = _format_context(f"Policy decision: {decision}", context, "decision")

    if outcome == "rejected":
        logger.warning(message, extra=context)
    else:
        logger.info(message, extra=context)
