"""FastAPI application for the Courtbook payment and policy resolver.

This package provides REST endpoints for:
- Health checks
- Payment quotes and charges for the booking payment page
- Booking window checks and cancellation refunds
- Establishment settings previews for the admin flow

Every endpoint is a pure computation over the request body; the booking
backend owns persistence.
"""

import os
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum

from courtbook import __version__
from courtbook.utils.logging import configure_logging, get_logger
from courtbook_api.exceptions import register_exception_handlers
from courtbook_api.middleware import CorrelationIdMiddleware
from courtbook_api.routes.bookings import router as bookings_router
from courtbook_api.routes.establishments import router as establishments_router
from courtbook_api.routes.health import router as health_router
from courtbook_api.routes.payments import router as payments_router

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"

configure_logging(os.environ.get("LOG_LEVEL", "INFO"))
logger = get_logger(__name__)


def get_cors_origins() -> list[str]:
    """Allowed CORS origins from CORS_ALLOWED_ORIGINS (comma-separated)."""
    raw = os.environ.get("CORS_ALLOWED_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


app = FastAPI(
    title="Courtbook Payment & Policy API",
    description="REST API for booking payments, booking windows and cancellation policies",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(CorrelationIdMiddleware)

# Register exception handlers for consistent error responses
register_exception_handlers(app)

app.include_router(health_router, prefix="/api")
app.include_router(payments_router, prefix="/api")
app.include_router(bookings_router, prefix="/api")
app.include_router(establishments_router, prefix="/api")


@app.get("/api/ping")
async def ping() -> dict[str, Any]:
    """Root health check endpoint at /api/ping."""
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "service": "courtbook-api",
    }


# Lambda handler - Mangum wraps FastAPI for AWS Lambda + API Gateway
handler = Mangum(app, lifespan="off")


def run_server(host: str = "0.0.0.0", port: int = 8080, reload: bool = True) -> None:
    """Run the FastAPI server.

    Args:
        host: Host to bind to (default: 0.0.0.0)
        port: Port to listen on (default: 8080)
        reload: Enable hot reload for development (default: True)
    """
    import uvicorn

    if reload:
        # Use string reference for reload mode (uvicorn requirement)
        uvicorn.run(
            "courtbook_api.main:app",
            host=host,
            port=port,
            reload=True,
            reload_dirs=["backend/api/src", "backend/shared/src"],
        )
    else:
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
