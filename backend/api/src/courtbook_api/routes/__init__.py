"""API routes package.

Routers are organized by domain:

- health: Health check endpoint
- payments: Fee quotes and payment charges
- bookings: Booking window checks and cancellations
- establishments: Establishment settings preview

All routers are registered in main.py with /api prefix.
"""

from courtbook_api.routes.bookings import router as bookings_router
from courtbook_api.routes.establishments import router as establishments_router
from courtbook_api.routes.health import router as health_router
from courtbook_api.routes.payments import router as payments_router

__all__ = [
    "bookings_router",
    "establishments_router",
    "health_router",
    "payments_router",
]
