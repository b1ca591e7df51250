"""Pytest configuration and fixtures for Courtbook resolver tests.

This module provides reusable fixtures for testing:
- Establishment policies for the common deposit/refund configurations
- Service instances
- A FastAPI test client with fresh service singletons
"""

import datetime as dt
import os
from typing import Any, Generator

import pytest

# === Environment Setup ===

# Set environment variables for testing before imports
os.environ.setdefault("PLATFORM_FEE_PERCENT", "10")
os.environ.setdefault("CURRENCY", "ARS")


# === Establishment Policy Fixtures ===


@pytest.fixture
def default_policy() -> Any:
    """Policy resolved from an establishment with no settings."""
    from courtbook.models import EstablishmentPolicy

    return EstablishmentPolicy.from_establishment({})


@pytest.fixture
def percentage_policy() -> Any:
    """50% deposit, full payment allowed, 10% platform fee."""
    from courtbook.models import EstablishmentPolicy

    return EstablishmentPolicy(
        require_deposit=True,
        deposit_type="percentage",
        deposit_percentage=50,
        allow_full_payment=True,
        platform_fee_percent=10,
    )


@pytest.fixture
def fixed_policy() -> Any:
    """Fixed 3000 deposit, full payment allowed."""
    from courtbook.models import EstablishmentPolicy

    return EstablishmentPolicy(
        require_deposit=True,
        deposit_type="fixed",
        deposit_fixed_amount=3000,
        allow_full_payment=True,
        platform_fee_percent=10,
    )


@pytest.fixture
def deposit_only_policy() -> Any:
    """50% deposit, no full payment online."""
    from courtbook.models import EstablishmentPolicy

    return EstablishmentPolicy(
        require_deposit=True,
        deposit_percentage=50,
        allow_full_payment=False,
        platform_fee_percent=10,
    )


@pytest.fixture
def establishment_document() -> dict[str, Any]:
    """Establishment settings as returned by the backend API (camelCase)."""
    return {
        "id": "est-123",
        "name": "Club Norte",
        "requireDeposit": True,
        "depositType": "percentage",
        "depositPercentage": 50,
        "depositFixedAmount": None,
        "allowFullPayment": True,
        "maxAdvanceBookingDays": 30,
        "minAdvanceBookingHours": 2,
        "allowSameDayBooking": True,
        "cancellationDeadlineHours": 24,
        "cancellationPolicy": "partial_refund",
        "refundPercentage": 50,
        "noShowPenalty": True,
        "noShowPenaltyType": "deposit_only",
        "depositPaymentDeadlineHours": 2,
    }


# === Time Fixtures ===


@pytest.fixture
def now() -> dt.datetime:
    """Fixed establishment-local current time."""
    return dt.datetime(2026, 11, 2, 10, 0)


# === API Fixtures ===


@pytest.fixture
def client() -> Generator[Any, None, None]:
    """Create a test client with fresh service singletons."""
    from fastapi.testclient import TestClient

    from courtbook_api.dependencies import reset_services
    from courtbook_api.main import app

    reset_services()
    yield TestClient(app)
    reset_services()
