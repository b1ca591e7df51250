"""FastAPI dependency injection providers for the resolver services.

Services hold no state, so each provider returns one cached instance for
the lifetime of the process.

Usage in routes:
    from courtbook_api.dependencies import get_fee_calculator

    @router.post("/payments/quote")
    async def quote(
        calculator: FeeCalculator = Depends(get_fee_calculator),
    ):
        ...

Service Dependency Graph:
    PaymentTypeSelector
        ├── FeeCalculator
        └── CheckoutService (with PricingService)

Testing:
    Use reset_services() to clear cached instances between tests.
"""

from functools import lru_cache

from courtbook.services import (
    BookingWindowValidator,
    CancellationPolicyEvaluator,
    CheckoutService,
    DebtAggregator,
    FeeCalculator,
    PaymentTypeSelector,
    PricingService,
)


@lru_cache
def get_payment_type_selector() -> PaymentTypeSelector:
    """Get cached PaymentTypeSelector instance."""
    return PaymentTypeSelector()


@lru_cache
def get_fee_calculator() -> FeeCalculator:
    """Get cached FeeCalculator instance.

    Returns:
        FeeCalculator sharing the PaymentTypeSelector singleton.
    """
    return FeeCalculator(selector=get_payment_type_selector())


@lru_cache
def get_debt_aggregator() -> DebtAggregator:
    """Get cached DebtAggregator instance."""
    return DebtAggregator()


@lru_cache
def get_pricing_service() -> PricingService:
    """Get cached PricingService instance."""
    return PricingService()


@lru_cache
def get_checkout_service() -> CheckoutService:
    """Get cached CheckoutService instance.

    Returns:
        CheckoutService wired to the pricing, calculator and selector singletons.
    """
    return CheckoutService(
        pricing=get_pricing_service(),
        calculator=get_fee_calculator(),
        selector=get_payment_type_selector(),
    )


@lru_cache
def get_booking_window_validator() -> BookingWindowValidator:
    """Get cached BookingWindowValidator instance."""
    return BookingWindowValidator()


@lru_cache
def get_cancellation_evaluator() -> CancellationPolicyEvaluator:
    """Get cached CancellationPolicyEvaluator instance."""
    return CancellationPolicyEvaluator()


def reset_services() -> None:
    """Clear all cached service instances.

    Use in tests to ensure fresh instances between test runs.
    """
    get_payment_type_selector.cache_clear()
    get_fee_calculator.cache_clear()
    get_debt_aggregator.cache_clear()
    get_pricing_service.cache_clear()
    get_checkout_service.cache_clear()
    get_booking_window_validator.cache_clear()
    get_cancellation_evaluator.cache_clear()
