"""Computation services for the Courtbook payment and policy resolver."""

from .booking_window import BookingWindowValidator
from .checkout import CheckoutService
from .debt_aggregator import DebtAggregator
from .fee_calculator import FeeCalculator
from .payment_type_selector import PaymentTypeSelector, parse_payment_type
from .pricing import PricingService
from .refund_policy_service import CancellationPolicyEvaluator, RefundCalculation

__all__ = [
    "BookingWindowValidator",
    "CancellationPolicyEvaluator",
    "CheckoutService",
    "DebtAggregator",
    "FeeCalculator",
    "PaymentTypeSelector",
    "PricingService",
    "RefundCalculation",
    "parse_payment_type",
]
