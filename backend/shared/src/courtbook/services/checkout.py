"""Checkout: the charge submitted to the payment-preference endpoint.

Ties the pieces of the payment page together for one confirmed choice:
prices the slot, validates the payment type, computes its breakdown,
appends pending debt and labels the charge the way the payment
preference shows it to the customer.
"""

from courtbook.models import (
    CourtBooking,
    EstablishmentPolicy,
    FeeDiscount,
    InvalidArgumentError,
    PaymentBreakdown,
    PaymentCharge,
    PaymentType,
    PendingDebt,
)
from courtbook.utils.logging import get_logger, log_payment_operation
from courtbook.utils.money import format_amount

from .fee_calculator import FeeCalculator
from .payment_type_selector import PaymentTypeSelector
from .pricing import PricingService

logger = get_logger(__name__)


class CheckoutService:
    """Builds PaymentCharges from a booking and the establishment policy."""

    def __init__(
        self,
        pricing: PricingService | None = None,
        calculator: FeeCalculator | None = None,
        selector: PaymentTypeSelector | None = None,
    ) -> None:
        self.pricing = pricing or PricingService()
        self.selector = selector or PaymentTypeSelector()
        self.calculator = calculator or FeeCalculator(selector=self.selector)

    def prepare_charge(
        self,
        booking: CourtBooking,
        policy: EstablishmentPolicy,
        payment_type: PaymentType | str,
        discount: FeeDiscount | None = None,
        debt: PendingDebt | None = None,
    ) -> PaymentCharge:
        """Compute the charge for the customer's confirmed payment choice.

        Args:
            booking: Court, slot and duration being paid for
            policy: Resolved establishment policy
            payment_type: deposit or full
            discount: Fee discount for this client, or None
            debt: Client's pending debt at the establishment, or None

        Returns:
            PaymentCharge with the literal amount for the gateway

        Raises:
            ConfigurationError: the establishment offers no payment option
            PolicyViolation: the chosen payment type is disabled
            InvalidArgumentError: the booking has no positive price
        """
        payment_type = self.selector.validate_choice(policy, payment_type)
        debt = debt or PendingDebt.none()

        full_price = self.pricing.calculate_court_price(booking.hourly_rate, booking.duration_minutes)
        breakdown = self.calculator.compute_breakdown(full_price, policy, discount, payment_type)
        amount = self.selector.select_final_amount(breakdown, debt)

        if amount <= 0:
            log_payment_operation(
                logger,
                "prepare_charge",
                payment_type=payment_type.value,
                amount=amount,
                error="non-positive amount",
            )
            raise InvalidArgumentError(
                "The amount to pay could not be calculated",
                {"amount": amount},
            )

        title, description = self._labels(booking, breakdown, debt.total_debt)
        charge = PaymentCharge(
            payment_type=payment_type,
            full_price=full_price,
            breakdown=breakdown,
            debt_amount=debt.total_debt,
            debt_ids=debt.debt_ids,
            amount=amount,
            title=title,
            description=description,
        )

        log_payment_operation(
            logger,
            "prepare_charge",
            payment_type=payment_type.value,
            amount=amount,
            base_amount=breakdown.base_amount,
            fee=breakdown.fee,
            debt_amount=debt.total_debt,
        )
        return charge

    def _labels(
        self,
        booking: CourtBooking,
        breakdown: PaymentBreakdown,
        debt_amount: int,
    ) -> tuple[str, str]:
        end_time = self.pricing.calculate_end_time(booking.start_time, booking.duration_minutes)
        slot = (
            f"{booking.date.strftime('%d/%m/%Y')} de "
            f"{booking.start_time.strftime('%H:%M')} a {end_time.strftime('%H:%M')}"
        )
        venue = f"{booking.court_name} ({booking.establishment_name})"

        if breakdown.payment_type is PaymentType.FULL:
            title = f"Pago completo - {venue}"
            description = f"Pago completo - {slot}"
        else:
            percent = breakdown.deposit_percent.normalize()
            title = f"Seña - {venue}"
            description = f"Seña {percent:f}% - {slot}"

        if debt_amount > 0:
            title += " + Deuda"
            description += f" + Deuda acumulada: ${format_amount(debt_amount)}"

        return title, description
