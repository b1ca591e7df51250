"""Fee calculator for deposit and full-payment breakdowns.

For a booking's full price the calculator works out, per payment type:
- base amount owed to the establishment now (deposit or full price)
- platform service fee, before and after any client discount
- total charged online and balance left to pay at the venue

All amounts are whole currency units, rounded half-up.
"""

from decimal import Decimal

from courtbook.models import (
    DepositType,
    ErrorCode,
    EstablishmentPolicy,
    FeeDiscount,
    FeeQuote,
    InvalidArgumentError,
    PaymentBreakdown,
    PaymentType,
    PendingDebt,
    PolicyViolation,
)
from courtbook.utils.logging import get_logger
from courtbook.utils.money import HUNDRED, percent_of, round_half_up

from .payment_type_selector import PaymentTypeSelector, parse_payment_type

logger = get_logger(__name__)


def _check_full_price(full_price: int) -> None:
    if isinstance(full_price, bool) or not isinstance(full_price, int):
        raise InvalidArgumentError(
            "full_price must be a whole amount",
            {"full_price": full_price},
        )
    if full_price <= 0:
        raise InvalidArgumentError(
            "full_price must be greater than 0",
            {"full_price": full_price},
        )


class FeeCalculator:
    """Computes PaymentBreakdowns; stateless and safe to share."""

    def __init__(self, selector: PaymentTypeSelector | None = None) -> None:
        self.selector = selector or PaymentTypeSelector()

    def deposit_base(self, full_price: int, policy: EstablishmentPolicy) -> int:
        """Deposit owed to the establishment for a booking of ``full_price``."""
        if policy.deposit_type is DepositType.PERCENTAGE:
            return percent_of(full_price, policy.deposit_percentage)
        # Never ask for more than the booking costs
        return min(policy.deposit_fixed_amount, full_price)

    def compute_breakdown(
        self,
        full_price: int,
        policy: EstablishmentPolicy,
        discount: FeeDiscount | None,
        payment_type: PaymentType,
    ) -> PaymentBreakdown:
        """Compute what the customer pays for one payment type.

        Args:
            full_price: Full booking price, > 0
            policy: Resolved establishment policy
            discount: Fee discount for this client, or None
            payment_type: deposit or full

        Returns:
            PaymentBreakdown for the payment type

        Raises:
            InvalidArgumentError: full_price is not a positive whole amount
            PolicyViolation: the requested payment type is disabled by the policy
        """
        _check_full_price(full_price)
        payment_type = parse_payment_type(payment_type)
        discount = discount or FeeDiscount.none()

        if payment_type is PaymentType.DEPOSIT:
            if not policy.require_deposit:
                raise PolicyViolation(
                    ErrorCode.DEPOSIT_NOT_OFFERED,
                    "A deposit was requested but this establishment does not take deposits",
                    {"payment_type": payment_type.value},
                )
            base = self.deposit_base(full_price, policy)
            remaining = full_price - base
            if policy.deposit_type is DepositType.PERCENTAGE:
                deposit_percent = Decimal(policy.deposit_percentage)
            else:
                deposit_percent = (Decimal(base) * HUNDRED / Decimal(full_price)).quantize(
                    Decimal("0.01")
                )
        else:
            if not policy.allow_full_payment:
                raise PolicyViolation(
                    ErrorCode.FULL_PAYMENT_NOT_ALLOWED,
                    "Full payment was requested but this establishment does not allow it online",
                    {"payment_type": payment_type.value},
                )
            base = full_price
            remaining = 0
            deposit_percent = HUNDRED

        fee_percent = self.fee_percent(policy, discount)
        general_fee = percent_of(base, fee_percent)
        if discount.has_discount:
            fee = round_half_up(
                Decimal(general_fee) * (HUNDRED - Decimal(discount.discount_percent)) / HUNDRED
            )
        else:
            fee = general_fee

        breakdown = PaymentBreakdown(
            payment_type=payment_type,
            base_amount=base,
            fee=fee,
            general_fee=general_fee,
            total_amount=base + fee,
            remaining_amount=remaining,
            deposit_percent=deposit_percent,
        )
        logger.debug(
            "Computed %s breakdown: base=%s fee=%s total=%s remaining=%s",
            payment_type.value,
            breakdown.base_amount,
            breakdown.fee,
            breakdown.total_amount,
            breakdown.remaining_amount,
        )
        return breakdown

    def fee_percent(self, policy: EstablishmentPolicy, discount: FeeDiscount | None) -> Decimal:
        """Platform fee percent before discount."""
        if discount is not None and discount.general_fee_percent is not None:
            return Decimal(discount.general_fee_percent)
        return Decimal(policy.platform_fee_percent)

    def quote(
        self,
        full_price: int,
        policy: EstablishmentPolicy,
        discount: FeeDiscount | None = None,
        debt: PendingDebt | None = None,
    ) -> FeeQuote:
        """Compute a breakdown for every payment type the policy offers.

        Raises:
            InvalidArgumentError: full_price is not a positive whole amount
            ConfigurationError: the policy offers no payment option
        """
        _check_full_price(full_price)
        discount = discount or FeeDiscount.none()
        options = self.selector.require_options(policy)

        breakdowns = {
            option: self.compute_breakdown(full_price, policy, discount, option)
            for option in options
        }
        return FeeQuote(
            full_price=full_price,
            fee_percent=self.fee_percent(policy, discount),
            available_options=sorted(options, key=list(PaymentType).index),
            deposit=breakdowns.get(PaymentType.DEPOSIT),
            full=breakdowns.get(PaymentType.FULL),
            fee_discount=discount,
            pending_debt=debt or PendingDebt.none(),
        )
