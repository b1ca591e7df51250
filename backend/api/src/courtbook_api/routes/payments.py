"""Payment endpoints for the booking payment page.

Provides REST endpoints for:
- Quoting both payment-choice cards (deposit and full payment)
- Computing the charge for a confirmed payment choice

The booking backend resolves the client's fee discount and pending debts
and sends them along; nothing is persisted here. Amounts are whole
currency units.
"""

from fastapi import APIRouter, Depends

from courtbook.models import EstablishmentPolicy, FeeQuote, PaymentCharge
from courtbook.services import CheckoutService, DebtAggregator, FeeCalculator
from courtbook.utils.logging import get_logger, log_payment_operation
from courtbook_api.dependencies import (
    get_checkout_service,
    get_debt_aggregator,
    get_fee_calculator,
)
from courtbook_api.models.payments import ChargeRequest, QuoteRequest

logger = get_logger(__name__)

router = APIRouter(tags=["payments"])


@router.post(
    "/payments/quote",
    summary="Quote payment options",
    description="""
Compute the breakdown of every payment option the establishment offers.

Returns one breakdown per option with the base amount, platform fee
(before and after the client's discount), online total and the balance
left to pay at the venue.

**Notes:**
- Amounts are whole currency units, rounded half-up
- Missing policy settings take the platform defaults
- Pending debts are returned for display; they are added at checkout
""",
    response_description="Breakdowns for the offered payment options",
    response_model=FeeQuote,
    responses={
        200: {
            "description": "Quote computed successfully",
            "content": {
                "application/json": {
                    "example": {
                        "fullPrice": 10000,
                        "feePercent": 10,
                        "availableOptions": ["deposit", "full"],
                        "deposit": {
                            "paymentType": "deposit",
                            "baseAmount": 5000,
                            "fee": 500,
                            "generalFee": 500,
                            "totalAmount": 5500,
                            "remainingAmount": 5000,
                            "depositPercent": 50,
                        },
                        "full": {
                            "paymentType": "full",
                            "baseAmount": 10000,
                            "fee": 1000,
                            "generalFee": 1000,
                            "totalAmount": 11000,
                            "remainingAmount": 0,
                            "depositPercent": 100,
                        },
                    }
                }
            },
        },
        409: {"description": "The establishment offers no payment option or is misconfigured"},
    },
)
async def quote_payment_options(
    body: QuoteRequest,
    calculator: FeeCalculator = Depends(get_fee_calculator),
    aggregator: DebtAggregator = Depends(get_debt_aggregator),
) -> FeeQuote:
    """Quote deposit and full payment for a booking."""
    policy = EstablishmentPolicy.from_establishment(body.policy)
    debt = aggregator.aggregate_debt(body.debts)

    quote = calculator.quote(body.full_price, policy, body.fee_discount, debt)
    log_payment_operation(
        logger,
        "quote",
        amount=body.full_price,
        options=",".join(option.value for option in quote.available_options),
        debt_amount=debt.total_debt,
    )
    return quote


@router.post(
    "/payments/charge",
    summary="Compute payment charge",
    description="""
Compute the amount and labels of the payment preference for a confirmed
payment choice.

The court price is pro-rated from the hourly rate and the slot duration.
Pending debts are added to the amount and listed in `debtIds` so they can
be settled when the payment is approved.

**Notes:**
- `amount` is the literal amount for the payment gateway
- Choosing a disabled payment type is rejected with 400
""",
    response_description="Charge ready to submit to the payment gateway",
    response_model=PaymentCharge,
    responses={
        400: {"description": "Payment type not offered or invalid booking"},
        409: {"description": "The establishment offers no payment option or is misconfigured"},
    },
)
async def compute_charge(
    body: ChargeRequest,
    checkout: CheckoutService = Depends(get_checkout_service),
    aggregator: DebtAggregator = Depends(get_debt_aggregator),
) -> PaymentCharge:
    """Compute the charge for a booking and payment choice."""
    policy = EstablishmentPolicy.from_establishment(body.policy)
    debt = aggregator.aggregate_debt(body.debts)

    return checkout.prepare_charge(
        body.booking,
        policy,
        body.payment_type,
        body.fee_discount,
        debt,
    )
