"""Payment models: fee discounts, breakdowns, quotes and charges.

Amounts are whole currency units.
"""

import os
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from .common import FROZEN_CAMEL_CASE_CONFIG, Percent
from .debt import PendingDebt
from .enums import PaymentType


def default_currency() -> str:
    """Currency of payment preferences."""
    return os.environ.get("CURRENCY", "ARS")


class FeeDiscount(BaseModel):
    """Promotional reduction of the platform fee for a client/establishment pair.

    Computed by the backend per request; never persisted by the core.
    """

    model_config = FROZEN_CAMEL_CASE_CONFIG

    has_discount: bool = False
    general_fee_percent: Percent | None = Field(
        default=None,
        ge=0,
        le=100,
        description="Fee percent before discount; the policy's platform fee when omitted",
    )
    discount_percent: Percent = Field(default=Decimal(0), ge=0, le=100)

    @classmethod
    def none(cls) -> "FeeDiscount":
        """No discount."""
        return cls()


class PaymentBreakdown(BaseModel):
    """What a customer pays now and later for one payment type."""

    model_config = FROZEN_CAMEL_CASE_CONFIG

    payment_type: PaymentType
    base_amount: int = Field(..., ge=0, description="Principal owed to the establishment")
    fee: int = Field(..., ge=0, description="Platform fee after discount")
    general_fee: int = Field(..., ge=0, description="Platform fee before discount")
    total_amount: int = Field(..., ge=0, description="base_amount + fee")
    remaining_amount: int = Field(..., ge=0, description="Balance due at the venue")
    deposit_percent: Percent = Field(
        ...,
        description="Share of the full price covered by base_amount",
    )

    @model_validator(mode="after")
    def _check_totals(self) -> "PaymentBreakdown":
        if self.total_amount != self.base_amount + self.fee:
            raise ValueError("total_amount must equal base_amount + fee")
        if self.payment_type is PaymentType.FULL and self.remaining_amount != 0:
            raise ValueError("full payments leave no remaining amount")
        return self

    @property
    def has_fee_discount(self) -> bool:
        """Whether the crossed-out general fee should be shown."""
        return self.fee < self.general_fee


class FeeQuote(BaseModel):
    """Both payment-choice cards of the payment page."""

    model_config = FROZEN_CAMEL_CASE_CONFIG

    full_price: int = Field(..., gt=0)
    fee_percent: Percent
    available_options: list[PaymentType]
    deposit: PaymentBreakdown | None = None
    full: PaymentBreakdown | None = None
    fee_discount: FeeDiscount = Field(default_factory=FeeDiscount.none)
    pending_debt: PendingDebt = Field(default_factory=PendingDebt.none)

    def breakdown_for(self, payment_type: PaymentType) -> PaymentBreakdown | None:
        """Return the breakdown of a payment type, if offered."""
        return self.deposit if payment_type is PaymentType.DEPOSIT else self.full


class PaymentCharge(BaseModel):
    """The amount and labels submitted to the payment-preference endpoint."""

    model_config = FROZEN_CAMEL_CASE_CONFIG

    payment_type: PaymentType
    full_price: int = Field(..., gt=0)
    breakdown: PaymentBreakdown
    debt_amount: int = Field(default=0, ge=0)
    debt_ids: list[str] = Field(default_factory=list)
    amount: int = Field(..., gt=0, description="Literal amount charged by the gateway")
    currency: str = Field(default_factory=default_currency)
    title: str
    description: str
