"""Establishment policy model.

The policy is the per-establishment configuration that drives deposits,
payment options, booking windows, cancellations and no-show penalties.
Defaults for missing fields are resolved here, once, so every service
receives a fully-resolved policy.
"""

import os
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, model_validator

from courtbook.utils.money import format_amount

from .common import FROZEN_CAMEL_CASE_CONFIG, Percent
from .enums import CancellationPolicy, DepositType, NoShowPenaltyType
from .errors import ConfigurationError, ErrorCode, InvalidArgumentError

DEFAULT_PLATFORM_FEE_PERCENT = "10"


def default_platform_fee_percent() -> Decimal:
    """Platform service fee applied when an establishment has none configured."""
    return Decimal(os.environ.get("PLATFORM_FEE_PERCENT", DEFAULT_PLATFORM_FEE_PERCENT))


def _in_percent_range(value: Decimal | None) -> bool:
    return value is not None and Decimal(0) <= value <= Decimal(100)


class EstablishmentPolicy(BaseModel):
    """Deposit, booking-window and cancellation rules of an establishment.

    Read-only to the payment flow. Amounts are whole currency units.
    """

    model_config = FROZEN_CAMEL_CASE_CONFIG

    # Deposit
    require_deposit: bool = Field(default=True, description="Whether a deposit is taken online")
    deposit_type: DepositType = Field(default=DepositType.PERCENTAGE)
    deposit_percentage: Percent | None = Field(
        default=Decimal(50),
        description="Deposit as a share of the full price (percentage deposits)",
    )
    deposit_fixed_amount: int | None = Field(
        default=5000,
        description="Deposit amount (fixed deposits)",
    )
    allow_full_payment: bool = Field(
        default=False,
        description="Whether customers may pay the full price online",
    )
    deposit_payment_deadline_hours: int = Field(default=2, ge=0)

    # Booking window
    max_advance_booking_days: int = Field(default=30, ge=0)
    min_advance_booking_hours: int = Field(default=2, ge=0)
    allow_same_day_booking: bool = Field(default=True)

    # Cancellation
    cancellation_deadline_hours: int = Field(default=24, ge=0)
    cancellation_policy: CancellationPolicy = Field(default=CancellationPolicy.PARTIAL_REFUND)
    refund_percentage: Percent | None = Field(default=Decimal(50))

    # No-show
    no_show_penalty: bool = Field(default=True)
    no_show_penalty_type: NoShowPenaltyType = Field(default=NoShowPenaltyType.DEPOSIT_ONLY)
    no_show_penalty_percentage: Percent | None = Field(default=Decimal(100))

    # Platform service fee charged on top of the base amount
    platform_fee_percent: Percent = Field(default_factory=default_platform_fee_percent)

    @model_validator(mode="after")
    def _check_consistency(self) -> "EstablishmentPolicy":
        if self.deposit_type is DepositType.PERCENTAGE:
            if not _in_percent_range(self.deposit_percentage):
                raise ConfigurationError(
                    ErrorCode.INVALID_DEPOSIT_CONFIG,
                    "Percentage deposits need a deposit percentage between 0 and 100",
                    {"deposit_percentage": self.deposit_percentage},
                )
        elif self.deposit_fixed_amount is None or self.deposit_fixed_amount < 0:
            raise ConfigurationError(
                ErrorCode.INVALID_DEPOSIT_CONFIG,
                "Fixed deposits need a deposit amount of 0 or more",
                {"deposit_fixed_amount": self.deposit_fixed_amount},
            )

        if self.cancellation_policy is CancellationPolicy.PARTIAL_REFUND and not _in_percent_range(
            self.refund_percentage
        ):
            raise ConfigurationError(
                ErrorCode.INVALID_REFUND_CONFIG,
                "Partial refunds need a refund percentage between 0 and 100",
                {"refund_percentage": self.refund_percentage},
            )

        if (
            self.no_show_penalty
            and self.no_show_penalty_type is NoShowPenaltyType.PERCENTAGE
            and not _in_percent_range(self.no_show_penalty_percentage)
        ):
            raise ConfigurationError(
                ErrorCode.INVALID_NO_SHOW_CONFIG,
                "Percentage no-show penalties need a percentage between 0 and 100",
                {"no_show_penalty_percentage": self.no_show_penalty_percentage},
            )

        if not _in_percent_range(self.platform_fee_percent):
            raise ConfigurationError(
                ErrorCode.INVALID_FEE_CONFIG,
                details={"platform_fee_percent": self.platform_fee_percent},
            )

        return self

    @classmethod
    def from_establishment(cls, document: Mapping[str, Any]) -> "EstablishmentPolicy":
        """Build a policy from an establishment document of the backend API.

        Keys may be camelCase or snake_case; unknown keys are ignored.
        Missing or null fields fall back to the platform defaults.

        Args:
            document: Establishment JSON object

        Returns:
            Fully-resolved EstablishmentPolicy
        """
        if not isinstance(document, Mapping):
            raise InvalidArgumentError(
                "Establishment document must be a mapping",
                {"type": type(document).__name__},
            )
        present = {key: value for key, value in document.items() if value is not None}
        return cls.model_validate(present)

    def describe(self) -> str:
        """Human-readable summary of the policy for the settings preview."""
        lines = []
        if self.require_deposit:
            if self.deposit_type is DepositType.PERCENTAGE:
                lines.append(f"Deposit: {self.deposit_percentage}% of the total.")
            else:
                lines.append(f"Deposit: fixed ${format_amount(self.deposit_fixed_amount or 0)}.")
            hours = self.deposit_payment_deadline_hours
            lines.append(f"Deposit must be paid within {hours} hour{'s' if hours != 1 else ''}.")
            if self.allow_full_payment:
                lines.append("Customers may also pay the full amount online.")
        elif self.allow_full_payment:
            lines.append("Full payment online, no deposit.")
        else:
            lines.append("No online payment configured.")

        lines.append(
            f"Bookings up to {self.max_advance_booking_days} days ahead, "
            f"at least {self.min_advance_booking_hours} hours before start"
            f"{'' if self.allow_same_day_booking else ', not on the same day'}."
        )

        refund = {
            CancellationPolicy.FULL_REFUND: "full refund",
            CancellationPolicy.PARTIAL_REFUND: f"{self.refund_percentage}% refund",
            CancellationPolicy.NO_REFUND: "no refund",
            CancellationPolicy.CREDIT: "credit for future bookings",
        }[self.cancellation_policy]
        lines.append(
            f"Cancellations {self.cancellation_deadline_hours}+ hours before start: {refund}."
        )

        if self.no_show_penalty:
            penalty = {
                NoShowPenaltyType.FULL_CHARGE: "the full price is charged",
                NoShowPenaltyType.DEPOSIT_ONLY: "the deposit is retained",
                NoShowPenaltyType.PERCENTAGE: f"{self.no_show_penalty_percentage}% is charged",
            }[self.no_show_penalty_type]
            lines.append(f"Late cancellations and no-shows: {penalty}.")
        else:
            lines.append("No penalty for late cancellations or no-shows.")

        return "\n".join(lines)
