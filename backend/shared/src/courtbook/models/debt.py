"""Pending debt models for late cancellations and no-shows."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from .common import FROZEN_CAMEL_CASE_CONFIG
from .enums import DebtReason


class DebtItem(BaseModel):
    """One outstanding charge of a client at an establishment."""

    model_config = FROZEN_CAMEL_CASE_CONFIG

    id: str
    amount: int = Field(..., ge=0)
    reason: DebtReason = DebtReason.OTHER
    description: str = ""

    @field_validator("reason", mode="before")
    @classmethod
    def _unknown_reason_is_other(cls, value: Any) -> Any:
        if isinstance(value, str) and value not in {reason.value for reason in DebtReason}:
            return DebtReason.OTHER
        return value


class PendingDebt(BaseModel):
    """Outstanding debts appended to the next payment.

    ``debts`` keeps the order they were received in, for display.
    """

    model_config = FROZEN_CAMEL_CASE_CONFIG

    has_debt: bool = False
    total_debt: int = Field(default=0, ge=0)
    debts: tuple[DebtItem, ...] = ()

    @classmethod
    def none(cls) -> "PendingDebt":
        """No pending debt."""
        return cls()

    @property
    def debt_ids(self) -> list[str]:
        """IDs of the debts settled by the next payment."""
        return [debt.id for debt in self.debts]
