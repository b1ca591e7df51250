"""Aggregation of a client's pending debts at an establishment.

Debts come from late cancellations and no-shows and are appended to the
client's next payment. A debt lookup that fails never blocks a payment:
the caller's loader raises DebtSourceUnavailableError and the payment
proceeds without debt.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from courtbook.models import DebtItem, DebtSourceUnavailableError, PendingDebt
from courtbook.utils.logging import get_logger

logger = get_logger(__name__)

RawDebt = DebtItem | Mapping[str, Any]


class DebtAggregator:
    """Sums outstanding debts; holds no state."""

    def aggregate_debt(self, debts: Iterable[RawDebt]) -> PendingDebt:
        """Build a PendingDebt from debt records.

        Args:
            debts: DebtItems or raw debt objects from the backend API

        Returns:
            PendingDebt with the debts in their original order
        """
        items = tuple(
            debt if isinstance(debt, DebtItem) else DebtItem.model_validate(debt)
            for debt in debts
        )
        return PendingDebt(
            has_debt=len(items) > 0,
            total_debt=sum(item.amount for item in items),
            debts=items,
        )

    def aggregate_from_source(self, loader: Callable[[], Iterable[RawDebt]]) -> PendingDebt:
        """Load debts with ``loader`` and aggregate them.

        An unavailable debt source degrades to "no debt". Nothing is retried.

        Args:
            loader: Zero-argument callable fetching the client's debts

        Returns:
            PendingDebt, empty when the source is unavailable
        """
        try:
            debts = list(loader())
        except DebtSourceUnavailableError as exc:
            logger.warning("Debt source unavailable, continuing without debt: %s", exc.message)
            return PendingDebt.none()

        return self.aggregate_debt(debts)
