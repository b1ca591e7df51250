"""Payment option selection.

Decides which payment types an establishment offers, validates the
customer's choice and computes the literal amount sent to the gateway.
"""

from typing import Any

from courtbook.models import (
    ConfigurationError,
    ErrorCode,
    EstablishmentPolicy,
    InvalidArgumentError,
    PaymentBreakdown,
    PaymentType,
    PendingDebt,
    PolicyViolation,
)


def parse_payment_type(value: Any) -> PaymentType:
    """Coerce a payment type string, failing as a caller error."""
    try:
        return PaymentType(value)
    except ValueError as exc:
        raise InvalidArgumentError(
            f"Unknown payment type: {value!r}",
            {"payment_type": value},
        ) from exc


class PaymentTypeSelector:
    """Service for choosing between deposit and full payment."""

    def available_options(self, policy: EstablishmentPolicy) -> frozenset[PaymentType]:
        """Payment types the establishment offers.

        Args:
            policy: Resolved establishment policy

        Returns:
            Deposit when deposits are required, full when full payment is allowed.
            May be empty; see require_options().
        """
        options = set()
        if policy.require_deposit:
            options.add(PaymentType.DEPOSIT)
        if policy.allow_full_payment:
            options.add(PaymentType.FULL)
        return frozenset(options)

    def require_options(self, policy: EstablishmentPolicy) -> frozenset[PaymentType]:
        """Like available_options(), but an empty set is a configuration error."""
        options = self.available_options(policy)
        if not options:
            raise ConfigurationError(
                ErrorCode.NO_PAYMENT_OPTION,
                "Neither deposits nor full online payment are enabled for this establishment",
                {
                    "require_deposit": policy.require_deposit,
                    "allow_full_payment": policy.allow_full_payment,
                },
            )
        return options

    def validate_choice(self, policy: EstablishmentPolicy, payment_type: PaymentType | str) -> PaymentType:
        """Check that the customer's payment type is allowed.

        Raises:
            ConfigurationError: the establishment offers no payment option at all
            PolicyViolation: the chosen option is disabled
        """
        payment_type = parse_payment_type(payment_type)
        options = self.require_options(policy)
        if payment_type in options:
            return payment_type

        if payment_type is PaymentType.FULL:
            raise PolicyViolation(
                ErrorCode.FULL_PAYMENT_NOT_ALLOWED,
                "Full payment was requested but this establishment only takes deposits online",
                {"payment_type": payment_type.value},
            )
        raise PolicyViolation(
            ErrorCode.DEPOSIT_NOT_OFFERED,
            "A deposit was requested but this establishment only takes full payments online",
            {"payment_type": payment_type.value},
        )

    def default_choice(self, policy: EstablishmentPolicy) -> PaymentType:
        """Option pre-selected on the payment page: deposit when offered."""
        options = self.require_options(policy)
        return PaymentType.DEPOSIT if PaymentType.DEPOSIT in options else PaymentType.FULL

    def select_final_amount(self, breakdown: PaymentBreakdown, debt: PendingDebt | None) -> int:
        """Amount charged by the payment gateway: breakdown total plus debt."""
        return breakdown.total_amount + (debt.total_debt if debt else 0)
