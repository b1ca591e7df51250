"""Unit tests for PaymentTypeSelector."""

import pytest

from courtbook.models import (
    ConfigurationError,
    EstablishmentPolicy,
    ErrorCode,
    InvalidArgumentError,
    PaymentBreakdown,
    PaymentType,
    PendingDebt,
    PolicyViolation,
)
from courtbook.services import PaymentTypeSelector


@pytest.fixture
def selector() -> PaymentTypeSelector:
    return PaymentTypeSelector()


@pytest.fixture
def breakdown() -> PaymentBreakdown:
    return PaymentBreakdown(
        payment_type=PaymentType.DEPOSIT,
        base_amount=5000,
        fee=500,
        general_fee=500,
        total_amount=5500,
        remaining_amount=5000,
        deposit_percent=50,
    )


class TestAvailableOptions:
    """Tests for the offered payment types."""

    @pytest.mark.parametrize(
        ("require_deposit", "allow_full_payment", "expected"),
        [
            (True, True, {PaymentType.DEPOSIT, PaymentType.FULL}),
            (True, False, {PaymentType.DEPOSIT}),
            (False, True, {PaymentType.FULL}),
            (False, False, set()),
        ],
    )
    def test_options_follow_policy(
        self,
        selector: PaymentTypeSelector,
        require_deposit: bool,
        allow_full_payment: bool,
        expected: set[PaymentType],
    ) -> None:
        policy = EstablishmentPolicy(require_deposit=require_deposit, allow_full_payment=allow_full_payment)

        assert selector.available_options(policy) == expected

    def test_no_option_is_a_configuration_error(self, selector: PaymentTypeSelector) -> None:
        policy = EstablishmentPolicy(require_deposit=False, allow_full_payment=False)

        with pytest.raises(ConfigurationError) as exc_info:
            selector.require_options(policy)

        assert exc_info.value.code == ErrorCode.NO_PAYMENT_OPTION


class TestValidateChoice:
    """Tests for validating the customer's choice."""

    def test_full_payment_not_allowed(
        self, selector: PaymentTypeSelector, deposit_only_policy: EstablishmentPolicy
    ) -> None:
        with pytest.raises(PolicyViolation) as exc_info:
            selector.validate_choice(deposit_only_policy, PaymentType.FULL)

        assert exc_info.value.code == ErrorCode.FULL_PAYMENT_NOT_ALLOWED
        assert "only takes deposits" in exc_info.value.message

    def test_deposit_not_offered(self, selector: PaymentTypeSelector) -> None:
        policy = EstablishmentPolicy(require_deposit=False, allow_full_payment=True)

        with pytest.raises(PolicyViolation) as exc_info:
            selector.validate_choice(policy, "deposit")

        assert exc_info.value.code == ErrorCode.DEPOSIT_NOT_OFFERED

    def test_allowed_choice_is_returned(
        self, selector: PaymentTypeSelector, percentage_policy: EstablishmentPolicy
    ) -> None:
        assert selector.validate_choice(percentage_policy, "full") is PaymentType.FULL

    def test_unknown_choice(self, selector: PaymentTypeSelector, percentage_policy: EstablishmentPolicy) -> None:
        with pytest.raises(InvalidArgumentError):
            selector.validate_choice(percentage_policy, "cash")

    def test_default_choice_prefers_deposit(
        self, selector: PaymentTypeSelector, percentage_policy: EstablishmentPolicy
    ) -> None:
        assert selector.default_choice(percentage_policy) is PaymentType.DEPOSIT

    def test_default_choice_full_only(self, selector: PaymentTypeSelector) -> None:
        policy = EstablishmentPolicy(require_deposit=False, allow_full_payment=True)

        assert selector.default_choice(policy) is PaymentType.FULL


class TestSelectFinalAmount:
    """Tests for the amount sent to the payment gateway."""

    def test_adds_debt(self, selector: PaymentTypeSelector, breakdown: PaymentBreakdown) -> None:
        debt = PendingDebt(has_debt=True, total_debt=3500)

        assert selector.select_final_amount(breakdown, debt) == 9000

    @pytest.mark.parametrize("debt", [None, PendingDebt.none()])
    def test_without_debt(
        self, selector: PaymentTypeSelector, breakdown: PaymentBreakdown, debt: PendingDebt | None
    ) -> None:
        assert selector.select_final_amount(breakdown, debt) == breakdown.total_amount
