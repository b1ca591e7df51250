"""Unit tests for FeeCalculator breakdowns and quotes.

Test categories:
- Deposit breakdowns (percentage and fixed deposits)
- Full payment breakdowns
- Fee discounts
- Quotes for every offered option
- Invalid input
"""

from decimal import Decimal

import pytest

from courtbook.models import (
    ConfigurationError,
    EstablishmentPolicy,
    ErrorCode,
    FeeDiscount,
    InvalidArgumentError,
    PaymentType,
    PendingDebt,
    PolicyViolation,
)
from courtbook.services import FeeCalculator


@pytest.fixture
def calculator() -> FeeCalculator:
    return FeeCalculator()


class TestDepositBreakdown:
    """Tests for deposit payments."""

    def test_percentage_deposit_with_general_fee(
        self, calculator: FeeCalculator, percentage_policy: EstablishmentPolicy
    ) -> None:
        """10000 with a 50% deposit and 10% fee charges 5500 now and 5000 later."""
        breakdown = calculator.compute_breakdown(10000, percentage_policy, None, PaymentType.DEPOSIT)

        assert breakdown.base_amount == 5000
        assert breakdown.fee == 500
        assert breakdown.general_fee == 500
        assert breakdown.total_amount == 5500
        assert breakdown.remaining_amount == 5000
        assert breakdown.deposit_percent == Decimal(50)

    @pytest.mark.parametrize(
        ("full_price", "percent", "expected_base"),
        [
            (10000, 50, 5000),
            (9999, 50, 5000),  # 4999.5 rounds half-up
            (7, 30, 2),
            (12345, 0, 0),
            (12345, 100, 12345),
        ],
    )
    def test_percentage_deposit_rounds_half_up(
        self,
        calculator: FeeCalculator,
        full_price: int,
        percent: int,
        expected_base: int,
    ) -> None:
        """Deposit base is round(full_price * p / 100) and base + remaining == full price."""
        policy = EstablishmentPolicy(deposit_percentage=percent, platform_fee_percent=10)

        breakdown = calculator.compute_breakdown(full_price, policy, None, "deposit")

        assert breakdown.base_amount == expected_base
        assert breakdown.base_amount + breakdown.remaining_amount == full_price

    def test_fixed_deposit(self, calculator: FeeCalculator, fixed_policy: EstablishmentPolicy) -> None:
        """A fixed deposit is charged as is."""
        breakdown = calculator.compute_breakdown(8000, fixed_policy, None, PaymentType.DEPOSIT)

        assert breakdown.base_amount == 3000
        assert breakdown.remaining_amount == 5000
        assert breakdown.fee == 300
        assert breakdown.deposit_percent == Decimal("37.50")

    def test_fixed_deposit_never_exceeds_full_price(self, calculator: FeeCalculator) -> None:
        """A fixed deposit above the price is capped at the price."""
        policy = EstablishmentPolicy(deposit_type="fixed", deposit_fixed_amount=20000)

        breakdown = calculator.compute_breakdown(8000, policy, None, PaymentType.DEPOSIT)

        assert breakdown.base_amount == 8000
        assert breakdown.remaining_amount == 0

    def test_deposit_not_offered(self, calculator: FeeCalculator) -> None:
        """Deposits cannot be computed for an establishment that takes none."""
        policy = EstablishmentPolicy(require_deposit=False, allow_full_payment=True)

        with pytest.raises(PolicyViolation) as exc_info:
            calculator.compute_breakdown(10000, policy, None, PaymentType.DEPOSIT)

        assert exc_info.value.code == ErrorCode.DEPOSIT_NOT_OFFERED


class TestFullPaymentBreakdown:
    """Tests for full payments."""

    def test_full_payment_with_fixed_deposit_policy(
        self, calculator: FeeCalculator, fixed_policy: EstablishmentPolicy
    ) -> None:
        """Full payment ignores the deposit and leaves nothing to pay at the venue."""
        breakdown = calculator.compute_breakdown(8000, fixed_policy, None, PaymentType.FULL)

        assert breakdown.base_amount == 8000
        assert breakdown.remaining_amount == 0
        assert breakdown.fee == 800
        assert breakdown.total_amount == 8800
        assert breakdown.deposit_percent == Decimal(100)

    def test_full_payment_not_allowed(
        self, calculator: FeeCalculator, deposit_only_policy: EstablishmentPolicy
    ) -> None:
        """Full breakdowns cannot be computed for deposit-only establishments."""
        with pytest.raises(PolicyViolation) as exc_info:
            calculator.compute_breakdown(10000, deposit_only_policy, None, PaymentType.FULL)

        assert exc_info.value.code == ErrorCode.FULL_PAYMENT_NOT_ALLOWED

    def test_unknown_payment_type(
        self, calculator: FeeCalculator, percentage_policy: EstablishmentPolicy
    ) -> None:
        """Unknown payment types are caller errors."""
        with pytest.raises(InvalidArgumentError):
            calculator.compute_breakdown(10000, percentage_policy, None, "installments")


class TestFeeDiscount:
    """Tests for platform fee discounts."""

    def test_full_discount_removes_fee(
        self, calculator: FeeCalculator, percentage_policy: EstablishmentPolicy
    ) -> None:
        """A 100% discount makes the fee exactly 0."""
        discount = FeeDiscount(has_discount=True, discount_percent=100)

        breakdown = calculator.compute_breakdown(10000, percentage_policy, discount, PaymentType.DEPOSIT)

        assert breakdown.fee == 0
        assert breakdown.general_fee == 500
        assert breakdown.total_amount == 5000
        assert breakdown.has_fee_discount is True

    @pytest.mark.parametrize("general_fee_percent", [0, 7, 10, 33.3, 100])
    def test_full_discount_is_zero_for_any_fee(
        self,
        calculator: FeeCalculator,
        percentage_policy: EstablishmentPolicy,
        general_fee_percent: float,
    ) -> None:
        """The fee is 0 regardless of the general fee percent."""
        discount = FeeDiscount(
            has_discount=True,
            general_fee_percent=general_fee_percent,
            discount_percent=100,
        )

        breakdown = calculator.compute_breakdown(12345, percentage_policy, discount, PaymentType.FULL)

        assert breakdown.fee == 0

    def test_partial_discount(self, calculator: FeeCalculator, percentage_policy: EstablishmentPolicy) -> None:
        """A 50% discount halves the fee."""
        discount = FeeDiscount(has_discount=True, discount_percent=50)

        breakdown = calculator.compute_breakdown(10000, percentage_policy, discount, PaymentType.FULL)

        assert breakdown.general_fee == 1000
        assert breakdown.fee == 500
        assert breakdown.total_amount == 10500

    def test_discount_flag_off_ignores_percent(
        self, calculator: FeeCalculator, percentage_policy: EstablishmentPolicy
    ) -> None:
        """discount_percent only applies when has_discount is set."""
        discount = FeeDiscount(has_discount=False, discount_percent=100)

        breakdown = calculator.compute_breakdown(10000, percentage_policy, discount, PaymentType.FULL)

        assert breakdown.fee == 1000
        assert breakdown.has_fee_discount is False

    def test_general_fee_percent_overrides_policy(
        self, calculator: FeeCalculator, percentage_policy: EstablishmentPolicy
    ) -> None:
        """The discount's general fee percent replaces the platform fee."""
        discount = FeeDiscount(has_discount=False, general_fee_percent=5)

        breakdown = calculator.compute_breakdown(10000, percentage_policy, discount, PaymentType.FULL)

        assert breakdown.fee == 500


class TestIdempotence:
    """Tests that breakdowns hold no hidden state."""

    def test_same_inputs_same_breakdown(
        self, calculator: FeeCalculator, percentage_policy: EstablishmentPolicy
    ) -> None:
        discount = FeeDiscount(has_discount=True, discount_percent=25)

        first = calculator.compute_breakdown(15000, percentage_policy, discount, PaymentType.DEPOSIT)
        second = calculator.compute_breakdown(15000, percentage_policy, discount, PaymentType.DEPOSIT)

        assert first == second


class TestQuote:
    """Tests for quoting every offered option."""

    def test_quote_both_options(
        self, calculator: FeeCalculator, percentage_policy: EstablishmentPolicy
    ) -> None:
        quote = calculator.quote(10000, percentage_policy)

        assert quote.available_options == [PaymentType.DEPOSIT, PaymentType.FULL]
        assert quote.deposit is not None and quote.deposit.total_amount == 5500
        assert quote.full is not None and quote.full.total_amount == 11000
        assert quote.fee_percent == Decimal(10)
        assert quote.pending_debt.has_debt is False

    def test_quote_deposit_only(
        self, calculator: FeeCalculator, deposit_only_policy: EstablishmentPolicy
    ) -> None:
        quote = calculator.quote(10000, deposit_only_policy)

        assert quote.available_options == [PaymentType.DEPOSIT]
        assert quote.full is None
        assert quote.breakdown_for(PaymentType.DEPOSIT) == quote.deposit

    def test_quote_carries_pending_debt(
        self, calculator: FeeCalculator, percentage_policy: EstablishmentPolicy
    ) -> None:
        debt = PendingDebt(has_debt=True, total_debt=1500)

        quote = calculator.quote(10000, percentage_policy, debt=debt)

        assert quote.pending_debt.total_debt == 1500

    def test_quote_without_options(self, calculator: FeeCalculator) -> None:
        """An establishment with no payment option cannot be quoted."""
        policy = EstablishmentPolicy(require_deposit=False, allow_full_payment=False)

        with pytest.raises(ConfigurationError) as exc_info:
            calculator.quote(10000, policy)

        assert exc_info.value.code == ErrorCode.NO_PAYMENT_OPTION


class TestInvalidFullPrice:
    """Tests for full price validation."""

    @pytest.mark.parametrize("full_price", [0, -100, 10.5, True])
    def test_rejects_non_positive_or_non_integer(
        self,
        calculator: FeeCalculator,
        percentage_policy: EstablishmentPolicy,
        full_price: object,
    ) -> None:
        with pytest.raises(InvalidArgumentError):
            calculator.compute_breakdown(full_price, percentage_policy, None, PaymentType.FULL)  # type: ignore[arg-type]
