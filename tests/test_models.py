"""Tests for domain models."""

import dataclasses
from datetime import datetime
from decimal import Decimal

import pytest

from bank_payments.models import (
    Account,
    AccountStatus,
    AllowedPaymentSchemes,
    MakePaymentRequest,
    MakePaymentResult,
    PaymentScheme,
)


class TestAccount:
    """Tests for Account model."""

    def test_defaults(self) -> None:
        """Test creating an account with only its number."""
        account = Account(account_number="12345678")

        assert account.balance == Decimal("0")
        assert account.status == AccountStatus.LIVE
        assert account.allowed_payment_schemes == AllowedPaymentSchemes(0)


class TestAllowedPaymentSchemes:
    """Tests for the allowed schemes flag."""

    def test_combination_membership(self) -> None:
        schemes = AllowedPaymentSchemes.BACS | AllowedPaymentSchemes.CHAPS

        assert AllowedPaymentSchemes.BACS in schemes
        assert AllowedPaymentSchemes.CHAPS in schemes
        assert AllowedPaymentSchemes.FASTER_PAYMENTS not in schemes

    @pytest.mark.parametrize(
        "scheme,flag",
        [
            (PaymentScheme.BACS, AllowedPaymentSchemes.BACS),
            (PaymentScheme.FASTER_PAYMENTS, AllowedPaymentSchemes.FASTER_PAYMENTS),
            (PaymentScheme.CHAPS, AllowedPaymentSchemes.CHAPS),
        ],
    )
    def test_for_scheme(self, scheme: PaymentScheme, flag: AllowedPaymentSchemes) -> None:
        assert AllowedPaymentSchemes.for_scheme(scheme) is flag

    def test_enum_values(self) -> None:
        assert PaymentScheme("FASTER_PAYMENTS") is PaymentScheme.FASTER_PAYMENTS
        assert AccountStatus("INBOUND_PAYMENTS_ONLY") is AccountStatus.INBOUND_PAYMENTS_ONLY


class TestMakePaymentRequest:
    """Tests for MakePaymentRequest model."""

    def test_optional_fields(self) -> None:
        request = MakePaymentRequest(
            debtor_account_number="12345678",
            payment_scheme=PaymentScheme.BACS,
            amount=Decimal("50"),
        )

        assert request.creditor_account_number is None
        assert request.payment_date is None

    def test_creditor_fields(self) -> None:
        when = datetime(2024, 6, 15, 10, 30)
        request = MakePaymentRequest(
            debtor_account_number="12345678",
            payment_scheme=PaymentScheme.CHAPS,
            amount=Decimal("50"),
            creditor_account_number="87654321",
            payment_date=when,
        )

        assert request.creditor_account_number == "87654321"
        assert request.payment_date == when

    @pytest.mark.parametrize(
        "amount,expected",
        [(50, Decimal("50")), (50.1, Decimal("50.1")), ("12.34", Decimal("12.34"))],
    )
    def test_amount_converted_to_decimal(self, amount: object, expected: Decimal) -> None:
        request = MakePaymentRequest(
            debtor_account_number="12345678",
            payment_scheme=PaymentScheme.BACS,
            amount=amount,
        )

        assert isinstance(request.amount, Decimal)
        assert request.amount == expected

    def test_decimal_amount_kept(self) -> None:
        amount = Decimal("50.00")
        request = MakePaymentRequest(
            debtor_account_number="12345678",
            payment_scheme=PaymentScheme.BACS,
            amount=amount,
        )

        assert request.amount is amount


class TestMakePaymentResult:
    """Tests for MakePaymentResult model."""

    def test_default_is_failure(self) -> None:
        assert MakePaymentResult().success is False

    def test_frozen(self) -> None:
        result = MakePaymentResult(success=True)

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.success = False
