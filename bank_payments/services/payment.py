"""Payment service: scheme eligibility rules and balance debit."""

import logging
from collections.abc import Callable
from typing import Any

from bank_payments.logging import PAYMENT_FIELDS_ATTR
from bank_payments.models import (
    Account,
    AccountStatus,
    AllowedPaymentSchemes,
    MakePaymentRequest,
    MakePaymentResult,
    PaymentScheme,
)
from bank_payments.store import AccountDataStore

logger = logging.getLogger(__name__)


def _scheme_allowed(account: Account, scheme: PaymentScheme) -> bool:
    return AllowedPaymentSchemes.for_scheme(scheme) in account.allowed_payment_schemes


def _bacs_allowed(account: Account, request: MakePaymentRequest) -> bool:
    return _scheme_allowed(account, PaymentScheme.BACS)


def _faster_payments_allowed(account: Account, request: MakePaymentRequest) -> bool:
    return (
        _scheme_allowed(account, PaymentScheme.FASTER_PAYMENTS)
        and account.balance >= request.amount
    )


def _chaps_allowed(account: Account, request: MakePaymentRequest) -> bool:
    return (
        _scheme_allowed(account, PaymentScheme.CHAPS)
        and account.status == AccountStatus.LIVE
    )


SCHEME_RULES: dict[PaymentScheme, Callable[[Account, MakePaymentRequest], bool]] = {
    PaymentScheme.BACS: _bacs_allowed,
    PaymentScheme.FASTER_PAYMENTS: _faster_payments_allowed,
    PaymentScheme.CHAPS: _chaps_allowed,
}


def is_payment_allowed(account: Account, request: MakePaymentRequest) -> bool:
    """Check whether ``account`` may make ``request`` under its scheme's rules.

    Unknown schemes are never allowed.
    """
    rule = SCHEME_RULES.get(request.payment_scheme)
    if rule is None:
        return False
    return rule(account, request)


def _payment_fields(request: MakePaymentRequest, outcome: str, **fields: str) -> dict[str, Any]:
    scheme = request.payment_scheme
    return {
        PAYMENT_FIELDS_ATTR: {
            "debtor_account_number": request.debtor_account_number,
            "payment_scheme": scheme.value if isinstance(scheme, PaymentScheme) else str(scheme),
            "amount": str(request.amount),
            "outcome": outcome,
            **fields,
        }
    }


class PaymentService:
    """Validate payment requests and debit the debtor account.

    Parameters
    ----------
    account_data_store : AccountDataStore
        Store used to look up and persist the debtor account.
    """

    def __init__(self, account_data_store: AccountDataStore) -> None:
        self.account_data_store = account_data_store

    def make_payment(self, request: MakePaymentRequest) -> MakePaymentResult:
        """Apply a payment request.

        Rule failures (unknown account, disallowed scheme, insufficient
        balance, non-live account) all return ``success=False`` and leave
        the account untouched. On success the balance is debited and the
        account is written back to the store exactly once.

        Parameters
        ----------
        request : MakePaymentRequest
            Payment to apply.

        Returns
        -------
        MakePaymentResult
            Outcome of the payment.
        """
        account = self.account_data_store.get_account(request.debtor_account_number)
        if account is None:
            logger.debug(
                "Payment rejected: account %s not found",
                request.debtor_account_number,
                extra=_payment_fields(request, "rejected", reason="account_not_found"),
            )
            return MakePaymentResult(success=False)

        if not is_payment_allowed(account, request):
            logger.debug(
                "Payment rejected: %s not allowed for account %s",
                request.payment_scheme,
                account.account_number,
                extra=_payment_fields(request, "rejected", reason="scheme_rules_failed"),
            )
            return MakePaymentResult(success=False)

        account.balance -= request.amount
        self.account_data_store.update_account(account)
        logger.info(
            "Payment of %s via %s debited from account %s",
            request.amount,
            request.payment_scheme.value,
            account.account_number,
            extra=_payment_fields(request, "debited"),
        )
        return MakePaymentResult(success=True)
