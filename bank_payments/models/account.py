"""Account model for payment processing."""

from dataclasses import dataclass
from decimal import Decimal

from bank_payments.models.enums import AccountStatus, AllowedPaymentSchemes


@dataclass
class Account:
    """Bank account held by an account data store.

    The payment service debits ``balance`` in place and hands the same
    object back to the store for persistence.
    """

    account_number: str
    balance: Decimal = Decimal("0")
    status: AccountStatus = AccountStatus.LIVE
    allowed_payment_schemes: AllowedPaymentSchemes = AllowedPaymentSchemes(0)
