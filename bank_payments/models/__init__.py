"""Payment domain models."""

from bank_payments.models.account import Account
from bank_payments.models.enums import AccountStatus, AllowedPaymentSchemes, PaymentScheme
from bank_payments.models.payment import MakePaymentRequest, MakePaymentResult

__all__ = [
    "Account",
    "AccountStatus",
    "AllowedPaymentSchemes",
    "MakePaymentRequest",
    "MakePaymentResult",
    "PaymentScheme",
]
