"""Payment request and result models."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from bank_payments.models.enums import PaymentScheme


@dataclass
class MakePaymentRequest:
    """Request to pay ``amount`` out of the debtor account.

    Non-Decimal amounts (int, float, str) are converted through ``str`` so
    ``50.1`` becomes ``Decimal("50.1")`` rather than its binary expansion.
    """

    debtor_account_number: str
    payment_scheme: PaymentScheme
    amount: Decimal
    creditor_account_number: str | None = None  # not used for eligibility
    payment_date: datetime | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            self.amount = Decimal(str(self.amount))


@dataclass(frozen=True)
class MakePaymentResult:
    """Outcome of a payment attempt."""

    success: bool = False
