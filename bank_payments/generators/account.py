"""Account generator for seeding account data stores."""

import random
from decimal import Decimal
from typing import Any, Iterator

from bank_payments.generators.base import BaseGenerator
from bank_payments.models import Account, AccountStatus, AllowedPaymentSchemes


class AccountGenerator(BaseGenerator):
    """Generate sample debtor accounts.

    Most accounts are live and allowed on every scheme; the rest exercise
    the restricted combinations the payment rules distinguish.
    """

    STATUSES = list(AccountStatus)
    STATUS_WEIGHTS = [0.85, 0.10, 0.05]

    SCHEME_COMBINATIONS = [
        AllowedPaymentSchemes.BACS | AllowedPaymentSchemes.FASTER_PAYMENTS | AllowedPaymentSchemes.CHAPS,
        AllowedPaymentSchemes.BACS | AllowedPaymentSchemes.FASTER_PAYMENTS,
        AllowedPaymentSchemes.BACS,
        AllowedPaymentSchemes.FASTER_PAYMENTS,
        AllowedPaymentSchemes.CHAPS,
    ]
    SCHEME_WEIGHTS = [0.50, 0.20, 0.10, 0.10, 0.10]

    def generate(self, **overrides: Any) -> Account:
        """Generate a single account.

        Parameters
        ----------
        **overrides
            Field values to use instead of generated ones.

        Returns
        -------
        Account
            Generated account.
        """
        values: dict[str, Any] = {
            "account_number": self.fake.numerify("########"),
            "balance": Decimal(str(round(random.uniform(0, 5000), 2))).quantize(Decimal("0.01")),
            "status": random.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0],
            "allowed_payment_schemes": random.choices(
                self.SCHEME_COMBINATIONS, weights=self.SCHEME_WEIGHTS, k=1
            )[0],
        }
        values.update(overrides)
        return Account(**values)

    def generate_batch(self, count: int) -> Iterator[Account]:
        """Generate ``count`` accounts with distinct account numbers."""
        seen: set[str] = set()
        while len(seen) < count:
            account = self.generate()
            if account.account_number in seen:
                continue
            seen.add(account.account_number)
            yield account
