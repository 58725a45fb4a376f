"""Enumeration types for payment entities."""

from enum import Enum, Flag, auto


class PaymentScheme(str, Enum):
    BACS = "BACS"
    FASTER_PAYMENTS = "FASTER_PAYMENTS"
    CHAPS = "CHAPS"


class AllowedPaymentSchemes(Flag):
    """Schemes an account may use as debtor, combinable with ``|``.

    An account with no allowed schemes holds ``AllowedPaymentSchemes(0)``.
    """

    BACS = auto()
    FASTER_PAYMENTS = auto()
    CHAPS = auto()

    @classmethod
    def for_scheme(cls, scheme: PaymentScheme) -> "AllowedPaymentSchemes":
        """Return the flag matching a requested payment scheme."""
        return cls[scheme.name]


class AccountStatus(str, Enum):
    LIVE = "LIVE"
    DISABLED = "DISABLED"
    INBOUND_PAYMENTS_ONLY = "INBOUND_PAYMENTS_ONLY"
