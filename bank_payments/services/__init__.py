"""Payment services."""

from bank_payments.services.payment import PaymentService, is_payment_allowed

__all__ = ["PaymentService", "is_payment_allowed"]
