"""Sample data generators."""

from bank_payments.generators.account import AccountGenerator

__all__ = ["AccountGenerator"]
