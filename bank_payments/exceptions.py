"""Custom exception hierarchy for bank-payments."""


class BankPaymentsError(Exception):
    """Base exception for all bank-payments errors."""


class EntityNotFoundError(BankPaymentsError):
    """Raised when a referenced entity does not exist."""


class AccountNotFoundError(EntityNotFoundError):
    """Raised when an account is not held by the data store."""


class DuplicateEntityError(BankPaymentsError):
    """Raised when an entity with the same key is already stored."""


class ConfigurationError(BankPaymentsError):
    """Raised when configuration is invalid or missing."""
