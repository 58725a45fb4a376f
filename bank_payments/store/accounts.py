"""Account data stores consumed by the payment service."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from bank_payments.exceptions import AccountNotFoundError, DuplicateEntityError
from bank_payments.models import Account

logger = logging.getLogger(__name__)


class AccountDataStore(Protocol):
    """Lookup and persistence contract for debtor accounts."""

    def get_account(self, account_number: str) -> Account | None:
        ...

    def update_account(self, account: Account) -> None:
        ...


@dataclass
class InMemoryAccountDataStore:
    """Primary in-memory account store keyed by account number."""

    accounts: dict[str, Account] = field(default_factory=dict)

    # Write counter (for summary)
    _updates: int = 0

    def add_account(self, account: Account) -> None:
        """Add an account to the store."""
        if account.account_number in self.accounts:
            raise DuplicateEntityError(f"Account {account.account_number} already exists")
        self.accounts[account.account_number] = account

    def get_account(self, account_number: str) -> Account | None:
        """Return the account with the given number, or None."""
        return self.accounts.get(account_number)

    def update_account(self, account: Account) -> None:
        """Persist an account previously added to the store."""
        if account.account_number not in self.accounts:
            raise AccountNotFoundError(f"Account {account.account_number} not found")
        self.accounts[account.account_number] = account
        self._updates += 1
        logger.debug("Updated account %s in %s", account.account_number, type(self).__name__)

    def summary(self) -> dict[str, int]:
        """Return summary counts for the store."""
        return {
            "accounts": len(self.accounts),
            "updates": self._updates,
        }


@dataclass
class BackupAccountDataStore(InMemoryAccountDataStore):
    """Backup account store, selected with ``data_store_type="Backup"``."""


def create_account_data_store(data_store_type: str = "Default") -> InMemoryAccountDataStore:
    """Create the account data store named by configuration.

    Parameters
    ----------
    data_store_type : str
        ``"Backup"`` (case-insensitive) for the backup store; any other
        value selects the primary store.

    Returns
    -------
    InMemoryAccountDataStore
        An empty store.
    """
    if data_store_type.strip().lower() == "backup":
        store: InMemoryAccountDataStore = BackupAccountDataStore()
    else:
        store = InMemoryAccountDataStore()
    logger.info("Using %s", type(store).__name__)
    return store
