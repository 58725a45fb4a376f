"""Account data stores."""

from bank_payments.store.accounts import (
    AccountDataStore,
    BackupAccountDataStore,
    InMemoryAccountDataStore,
    create_account_data_store,
)

__all__ = [
    "AccountDataStore",
    "BackupAccountDataStore",
    "InMemoryAccountDataStore",
    "create_account_data_store",
]
