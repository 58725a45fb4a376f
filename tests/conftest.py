"""Pytest configuration and fixtures."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from bank_payments.models import Account, AccountStatus, AllowedPaymentSchemes
from bank_payments.services import PaymentService
from bank_payments.store import InMemoryAccountDataStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_account_number() -> str:
    """Sample account number."""
    return "12345678"


@pytest.fixture
def sample_account(sample_account_number: str) -> Account:
    """Live account allowed on every scheme."""
    return Account(
        account_number=sample_account_number,
        balance=Decimal("110"),
        status=AccountStatus.LIVE,
        allowed_payment_schemes=(
            AllowedPaymentSchemes.BACS
            | AllowedPaymentSchemes.FASTER_PAYMENTS
            | AllowedPaymentSchemes.CHAPS
        ),
    )


@pytest.fixture
def store() -> InMemoryAccountDataStore:
    """Create a fresh store for each test."""
    return InMemoryAccountDataStore()


@pytest.fixture
def mock_store() -> MagicMock:
    """Account data store double; tests set ``get_account.return_value``."""
    mock = MagicMock()
    mock.get_account.return_value = None
    return mock


@pytest.fixture
def service(mock_store: MagicMock) -> PaymentService:
    """Payment service wired to the mock store."""
    return PaymentService(mock_store)
