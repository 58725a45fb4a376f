#!/usr/bin/env python3
"""Run a single payment against a freshly seeded account data store.

Generates sample accounts, pays out of the first one under the chosen
scheme and prints the request, the result and the debtor account as JSON.

Defaults come from the environment (DATA_STORE_TYPE, LOG_LEVEL, LOG_FORMAT,
SEED); command line options take precedence.
"""

import argparse
import json
import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_payments.config import PaymentServiceConfig
from bank_payments.exceptions import ConfigurationError
from bank_payments.generators import AccountGenerator
from bank_payments.logging import setup_logging
from bank_payments.models import MakePaymentRequest, PaymentScheme
from bank_payments.serialization import to_dict
from bank_payments.services import PaymentService
from bank_payments.store import create_account_data_store

logger = logging.getLogger(__name__)


def parse_amount(value: str) -> Decimal:
    """Parse a non-negative decimal amount."""
    try:
        amount = Decimal(value)
    except InvalidOperation as e:
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}") from e
    if amount < 0:
        raise argparse.ArgumentTypeError("amount must not be negative")
    return amount


def main() -> None:
    """Main entry point."""
    try:
        config = PaymentServiceConfig.from_env()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)

    parser = argparse.ArgumentParser(
        description="Make a payment from a generated sample account"
    )
    parser.add_argument(
        "--scheme",
        type=str,
        choices=[s.value for s in PaymentScheme],
        default=PaymentScheme.BACS.value,
        help="Payment scheme (default: BACS)",
    )
    parser.add_argument(
        "--amount",
        type=parse_amount,
        default=Decimal("50"),
        help="Amount to debit (default: 50)",
    )
    parser.add_argument(
        "--accounts",
        type=int,
        default=5,
        help="Number of sample accounts to seed (default: 5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--data-store-type",
        type=str,
        default=config.data_store_type,
        help="Account data store: 'Backup' or anything else for the primary store",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help="Log level (default: INFO)",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        choices=["standard", "json"],
        default=config.log_format,
        help="Log format (default: standard)",
    )

    args = parser.parse_args()
    if args.accounts < 1:
        parser.error("--accounts must be at least 1")

    setup_logging(level=args.log_level, format_type=args.log_format)

    store = create_account_data_store(args.data_store_type)
    account_gen = AccountGenerator(seed=args.seed)
    accounts = list(account_gen.generate_batch(args.accounts))
    for account in accounts:
        store.add_account(account)
    logger.info("Seeded %d accounts", len(accounts))

    debtor = accounts[0]
    request = MakePaymentRequest(
        debtor_account_number=debtor.account_number,
        payment_scheme=PaymentScheme(args.scheme),
        amount=args.amount,
    )
    result = PaymentService(store).make_payment(request)

    print(
        json.dumps(
            {
                "request": to_dict(request),
                "result": to_dict(result),
                "account": to_dict(debtor),
                "store": store.summary(),
            },
            indent=2,
        )
    )
    sys.exit(0 if result.success else 1)


if __name__ == "__main__":
    main()
