"""Structured logging configuration for bank-payments."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

# Record attribute carrying structured payment fields, set with
# ``logger.info(..., extra={"payment": {...}})``.
PAYMENT_FIELDS_ATTR = "payment"


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
) -> None:
    """Route all bank-payments logging to stdout.

    Parameters
    ----------
    level : str
        Log level name; unknown names fall back to INFO.
    format_type : str
        ``"json"`` for one JSON object per line, anything else for
        pipe-separated text.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.getLogger("bank_payments").setLevel(log_level)
    # Faker logs locale lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """Format records as JSON, lifting payment fields to the top level.

    A payment debit logged by the service renders as::

        {"timestamp": "...", "level": "INFO", "logger": "bank_payments.services.payment",
         "message": "...", "debtor_account_number": "12345678",
         "payment_scheme": "BACS", "amount": "50", "outcome": "debited"}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(getattr(record, PAYMENT_FIELDS_ATTR, None) or {})

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)
