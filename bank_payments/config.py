"""Configuration management for bank-payments."""

import os
from dataclasses import dataclass

from bank_payments.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class PaymentServiceConfig:
    """Main configuration for bank-payments.

    ``data_store_type`` selects the account data store: ``"Backup"``
    (any case) picks the backup store, anything else the primary one.
    """

    data_store_type: str = "Default"
    log_level: str = "INFO"
    log_format: str = "standard"
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "PaymentServiceConfig":
        """Create config from environment variables."""
        log_format = os.getenv("LOG_FORMAT", "standard").lower()
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {log_format!r}"
            )

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as e:
            raise ConfigurationError(f"SEED must be an integer, got {seed_str!r}") from e

        return cls(
            data_store_type=os.getenv("DATA_STORE_TYPE", "Default"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
            seed=seed,
        )
