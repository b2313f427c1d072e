"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.application.use_cases.send_money import (
    DEFAULT_BASELINE_WINDOW_DAYS,
    DEFAULT_TRANSFER_THRESHOLD,
)
from src.domain.models import Money
from src.infrastructure.logging.logger import get_app_logger

LOCK_BACKENDS = ("memory", "none")


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for money transfers and account loading.

    Attributes:
        baseline_window_days: Days of activity loaded with an account.
        transfer_threshold: Largest amount a single transfer may move.
        lock_backend: Account lock implementation (memory or none).
    """

    baseline_window_days: int = DEFAULT_BASELINE_WINDOW_DAYS
    transfer_threshold: Money = DEFAULT_TRANSFER_THRESHOLD
    lock_backend: str = "memory"

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        baseline_window_days = cls._read_int(
            "LEDGER_BASELINE_DAYS",
            DEFAULT_BASELINE_WINDOW_DAYS,
            logger,
        )
        threshold = cls._read_int(
            "LEDGER_TRANSFER_THRESHOLD",
            DEFAULT_TRANSFER_THRESHOLD.amount,
            logger,
        )
        lock_backend = os.getenv("LEDGER_LOCK_BACKEND", "memory").strip().lower()
        if lock_backend not in LOCK_BACKENDS:
            logger.warning(
                f"Unknown LEDGER_LOCK_BACKEND '{lock_backend}'; using memory"
            )
            lock_backend = "memory"
        return cls(
            baseline_window_days=baseline_window_days,
            transfer_threshold=Money(threshold),
            lock_backend=lock_backend,
        )

    @staticmethod
    def _read_int(name: str, default: int, logger) -> int:
        """Read a non-negative integer environment variable.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning(f"Invalid integer for {name}: '{raw}'")
            return default
        if value < 0:
            logger.warning(f"{name} must not be negative: {value}")
            return default
        return value


__all__ = ["LedgerSettings", "LOCK_BACKENDS"]
