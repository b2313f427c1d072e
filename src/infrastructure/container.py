"""Composition root for wiring infrastructure adapters."""

from src.application.ports.account_lock import AccountLockPort
from src.application.ports.database import DatabaseEnginePort
from src.application.use_cases.get_account_balance import GetAccountBalanceUseCase
from src.application.use_cases.send_money import SendMoneyUseCase
from src.infrastructure.account_lock import InMemoryAccountLock, NoOpAccountLock
from src.infrastructure.account_repository import SqlAlchemyAccountRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger, get_audit_logger
from src.infrastructure.settings import LedgerSettings

_account_lock: AccountLockPort | None = None


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_account_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SqlAlchemyAccountRepository:
    """Return the repository loading and persisting accounts."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountRepository(resolved_db, logger=get_app_logger())


def build_account_lock(settings: LedgerSettings | None = None) -> AccountLockPort:
    """Return the process-wide account lock for the configured backend.

    Raises:
        ValueError: If the lock backend is unknown.
    """
    global _account_lock
    resolved = settings or LedgerSettings.from_env()
    if resolved.lock_backend == "none":
        return NoOpAccountLock()
    if resolved.lock_backend == "memory":
        if _account_lock is None:
            _account_lock = InMemoryAccountLock()
        return _account_lock
    raise ValueError(
        "Unsupported account lock backend: "
        f"{resolved.lock_backend}. Expected memory or none."
    )


def build_send_money_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> SendMoneyUseCase:
    """Return the money transfer use case wired to SQL storage."""
    resolved = settings or LedgerSettings.from_env()
    repository = build_account_repository(db_port)
    return SendMoneyUseCase(
        load_account_port=repository,
        update_account_state_port=repository,
        account_lock=build_account_lock(resolved),
        transfer_threshold=resolved.transfer_threshold,
        baseline_window_days=resolved.baseline_window_days,
        logger=get_app_logger(),
        audit_logger=get_audit_logger(),
    )


def build_get_account_balance_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetAccountBalanceUseCase:
    """Return the balance query use case wired to SQL storage."""
    return GetAccountBalanceUseCase(
        load_account_port=build_account_repository(db_port),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_account_repository",
    "build_account_lock",
    "build_send_money_use_case",
    "build_get_account_balance_use_case",
]
