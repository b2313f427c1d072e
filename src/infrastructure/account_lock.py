"""In-process implementations of the account lock port."""

import threading

from src.application.ports.account_lock import AccountLockPort
from src.domain.models import AccountId


class InMemoryAccountLock(AccountLockPort):
    """Per-account mutual exclusion for a single process.

    Each account id gets its own ``threading.Lock``. Locks are not shared
    across processes; deployments with several workers need a lock held at
    the database level instead.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[AccountId, threading.Lock] = {}

    def lock_account(self, account_id: AccountId) -> None:
        self._lock_for(account_id).acquire()

    def release_account(self, account_id: AccountId) -> None:
        """Release the lock of ``account_id``.

        Raises:
            RuntimeError: If the account is not locked.
        """
        with self._guard:
            lock = self._locks.get(account_id)
        if lock is None or not lock.locked():
            raise RuntimeError(f"Account {account_id.value} is not locked")
        lock.release()

    def is_locked(self, account_id: AccountId) -> bool:
        with self._guard:
            lock = self._locks.get(account_id)
        return lock is not None and lock.locked()

    def _lock_for(self, account_id: AccountId) -> threading.Lock:
        with self._guard:
            return self._locks.setdefault(account_id, threading.Lock())


class NoOpAccountLock(AccountLockPort):
    """Lock that does nothing, for single-writer setups."""

    def lock_account(self, account_id: AccountId) -> None:
        return None

    def release_account(self, account_id: AccountId) -> None:
        return None


__all__ = ["InMemoryAccountLock", "NoOpAccountLock"]
