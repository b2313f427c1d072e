"""Tests for the in-process account locks."""

import threading

import pytest

from src.domain.models import AccountId
from src.infrastructure.account_lock import InMemoryAccountLock, NoOpAccountLock


def test_lock_and_release_single_account() -> None:
    """Locking marks the account; releasing clears it."""
    lock = InMemoryAccountLock()

    lock.lock_account(AccountId(1))
    assert lock.is_locked(AccountId(1)) is True
    assert lock.is_locked(AccountId(2)) is False

    lock.release_account(AccountId(1))
    assert lock.is_locked(AccountId(1)) is False


def test_release_without_lock_raises() -> None:
    """Releasing an account that is not locked is an error."""
    lock = InMemoryAccountLock()

    with pytest.raises(RuntimeError):
        lock.release_account(AccountId(1))


def test_second_locker_waits_for_release() -> None:
    """A second thread blocks until the first one releases the account."""
    lock = InMemoryAccountLock()
    account_id = AccountId(7)
    acquired = threading.Event()

    def _contender() -> None:
        lock.lock_account(account_id)
        acquired.set()
        lock.release_account(account_id)

    lock.lock_account(account_id)
    worker = threading.Thread(target=_contender)
    worker.start()

    assert acquired.wait(timeout=0.2) is False
    lock.release_account(account_id)
    worker.join(timeout=5)

    assert acquired.is_set()
    assert lock.is_locked(account_id) is False


def test_noop_lock_accepts_any_sequence() -> None:
    """The no-op lock never blocks nor raises."""
    lock = NoOpAccountLock()

    lock.lock_account(AccountId(1))
    lock.lock_account(AccountId(1))
    lock.release_account(AccountId(1))
    lock.release_account(AccountId(2))
