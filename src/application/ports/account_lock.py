"""Port for serializing mutations of a single account."""

from typing import Protocol

from src.domain.models import AccountId


class AccountLockPort(Protocol):
    """Port granting exclusive access to an account while it is mutated."""

    def lock_account(self, account_id: AccountId) -> None:
        """Block until the caller holds the lock for ``account_id``."""

    def release_account(self, account_id: AccountId) -> None:
        """Release the lock held for ``account_id``."""


__all__ = ["AccountLockPort"]
