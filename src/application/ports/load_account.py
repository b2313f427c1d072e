"""Port for loading an account with its recent activity."""

from datetime import datetime
from typing import Protocol

from src.domain.models import Account, AccountId


class AccountNotFoundError(LookupError):
    """Raised when no account exists for the requested id."""

    def __init__(self, account_id: AccountId) -> None:
        super().__init__(f"Account {account_id.value} does not exist")
        self.account_id = account_id


class LoadAccountPort(Protocol):
    """Port exposing read access to accounts."""

    def load_account(
        self,
        account_id: AccountId,
        baseline_date: datetime,
    ) -> Account:
        """Return the account with activities since ``baseline_date``.

        The baseline balance is the net of every activity owned by the
        account strictly before ``baseline_date``. The activity window holds
        the activities owned by the account at or after that date.

        Raises:
            AccountNotFoundError: If the account does not exist.
        """


__all__ = ["AccountNotFoundError", "LoadAccountPort"]
