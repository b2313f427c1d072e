"""Port for persisting the activities recorded on an account."""

from typing import Protocol

from src.domain.models import Account


class UpdateAccountStatePort(Protocol):
    """Port exposing write access to account activities."""

    def update_activities(self, account: Account) -> Account:
        """Persist the activities of ``account`` that have no id yet.

        Activities that already carry an id are left untouched.

        Returns:
            Account: The account whose new activities carry their ids.
        """


__all__ = ["UpdateAccountStatePort"]
