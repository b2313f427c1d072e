"""Account aggregate deriving its balance from a baseline and recent activity."""

from src.domain.errors import AccountIdentityMissingError
from src.domain.models.activity import Activity, ActivityWindow
from src.domain.models.identifiers import AccountId
from src.domain.models.money import Money


class Account:
    """Account holding a baseline balance and a window of recent activities.

    The balance is never stored. It is the baseline balance (the net of all
    activity before the window) plus the net of the activities in the window.

    The account performs no locking. Callers must ensure that at most one
    ``withdraw`` or ``deposit`` runs per account id at a time.
    """

    def __init__(
        self,
        baseline_balance: Money,
        activity_window: ActivityWindow,
        id: AccountId | None = None,
    ) -> None:
        """Initialize the account.

        Args:
            baseline_balance: Net balance of all activity before the window.
            activity_window: Activities since the baseline date, owned by
                this account.
            id: Account identity, ``None`` for an account not yet persisted.
        """
        self._id = id
        self._baseline_balance = baseline_balance
        self._activity_window = activity_window

    @classmethod
    def with_id(
        cls,
        account_id: AccountId,
        baseline_balance: Money,
        activity_window: ActivityWindow,
    ) -> "Account":
        """Build an account with a known identity."""
        return cls(baseline_balance, activity_window, id=account_id)

    @classmethod
    def without_id(
        cls,
        baseline_balance: Money,
        activity_window: ActivityWindow,
    ) -> "Account":
        """Build an account that has not been persisted yet."""
        return cls(baseline_balance, activity_window)

    @property
    def id(self) -> AccountId | None:
        return self._id

    @property
    def baseline_balance(self) -> Money:
        return self._baseline_balance

    @property
    def activity_window(self) -> ActivityWindow:
        return self._activity_window

    def calculate_balance(self) -> Money:
        """Return the current balance of the account.

        Raises:
            AccountIdentityMissingError: If the account has no id.
        """
        if self._id is None:
            raise AccountIdentityMissingError(
                "Cannot calculate balance. Account id is not set."
            )
        return self._baseline_balance + self._activity_window.calculate_balance(
            self._id
        )

    def withdraw(self, money: Money, target_account_id: AccountId) -> bool:
        """Move money from this account to ``target_account_id``.

        Returns:
            bool: ``False`` without any change when the account has no id or
            the balance would become negative, ``True`` once the withdrawal
            has been recorded.

        Raises:
            MoneyOverflowError: If ``balance - money`` leaves the signed
                64-bit range, as for a large negative ``money``.
        """
        if self._id is None:
            return False
        if not self._may_withdraw_money(money):
            return False

        withdrawal = Activity(
            source_account_id=self._id,
            target_account_id=target_account_id,
            money=money,
        )
        self._activity_window.add_activity(withdrawal)
        return True

    def deposit(self, money: Money, source_account_id: AccountId) -> bool:
        """Record money coming from ``source_account_id`` into this account.

        Deposits are never rejected for balance reasons.

        Returns:
            bool: ``False`` when the account has no id, ``True`` otherwise.
        """
        if self._id is None:
            return False

        deposit = Activity(
            owner_account_id=self._id,
            source_account_id=source_account_id,
            target_account_id=self._id,
            money=money,
        )
        self._activity_window.add_activity(deposit)
        return True

    def _may_withdraw_money(self, money: Money) -> bool:
        return (self.calculate_balance() - money).is_positive_or_zero()

    def __repr__(self) -> str:
        return (
            f"Account(id={self._id!r}, "
            f"baseline_balance={self._baseline_balance!r}, "
            f"activity_window={self._activity_window!r})"
        )


__all__ = ["Account"]
