"""Use case for transferring money between two accounts.

The transfer loads both accounts with a window of recent activity, withdraws
from the source, deposits into the target and persists the new activities of
both accounts. Each account is locked while it is mutated.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from src.application.ports.account_lock import AccountLockPort
from src.application.ports.load_account import LoadAccountPort
from src.application.ports.update_account_state import UpdateAccountStatePort
from src.domain.models import AccountId, Money
from src.infrastructure.logging.logger import get_app_logger, get_audit_logger

DEFAULT_BASELINE_WINDOW_DAYS = 10
DEFAULT_TRANSFER_THRESHOLD = Money(1_000_000)


class ThresholdExceededError(ValueError):
    """Raised when a transfer is larger than the allowed maximum."""

    def __init__(self, threshold: Money, actual: Money) -> None:
        super().__init__(
            f"Maximum threshold for transferring money exceeded: "
            f"tried to transfer {actual.amount} but threshold is "
            f"{threshold.amount}"
        )
        self.threshold = threshold
        self.actual = actual


@dataclass(frozen=True)
class SendMoneyCommand:
    """Request to move money from one account to another.

    Attributes:
        source_account_id: Account to withdraw from.
        target_account_id: Account to deposit into.
        money: Positive amount to transfer.
    """

    source_account_id: AccountId
    target_account_id: AccountId
    money: Money

    def __post_init__(self) -> None:
        if not isinstance(self.money, Money):
            raise TypeError("SendMoneyCommand money must be a Money value")
        if not self.money.is_positive():
            raise ValueError(
                f"Transferred money must be positive, got {self.money.amount}"
            )


class SendMoneyUseCase:
    """Transfer money between accounts through the account ports."""

    def __init__(
        self,
        load_account_port: LoadAccountPort,
        update_account_state_port: UpdateAccountStatePort,
        account_lock: AccountLockPort,
        transfer_threshold: Money = DEFAULT_TRANSFER_THRESHOLD,
        baseline_window_days: int = DEFAULT_BASELINE_WINDOW_DAYS,
        logger=None,
        audit_logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            load_account_port: Port loading accounts with recent activity.
            update_account_state_port: Port persisting new activities.
            account_lock: Port serializing mutations per account.
            transfer_threshold: Largest amount a single transfer may move.
            baseline_window_days: Days of activity loaded with each account.
            logger: Optional logger compatible with logging.Logger-like API.
            audit_logger: Optional logger recording completed transfers.
            clock: Optional callable returning the current UTC time.
        """
        self._load_account_port = load_account_port
        self._update_account_state_port = update_account_state_port
        self._account_lock = account_lock
        self._transfer_threshold = transfer_threshold
        self._baseline_window_days = baseline_window_days
        self._logger = logger or get_app_logger()
        self._audit_logger = audit_logger or get_audit_logger()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def execute(self, command: SendMoneyCommand) -> bool:
        """Execute the transfer described by ``command``.

        Returns:
            bool: ``True`` when the transfer was recorded, ``False`` when one
            of the accounts rejected it.

        Raises:
            ThresholdExceededError: If the amount exceeds the threshold.
            AccountNotFoundError: If one of the accounts does not exist.
        """
        self._check_threshold(command)

        baseline_date = self._clock() - timedelta(days=self._baseline_window_days)
        source_id = command.source_account_id
        target_id = command.target_account_id

        # Accounts are locked before loading, in id order, so two opposite
        # transfers cannot deadlock.
        lock_order = sorted({source_id, target_id}, key=lambda i: i.value)
        locked: list[AccountId] = []
        try:
            for account_id in lock_order:
                self._account_lock.lock_account(account_id)
                locked.append(account_id)

            source_account = self._load_account_port.load_account(
                source_id, baseline_date
            )
            target_account = self._load_account_port.load_account(
                target_id, baseline_date
            )

            if not source_account.withdraw(command.money, target_id):
                self._logger.warning(
                    f"Withdrawal of {command.money.amount} from account "
                    f"{source_id.value} rejected"
                )
                return False

            if not target_account.deposit(command.money, source_id):
                self._logger.warning(
                    f"Deposit of {command.money.amount} into account "
                    f"{target_id.value} rejected"
                )
                return False

            self._update_account_state_port.update_activities(source_account)
            self._update_account_state_port.update_activities(target_account)
        finally:
            for account_id in reversed(locked):
                self._account_lock.release_account(account_id)

        self._audit_logger.info(
            f"Transferred {command.money.amount} from account "
            f"{source_id.value} to account {target_id.value}"
        )
        return True

    def _check_threshold(self, command: SendMoneyCommand) -> None:
        if command.money > self._transfer_threshold:
            raise ThresholdExceededError(self._transfer_threshold, command.money)


__all__ = [
    "DEFAULT_BASELINE_WINDOW_DAYS",
    "DEFAULT_TRANSFER_THRESHOLD",
    "SendMoneyCommand",
    "SendMoneyUseCase",
    "ThresholdExceededError",
]
