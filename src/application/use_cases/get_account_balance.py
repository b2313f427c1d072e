"""Use case to read the current balance of an account."""

from collections.abc import Callable
from datetime import datetime, timezone

from src.application.ports.load_account import LoadAccountPort
from src.domain.models import AccountId, Money
from src.infrastructure.logging.logger import get_app_logger


class GetAccountBalanceUseCase:
    """Compute the balance of an account from its persisted activity."""

    def __init__(
        self,
        load_account_port: LoadAccountPort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case with its required dependencies."""
        self._load_account_port = load_account_port
        self._logger = logger or get_app_logger()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def execute(self, account_id: AccountId) -> Money:
        """Return the balance of ``account_id`` as of now."""
        account = self._load_account_port.load_account(account_id, self._clock())
        balance = account.calculate_balance()
        self._logger.debug(
            f"Balance of account {account_id.value} is {balance.amount}"
        )
        return balance


__all__ = ["GetAccountBalanceUseCase"]
