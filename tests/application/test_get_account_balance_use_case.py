"""Tests for the GetAccountBalanceUseCase."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from src.application.ports.load_account import AccountNotFoundError
from src.application.use_cases.get_account_balance import GetAccountBalanceUseCase
from src.domain.models import Account, AccountId, ActivityWindow, Money

NOW = datetime(2024, 3, 1, tzinfo=timezone.utc)


def test_execute_returns_balance_as_of_now() -> None:
    """The account should be loaded with the current time as baseline."""
    port = MagicMock()
    port.load_account.return_value = Account.with_id(
        AccountId(3), Money(1250), ActivityWindow()
    )
    use_case = GetAccountBalanceUseCase(
        load_account_port=port,
        logger=MagicMock(),
        clock=lambda: NOW,
    )

    balance = use_case.execute(AccountId(3))

    assert balance == Money(1250)
    port.load_account.assert_called_once_with(AccountId(3), NOW)


def test_execute_propagates_missing_account() -> None:
    """Unknown accounts should surface the port error."""
    port = MagicMock()
    port.load_account.side_effect = AccountNotFoundError(AccountId(9))
    use_case = GetAccountBalanceUseCase(load_account_port=port, logger=MagicMock())

    with pytest.raises(AccountNotFoundError) as excinfo:
        use_case.execute(AccountId(9))

    assert excinfo.value.account_id == AccountId(9)
