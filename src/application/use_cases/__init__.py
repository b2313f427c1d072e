"""Application use cases package."""

from .get_account_balance import GetAccountBalanceUseCase
from .send_money import (
    SendMoneyCommand,
    SendMoneyUseCase,
    ThresholdExceededError,
)

__all__ = [
    "GetAccountBalanceUseCase",
    "SendMoneyCommand",
    "SendMoneyUseCase",
    "ThresholdExceededError",
]
