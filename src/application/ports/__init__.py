"""Application ports package."""

from .account_lock import AccountLockPort
from .database import DatabaseEnginePort
from .load_account import AccountNotFoundError, LoadAccountPort
from .update_account_state import UpdateAccountStatePort

__all__ = [
    "AccountLockPort",
    "AccountNotFoundError",
    "DatabaseEnginePort",
    "LoadAccountPort",
    "UpdateAccountStatePort",
]
