"""Domain models package."""

from .account import Account
from .activity import Activity, ActivityWindow
from .identifiers import AccountId, ActivityId
from .money import Money

__all__ = [
    "Account",
    "AccountId",
    "Activity",
    "ActivityId",
    "ActivityWindow",
    "Money",
]
