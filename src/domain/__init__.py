"""Domain package for the account ledger rules and core models."""

from .errors import (
    AccountIdentityMissingError,
    ActivityConstructionError,
    EmptyActivityWindowError,
    LedgerPreconditionError,
    MoneyOverflowError,
)
from .models import (
    Account,
    AccountId,
    Activity,
    ActivityId,
    ActivityWindow,
    Money,
)

__all__ = [
    "Account",
    "AccountId",
    "Activity",
    "ActivityId",
    "ActivityWindow",
    "Money",
    "AccountIdentityMissingError",
    "ActivityConstructionError",
    "EmptyActivityWindowError",
    "LedgerPreconditionError",
    "MoneyOverflowError",
]
