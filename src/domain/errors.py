"""Domain error types for the account ledger.

Construction errors surface invalid input while assembling ledger records.
Precondition errors signal programming defects, such as asking an account
without identity for its balance. Domain rejections (insufficient funds) are
never raised; ``Account.withdraw`` and ``Account.deposit`` return ``False``.
"""


class ActivityConstructionError(ValueError):
    """Raised when an activity cannot be assembled from the given fields."""


class MoneyOverflowError(OverflowError):
    """Raised when a money amount leaves the signed 64-bit range."""


class LedgerPreconditionError(RuntimeError):
    """Base class for violated preconditions of ledger operations."""


class AccountIdentityMissingError(LedgerPreconditionError):
    """Raised when an operation needs an account id that is not set."""


class EmptyActivityWindowError(LedgerPreconditionError):
    """Raised when a time range is requested from an empty activity window."""


__all__ = [
    "ActivityConstructionError",
    "MoneyOverflowError",
    "LedgerPreconditionError",
    "AccountIdentityMissingError",
    "EmptyActivityWindowError",
]
