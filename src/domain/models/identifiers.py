"""Opaque identifiers for accounts and ledger activities."""

from dataclasses import dataclass

MAX_IDENTIFIER = 2**64 - 1


def _validate_identifier(kind: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{kind} must wrap an int, got {type(value).__name__}")
    if value < 0 or value > MAX_IDENTIFIER:
        raise ValueError(f"{kind} must be an unsigned 64-bit integer: {value}")


@dataclass(frozen=True)
class AccountId:
    """Identifier of an account. Compared by equality only."""

    value: int

    def __post_init__(self) -> None:
        _validate_identifier("AccountId", self.value)


@dataclass(frozen=True)
class ActivityId:
    """Identifier assigned to an activity once it has been persisted."""

    value: int

    def __post_init__(self) -> None:
        _validate_identifier("ActivityId", self.value)


__all__ = ["AccountId", "ActivityId", "MAX_IDENTIFIER"]
