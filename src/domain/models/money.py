"""Money value type expressed in minor currency units."""

from dataclasses import dataclass

from src.domain.errors import MoneyOverflowError

MIN_AMOUNT = -(2**63)
MAX_AMOUNT = 2**63 - 1


def _checked(amount: int) -> int:
    """Return the amount if it fits a signed 64-bit integer.

    Raises:
        MoneyOverflowError: If the amount is out of range.
    """
    if amount < MIN_AMOUNT or amount > MAX_AMOUNT:
        raise MoneyOverflowError(
            f"Money amount {amount} is outside the signed 64-bit range"
        )
    return amount


@dataclass(frozen=True, order=True)
class Money:
    """Signed amount of money in minor units (for example cents).

    Arithmetic is checked: a result that does not fit a signed 64-bit
    integer raises ``MoneyOverflowError`` instead of wrapping or saturating.

    Attributes:
        amount: Integer amount in minor units.
    """

    amount: int

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError(
                f"Money amount must be an int, got {type(self.amount).__name__}"
            )
        _checked(self.amount)

    @classmethod
    def zero(cls) -> "Money":
        """Return a zero amount."""
        return cls(0)

    def add(self, other: "Money") -> "Money":
        """Return the sum of both amounts."""
        return Money(_checked(self.amount + other.amount))

    def subtract(self, other: "Money") -> "Money":
        """Return this amount minus ``other``."""
        return Money(_checked(self.amount - other.amount))

    def negate(self) -> "Money":
        """Return the amount with its sign flipped."""
        return Money.zero().subtract(self)

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_negative(self) -> bool:
        return self.amount < 0

    def is_positive_or_zero(self) -> bool:
        return self.amount >= 0

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Money":
        return self.negate()


__all__ = ["Money", "MIN_AMOUNT", "MAX_AMOUNT"]
