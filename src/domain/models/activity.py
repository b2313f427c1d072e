"""Ledger activities and the window of recent activities kept by an account."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from datetime import datetime, timezone

from src.domain.errors import ActivityConstructionError, EmptyActivityWindowError
from src.domain.models.identifiers import AccountId, ActivityId
from src.domain.models.money import Money


@dataclass(frozen=True)
class Activity:
    """Transfer of money from a source account to a target account.

    The sign of the transfer is carried by the source and target roles, so
    ``money`` is non-negative by convention. Each transfer is filed under an
    owner account; the owner defaults to the source account.

    Attributes:
        source_account_id: Account the money leaves.
        target_account_id: Account the money enters.
        money: Transferred amount.
        owner_account_id: Account whose ledger holds this entry.
        timestamp: Moment of the transfer in UTC, defaults to the current
            time. Naive values are read as UTC.
        id: Identity assigned by persistence, ``None`` until saved.
    """

    source_account_id: AccountId
    target_account_id: AccountId
    money: Money
    owner_account_id: AccountId | None = None
    timestamp: datetime | None = None
    id: ActivityId | None = None

    def __post_init__(self) -> None:
        if self.source_account_id is None:
            raise ActivityConstructionError("Source account id is missing")
        if self.owner_account_id is None:
            object.__setattr__(self, "owner_account_id", self.source_account_id)
        if self.target_account_id is None:
            raise ActivityConstructionError("Target account id is missing")
        if not isinstance(self.money, Money):
            raise ActivityConstructionError("Activity money must be a Money value")
        if self.timestamp is None:
            object.__setattr__(self, "timestamp", datetime.now(timezone.utc))
        elif self.timestamp.tzinfo is None:
            # Naive timestamps are read as UTC.
            object.__setattr__(
                self, "timestamp", self.timestamp.replace(tzinfo=timezone.utc)
            )
        else:
            object.__setattr__(
                self, "timestamp", self.timestamp.astimezone(timezone.utc)
            )

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def with_timestamp(self, timestamp: datetime) -> "Activity":
        """Return a copy of the activity moved to ``timestamp``."""
        return replace(self, timestamp=timestamp)

    def with_id(self, activity_id: ActivityId) -> "Activity":
        """Return a copy of the activity carrying a persisted identity."""
        return replace(self, id=activity_id)


class ActivityWindow:
    """Activities recorded on or after an account's baseline date.

    The window is an append-only log: insertion order is kept and duplicates
    are allowed. It may be empty, in which case time range queries fail.
    """

    def __init__(self, activities: Iterable[Activity] = ()) -> None:
        self._activities: list[Activity] = list(activities)

    @property
    def activities(self) -> tuple[Activity, ...]:
        return tuple(self._activities)

    def __len__(self) -> int:
        return len(self._activities)

    def __iter__(self) -> Iterator[Activity]:
        return iter(tuple(self._activities))

    def __repr__(self) -> str:
        return f"ActivityWindow(activities={self._activities!r})"

    def add_activity(self, activity: Activity) -> None:
        self._activities.append(activity)

    def new_activities(self) -> list[Activity]:
        """Return the activities that have not been persisted yet."""
        return [a for a in self._activities if not a.is_persisted]

    def get_start_timestamp(self) -> datetime:
        """Return the earliest activity timestamp.

        Raises:
            EmptyActivityWindowError: If the window holds no activity.
        """
        self._ensure_not_empty()
        return min(a.timestamp for a in self._activities)

    def get_end_timestamp(self) -> datetime:
        """Return the latest activity timestamp.

        Raises:
            EmptyActivityWindowError: If the window holds no activity.
        """
        self._ensure_not_empty()
        return max(a.timestamp for a in self._activities)

    def calculate_balance(self, account_id: AccountId) -> Money:
        """Return the net balance of the window for ``account_id``.

        Deposits (target is the account) count positively, withdrawals
        (source is the account) negatively. A self-transfer cancels out.

        Args:
            account_id: Account whose perspective is computed.

        Returns:
            Money: Deposits minus withdrawals.
        """
        deposit_balance = sum(
            (a.money for a in self._activities if a.target_account_id == account_id),
            Money.zero(),
        )
        withdrawal_balance = sum(
            (a.money for a in self._activities if a.source_account_id == account_id),
            Money.zero(),
        )
        return deposit_balance - withdrawal_balance

    def _ensure_not_empty(self) -> None:
        if not self._activities:
            raise EmptyActivityWindowError("Unexpected empty activity window")


__all__ = ["Activity", "ActivityWindow"]
