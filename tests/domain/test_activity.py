"""Tests for activities and the activity window."""

from datetime import datetime, timedelta, timezone

import pytest

from src.domain.errors import (
    ActivityConstructionError,
    EmptyActivityWindowError,
    LedgerPreconditionError,
)
from src.domain.models import (
    AccountId,
    Activity,
    ActivityId,
    ActivityWindow,
    Money,
)

START_DATE = datetime(2019, 8, 3, tzinfo=timezone.utc)
IN_BETWEEN_DATE = datetime(2019, 8, 4, tzinfo=timezone.utc)
END_DATE = datetime(2019, 8, 5, tzinfo=timezone.utc)


def _activity(**overrides) -> Activity:
    fields = {
        "source_account_id": AccountId(42),
        "target_account_id": AccountId(41),
        "money": Money(999),
    }
    fields.update(overrides)
    return Activity(**fields)


def test_owner_defaults_to_source() -> None:
    """The owner should be the source account unless given."""
    activity = _activity()

    assert activity.owner_account_id == AccountId(42)
    assert activity.id is None
    assert activity.is_persisted is False


def test_explicit_owner_is_kept() -> None:
    """An explicit owner should override the default."""
    activity = _activity(owner_account_id=AccountId(41))

    assert activity.owner_account_id == AccountId(41)


def test_timestamp_defaults_to_now() -> None:
    """Missing timestamps should default to the current UTC time."""
    before = datetime.now(timezone.utc)
    activity = _activity()
    after = datetime.now(timezone.utc)

    assert before <= activity.timestamp <= after
    assert activity.timestamp.tzinfo is not None


def test_naive_timestamp_is_read_as_utc() -> None:
    """Naive timestamps should be stored as aware UTC values."""
    activity = _activity(timestamp=datetime(2019, 8, 3))

    assert activity.timestamp == START_DATE
    assert activity.timestamp.tzinfo is timezone.utc


def test_aware_timestamp_is_converted_to_utc() -> None:
    """Timestamps in other zones should be moved to UTC."""
    cest = timezone(timedelta(hours=2))
    activity = _activity(timestamp=datetime(2019, 8, 3, 2, 0, tzinfo=cest))

    assert activity.timestamp == START_DATE
    assert activity.timestamp.tzinfo is timezone.utc


def test_construction_fails_without_owner_or_source() -> None:
    """An undeterminable owner should fail at construction time."""
    with pytest.raises(ActivityConstructionError):
        _activity(source_account_id=None)


def test_construction_fails_without_target() -> None:
    """A missing target should fail at construction time."""
    with pytest.raises(ActivityConstructionError):
        _activity(target_account_id=None)


def test_construction_fails_without_money() -> None:
    """Money is required."""
    with pytest.raises(ActivityConstructionError):
        _activity(money=None)


def test_activity_is_immutable() -> None:
    """Activities cannot be changed once built."""
    activity = _activity()

    with pytest.raises(AttributeError):
        activity.money = Money(1)


def test_with_timestamp_preserves_identity() -> None:
    """with_timestamp should only move the activity in time."""
    activity = _activity(id=ActivityId(7), timestamp=START_DATE)

    moved = activity.with_timestamp(END_DATE)

    assert moved.timestamp == END_DATE
    assert moved.id == ActivityId(7)
    assert moved.owner_account_id == activity.owner_account_id
    assert moved.money == activity.money
    assert activity.timestamp == START_DATE


def test_with_id_marks_activity_persisted() -> None:
    """with_id should attach a persisted identity."""
    activity = _activity(timestamp=START_DATE)

    saved = activity.with_id(ActivityId(3))

    assert saved.is_persisted is True
    assert saved.id == ActivityId(3)
    assert saved.timestamp == START_DATE


def test_window_calculates_start_timestamp() -> None:
    """The start timestamp is the earliest, whatever the insertion order."""
    window = ActivityWindow(
        [
            _activity(timestamp=IN_BETWEEN_DATE),
            _activity(timestamp=END_DATE),
            _activity(timestamp=START_DATE),
        ]
    )

    assert window.get_start_timestamp() == START_DATE


def test_window_calculates_end_timestamp() -> None:
    """The end timestamp is the latest, whatever the insertion order."""
    window = ActivityWindow(
        [
            _activity(timestamp=END_DATE),
            _activity(timestamp=START_DATE),
            _activity(timestamp=IN_BETWEEN_DATE),
        ]
    )

    assert window.get_end_timestamp() == END_DATE


def test_empty_window_is_valid_but_has_no_time_range() -> None:
    """An empty window can be built but time range queries fail."""
    window = ActivityWindow([])

    assert len(window) == 0
    assert window.calculate_balance(AccountId(1)) == Money(0)
    with pytest.raises(EmptyActivityWindowError):
        window.get_start_timestamp()
    with pytest.raises(LedgerPreconditionError):
        window.get_end_timestamp()


def test_window_calculates_balance() -> None:
    """Deposits minus withdrawals per account perspective."""
    account1 = AccountId(1)
    account2 = AccountId(2)
    window = ActivityWindow(
        [
            Activity(account1, account2, Money(999)),
            Activity(account1, account2, Money(1)),
            Activity(account2, account1, Money(500)),
        ]
    )

    assert window.calculate_balance(account1) == Money(-500)
    assert window.calculate_balance(account2) == Money(500)
    assert window.calculate_balance(AccountId(3)) == Money(0)


def test_self_transfer_nets_to_zero() -> None:
    """A transfer from an account to itself does not change its balance."""
    account = AccountId(1)
    window = ActivityWindow([Activity(account, account, Money(250))])

    assert window.calculate_balance(account) == Money(0)


def test_add_activity_appends_duplicates_and_out_of_order() -> None:
    """The window is a log: no ordering checks and duplicates are kept."""
    late = _activity(timestamp=END_DATE)
    early = _activity(timestamp=START_DATE)
    window = ActivityWindow([late])

    window.add_activity(early)
    window.add_activity(early)

    assert window.activities == (late, early, early)
    assert window.get_start_timestamp() == START_DATE


def test_activities_snapshot_is_read_only() -> None:
    """The activities property should not expose the internal list."""
    window = ActivityWindow([_activity()])

    snapshot = window.activities
    window.add_activity(_activity())

    assert len(snapshot) == 1
    assert len(window) == 2


def test_new_activities_excludes_persisted_entries() -> None:
    """Only activities without id are reported as new."""
    saved = _activity(id=ActivityId(1))
    fresh = _activity()
    window = ActivityWindow([saved, fresh])

    assert window.new_activities() == [fresh]


def test_window_accepts_any_iterable() -> None:
    """Generators and tuples are accepted as input."""
    window = ActivityWindow(_activity() for _ in range(3))

    assert len(window) == 3
    assert list(window) == list(window.activities)


def test_identifiers_reject_invalid_values() -> None:
    """Identifiers wrap unsigned integers only."""
    with pytest.raises(ValueError):
        AccountId(-1)
    with pytest.raises(ValueError):
        ActivityId(2**64)
    with pytest.raises(TypeError):
        AccountId("1")


def test_identifiers_compare_by_value() -> None:
    """Identifiers are equal when they wrap the same value."""
    assert AccountId(5) == AccountId(5)
    assert AccountId(5) != AccountId(6)
    assert len({AccountId(5), AccountId(5)}) == 1
