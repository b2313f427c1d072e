"""SQLAlchemy-backed repository loading and persisting accounts."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, bindparam, text
from sqlalchemy.engine import Connection

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.load_account import AccountNotFoundError, LoadAccountPort
from src.application.ports.update_account_state import UpdateAccountStatePort
from src.domain.errors import AccountIdentityMissingError
from src.domain.models import (
    Account,
    AccountId,
    Activity,
    ActivityId,
    ActivityWindow,
    Money,
)
from src.infrastructure.logging.logger import get_app_logger

_TIMESTAMP = DateTime(timezone=True)

SELECT_ACCOUNT_SQL = text("SELECT id FROM account WHERE id = :account_id")

INSERT_ACCOUNT_SQL = text("INSERT INTO account (id) VALUES (:account_id)")

SELECT_ACTIVITIES_SINCE_SQL = (
    text(
        """
        SELECT
            id, timestamp, owner_account_id, source_account_id,
            target_account_id, amount
        FROM activity
        WHERE owner_account_id = :account_id
        AND timestamp >= :baseline_date
        ORDER BY timestamp, id
        """
    )
    .bindparams(bindparam("baseline_date", type_=_TIMESTAMP))
    .columns(timestamp=_TIMESTAMP)
)

SELECT_WITHDRAWAL_BALANCE_SQL = text(
    """
    SELECT COALESCE(SUM(amount), 0) AS total
    FROM activity
    WHERE source_account_id = :account_id
    AND owner_account_id = :account_id
    AND timestamp < :baseline_date
    """
).bindparams(bindparam("baseline_date", type_=_TIMESTAMP))

SELECT_DEPOSIT_BALANCE_SQL = text(
    """
    SELECT COALESCE(SUM(amount), 0) AS total
    FROM activity
    WHERE target_account_id = :account_id
    AND owner_account_id = :account_id
    AND timestamp < :baseline_date
    """
).bindparams(bindparam("baseline_date", type_=_TIMESTAMP))

INSERT_ACTIVITY_SQL = text(
    """
    INSERT INTO activity (
        timestamp,
        owner_account_id,
        source_account_id,
        target_account_id,
        amount
    )
    VALUES (
        :timestamp,
        :owner_account_id,
        :source_account_id,
        :target_account_id,
        :amount
    )
    RETURNING id
    """
).bindparams(bindparam("timestamp", type_=_TIMESTAMP))


def _to_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime.

    Naive values are read as UTC, which is how SQLite hands them back.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SqlAlchemyAccountRepository(LoadAccountPort, UpdateAccountStatePort):
    """Repository backed by SQLAlchemy for accounts and their activities."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def load_account(
        self,
        account_id: AccountId,
        baseline_date: datetime,
    ) -> Account:
        params = {
            "account_id": account_id.value,
            "baseline_date": _to_utc(baseline_date),
        }
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            self._ensure_account_exists(conn, account_id)
            rows = conn.execute(SELECT_ACTIVITIES_SINCE_SQL, params).all()
            withdrawal_total = conn.execute(
                SELECT_WITHDRAWAL_BALANCE_SQL, params
            ).scalar_one()
            deposit_total = conn.execute(
                SELECT_DEPOSIT_BALANCE_SQL, params
            ).scalar_one()

        baseline_balance = Money(int(deposit_total)) - Money(int(withdrawal_total))
        activities = [self._to_activity(row) for row in rows]
        self._logger.debug(
            f"Loaded account {account_id.value} with {len(activities)} "
            f"activities since {baseline_date.isoformat()}"
        )
        return Account.with_id(
            account_id,
            baseline_balance,
            ActivityWindow(activities),
        )

    def update_activities(self, account: Account) -> Account:
        if account.id is None:
            raise AccountIdentityMissingError(
                "Cannot persist activities of an account without id."
            )

        engine = self._db_port.get_ledger_engine()
        persisted: list[Activity] = []
        inserted = 0
        with engine.begin() as conn:
            for activity in account.activity_window.activities:
                if activity.is_persisted:
                    persisted.append(activity)
                    continue
                new_id = conn.execute(
                    INSERT_ACTIVITY_SQL,
                    {
                        "timestamp": _to_utc(activity.timestamp),
                        "owner_account_id": activity.owner_account_id.value,
                        "source_account_id": activity.source_account_id.value,
                        "target_account_id": activity.target_account_id.value,
                        "amount": activity.money.amount,
                    },
                ).scalar_one()
                persisted.append(activity.with_id(ActivityId(int(new_id))))
                inserted += 1

        self._logger.info(
            f"Inserted {inserted} activities for account {account.id.value}"
        )
        return Account.with_id(
            account.id,
            account.baseline_balance,
            ActivityWindow(persisted),
        )

    def register_account(self, account_id: AccountId) -> bool:
        """Create the account row if it does not exist yet.

        Returns:
            bool: ``True`` when the account was created.
        """
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            existing = conn.execute(
                SELECT_ACCOUNT_SQL, {"account_id": account_id.value}
            ).first()
            if existing is not None:
                return False
            conn.execute(INSERT_ACCOUNT_SQL, {"account_id": account_id.value})
        self._logger.info(f"Registered account {account_id.value}")
        return True

    @staticmethod
    def _ensure_account_exists(conn: Connection, account_id: AccountId) -> None:
        row = conn.execute(
            SELECT_ACCOUNT_SQL, {"account_id": account_id.value}
        ).first()
        if row is None:
            raise AccountNotFoundError(account_id)

    @staticmethod
    def _to_activity(row) -> Activity:
        return Activity(
            id=ActivityId(int(row.id)),
            owner_account_id=AccountId(int(row.owner_account_id)),
            source_account_id=AccountId(int(row.source_account_id)),
            target_account_id=AccountId(int(row.target_account_id)),
            timestamp=_to_utc(row.timestamp),
            money=Money(int(row.amount)),
        )


__all__ = [
    "SqlAlchemyAccountRepository",
    "SELECT_ACCOUNT_SQL",
    "SELECT_ACTIVITIES_SINCE_SQL",
    "SELECT_WITHDRAWAL_BALANCE_SQL",
    "SELECT_DEPOSIT_BALANCE_SQL",
    "INSERT_ACTIVITY_SQL",
]
