"""DDL for the ledger tables.

Every transfer is stored twice in ``activity``: once owned by the source
account (the withdrawal) and once owned by the target account (the deposit).
"""

from sqlalchemy.engine import Engine

CREATE_ACCOUNT_SQL = """
CREATE TABLE IF NOT EXISTS account (
    id BIGINT PRIMARY KEY
)
"""

_CREATE_ACTIVITY_SQL = {
    "sqlite": """
        CREATE TABLE IF NOT EXISTS activity (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            timestamp TIMESTAMP NOT NULL,
            owner_account_id BIGINT NOT NULL,
            source_account_id BIGINT NOT NULL,
            target_account_id BIGINT NOT NULL,
            amount BIGINT NOT NULL
        )
    """,
    "postgresql": """
        CREATE TABLE IF NOT EXISTS activity (
            id BIGSERIAL PRIMARY KEY,
            timestamp TIMESTAMPTZ NOT NULL,
            owner_account_id BIGINT NOT NULL,
            source_account_id BIGINT NOT NULL,
            target_account_id BIGINT NOT NULL,
            amount BIGINT NOT NULL
        )
    """,
}

CREATE_ACTIVITY_INDEX_SQL = """
CREATE INDEX IF NOT EXISTS ix_activity_owner_timestamp
ON activity (owner_account_id, timestamp)
"""


def create_activity_sql(dialect: str) -> str:
    """Return the ``activity`` DDL for a SQLAlchemy dialect name.

    Raises:
        ValueError: If the dialect is not supported.
    """
    try:
        return _CREATE_ACTIVITY_SQL[dialect]
    except KeyError:
        raise ValueError(
            f"Unsupported ledger database dialect: {dialect}. "
            "Expected sqlite or postgresql."
        ) from None


def prepare_ledger_schema(engine: Engine) -> None:
    """Create the ledger tables if they do not exist.

    Args:
        engine: SQLAlchemy engine for the ledger database.
    """
    activity_sql = create_activity_sql(engine.dialect.name)
    with engine.begin() as conn:
        conn.exec_driver_sql(CREATE_ACCOUNT_SQL)
        conn.exec_driver_sql(activity_sql)
        conn.exec_driver_sql(CREATE_ACTIVITY_INDEX_SQL)


__all__ = [
    "CREATE_ACCOUNT_SQL",
    "CREATE_ACTIVITY_INDEX_SQL",
    "create_activity_sql",
    "prepare_ledger_schema",
]
