"""CLI adapter to create the ledger tables and register accounts.

This module wires the schema helpers and the account repository to the
concrete database adapter. Account ids given on the command line are
registered so they can take part in transfers.
"""

import argparse

from src.domain.models import AccountId
from src.infrastructure.container import (
    build_account_repository,
    build_database_adapter,
)
from src.infrastructure.ledger_schema import prepare_ledger_schema
from src.infrastructure.logging.logger import get_app_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Create the ledger tables and register accounts.",
    )
    parser.add_argument(
        "account_ids",
        nargs="*",
        type=int,
        help="Ids of accounts to register.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Create the ledger schema and register the requested accounts."""
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    db_adapter = build_database_adapter()

    prepare_ledger_schema(db_adapter.get_ledger_engine())
    logger.info("Ledger schema is ready.")

    repository = build_account_repository(db_adapter)
    created = [
        account_id
        for account_id in args.account_ids
        if repository.register_account(AccountId(account_id))
    ]

    print(
        f"Ledger schema ready; registered {len(created)} "
        f"of {len(args.account_ids)} accounts."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
