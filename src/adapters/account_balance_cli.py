"""CLI adapter to print the balance of an account."""

import argparse
import sys

from src.application.ports.load_account import AccountNotFoundError
from src.domain.models import AccountId
from src.infrastructure.container import build_get_account_balance_use_case
from src.infrastructure.logging.logger import get_app_logger


def main(argv: list[str] | None = None) -> int:
    """Print the current balance of the requested account."""
    parser = argparse.ArgumentParser(
        description="Print the current balance of a ledger account.",
    )
    parser.add_argument("account_id", type=int, help="Account id.")
    args = parser.parse_args(argv)
    logger = get_app_logger()

    use_case = build_get_account_balance_use_case()
    try:
        balance = use_case.execute(AccountId(args.account_id))
    except AccountNotFoundError as exc:
        logger.error(str(exc))
        print(str(exc))
        return 1

    print(f"Balance of account {args.account_id}: {balance.amount}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
