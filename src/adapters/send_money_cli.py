"""CLI adapter to transfer money between two accounts."""

import argparse
import sys

from src.application.ports.load_account import AccountNotFoundError
from src.application.use_cases.send_money import (
    SendMoneyCommand,
    ThresholdExceededError,
)
from src.domain.models import AccountId, Money
from src.infrastructure.container import build_send_money_use_case
from src.infrastructure.logging.logger import get_app_logger

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_INVALID = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Transfer money between two ledger accounts.",
    )
    parser.add_argument("source", type=int, help="Source account id.")
    parser.add_argument("target", type=int, help="Target account id.")
    parser.add_argument(
        "amount",
        type=int,
        help="Amount to transfer, in minor currency units.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the send money use case and print its outcome.

    Returns:
        int: Process exit code.
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()

    try:
        command = SendMoneyCommand(
            source_account_id=AccountId(args.source),
            target_account_id=AccountId(args.target),
            money=Money(args.amount),
        )
    except (TypeError, ValueError) as exc:
        logger.error(str(exc))
        print(f"Invalid transfer: {exc}")
        return EXIT_INVALID

    use_case = build_send_money_use_case()
    try:
        success = use_case.execute(command)
    except (ThresholdExceededError, AccountNotFoundError) as exc:
        logger.error(str(exc))
        print(f"Invalid transfer: {exc}")
        return EXIT_INVALID

    if not success:
        print(
            f"Transfer of {args.amount} from account {args.source} "
            f"to account {args.target} was rejected."
        )
        return EXIT_REJECTED

    print(
        f"Transferred {args.amount} from account {args.source} "
        f"to account {args.target}."
    )
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
