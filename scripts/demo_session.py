#!/usr/bin/env python3
"""Replay a scripted ATM session against the configured accounts.

Authenticates the first seeded account, then checks the balance, deposits
and withdraws, printing the result of each step. Useful as a smoke test
without typing into the interactive shell.
"""

import argparse
import sys
from decimal import Decimal
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from atm_sim.config import AtmConfig
from atm_sim.exceptions import InvalidAmountError
from atm_sim.logging import setup_logging
from atm_sim.models import TransactionKind, to_amount
from atm_sim.store import AccountDirectory


def run_session(
    directory: AccountDirectory,
    account_number: str,
    pin: str,
    deposit: Decimal,
    withdrawal: Decimal,
) -> bool:
    """Run the scripted steps; return False if authentication fails."""
    handle = directory.authenticate(account_number, pin)
    if handle is None:
        print("Invalid PIN")
        return False

    print(f"Balance: {directory.check_balance(handle)}")
    print(directory.perform(handle, TransactionKind.DEPOSIT, deposit).message)
    print(f"Balance after deposit: {directory.check_balance(handle)}")
    print(directory.perform(handle, TransactionKind.WITHDRAWAL, withdrawal).message)
    print(f"Balance after withdrawal: {directory.check_balance(handle)}")

    print("\nJournal:")
    for record in directory.history(handle):
        print(
            f"  {record.timestamp:%H:%M:%S}  {record.kind.value:<8}  "
            f"{record.amount:>10}  {record.status.value:<9}  balance={record.balance_after}"
        )
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Replay a scripted ATM session")
    parser.add_argument("--account", type=str, default=None, help="Account number (default: first seeded account)")
    parser.add_argument("--pin", type=str, default=None, help="PIN (default: the seeded account's PIN)")
    parser.add_argument("--deposit", type=str, default="200", help="Deposit amount (default: 200)")
    parser.add_argument("--withdraw", type=str, default="100", help="Withdrawal amount (default: 100)")
    args = parser.parse_args()

    try:
        deposit = to_amount(args.deposit)
        withdrawal = to_amount(args.withdraw)
    except InvalidAmountError as exc:
        parser.error(str(exc))

    config = AtmConfig.from_env()
    setup_logging(level=config.log_level, format_type=config.log_format)

    if not config.accounts:
        print("No accounts configured")
        sys.exit(1)

    seed = config.accounts[0]
    directory = AccountDirectory.from_seeds(config.accounts)

    print("=" * 60)
    print(f"  atm-sim demo  |  accounts={len(directory.accounts)}")
    print("=" * 60)

    ok = run_session(
        directory,
        account_number=args.account or seed.account_number,
        pin=args.pin or seed.pin,
        deposit=deposit,
        withdrawal=withdrawal,
    )
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
