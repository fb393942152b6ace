"""Interactive console session for the ATM simulator."""

import argparse
import sys
from typing import TextIO

from atm_sim.config import LOG_FORMATS, AtmConfig
from atm_sim.exceptions import ConfigurationError, InvalidAmountError
from atm_sim.logging import get_logger, setup_logging
from atm_sim.models import AccountHandle, TransactionKind, to_amount
from atm_sim.store import AccountDirectory

logger = get_logger(__name__)

MENU = (
    "\nATM Menu:\n"
    "1. Check Balance\n"
    "2. Deposit\n"
    "3. Withdraw\n"
    "4. Exit"
)

CHECK_BALANCE = 1
DEPOSIT = 2
WITHDRAW = 3
EXIT = 4


class AtmShell:
    """Line-oriented ATM session over a pair of text streams.

    The shell owns all prompting and formatting; every balance change goes
    through the :class:`AccountDirectory` it is given.
    """

    def __init__(
        self,
        directory: AccountDirectory,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.directory = directory
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def run(self) -> int:
        """Run one session until the user exits or input ends."""
        handle = self.login()
        if handle is None:
            return 0

        while True:
            self._print(MENU)
            line = self._prompt("Enter your choice: ")
            if line is None:
                return 0

            try:
                choice = int(line)
            except ValueError:
                self._print("Invalid input. Please enter a number.")
                continue

            if choice == EXIT:
                self._print("Thank you for using the ATM. Goodbye!")
                return 0
            if choice == CHECK_BALANCE:
                self._print(f"Balance: {self.directory.check_balance(handle)}")
            elif choice == DEPOSIT:
                if not self._transact(handle, TransactionKind.DEPOSIT, "deposit"):
                    return 0
            elif choice == WITHDRAW:
                if not self._transact(handle, TransactionKind.WITHDRAWAL, "withdraw"):
                    return 0
            else:
                self._print("Invalid choice. Please try again.")

    def login(self) -> AccountHandle | None:
        """Prompt for credentials until they match or input ends."""
        while True:
            account_number = self._prompt("Enter account number: ")
            if account_number is None:
                return None
            pin = self._prompt("Enter PIN: ")
            if pin is None:
                return None

            handle = self.directory.authenticate(account_number, pin)
            if handle is not None:
                return handle
            self._print("Invalid account number or PIN.")

    def _transact(self, handle: AccountHandle, kind: TransactionKind, verb: str) -> bool:
        """Read an amount and perform ``kind``; return False when input ended."""
        line = self._prompt(f"Enter amount to {verb}: ")
        if line is None:
            return False

        try:
            amount = to_amount(line)
        except InvalidAmountError:
            self._print("Invalid input. Please enter a number.")
            return True

        outcome = self.directory.perform(handle, kind, amount)
        self._print(outcome.message)
        return True

    def _prompt(self, text: str) -> str | None:
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def _print(self, text: str) -> None:
        self.stdout.write(text + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="atm-sim", description="Simulate an ATM console session")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: ATM_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Log format (default: ATM_LOG_FORMAT or standard)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``atm-sim`` console script."""
    args = build_parser().parse_args(argv)

    try:
        config = AtmConfig.from_env()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    setup_logging(
        level=args.log_level or config.log_level,
        format_type=args.log_format or config.log_format,
    )

    directory = AccountDirectory.from_seeds(config.accounts)
    logger.info("Loaded %d accounts", len(directory.accounts))
    return AtmShell(directory).run()


if __name__ == "__main__":
    sys.exit(main())
