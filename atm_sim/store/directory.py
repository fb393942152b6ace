"""Account directory: authentication and transaction dispatch."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Iterable

from atm_sim.config import AccountSeed
from atm_sim.exceptions import AccountNotFoundError, InvalidTransactionKindError
from atm_sim.logging import get_logger
from atm_sim.models import (
    Account,
    AccountHandle,
    Outcome,
    Transaction,
    TransactionKind,
    TransactionRecord,
    TransactionStatus,
    apply_transaction,
    to_amount,
)

logger = get_logger(__name__)


@dataclass
class AccountDirectory:
    """In-memory registry of accounts keyed by account number.

    Callers receive :class:`AccountHandle` values from :meth:`authenticate`
    and pass them back in; accounts themselves stay owned by the directory.
    """

    accounts: dict[str, Account] = field(default_factory=dict)

    _journal: list[TransactionRecord] = field(default_factory=list)

    # account_number -> indices into _journal
    _account_records: dict[str, list[int]] = field(default_factory=dict)

    @classmethod
    def from_seeds(cls, seeds: Iterable[AccountSeed]) -> "AccountDirectory":
        """Create a directory populated from configured account seeds."""
        directory = cls()
        for seed in seeds:
            directory.add_account(
                Account(account_number=seed.account_number, pin=seed.pin, balance=seed.balance)
            )
        return directory

    def add_account(self, account: Account) -> None:
        """Add an account, replacing any account with the same number."""
        if account.account_number in self.accounts:
            logger.warning("Replacing existing account %s", account.account_number)
        self.accounts[account.account_number] = account
        self._account_records.setdefault(account.account_number, [])

    def authenticate(self, account_number: str, pin: str) -> AccountHandle | None:
        """Return a handle when the number exists and the PIN matches.

        Unknown numbers and wrong PINs both return ``None``.
        """
        account = self.accounts.get(account_number)
        if account is None or not account.verify_pin(pin):
            logger.info("Authentication failed for account %s", account_number)
            return None
        logger.info("Authenticated account %s", account_number)
        return AccountHandle(account_number)

    def perform(
        self,
        handle: AccountHandle,
        kind: TransactionKind | str,
        amount: Decimal | int | str,
    ) -> Outcome:
        """Build and apply a transaction of ``kind`` for ``amount``."""
        account = self._resolve(handle)

        try:
            transaction_kind = (
                kind if isinstance(kind, TransactionKind) else TransactionKind.parse(kind)
            )
        except InvalidTransactionKindError:
            logger.info("Rejected unknown transaction kind %r for %s", kind, handle.account_number)
            return Outcome.INVALID_KIND

        transaction = Transaction(kind=transaction_kind, amount=to_amount(amount))
        success = apply_transaction(transaction, account)
        self._record(account, transaction, success)

        outcome = Outcome.SUCCESS if success else Outcome.FAILURE
        logger.info(
            "%s of %s on %s %s",
            transaction.kind.value,
            transaction.amount,
            account.account_number,
            "completed" if success else "failed",
            extra={
                "context": {
                    "account_number": account.account_number,
                    "kind": transaction.kind.value,
                    "amount": str(transaction.amount),
                    "outcome": outcome.value,
                }
            },
        )
        return outcome

    def check_balance(self, handle: AccountHandle) -> Decimal:
        """Return the balance of the account behind ``handle``."""
        return self._resolve(handle).check_balance()

    def history(self, handle: AccountHandle) -> list[TransactionRecord]:
        """Return the journal of transactions applied to an account, oldest first."""
        self._resolve(handle)
        indices = self._account_records.get(handle.account_number, [])
        return [self._journal[i] for i in indices]

    def _resolve(self, handle: AccountHandle) -> Account:
        account = self.accounts.get(handle.account_number)
        if account is None:
            raise AccountNotFoundError(f"Account {handle.account_number} not found")
        return account

    def _record(self, account: Account, transaction: Transaction, success: bool) -> None:
        record = TransactionRecord(
            account_number=account.account_number,
            kind=transaction.kind,
            amount=transaction.amount,
            status=TransactionStatus.COMPLETED if success else TransactionStatus.FAILED,
            balance_after=account.check_balance(),
            timestamp=datetime.now(),
        )
        idx = len(self._journal)
        self._journal.append(record)
        self._account_records.setdefault(account.account_number, []).append(idx)
