"""Transaction model for the ATM domain."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from atm_sim.exceptions import InvalidTransactionKindError
from atm_sim.models.account import Account
from atm_sim.models.enums import TransactionKind, TransactionStatus


@dataclass(frozen=True)
class Transaction:
    """Single deposit or withdrawal request.

    Built per operation and applied exactly once with
    :func:`apply_transaction`; applying it again applies the amount again.
    """

    kind: TransactionKind
    amount: Decimal

    @classmethod
    def deposit(cls, amount: Decimal) -> "Transaction":
        return cls(kind=TransactionKind.DEPOSIT, amount=amount)

    @classmethod
    def withdrawal(cls, amount: Decimal) -> "Transaction":
        return cls(kind=TransactionKind.WITHDRAWAL, amount=amount)


def apply_transaction(transaction: Transaction, account: Account) -> bool:
    """Apply ``transaction`` to ``account`` and report whether it succeeded."""
    if transaction.kind is TransactionKind.DEPOSIT:
        return account.deposit(transaction.amount)
    if transaction.kind is TransactionKind.WITHDRAWAL:
        return account.withdraw(transaction.amount)
    raise InvalidTransactionKindError(f"Unhandled transaction kind: {transaction.kind}")


@dataclass
class TransactionRecord:
    """Journal entry for an applied transaction."""

    account_number: str
    kind: TransactionKind
    amount: Decimal
    status: TransactionStatus
    balance_after: Decimal
    timestamp: datetime
