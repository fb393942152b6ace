"""Domain models for the ATM simulator."""

from atm_sim.models.account import Account, AccountHandle
from atm_sim.models.base import BALANCE_CONTEXT, to_amount
from atm_sim.models.enums import Outcome, TransactionKind, TransactionStatus
from atm_sim.models.transaction import Transaction, TransactionRecord, apply_transaction

__all__ = [
    "BALANCE_CONTEXT",
    "Account",
    "AccountHandle",
    "Outcome",
    "Transaction",
    "TransactionKind",
    "TransactionRecord",
    "TransactionStatus",
    "apply_transaction",
    "to_amount",
]
