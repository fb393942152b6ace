"""Enumeration types for ATM entities."""

from enum import Enum

from atm_sim.exceptions import InvalidTransactionKindError


class TransactionKind(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdraw"

    @classmethod
    def parse(cls, name: str) -> "TransactionKind":
        """Map the exact boundary string ``"deposit"`` or ``"withdraw"`` to its kind."""
        try:
            return cls(name)
        except ValueError as exc:
            raise InvalidTransactionKindError(f"Unknown transaction kind: {name!r}") from exc


class Outcome(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    INVALID_KIND = "INVALID_KIND"

    @property
    def message(self) -> str:
        """Console text for this outcome."""
        return _OUTCOME_MESSAGES[self]


_OUTCOME_MESSAGES = {
    Outcome.SUCCESS: "Transaction successful",
    Outcome.FAILURE: "Transaction failed",
    Outcome.INVALID_KIND: "Invalid transaction type",
}


class TransactionStatus(str, Enum):
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
