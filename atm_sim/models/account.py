"""Account model for the ATM domain."""

from dataclasses import dataclass
from decimal import Decimal, Inexact, localcontext

from atm_sim.exceptions import InvalidAmountError
from atm_sim.models.base import BALANCE_CONTEXT, to_amount


class Account:
    """Bank account holding a balance that never goes negative.

    The balance is read-only from outside; ``deposit`` and ``withdraw`` are
    the only ways to change it. They report rejected amounts by returning
    ``False`` and leave the balance untouched; they do not raise.
    """

    def __init__(
        self,
        account_number: str,
        pin: str,
        balance: Decimal | int | str = Decimal("0"),
    ) -> None:
        self.account_number = account_number
        self._pin = pin
        self._balance = to_amount(balance)
        if self._balance < 0:
            raise InvalidAmountError(
                f"Account {account_number} cannot open with a negative balance"
            )

    @property
    def balance(self) -> Decimal:
        return self._balance

    def check_balance(self) -> Decimal:
        """Return the current balance."""
        return self._balance

    def deposit(self, amount: Decimal | int | float | str) -> bool:
        """Add ``amount`` if it is positive."""
        value = self._normalize(amount)
        if value is None or value <= 0:
            return False
        return self._apply(value)

    def withdraw(self, amount: Decimal | int | float | str) -> bool:
        """Remove ``amount`` if it is positive and covered by the balance."""
        value = self._normalize(amount)
        if value is None or not 0 < value <= self._balance:
            return False
        return self._apply(value.copy_negate())

    def verify_pin(self, candidate: str) -> bool:
        """Check ``candidate`` against the stored PIN."""
        return self._pin == candidate

    def _normalize(self, amount: Decimal | int | float | str) -> Decimal | None:
        try:
            return to_amount(amount)
        except InvalidAmountError:
            return None

    def _apply(self, delta: Decimal) -> bool:
        with localcontext(BALANCE_CONTEXT):
            try:
                self._balance = self._balance + delta
            except Inexact:
                return False
        return True

    def __repr__(self) -> str:
        return f"Account(account_number={self.account_number!r}, balance={self._balance!r})"


@dataclass(frozen=True)
class AccountHandle:
    """Opaque reference to an account held by an ``AccountDirectory``."""

    account_number: str
