"""Monetary amount helpers shared across models."""

from decimal import MAX_EMAX, MIN_EMIN, Context, Decimal, Inexact, InvalidOperation

from atm_sim.exceptions import InvalidAmountError

# Balance arithmetic must never round; a sum that needs more digits than
# this raises Inexact instead of silently losing the low-order part.
BALANCE_CONTEXT = Context(
    prec=1000,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, Inexact],
)


def to_amount(value: Decimal | int | float | str) -> Decimal:
    """Convert user or config input into a ``Decimal`` without rounding.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion. Sign and precision are preserved;
    validating the sign is up to the operation that uses the amount.

    Raises
    ------
    InvalidAmountError
        If the value is not numeric or is not finite (NaN, Infinity).
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Not an amount: {value!r}")

    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise InvalidAmountError(f"Not an amount: {value!r}") from exc

    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite: {value!r}")

    return amount
