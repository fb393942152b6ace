"""Tests for custom exception hierarchy."""

from atm_sim.exceptions import (
    AccountNotFoundError,
    AtmError,
    ConfigurationError,
    InvalidAmountError,
    InvalidTransactionKindError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_atm_error_is_exception(self) -> None:
        assert isinstance(AtmError("test"), Exception)

    def test_invalid_amount_is_atm_error(self) -> None:
        assert isinstance(InvalidAmountError("test"), AtmError)

    def test_invalid_kind_is_atm_error(self) -> None:
        assert isinstance(InvalidTransactionKindError("test"), AtmError)

    def test_account_not_found_is_atm_error(self) -> None:
        assert isinstance(AccountNotFoundError("test"), AtmError)

    def test_configuration_error_is_atm_error(self) -> None:
        assert isinstance(ConfigurationError("test"), AtmError)

    def test_exception_message(self) -> None:
        err = AccountNotFoundError("Account 123456 not found")
        assert str(err) == "Account 123456 not found"
