"""Configuration management for atm-sim."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from atm_sim.exceptions import ConfigurationError, InvalidAmountError
from atm_sim.models.base import to_amount

LOG_FORMATS = ("standard", "json")


@dataclass
class AccountSeed:
    """Account loaded into the directory at startup."""

    account_number: str
    pin: str
    balance: Decimal = Decimal("0.00")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AccountSeed":
        """Build a seed from a JSON object."""
        try:
            account_number = data["account_number"]
            pin = data["pin"]
        except (KeyError, TypeError) as exc:
            raise ConfigurationError(f"Account entry missing field: {exc}") from exc

        if not isinstance(account_number, str) or not isinstance(pin, str):
            raise ConfigurationError("account_number and pin must be strings")

        try:
            balance = to_amount(data.get("balance", 0))
        except InvalidAmountError as exc:
            raise ConfigurationError(f"Account {account_number}: {exc}") from exc

        if balance < 0:
            raise ConfigurationError(f"Account {account_number} has a negative balance")

        return cls(account_number=account_number, pin=pin, balance=balance)


def default_accounts() -> list[AccountSeed]:
    """Accounts available when no ATM_ACCOUNTS override is set."""
    return [
        AccountSeed(account_number="123456", pin="1234", balance=Decimal("1000.00")),
        AccountSeed(account_number="654321", pin="4321", balance=Decimal("500.00")),
    ]


@dataclass
class AtmConfig:
    """Main configuration for atm-sim."""

    accounts: list[AccountSeed] = field(default_factory=default_accounts)
    log_level: str = "WARNING"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "AtmConfig":
        """Create config from environment variables."""
        import json
        import os

        log_format = os.getenv("ATM_LOG_FORMAT", "standard")
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"ATM_LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {log_format!r}"
            )

        accounts_str = os.getenv("ATM_ACCOUNTS")
        if accounts_str:
            try:
                raw_accounts = json.loads(accounts_str)
            except json.JSONDecodeError as exc:
                raise ConfigurationError(f"ATM_ACCOUNTS is not valid JSON: {exc}") from exc
            if not isinstance(raw_accounts, list):
                raise ConfigurationError("ATM_ACCOUNTS must be a JSON list")
            accounts = [AccountSeed.from_dict(item) for item in raw_accounts]
        else:
            accounts = default_accounts()

        return cls(
            accounts=accounts,
            log_level=os.getenv("ATM_LOG_LEVEL", "WARNING"),
            log_format=log_format,
        )
