"""Custom exception hierarchy for atm-sim."""


class AtmError(Exception):
    """Base exception for all atm-sim errors."""


class InvalidAmountError(AtmError):
    """Raised when an amount cannot be parsed or is not a finite number."""


class InvalidTransactionKindError(AtmError):
    """Raised when a transaction kind name is not recognized."""


class AccountNotFoundError(AtmError):
    """Raised when a handle refers to an account the directory does not hold."""


class ConfigurationError(AtmError):
    """Raised when configuration is invalid or missing."""
