"""In-memory ATM session simulator."""

__version__ = "0.1.0"
