"""In-memory account directory."""

from atm_sim.store.directory import AccountDirectory

__all__ = ["AccountDirectory"]
