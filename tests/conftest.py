"""Pytest configuration and fixtures."""

from decimal import Decimal
from typing import Callable

import pytest
from faker import Faker

from atm_sim.config import default_accounts
from atm_sim.models import Account
from atm_sim.store import AccountDirectory


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def fake(seed: int) -> Faker:
    """Seeded Faker instance for randomized inputs."""
    faker = Faker()
    faker.seed_instance(seed)
    return faker


@pytest.fixture
def account() -> Account:
    """Sample account with a 1000.00 balance."""
    return Account(account_number="123456", pin="1234", balance=Decimal("1000.00"))


@pytest.fixture
def directory() -> AccountDirectory:
    """Directory holding the two default seeded accounts."""
    return AccountDirectory.from_seeds(default_accounts())


@pytest.fixture
def random_amount(fake: Faker) -> Callable[..., Decimal]:
    """Factory for positive two-place amounts between ``low`` and ``high`` cents."""

    def _amount(low: int = 1, high: int = 500_000) -> Decimal:
        return Decimal(fake.random_int(min=low, max=high)) / 100

    return _amount
