"""Shared pytest fixtures for all tests."""

from decimal import Decimal

import pytest

from config import Config
from models.account import Account
from models.statement import MiniStatement
from services.base import Services


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary data directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "atm",
        data_dir=tmp_path / "atm" / "data",
        accounts_filename="accounts.csv",
        history_filename="transaction_history.csv",
        statement_capacity=20,
        withdrawal_limit=Decimal("50000"),
        pin_attempts=3,
        log_level="DEBUG",
        log_dir=tmp_path / "atm" / "logs",
    )


@pytest.fixture
def services(test_config):
    """Create a Services container with the sample accounts loaded.

    Args:
        test_config: Test configuration fixture.

    Returns:
        Services: Services container for testing.
    """
    services = Services(test_config)
    services.accounts.load()
    return services


@pytest.fixture
def make_account():
    """Factory for standalone accounts.

    Returns:
        Callable building an Account with the given balance and capacity.
    """

    def _make(balance="100.00", capacity=20, number="1001", pin="1234"):
        return Account(
            account_number=number,
            holder_name="Test Holder",
            pin=pin,
            balance=Decimal(balance),
            statement=MiniStatement(capacity),
        )

    return _make
