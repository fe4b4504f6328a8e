"""Exception hierarchy for the ATM ledger."""

from decimal import Decimal
from pathlib import Path


class AtmError(Exception):
    """Base exception for all ATM errors."""


class InsufficientFunds(AtmError):
    """Raised when a withdrawal exceeds the account balance."""

    def __init__(self, balance: Decimal, amount: Decimal):
        super().__init__(
            f"Insufficient funds: balance {balance:.2f}, requested {amount:.2f}"
        )
        self.balance = balance
        self.amount = amount


class MalformedRecord(AtmError):
    """Raised when an account store or history log line does not parse."""

    def __init__(self, line: str, reason: str):
        super().__init__(f"Malformed record ({reason}): {line!r}")
        self.line = line
        self.reason = reason


class PersistenceFailure(AtmError):
    """Raised when the account store or history log cannot be written."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Could not write {path}: {reason}")
        self.path = path


class AuthenticationFailure(AtmError):
    """Raised when PIN attempts are exhausted."""
