"""Transaction model: deposits and withdrawals applied to accounts."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Optional

from exceptions import InsufficientFunds
from models.account import Account

SUMMARY_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
CENT = Decimal("0.01")


def format_amount(amount: Decimal) -> str:
    """Render an amount with two fraction digits, rounding halves up."""
    return str(amount.quantize(CENT, rounding=ROUND_HALF_UP))


class TransactionKind(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"

    @classmethod
    def parse(cls, value: str) -> "TransactionKind":
        """Parse a kind name, ignoring case and surrounding whitespace."""
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown transaction kind: {value!r}") from None


def _now() -> datetime:
    # History lines keep whole seconds, so in-memory timestamps do too
    return datetime.now().replace(microsecond=0)


@dataclass(frozen=True)
class Transaction:
    kind: TransactionKind
    amount: Decimal  # always positive, validated by the caller
    timestamp: datetime = field(default_factory=_now)

    @classmethod
    def create(
        cls,
        kind: TransactionKind,
        amount: Decimal,
        timestamp: Optional[datetime] = None,
    ) -> "Transaction":
        """Create a transaction, stamped now unless a timestamp is given."""
        if timestamp is None:
            return cls(kind=kind, amount=amount)
        return cls(kind=kind, amount=amount, timestamp=timestamp)

    @classmethod
    def deposit(
        cls, amount: Decimal, timestamp: Optional[datetime] = None
    ) -> "Transaction":
        return cls.create(TransactionKind.DEPOSIT, amount, timestamp)

    @classmethod
    def withdrawal(
        cls, amount: Decimal, timestamp: Optional[datetime] = None
    ) -> "Transaction":
        return cls.create(TransactionKind.WITHDRAWAL, amount, timestamp)

    def process(self, account: Account) -> None:
        """Apply this transaction to an account and record it.

        The check, the balance change and the statement append happen under
        the account's guard as one unit. Processing the same transaction
        twice applies it twice.

        Args:
            account: Account to mutate.

        Raises:
            InsufficientFunds: If a withdrawal exceeds the balance. Nothing
                is changed in that case.
        """
        apply = _APPLIERS[self.kind]
        with account.locked():
            apply(self, account)
            account.record_transaction(self)

    def summary(self) -> str:
        """Render a line like '[2025-01-15 10:30:00] DEPOSIT: 500.00'."""
        return (
            f"[{self.timestamp.strftime(SUMMARY_TIME_FORMAT)}] "
            f"{self.kind.value}: {format_amount(self.amount)}"
        )


def _apply_deposit(transaction: Transaction, account: Account) -> None:
    account.deposit(transaction.amount)


def _apply_withdrawal(transaction: Transaction, account: Account) -> None:
    if transaction.amount > account.balance:
        raise InsufficientFunds(account.balance, transaction.amount)
    account.withdraw(transaction.amount)


_APPLIERS = {
    TransactionKind.DEPOSIT: _apply_deposit,
    TransactionKind.WITHDRAWAL: _apply_withdrawal,
}
