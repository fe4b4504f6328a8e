"""Account model: identity, credential, balance and mini-statement."""

import threading
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, List

from config import STATEMENT_CAPACITY
from exceptions import MalformedRecord
from models.statement import MiniStatement

if TYPE_CHECKING:
    from models.transaction import Transaction


@dataclass
class Account:
    """A single bank account.

    Attributes:
        account_number: Unique identifier, the key for every lookup.
        holder_name: Display name of the account holder.
        pin: Credential compared verbatim by validate_pin.
        balance: Current balance. Account itself never refuses a mutation;
            overdraft protection belongs to the withdrawal transaction.
        statement: Bounded record of the most recent transactions.
    """

    account_number: str
    holder_name: str
    pin: str
    balance: Decimal
    statement: MiniStatement = field(
        default_factory=lambda: MiniStatement(STATEMENT_CAPACITY),
        repr=False,
        compare=False,
    )
    _lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    def validate_pin(self, attempt: str) -> bool:
        """Check a PIN attempt against the stored credential."""
        return self.pin == attempt

    def locked(self):
        """Return the account's mutation guard for use in a with block.

        The guard is re-entrant, so deposit/withdraw may be called while
        it is held.
        """
        return self._lock

    def deposit(self, amount: Decimal) -> None:
        with self._lock:
            self.balance += amount

    def withdraw(self, amount: Decimal) -> None:
        with self._lock:
            self.balance -= amount

    def record_transaction(self, transaction: "Transaction") -> None:
        """Append a transaction to the mini-statement."""
        with self._lock:
            self.statement.append(transaction)

    def recent_transactions(self) -> List["Transaction"]:
        """Get the retained transactions, oldest first.

        Returns:
            A copy of the statement; reverse it for newest-first display.
        """
        with self._lock:
            return self.statement.snapshot()

    def serialize(self) -> str:
        """Convert the account to an account store line."""
        holder_name = self.holder_name.replace(",", " ")
        return f"{self.account_number},{holder_name},{self.pin},{self.balance}"

    @classmethod
    def deserialize(cls, line: str, capacity: int = STATEMENT_CAPACITY) -> "Account":
        """Create an Account from an account store line.

        Args:
            line: Record in accountNumber,holderName,pin,balance format.
            capacity: Mini-statement capacity for the new account.

        Returns:
            Account with an empty mini-statement.

        Raises:
            MalformedRecord: If fewer than 4 fields are present or the
                balance is not a finite decimal.
        """
        parts = line.strip().split(",")
        if len(parts) < 4:
            raise MalformedRecord(line, "expected 4 fields")

        try:
            balance = Decimal(parts[3].strip())
        except InvalidOperation:
            raise MalformedRecord(line, "invalid balance") from None
        if not balance.is_finite():
            raise MalformedRecord(line, "invalid balance")

        return cls(
            account_number=parts[0].strip(),
            holder_name=parts[1].strip(),
            pin=parts[2].strip(),
            balance=balance,
            statement=MiniStatement(capacity),
        )
