"""Flat-file persistence for accounts and transaction history.

Two files back the ledger:

- The account store, one `accountNumber,holderName,pin,balance` line per
  account, rewritten in full after every balance change.
- The history log, one `accountId,KIND,amount,timestamp` line per processed
  transaction, only ever appended to. It is replayed at startup to rebuild
  mini-statements; balances come from the account store alone.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Dict, Iterable, Tuple

from exceptions import MalformedRecord, PersistenceFailure
from logger import get_logger
from models.account import Account
from models.transaction import Transaction, TransactionKind, format_amount

logger = get_logger()

HISTORY_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

SAMPLE_ACCOUNTS = [
    "1001,Rupesh Saini,1234,176381",
    "1002,Ansh Rana,2345,50087",
    "1003,Monish Yadav,3456,17393",
    "1004,Tanishq Kapil,4567,80980",
    "1005,Mridul Sharma,5678,20500",
    "1006,Maulik Chopra,6789,49070",
]


def bootstrap(path: Path) -> bool:
    """Write the sample accounts if the account store does not exist yet.

    Args:
        path: Account store path.

    Returns:
        True if the sample store was written, False if one already existed.

    Raises:
        PersistenceFailure: If the sample store could not be written.
    """
    if path.exists():
        return False

    logger.info(f"{path.name} not found. Creating default accounts.")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            for line in SAMPLE_ACCOUNTS:
                f.write(line + "\n")
    except OSError as e:
        logger.error(f"Could not create accounts file: {e}")
        raise PersistenceFailure(path, str(e)) from e
    return True


def load_accounts(path: Path, capacity: int) -> Dict[str, Account]:
    """Load every account from the account store.

    Blank lines are ignored. Any unreadable file or unparseable line fails
    the whole load: an empty mapping is returned and a warning is logged.

    Args:
        path: Account store path.
        capacity: Mini-statement capacity for each loaded account.

    Returns:
        Accounts keyed by account number, in file order.
    """
    accounts: Dict[str, Account] = {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                if not line.strip():
                    continue
                account = Account.deserialize(line, capacity)
                if account.account_number in accounts:
                    logger.warning(
                        f"Duplicate account {account.account_number} ignored, "
                        f"line will be dropped on next save: {line.strip()}"
                    )
                    continue
                accounts[account.account_number] = account
    except (OSError, UnicodeDecodeError, MalformedRecord) as e:
        logger.warning(f"Failed to load accounts: {e}")
        return {}

    logger.info(f"Loaded {len(accounts)} accounts.")
    return accounts


def save_accounts(accounts: Iterable[Account], path: Path) -> None:
    """Overwrite the account store with the given accounts.

    The write is not atomic; a crash part way through leaves a truncated file.

    Raises:
        PersistenceFailure: If the file could not be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            for account in accounts:
                f.write(account.serialize() + "\n")
    except OSError as e:
        logger.error(f"Failed to persist accounts: {e}")
        raise PersistenceFailure(path, str(e)) from e


def format_history_line(account_id: str, transaction: Transaction) -> str:
    return ",".join(
        [
            account_id,
            transaction.kind.value,
            format_amount(transaction.amount),
            transaction.timestamp.strftime(HISTORY_TIME_FORMAT),
        ]
    )


def parse_history_line(line: str) -> Tuple[str, Transaction]:
    """Parse a history log line.

    Args:
        line: Record in accountId,KIND,amount,timestamp format.

    Returns:
        Tuple of (account_id, Transaction carrying the stored timestamp).

    Raises:
        MalformedRecord: If any field is missing or invalid.
    """
    parts = line.strip().split(",")
    if len(parts) < 4:
        raise MalformedRecord(line, "expected 4 fields")

    account_id = parts[0].strip()
    try:
        kind = TransactionKind.parse(parts[1])
        amount = Decimal(parts[2].strip())
        timestamp = datetime.strptime(parts[3].strip(), HISTORY_TIME_FORMAT)
    except (ValueError, InvalidOperation) as e:
        raise MalformedRecord(line, str(e)) from None
    if not amount.is_finite():
        raise MalformedRecord(line, "invalid amount")

    return account_id, Transaction.create(kind, amount, timestamp)


def append_history(account_id: str, transaction: Transaction, path: Path) -> None:
    """Append one transaction to the history log, creating it if needed.

    Raises:
        PersistenceFailure: If the line could not be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(format_history_line(account_id, transaction) + "\n")
    except OSError as e:
        logger.error(f"Failed to write history: {e}")
        raise PersistenceFailure(path, str(e)) from e


def replay_history(path: Path, accounts: Dict[str, Account]) -> int:
    """Rebuild mini-statements from the history log.

    Each entry for a known account is recorded on that account's statement
    with its stored timestamp. Balances are not touched. Blank lines,
    malformed lines and entries for unknown accounts are skipped.

    Args:
        path: History log path. A missing log replays nothing.
        accounts: Loaded accounts keyed by account number.

    Returns:
        Number of entries recorded.
    """
    if not path.exists():
        return 0

    replayed = 0
    line_num = 0
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                line_num += 1
                if not line.strip():
                    continue

                try:
                    account_id, transaction = parse_history_line(line)
                except MalformedRecord as e:
                    logger.debug(f"Skipping history line {line_num}: {e}")
                    continue

                account = accounts.get(account_id)
                if account is None:
                    logger.debug(
                        f"Skipping history line {line_num}: "
                        f"unknown account {account_id}"
                    )
                    continue

                account.record_transaction(transaction)
                replayed += 1
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to load history: {e}")

    return replayed
