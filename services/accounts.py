"""Account service: the in-memory account registry and its persistence."""

from typing import Dict, List, Optional

from config import Config
from exceptions import InsufficientFunds, PersistenceFailure
from logger import get_account_logger, get_logger
from models.account import Account
from models.transaction import Transaction, format_amount
from storage import ledger

logger = get_logger()


class AccountService:
    """Service for looking up accounts and committing transactions."""

    def __init__(self, config: Config):
        """Initialize the account service.

        Args:
            config: Config object with storage paths and statement capacity.
        """
        self.config = config
        self._accounts: Dict[str, Account] = {}

    def load(self) -> int:
        """Load accounts from the store and rebuild their mini-statements.

        Writes the sample accounts first if no store exists. Load failures
        leave the registry empty rather than raising.

        Returns:
            Number of accounts loaded.
        """
        try:
            ledger.bootstrap(self.config.accounts_path)
        except PersistenceFailure as e:
            logger.warning(f"Continuing without sample accounts: {e}")

        self._accounts = ledger.load_accounts(
            self.config.accounts_path, self.config.statement_capacity
        )
        replayed = ledger.replay_history(self.config.history_path, self._accounts)
        logger.debug(f"Replayed {replayed} history entries")
        return len(self._accounts)

    def find_all(self) -> List[Account]:
        """Get all accounts.

        Returns:
            List of Account objects, in account store order.
        """
        return list(self._accounts.values())

    def find(self, account_number: str) -> Optional[Account]:
        """Get a single account by account number.

        Args:
            account_number: The account number to find.

        Returns:
            Account object if found, None otherwise.
        """
        return self._accounts.get(account_number)

    def save(self) -> bool:
        """Write every account back to the account store.

        Returns:
            True if the store was written, False if the write failed.
        """
        try:
            ledger.save_accounts(self._accounts.values(), self.config.accounts_path)
        except PersistenceFailure:
            return False
        return True

    def execute(self, account: Account, transaction: Transaction) -> bool:
        """Process a transaction against an account and persist the result.

        The history line is appended before the account store is rewritten.
        A failed write does not undo the in-memory change.

        Args:
            account: Account to apply the transaction to.
            transaction: Deposit or withdrawal to process.

        Returns:
            True if both the history log and the account store were written.

        Raises:
            InsufficientFunds: If a withdrawal exceeds the balance. Nothing is
                processed or written in that case.
        """
        account_logger = get_account_logger(account.account_number)
        try:
            transaction.process(account)
        except InsufficientFunds as e:
            account_logger.warning(f"{transaction.kind.value} refused: {e}")
            raise
        account_logger.info(
            f"{transaction.kind.value} {format_amount(transaction.amount)}, "
            f"balance {account.balance:.2f}"
        )

        synced = True
        try:
            ledger.append_history(
                account.account_number, transaction, self.config.history_path
            )
        except PersistenceFailure:
            synced = False

        return self.save() and synced
