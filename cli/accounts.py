#!/usr/bin/env python3

import sys
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List all loaded accounts."""
    accounts = services.accounts.find_all()

    if not accounts:
        logger.info("No accounts found.")
        return

    logger.info("\nAccounts:")
    logger.info("=" * 80)
    for account in accounts:
        logger.info(f"Account: {account.account_number}")
        logger.info(f"Holder: {account.holder_name}")
        logger.info(f"Balance: {account.balance:.2f}")
        logger.info("-" * 80)

    logger.info(f"\nTotal accounts: {len(accounts)}")


def cmd_statement(args, services):
    """Show the mini-statement of an account, most recent first."""
    account = services.accounts.find(args.account_number)
    if not account:
        logger.error(f"Account '{args.account_number}' not found.")
        logger.info("Use 'python -m cli accounts list' to see available accounts.")
        sys.exit(1)

    transactions = account.recent_transactions()
    if not transactions:
        logger.info("No transactions yet.")
        return

    logger.info(f"\nMini-statement for {account.account_number} (most recent first):")
    for transaction in reversed(transactions):
        logger.info(transaction.summary())


def setup_parser(subparsers):
    """Setup accounts subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "accounts",
        help="Inspect accounts",
        description="List accounts and show their mini-statements",
    )

    accounts_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available account commands",
        dest="subcommand",
        required=True,
    )

    # accounts list
    list_parser = accounts_subparsers.add_parser("list", help="List all accounts")
    list_parser.set_defaults(func=cmd_list)

    # accounts statement
    statement_parser = accounts_subparsers.add_parser(
        "statement", help="Show an account's mini-statement"
    )
    statement_parser.add_argument("account_number", help="Account number")
    statement_parser.set_defaults(func=cmd_statement)
