#!/usr/bin/env python3
"""Interactive ATM session: account selection, PIN check and the menu loop."""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from exceptions import AuthenticationFailure, InsufficientFunds
from logger import get_account_logger
from models.transaction import CENT, Transaction


_PIN_PATTERN = re.compile(r"[0-9]{4}")

MENU = """--- Transaction Menu ---
1. Check Balance
2. Deposit
3. Withdraw
4. Mini-statement
5. Logout"""


def authenticate(account, attempts: int) -> None:
    """Prompt for the account's PIN until it matches or attempts run out.

    A PIN that is not exactly four digits uses up an attempt just like a
    wrong one.

    Args:
        account: Account being accessed.
        attempts: Number of tries allowed.

    Raises:
        AuthenticationFailure: If every attempt fails.
    """
    used = 0
    while used < attempts:
        pin = input("Enter 4-digit PIN: ").strip()

        if not _PIN_PATTERN.fullmatch(pin):
            used += 1
            print(f"PIN must be 4 digits. Attempts left: {attempts - used}")
            continue

        if account.validate_pin(pin):
            return

        used += 1
        print(f"Invalid PIN. Attempts left: {attempts - used}")

    get_account_logger(account.account_number).warning("PIN attempts exhausted")
    raise AuthenticationFailure(
        "Too many invalid PIN attempts. Returning to account selection."
    )


def read_amount(prompt: str) -> Optional[Decimal]:
    """Read a positive amount from the user.

    Returns:
        The amount, or None if the input was not a positive number of
        whole cents.
    """
    text = input(prompt).strip()
    try:
        amount = Decimal(text)
    except InvalidOperation:
        print("Invalid numeric input for amount.")
        return None

    if not amount.is_finite():
        print("Invalid numeric input for amount.")
        return None
    if amount <= 0:
        print("Amount must be positive.")
        return None

    # The history log keeps two fraction digits
    try:
        whole_cents = amount == amount.quantize(CENT)
    except InvalidOperation:
        print("Invalid numeric input for amount.")
        return None
    if not whole_cents:
        print("Amount can have at most two decimal places.")
        return None
    return amount


def _commit(services, account, transaction) -> None:
    if not services.accounts.execute(account, transaction):
        print("Warning: the transaction could not be saved to disk.")


def handle_deposit(account, services) -> None:
    amount = read_amount("Enter amount to deposit: ")
    if amount is None:
        return

    _commit(services, account, Transaction.deposit(amount))
    print(
        f"Deposited {amount:.2f} successfully. "
        f"New balance: {account.balance:.2f}"
    )


def handle_withdrawal(account, services) -> None:
    amount = read_amount("Enter amount to withdraw: ")
    if amount is None:
        return

    limit = services.config.withdrawal_limit
    if amount > limit:
        print(f"Withdrawal exceeds single-transaction limit of {limit}.")
        return

    try:
        _commit(services, account, Transaction.withdrawal(amount))
    except InsufficientFunds as e:
        print(f"Withdrawal failed: {e}")
        return

    print(
        f"Withdrawn {amount:.2f} successfully. "
        f"New balance: {account.balance:.2f}"
    )


def show_mini_statement(account) -> None:
    transactions = account.recent_transactions()

    if not transactions:
        print("No transactions yet.")
        return

    print("Mini-statement (most recent first):")
    for transaction in reversed(transactions):
        print(transaction.summary())


def run_menu(account, services) -> None:
    """Serve the transaction menu until the user logs out."""
    while True:
        print(MENU)
        choice = input("Choose an option: ").strip()

        if choice == "1":
            print(f"Current balance: {account.balance:.2f}")
        elif choice == "2":
            handle_deposit(account, services)
        elif choice == "3":
            handle_withdrawal(account, services)
        elif choice == "4":
            show_mini_statement(account)
        elif choice == "5":
            print("Logged out.\n")
            return
        else:
            print("Invalid option. Try again.")


def run_session(services) -> None:
    """Run the account selection loop until the user types 'exit'."""
    print("Welcome to ATM Simulator\n")

    while True:
        account_number = input("Enter account number (or 'exit'): ").strip()
        if account_number.lower() == "exit":
            break

        account = services.accounts.find(account_number)
        if account is None:
            print("Account not found. Try again.\n")
            continue

        try:
            authenticate(account, services.config.pin_attempts)
        except AuthenticationFailure as e:
            print(f"{e}\n")
            continue

        print(f"Welcome, {account.holder_name}!\n")
        run_menu(account, services)

    print("Thank you for using ATM Simulator. Goodbye!")


def cmd_run(args, services):
    """Start an interactive ATM session."""
    try:
        run_session(services)
    except (EOFError, KeyboardInterrupt):
        print("\nSession closed.")


def setup_parser(subparsers):
    """Setup atm subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "atm",
        help="Start an interactive ATM session",
        description="Log in to an account and deposit, withdraw or view statements",
    )
    parser.set_defaults(func=cmd_run)
