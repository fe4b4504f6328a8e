"""Tests for the accounts CLI commands."""

import argparse
import logging
from datetime import datetime
from decimal import Decimal

import pytest

from cli import accounts
from models.transaction import Transaction


@pytest.fixture
def info_logs(caplog):
    caplog.set_level(logging.INFO, logger="atm")
    return caplog


class TestAccountsCommands:
    """Tests for 'accounts list' and 'accounts statement'."""

    def test_list(self, services, info_logs):
        """Test every account is listed with its balance."""
        accounts.cmd_list(argparse.Namespace(), services)

        assert "Account: 1001" in info_logs.text
        assert "Holder: Maulik Chopra" in info_logs.text
        assert "Balance: 50087.00" in info_logs.text
        assert "Total accounts: 6" in info_logs.text

    def test_statement_newest_first(self, services, info_logs):
        """Test the statement is printed most recent first."""
        account = services.accounts.find("1002")
        services.accounts.execute(
            account, Transaction.deposit(Decimal("13"), datetime(2025, 1, 1, 9, 0, 0))
        )
        services.accounts.execute(
            account,
            Transaction.withdrawal(Decimal("3"), datetime(2025, 1, 2, 9, 0, 0)),
        )

        accounts.cmd_statement(argparse.Namespace(account_number="1002"), services)

        text = info_logs.text
        assert text.index("[2025-01-02 09:00:00] WITHDRAWAL: 3.00") < text.index(
            "[2025-01-01 09:00:00] DEPOSIT: 13.00"
        )

    def test_statement_empty(self, services, info_logs):
        """Test an account without transactions says so."""
        accounts.cmd_statement(argparse.Namespace(account_number="1004"), services)

        assert "No transactions yet." in info_logs.text

    def test_statement_unknown_account(self, services):
        """Test an unknown account number exits with an error."""
        with pytest.raises(SystemExit):
            accounts.cmd_statement(
                argparse.Namespace(account_number="9999"), services
            )

    def test_parser_registration(self):
        """Test the subcommands are wired to their handlers."""
        parser = argparse.ArgumentParser()
        subparsers = parser.add_subparsers(dest="command", required=True)
        accounts.setup_parser(subparsers)

        args = parser.parse_args(["accounts", "statement", "1001"])

        assert args.func is accounts.cmd_statement
        assert args.account_number == "1001"
