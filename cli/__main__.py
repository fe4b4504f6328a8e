#!/usr/bin/env python3
"""
ATM CLI - command-line interface for the ATM ledger.

Usage:
    python -m cli <command> [subcommand] [options]

Commands:
    atm          Start an interactive ATM session
    accounts     Inspect accounts and mini-statements

Examples:
    python -m cli atm
    python -m cli accounts list
    python -m cli accounts statement 1001
"""

import sys
import argparse
from cli import accounts, atm
from config import load_config
from services.base import Services
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="ATM Simulator - accounts, deposits and withdrawals",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    # Register each command's subparser
    atm.setup_parser(subparsers)
    accounts.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            # Every command works on the loaded accounts
            services = Services(config)
            services.accounts.load()

            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
