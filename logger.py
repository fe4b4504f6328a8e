"""Logging configuration for the ATM.

Sets up logging to both file (with date-based naming) and console.
"""

import logging
from datetime import date
from config import Config

LOGGER_NAME = "atm"


def setup_logging(config: Config) -> logging.Logger:
    """Set up application logging with file and console handlers.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)

    # Clear any existing handlers (in case this is called multiple times)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_formatter = logging.Formatter("%(levelname)s - %(message)s")

    # File handler - logs to atm-{date}.log
    log_file_path = config.log_dir / f"atm-{date.today().isoformat()}.log"
    file_handler = logging.FileHandler(log_file_path)
    file_handler.setLevel(config.log_level)
    file_handler.setFormatter(detailed_formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level)
    console_handler.setFormatter(console_formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The atm logger instance.
    """
    return logging.getLogger(LOGGER_NAME)


class AccountLogAdapter(logging.LoggerAdapter):
    """Prefix log messages with the account they concern."""

    def process(self, msg, kwargs):
        return f"[account {self.extra['account_number']}] {msg}", kwargs


def get_account_logger(account_number: str) -> AccountLogAdapter:
    """Get the application logger scoped to one account.

    Args:
        account_number: Account whose activity is being logged.

    Returns:
        Adapter writing to the atm logger with an account prefix.
    """
    return AccountLogAdapter(get_logger(), {"account_number": account_number})
