"""Tests for configuration loading and logging setup."""

import logging
from decimal import Decimal

import pytest

import config
from logger import setup_logging


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    path = tmp_path / ".config" / "atm.toml"
    monkeypatch.setattr(config, "get_config_path", lambda: path)
    return path


class TestLoadConfig:
    """Tests for load_config."""

    def test_creates_default_config(self, config_path):
        """Test a missing config file is written with defaults."""
        loaded = config.load_config()

        assert config_path.exists()
        assert loaded == config.Config.default()
        assert loaded.statement_capacity == 20
        assert loaded.withdrawal_limit == Decimal("50000")
        assert loaded.pin_attempts == 3
        assert loaded.accounts_path.name == "accounts.csv"
        assert loaded.history_path.name == "transaction_history.csv"

    def test_written_defaults_load_back(self, config_path):
        """Test the generated file parses to the same configuration."""
        written = config.load_config()

        assert config.load_config() == written

    def test_partial_config_uses_defaults(self, config_path, tmp_path):
        """Test missing keys fall back to defaults."""
        config_path.parent.mkdir(parents=True)
        config_path.write_text(
            f'base_dir = "{tmp_path / "bank"}"\n'
            "[policy]\n"
            "statement_capacity = 5\n"
            'withdrawal_limit = "1000.50"\n'
        )

        loaded = config.load_config()

        assert loaded.base_dir == tmp_path / "bank"
        assert loaded.data_dir == tmp_path / "bank" / "data"
        assert loaded.statement_capacity == 5
        assert loaded.withdrawal_limit == Decimal("1000.50")
        assert loaded.pin_attempts == 3
        assert loaded.log_level == "INFO"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_and_console_handlers(self, test_config):
        """Test logging writes to a dated file in the log directory."""
        logger = setup_logging(test_config)
        try:
            assert len(logger.handlers) == 2
            logger.info("hello from the ATM")
            for handler in logger.handlers:
                handler.flush()

            log_files = list(test_config.log_dir.glob("atm-*.log"))
            assert len(log_files) == 1
            assert "hello from the ATM" in log_files[0].read_text()
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()
            logger.setLevel(logging.NOTSET)

    def test_repeated_setup_does_not_duplicate_handlers(self, test_config):
        """Test calling setup twice keeps a single pair of handlers."""
        setup_logging(test_config)
        logger = setup_logging(test_config)
        try:
            assert len(logger.handlers) == 2
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()
            logger.setLevel(logging.NOTSET)
