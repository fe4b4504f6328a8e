"""Configuration management for the ATM.

Reads configuration from ~/.config/atm.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
from decimal import Decimal
import tomllib
import tomli_w

STATEMENT_CAPACITY = 20
WITHDRAWAL_LIMIT = Decimal("50000")
PIN_ATTEMPTS = 3


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    data_dir: Path
    accounts_filename: str
    history_filename: str
    statement_capacity: int
    withdrawal_limit: Decimal
    pin_attempts: int
    log_level: str
    log_dir: Path

    @property
    def accounts_path(self) -> Path:
        """Get the full account store path (data_dir/accounts_filename)."""
        return self.data_dir / self.accounts_filename

    @property
    def history_path(self) -> Path:
        """Get the full history log path (data_dir/history_filename)."""
        return self.data_dir / self.history_filename

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        base_dir = Path.home() / "data" / "atm"
        return cls(
            base_dir=base_dir,
            data_dir=base_dir / "data",
            accounts_filename="accounts.csv",
            history_filename="transaction_history.csv",
            statement_capacity=STATEMENT_CAPACITY,
            withdrawal_limit=WITHDRAWAL_LIMIT,
            pin_attempts=PIN_ATTEMPTS,
            log_level="INFO",
            log_dir=base_dir / "logs",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "atm.toml"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    # If config doesn't exist, create it with defaults
    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    # Parse with defaults for any missing values
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "atm"))

    storage_config = data.get("storage", {})
    data_dir = Path(storage_config.get("data_dir", base_dir / "data"))
    accounts_filename = storage_config.get("accounts_filename", "accounts.csv")
    history_filename = storage_config.get(
        "history_filename", "transaction_history.csv"
    )

    policy_config = data.get("policy", {})
    statement_capacity = int(
        policy_config.get("statement_capacity", STATEMENT_CAPACITY)
    )
    # TOML floats would lose precision, so the limit is stored as a string
    withdrawal_limit = Decimal(
        str(policy_config.get("withdrawal_limit", WITHDRAWAL_LIMIT))
    )
    pin_attempts = int(policy_config.get("pin_attempts", PIN_ATTEMPTS))

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    return Config(
        base_dir=base_dir,
        data_dir=data_dir,
        accounts_filename=accounts_filename,
        history_filename=history_filename,
        statement_capacity=statement_capacity,
        withdrawal_limit=withdrawal_limit,
        pin_attempts=pin_attempts,
        log_level=log_level,
        log_dir=log_dir,
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "storage": {
            "data_dir": str(config.data_dir),
            "accounts_filename": config.accounts_filename,
            "history_filename": config.history_filename,
        },
        "policy": {
            "statement_capacity": config.statement_capacity,
            "withdrawal_limit": str(config.withdrawal_limit),
            "pin_attempts": config.pin_attempts,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
