"""Base services container for dependency injection."""

from config import Config


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to point them at test storage.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        self.config = config

        # Lazy import to avoid circular dependencies
        from services.accounts import AccountService

        self.accounts = AccountService(config)
