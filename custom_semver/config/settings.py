"""
Settings
Configuration management for custom-semver.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


def get_log_level(environment: str) -> str:
    """
    Get the log level.

    Priority:
    1. CUSTOM_SEMVER_LOG_LEVEL env var (explicit override)
    2. INFO in production, DEBUG otherwise
    """
    explicit_level = os.getenv("CUSTOM_SEMVER_LOG_LEVEL")
    if explicit_level:
        return explicit_level.upper()
    return "INFO" if environment == "production" else "DEBUG"


@dataclass
class Config:
    """Library configuration."""
    environment: str = "development"
    log_level: str = "DEBUG"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


class ConfigManager:
    """Configuration manager - loads and provides config."""

    _instance: Optional["ConfigManager"] = None

    def __init__(self):
        self._config: Optional[Config] = None

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def load(self) -> Config:
        """Load configuration from environment (and a .env file, if any)."""
        load_dotenv()
        env = os.getenv("ENVIRONMENT", "development")
        self._config = Config(
            environment=env,
            log_level=get_log_level(env),
        )
        return self._config

    def get(self) -> Config:
        """Get current configuration."""
        if self._config is None:
            # Create default config if not loaded
            self._config = Config()
        return self._config
