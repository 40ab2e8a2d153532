"""
Environment configuration management module.

This module provides the Env container that loads, validates, and serves
all configuration values for the application.
"""

from __future__ import annotations

import logging
from argparse import Namespace
from dataclasses import dataclass
from typing import Mapping, Optional

from pydantic import ValidationError

from .schema import ConfigSchema
from .loader import ConfigLoader

logger = logging.getLogger(__name__)

# Module-level singleton instance
_ENV: Optional["Env"] = None


class ConfigError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass(frozen=True)
class Env:
    """Immutable configuration container."""

    DATABASE_URL: str
    DB_POOL_SIZE: int = 4
    DB_MAX_OVERFLOW: int = 8
    DB_CONNECTION_TIMEOUT: int = 30
    ATOMIC_UPDATES: bool = False

    @staticmethod
    def load(
        cli_args: Optional[Namespace] = None,
        cli_overrides: Optional[Mapping[str, str]] = None,
    ) -> "Env":
        """
        Load configuration from all sources with precedence handling.

        Args:
            cli_args: Parsed CLI arguments
            cli_overrides: Optional mapping of values keyed by env var name

        Returns:
            Configured Env instance

        Raises:
            ConfigError: If required fields are missing or invalid
        """
        global _ENV

        try:
            config = ConfigLoader.load(
                schema=ConfigSchema,
                cli_args=cli_args,
                cli_overrides=cli_overrides,
            )
        except ValueError as e:
            raise ConfigError(str(e)) from e

        _ENV = Env._from_schema(config)
        logger.debug("Environment configuration loaded successfully")
        return _ENV

    @staticmethod
    def current() -> "Env":
        """
        Return the globally-initialized Env instance.

        Raises:
            ConfigError: If Env.load() has not been called yet
        """
        if _ENV is None:
            raise ConfigError("Environment not initialized. Call Env.load() first.")
        return _ENV

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Env":
        """
        Create Env instance from mapping (useful for testing).

        Values are validated with the same schema used by ``load``.

        Raises:
            ConfigError: If required fields are missing or invalid
        """
        if not mapping.get("DATABASE_URL"):
            raise ConfigError("Missing required configuration: DATABASE_URL")

        values = {
            field_name: mapping[field_info.json_schema_extra["env_var"]]
            for field_name, field_info in ConfigSchema.model_fields.items()
            if field_info.json_schema_extra
            and mapping.get(field_info.json_schema_extra["env_var"]) is not None
        }

        try:
            config = ConfigSchema(**values)
        except ValidationError as e:
            raise ConfigError(str(e)) from e

        return cls._from_schema(config)

    @classmethod
    def _from_schema(cls, config: ConfigSchema) -> "Env":
        return cls(
            DATABASE_URL=config.database_url,
            DB_POOL_SIZE=config.pool_size,
            DB_MAX_OVERFLOW=config.max_overflow,
            DB_CONNECTION_TIMEOUT=config.connection_timeout,
            ATOMIC_UPDATES=config.atomic_updates,
        )

    def to_dict(self) -> dict:
        return {
            "DATABASE_URL": self.DATABASE_URL,
            "DB_POOL_SIZE": self.DB_POOL_SIZE,
            "DB_MAX_OVERFLOW": self.DB_MAX_OVERFLOW,
            "DB_CONNECTION_TIMEOUT": self.DB_CONNECTION_TIMEOUT,
            "ATOMIC_UPDATES": self.ATOMIC_UPDATES,
        }

    def mask(self) -> dict:
        """Return masked version for safe logging (hides sensitive values)."""
        masked = self.to_dict()
        masked["DATABASE_URL"] = "***" if self.DATABASE_URL else None
        return masked
