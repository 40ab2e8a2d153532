"""
Configuration schema definition using Pydantic.

This module defines the declarative configuration schema that serves as
the single source of truth for all configuration in the application.
"""

from typing import Any
from pydantic import BaseModel, Field, field_validator

from ..constants import (
    DEFAULT_POOL_SIZE,
    DEFAULT_MAX_OVERFLOW,
    DEFAULT_CONNECTION_TIMEOUT,
)


class ConfigSchema(BaseModel):
    """
    Declarative configuration schema.

    Each field can be set via environment variables or CLI arguments.
    """

    database_url: str = Field(
        ...,
        description="Database connection URL",
        json_schema_extra={
            "env_var": "DATABASE_URL",
            "cli_arg": "db_url",
            "sensitive": True,
        }
    )

    pool_size: int = Field(
        DEFAULT_POOL_SIZE,
        ge=1,
        description="Number of pooled database connections",
        json_schema_extra={
            "env_var": "DB_POOL_SIZE",
            "cli_arg": "pool_size",
        }
    )

    max_overflow: int = Field(
        DEFAULT_MAX_OVERFLOW,
        ge=0,
        description="Extra connections allowed beyond the pool size",
        json_schema_extra={
            "env_var": "DB_MAX_OVERFLOW",
            "cli_arg": "max_overflow",
        }
    )

    connection_timeout: int = Field(
        DEFAULT_CONNECTION_TIMEOUT,
        ge=1,
        description="Seconds to wait for a pooled connection",
        json_schema_extra={
            "env_var": "DB_CONNECTION_TIMEOUT",
            "cli_arg": "connection_timeout",
        }
    )

    atomic_updates: bool = Field(
        False,
        description="Run artist profile updates in a single transaction",
        json_schema_extra={
            "env_var": "ATOMIC_UPDATES",
            "cli_arg": "atomic_updates",
            "cli_choices": ["true", "false"],
        }
    )

    @field_validator('database_url')
    @classmethod
    def check_database_url(cls, v: str) -> str:
        """Reject URLs that are not PostgreSQL connection strings."""
        from ..database.config import validate_database_url

        if not validate_database_url(v):
            raise ValueError("must be a postgresql:// URL with user, host and database name")
        return v

    @field_validator('atomic_updates', mode='before')
    @classmethod
    def parse_bool(cls, v: Any) -> bool:
        """Parse boolean from string values."""
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            v_lower = v.strip().lower()
            if v_lower in ('1', 'true', 'yes', 'on'):
                return True
            elif v_lower in ('0', 'false', 'no', 'off'):
                return False
            else:
                raise ValueError(f"Invalid boolean value: {v}")
        return bool(v)

    model_config = {
        "validate_assignment": True,
        "extra": "forbid"
    }
