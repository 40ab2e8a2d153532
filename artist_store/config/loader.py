"""
Schema-driven configuration loader.

This module provides a ConfigLoader that uses the configuration schema
to load, validate, and merge configuration from multiple sources.
"""

import logging
import os
import typing
from typing import Dict, Any, Optional, Mapping
from argparse import ArgumentParser, Namespace

from dotenv import load_dotenv
from pydantic import ValidationError

from .schema import ConfigSchema


logger = logging.getLogger(__name__)


def _clean(value: Any) -> Any:
    """Strip strings; an explicitly empty string clears the value."""
    if isinstance(value, str):
        stripped = value.strip()
        return stripped if stripped else None
    return value


def _field_extra(field_info, key: str) -> Optional[Any]:
    return field_info.json_schema_extra.get(key) if field_info.json_schema_extra else None


class ConfigLoader:
    """Loads and validates configuration using a schema-driven approach."""

    @staticmethod
    def load(
        schema: type[ConfigSchema] = ConfigSchema,
        cli_args: Optional[Namespace] = None,
        cli_overrides: Optional[Mapping[str, Any]] = None,
        env_file: str = ".env.local",
    ) -> ConfigSchema:
        """
        Load configuration from all sources with precedence handling.

        Loading order (lowest to highest priority):
        1. Schema defaults
        2. .env.local file (if it exists)
        3. OS environment variables
        4. CLI arguments / overrides keyed by env var name (highest priority)

        Args:
            schema: The configuration schema class to use
            cli_args: Parsed CLI arguments (if available)
            cli_overrides: Overrides keyed by environment variable name
            env_file: dotenv file consulted before the OS environment

        Returns:
            Validated configuration instance

        Raises:
            ValueError: If configuration validation fails
        """
        config_dict: Dict[str, Any] = {}

        _load_from_dotenv_file(env_file)

        for field_name, field_info in schema.model_fields.items():
            env_var = _field_extra(field_info, "env_var")
            if env_var:
                env_value = os.getenv(env_var)
                if env_value is not None and env_value.strip():
                    config_dict[field_name] = env_value.strip()

        if cli_args:
            for field_name, field_info in schema.model_fields.items():
                cli_arg = _field_extra(field_info, "cli_arg")
                if cli_arg and hasattr(cli_args, cli_arg):
                    cli_value = getattr(cli_args, cli_arg)
                    if cli_value is not None:
                        config_dict[field_name] = _clean(cli_value)

        if cli_overrides:
            for field_name, field_info in schema.model_fields.items():
                env_var = _field_extra(field_info, "env_var")
                if env_var in cli_overrides and cli_overrides[env_var] is not None:
                    config_dict[field_name] = _clean(cli_overrides[env_var])

        try:
            config = schema(**config_dict)
            logger.debug("Configuration loaded and validated successfully")
            return config
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = error["loc"][0]
                msg = error["msg"]
                field_info = schema.model_fields.get(field)
                env_var = _field_extra(field_info, "env_var") if field_info else None
                errors.append(f"{env_var or str(field).upper()}: {msg}")

            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
            raise ValueError(error_msg) from e

    @staticmethod
    def add_schema_arguments(
        parser: ArgumentParser,
        schema: type[ConfigSchema] = ConfigSchema,
    ) -> ArgumentParser:
        """
        Add one ``--option`` per schema field that declares a ``cli_arg``.

        Args:
            parser: Parser to extend
            schema: The configuration schema class

        Returns:
            The same parser
        """
        for field_name, field_info in schema.model_fields.items():
            cli_arg = _field_extra(field_info, "cli_arg")
            if not cli_arg:
                continue

            arg_name = f"--{cli_arg.replace('_', '-')}"

            kwargs = {
                "help": field_info.description or f"Override {_field_extra(field_info, 'env_var') or field_name.upper()} env var",
                "default": None,  # Let the loader apply schema defaults
            }

            field_type = field_info.annotation
            if typing.get_origin(field_type) is typing.Union:
                non_none_args = [arg for arg in typing.get_args(field_type) if arg is not type(None)]
                if len(non_none_args) == 1:
                    field_type = non_none_args[0]

            if field_type == int:
                kwargs["type"] = int
            elif field_type == float:
                kwargs["type"] = float
            elif field_type == bool:
                choices = _field_extra(field_info, "cli_choices")
                if choices:
                    kwargs["choices"] = choices
                else:
                    kwargs["action"] = "store_true"

            parser.add_argument(arg_name, **kwargs)

        return parser


def _load_from_dotenv_file(env_file: str) -> None:
    """Load values from a dotenv file without overriding the OS environment."""
    if os.path.exists(env_file):
        load_dotenv(env_file, override=False)
        logger.debug(f"Loaded configuration from {env_file} file")
    else:
        logger.debug(f"{env_file} file not found, skipping")
