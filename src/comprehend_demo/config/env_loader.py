"""Environment variable configuration loading.

This module handles loading configuration from environment variables with
the COMPREHEND_ prefix, including optional .env file support and type coercion.
AWS_* variables are not read here; boto3 consumes them directly.
"""

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .schema import FIELD_ORDER, ComprehendSettings

ENV_PREFIX = "COMPREHEND_"

# COMPREHEND_<FIELD> for every settings field
ENV_VARS: dict[str, str] = {f"{ENV_PREFIX}{name.upper()}": name for name in FIELD_ORDER}


class EnvironmentConfigLoader:
    """Loads configuration from COMPREHEND_* environment variables."""

    def load_env_config(self, env_file: str | Path | None = None) -> dict[str, Any]:
        """Load configuration from environment variables.

        Args:
            env_file: Optional path to a .env file. Its values are loaded into
                the environment first, without overriding variables that are
                already set.

        Returns:
            Dictionary of configuration values found in environment.
            Only includes fields that are actually set (not defaults).

        Raises:
            FileNotFoundError: If ``env_file`` does not exist.
            ValueError: If environment variables contain invalid values.
        """
        if env_file:
            self._load_env_file(env_file)

        env_values = {
            field: os.environ[var] for var, field in ENV_VARS.items() if var in os.environ
        }
        if not env_values:
            return {}

        try:
            settings = ComprehendSettings(**env_values)
        except Exception as e:
            env_var_list = [
                f"{var}={os.environ[var]}"
                for var, field in ENV_VARS.items()
                if field in env_values
            ]
            raise ValueError(
                f"Invalid environment variable values: {', '.join(env_var_list)}. "
                f"Error: {e}"
            ) from e

        # Return only the fields that were actually set in environment
        return {field: getattr(settings, field) for field in env_values}

    def _load_env_file(self, env_file: str | Path) -> None:
        env_path = Path(env_file)
        if not env_path.exists():
            raise FileNotFoundError(f"Environment file not found: {env_path}")
        load_dotenv(env_path, override=False, encoding="utf-8")
