"""Public API for the configuration system.

This module provides the main entry points for configuration resolution.
"""

from pathlib import Path
from typing import Any

from .resolver import ConfigResolver
from .types import ResolvedConfig

# Global resolver instance for efficient reuse
_resolver = ConfigResolver()


def resolve_config(
    programmatic: dict[str, Any] | None = None,
    *,
    profile: str | None = None,
    use_env_file: str | Path | None = None,
    project_root: Path | None = None,
) -> ResolvedConfig:
    """Resolve configuration from all sources with proper precedence.

    Precedence: Programmatic > Environment > Project file > Home file > Defaults

    Args:
        programmatic: Dictionary of programmatic overrides (highest precedence).
                     Only known configuration fields are used.
        profile: Profile name to load from configuration files. If None,
                uses COMPREHEND_PROFILE environment variable if set.
        use_env_file: Optional path to .env file to load before reading
                     environment variables.
        project_root: Directory to search for pyproject.toml. If None,
                     searches current directory and parents.

    Returns:
        ResolvedConfig with merged values and source tracking for audit.

    Raises:
        ValueError: If configuration validation fails or environment
                   variables contain invalid values.
        ConfigFileError: If the project configuration file is malformed.

    Example:
        config = resolve_config({"concurrent": True}, profile="staging")
        frozen = config.to_frozen()
    """
    return _resolver.resolve(
        programmatic=programmatic,
        profile=profile,
        use_env_file=use_env_file,
        project_root=project_root,
    )


def list_available_profiles(project_root: Path | None = None) -> dict[str, list[str]]:
    """List the profiles defined in the project and home files."""
    return _resolver.list_available_profiles(project_root)
