"""Configuration resolution with precedence handling.

This module implements the core resolution algorithm that merges configuration
from multiple sources according to the documented precedence order:
Programmatic > Environment > Project file > Home file > Defaults
"""

import logging
import os
from pathlib import Path
from typing import Any

from .audit import SourceTracker, summarize_origins
from .env_loader import EnvironmentConfigLoader
from .file_loader import ConfigFileError, FileConfigLoader
from .schema import FIELD_ORDER, ComprehendSettings
from .types import ResolvedConfig

log = logging.getLogger(__name__)

PROFILE_ENV = "COMPREHEND_PROFILE"


def _schema_defaults() -> dict[str, Any]:
    # Read defaults from the field definitions; instantiating the settings
    # class here would also pull in the environment.
    return {
        name: ComprehendSettings.model_fields[name].get_default(
            call_default_factory=True
        )
        for name in FIELD_ORDER
    }


class ConfigResolver:
    """Resolves configuration from multiple sources with proper precedence."""

    def __init__(self) -> None:
        """Initialize the configuration resolver."""
        self.file_loader = FileConfigLoader()
        self.env_loader = EnvironmentConfigLoader()

    def resolve(
        self,
        programmatic: dict[str, Any] | None = None,
        *,
        profile: str | None = None,
        use_env_file: str | Path | None = None,
        project_root: Path | None = None,
    ) -> ResolvedConfig:
        """Resolve configuration from all sources with proper precedence.

        Args:
            programmatic: Programmatic overrides (highest precedence)
            profile: Profile name to load from files
            use_env_file: Optional .env file to load
            project_root: Directory to search for pyproject.toml

        Returns:
            ResolvedConfig with merged values and source tracking.

        Raises:
            ValueError: If validation fails or environment values are invalid.
            ConfigFileError: If the project configuration file is malformed.
        """
        source_tracker = SourceTracker()
        merged_config: dict[str, Any] = {}

        if profile is None:
            profile = os.getenv(PROFILE_ENV)

        # Step 1: Start with schema defaults
        defaults = _schema_defaults()
        merged_config.update(defaults)
        source_tracker.set_multiple(defaults, "default")

        # Step 2: Home file configuration (errors are non-fatal)
        try:
            home_config = self.file_loader.load_home_config(profile=profile)
        except ConfigFileError as e:
            log.warning("Ignoring home configuration: %s", e)
            home_config = {}
        self._apply(merged_config, source_tracker, home_config, "file")

        # Step 3: Project file configuration
        try:
            project_config = self.file_loader.load_project_config(
                project_root=project_root, profile=profile
            )
        except ConfigFileError:
            # A malformed base file is fatal; a profile that only lives in
            # the home file is not.
            if profile is None:
                raise
            project_config = {}
        self._apply(merged_config, source_tracker, project_config, "file")

        # Step 4: Environment variables
        try:
            env_config = self.env_loader.load_env_config(env_file=use_env_file)
        except (ValueError, FileNotFoundError) as e:
            raise ValueError(f"Environment configuration error: {e}") from e
        self._apply(merged_config, source_tracker, env_config, "env")

        # Step 5: Programmatic overrides (highest precedence)
        if programmatic:
            self._apply(merged_config, source_tracker, programmatic, "programmatic")

        # Step 6: Validate the final configuration
        try:
            final_config = ComprehendSettings(**merged_config).to_dict()
        except Exception as e:
            raise ValueError(f"Configuration validation failed: {e}") from e

        source_map = source_tracker.get_source_map()
        log.debug("Resolved configuration origins: %s", summarize_origins(source_map))
        return ResolvedConfig(**final_config, origin=source_map)

    @staticmethod
    def _apply(
        merged: dict[str, Any],
        tracker: SourceTracker,
        values: dict[str, Any],
        origin: Any,
    ) -> None:
        for field, value in values.items():
            if field in merged:  # Only override known fields
                merged[field] = value
                tracker.set_origin(field, origin)

    def list_available_profiles(
        self, project_root: Path | None = None
    ) -> dict[str, list[str]]:
        """List all available profiles from project and home files."""
        return self.file_loader.list_available_profiles(project_root)
