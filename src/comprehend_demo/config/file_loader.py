"""File-based configuration loading with profile support.

This module handles loading configuration from TOML files, supporting both
project-level (pyproject.toml) and home-level (~/.config/comprehend_demo.toml)
configuration with named profiles.
"""

import os
from pathlib import Path
import tomllib
from typing import Any

TOOL_SECTION = "comprehend_demo"
HOME_CONFIG_ENV = "COMPREHEND_DEMO_CONFIG_HOME"


class ConfigFileError(Exception):
    """Raised when configuration file loading fails."""

    def __init__(
        self, file_path: Path, message: str, cause: Exception | None = None
    ) -> None:
        """Initialize with file path, message, and optional cause.

        Args:
            file_path: The file that failed to load
            message: Human-readable error message
            cause: The underlying exception that caused the failure
        """
        self.file_path = file_path
        self.message = message
        self.cause = cause
        super().__init__(f"Config file error in {file_path}: {message}")


class FileConfigLoader:
    """Loads configuration from TOML files with profile support."""

    def load_project_config(
        self, project_root: Path | None = None, profile: str | None = None
    ) -> dict[str, Any]:
        """Load configuration from pyproject.toml in the project root.

        Args:
            project_root: Directory to search for pyproject.toml. If None,
                         searches current directory and parents.
            profile: Optional profile name to load from
                    [tool.comprehend_demo.profiles.<name>].
                    If None, loads from [tool.comprehend_demo]

        Returns:
            Dictionary of configuration values from the file.
            Empty dict if file doesn't exist or has no comprehend_demo section.

        Raises:
            ConfigFileError: If file exists but cannot be parsed, or the
                profile is missing.
        """
        pyproject_path = self._find_pyproject_toml(project_root)
        if not pyproject_path:
            return {}

        data = self._read_toml(pyproject_path)
        section = data.get("tool", {}).get(TOOL_SECTION, {})
        if not section:
            return {}
        return self._select_profile(pyproject_path, section, profile)

    def load_home_config(self, profile: str | None = None) -> dict[str, Any]:
        """Load configuration from the home configuration file.

        Args:
            profile: Optional profile name to load from [profiles.<name>]
                    If None, loads from the root level.

        Returns:
            Dictionary of configuration values from the home file.
            Empty dict if file doesn't exist.

        Raises:
            ConfigFileError: If file exists but cannot be parsed, or the
                profile is missing.
        """
        home_config_path = self._get_home_config_path()
        if not home_config_path.exists():
            return {}

        data = self._read_toml(home_config_path)
        return self._select_profile(home_config_path, data, profile)

    def list_available_profiles(
        self, project_root: Path | None = None
    ) -> dict[str, list[str]]:
        """List all available profiles from project and home files.

        Returns:
            Dictionary with 'project' and 'home' keys containing lists of profile names.
        """
        profiles: dict[str, list[str]] = {"project": [], "home": []}

        pyproject_path = self._find_pyproject_toml(project_root)
        if pyproject_path:
            try:
                data = self._read_toml(pyproject_path)
            except ConfigFileError:
                data = {}
            section = data.get("tool", {}).get(TOOL_SECTION, {})
            profiles["project"] = list(section.get("profiles", {}))

        home_config_path = self._get_home_config_path()
        if home_config_path.exists():
            try:
                data = self._read_toml(home_config_path)
            except ConfigFileError:
                data = {}
            profiles["home"] = list(data.get("profiles", {}))

        return profiles

    def _read_toml(self, path: Path) -> dict[str, Any]:
        try:
            with path.open(mode="rb") as f:
                return tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigFileError(path, f"Failed to parse TOML: {e}", cause=e) from e

    def _select_profile(
        self, path: Path, section: dict[str, Any], profile: str | None
    ) -> dict[str, Any]:
        if profile:
            profiles = section.get("profiles", {})
            if profile not in profiles:
                raise ConfigFileError(
                    path,
                    f"Profile '{profile}' not found. Available profiles: {list(profiles)}",
                )
            return dict(profiles[profile])
        # Base configuration, excluding the profiles table
        config = dict(section)
        config.pop("profiles", None)
        return config

    def _find_pyproject_toml(self, start_dir: Path | None = None) -> Path | None:
        """Find pyproject.toml by searching up the directory tree."""
        current = Path(start_dir or Path.cwd()).resolve()

        while current != current.parent:  # Stop at filesystem root
            pyproject_path = current / "pyproject.toml"
            if pyproject_path.exists():
                return pyproject_path
            current = current.parent

        return None

    def _get_home_config_path(self) -> Path:
        override = os.getenv(HOME_CONFIG_ENV)
        if override:
            return Path(override)
        return Path.home() / ".config" / "comprehend_demo.toml"
