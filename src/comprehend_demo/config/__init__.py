"""Configuration management for the Comprehend demo.

Settings are resolved once from programmatic overrides, environment,
project and home files, then frozen and passed explicitly to the client
factory and the dispatcher.

Key components:
- ResolvedConfig: Post-resolution configuration with audit metadata
- FrozenConfig: Immutable configuration used at runtime
- SourceMap: Audit tracking of configuration value origins
"""

from .api import list_available_profiles, resolve_config
from .audit import SourceTracker, summarize_origins
from .file_loader import ConfigFileError, FileConfigLoader
from .resolver import ConfigResolver
from .schema import ComprehendSettings
from .types import ConfigOrigin, FrozenConfig, ResolvedConfig, SourceMap

__all__ = [  # noqa: RUF022
    # Main API
    "resolve_config",
    "list_available_profiles",
    # Core types
    "ResolvedConfig",
    "FrozenConfig",
    "SourceMap",
    "ConfigOrigin",
    # Advanced usage
    "ComprehendSettings",
    "ConfigResolver",
    "FileConfigLoader",
    "ConfigFileError",
    "SourceTracker",
    "summarize_origins",
]
