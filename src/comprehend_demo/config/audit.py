"""Configuration source tracking.

This module records where each configuration value originated during
resolution so that ``--show-config`` can explain the effective settings.
"""

from typing import Any

from .types import ConfigOrigin, SourceMap


class SourceTracker:
    """Tracks the origin of configuration values during resolution."""

    def __init__(self) -> None:
        """Initialize an empty source tracker."""
        self._origins: dict[str, ConfigOrigin] = {}

    def set_origin(self, field: str, origin: ConfigOrigin) -> None:
        """Record the origin of a configuration field."""
        self._origins[field] = origin

    def set_multiple(self, fields: dict[str, Any], origin: ConfigOrigin) -> None:
        """Record the origin for multiple fields at once."""
        for field in fields:
            self._origins[field] = origin

    def get_source_map(self) -> SourceMap:
        """Get the current source map.

        Returns:
            A copy of the mapping of field names to their origins.
        """
        return dict(self._origins)


def summarize_origins(source_map: SourceMap) -> dict[str, int]:
    """Count how many fields came from each origin (e.g. ``{"env": 3}``)."""
    counts: dict[str, int] = {}
    for origin in source_map.values():
        counts[origin] = counts.get(origin, 0) + 1
    return counts
