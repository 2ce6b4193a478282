"""Core configuration data types.

This module defines the fundamental data structures used throughout the configuration
system, following the resolve-once, freeze-then-flow pattern.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, NamedTuple

from .schema import FIELD_ORDER

# --- Source Tracking Types ---

ConfigOrigin = Literal["programmatic", "env", "file", "default"]
SourceMap = Mapping[str, ConfigOrigin]

# --- Core Configuration Data ---


class ResolvedConfig(NamedTuple):
    """Configuration after resolution from all sources, before freezing.

    This represents the validated, merged result of combining programmatic overrides,
    environment variables, files, and defaults. It includes audit metadata for
    observability.
    """

    region: str | None
    aws_profile: str | None
    endpoint_url: str | None
    language_code: str
    follow_detected_language: bool
    syntax_preview_tokens: int
    concurrent: bool
    use_real_api: bool
    log_level: str

    # Audit metadata - tracks where each field value came from
    origin: SourceMap

    def to_frozen(self) -> "FrozenConfig":
        """Convert to the immutable configuration used at runtime.

        Returns:
            FrozenConfig with the same field values, excluding audit metadata.
        """
        return FrozenConfig(**{name: getattr(self, name) for name in FIELD_ORDER})

    def audit(self) -> str:
        """Generate a human-readable report showing the origin of each field.

        Returns:
            One ``field: origin:value`` line per field.
        """
        lines = []
        for field in FIELD_ORDER:
            if field not in self.origin:
                continue
            origin = self.origin[field]
            value = getattr(self, field)
            if origin == "env":
                value_display = f"env:COMPREHEND_{field.upper()}={value}"
            else:
                value_display = f"{origin}:{value}"
            lines.append(f"{field}: {value_display}")
        return "\n".join(lines)


@dataclass(frozen=True)
class FrozenConfig:
    """Immutable configuration handed to the client factory and dispatcher.

    Any attempt to modify this object will raise an exception.
    """

    region: str | None = None
    aws_profile: str | None = None
    endpoint_url: str | None = None
    language_code: str = "en"
    follow_detected_language: bool = False
    syntax_preview_tokens: int = 5
    concurrent: bool = False
    use_real_api: bool = True
    log_level: str = "WARNING"
