"""Configuration schema and validation using Pydantic.

This module defines the settings schema that validates and coerces configuration
values from various sources (environment, files, programmatic) into the correct
types with proper defaults.
"""

import logging
import re
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Comprehend language codes: "en", "es", ..., plus "zh-TW"
_LANGUAGE_CODE_RE = re.compile(r"^[a-z]{2}(-[A-Z]{2})?$")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ComprehendSettings(BaseSettings):
    """Pydantic settings schema for the Comprehend demo.

    This handles validation, type coercion, and default values for all
    configuration fields. It integrates with environment variables using
    the COMPREHEND_ prefix. AWS credentials are deliberately absent: they
    are resolved by boto3's own chain.
    """

    model_config = SettingsConfigDict(
        env_prefix="COMPREHEND_",
        env_file=None,  # Only used when explicitly requested
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- AWS endpoint selection ---

    region: str | None = Field(
        default=None,
        description="AWS region; None defers to the AWS resolution chain",
    )

    aws_profile: str | None = Field(
        default=None,
        description="Named profile in the shared AWS credentials/config files",
    )

    endpoint_url: str | None = Field(
        default=None,
        description="Endpoint override for the Comprehend service",
    )

    # --- Analysis behaviour ---

    language_code: str = Field(
        default="en",
        description="Language code sent to the language-bound operations",
    )

    follow_detected_language: bool = Field(
        default=False,
        description="Use the detected dominant language instead of language_code",
    )

    syntax_preview_tokens: int = Field(
        default=5,
        description="Number of syntax tokens shown per text",
        ge=0,
    )

    concurrent: bool = Field(
        default=False,
        description="Issue the six calls for a text concurrently",
    )

    use_real_api: bool = Field(
        default=True,
        description="Call AWS; False selects the offline mock adapter",
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level used by the command line entry point",
    )

    # --- Validation Rules ---

    @field_validator("language_code")
    @classmethod
    def check_language_code(cls, v: str) -> str:
        """Reject values that cannot be a Comprehend language code."""
        if not _LANGUAGE_CODE_RE.match(v):
            raise ValueError(
                f"Invalid language_code: {v!r}. Expected e.g. 'en' or 'zh-TW'"
            )
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v: Any) -> str:
        """Accept level names in any case, or numeric logging levels."""
        if isinstance(v, int):
            v = logging.getLevelName(v)
        if isinstance(v, str) and v.upper() in LOG_LEVELS:
            return v.upper()
        raise ValueError(f"Invalid log_level: {v}. Must be one of: {LOG_LEVELS}")

    @field_validator("region", "aws_profile", "endpoint_url", mode="before")
    @classmethod
    def blank_is_none(cls, v: Any) -> Any:
        """Treat empty strings (e.g. ``COMPREHEND_REGION=``) as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary suitable for SourceMap annotation.

        Returns:
            Dictionary with field names as keys and resolved values.
        """
        return {name: getattr(self, name) for name in FIELD_ORDER}


# Display and resolution order of the settings fields
FIELD_ORDER: tuple[str, ...] = (
    "region",
    "aws_profile",
    "endpoint_url",
    "language_code",
    "follow_detected_language",
    "syntax_preview_tokens",
    "concurrent",
    "use_real_api",
    "log_level",
)
