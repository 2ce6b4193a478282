"""AWS session and Comprehend client construction.

Credentials and region come from boto3's standard resolution chain
(environment, shared credential/config files, container or instance role).
This module only checks that the chain produced something usable and turns
the answer into a `ComprehendAdapter`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ProfileNotFound

from comprehend_demo.adapters import (
    BotoComprehendAdapter,
    ComprehendAdapter,
    MockComprehendAdapter,
)
from comprehend_demo.exceptions import ConfigurationError

if TYPE_CHECKING:
    from botocore.client import BaseClient

    from comprehend_demo.config import FrozenConfig

log = logging.getLogger(__name__)

SERVICE_NAME = "comprehend"
USER_AGENT_EXTRA = "comprehend-demo"


def build_session(config: FrozenConfig) -> boto3.Session:
    """Create a boto3 session and verify credentials and region resolve.

    Raises:
        ConfigurationError: If the profile is unknown, no credentials are
            found, or no region is configured.
    """
    try:
        session = boto3.Session(
            profile_name=config.aws_profile, region_name=config.region
        )
        credentials = session.get_credentials()
    except ProfileNotFound as e:
        raise ConfigurationError(str(e)) from e
    except BotoCoreError as e:
        raise ConfigurationError(f"Unable to resolve AWS credentials: {e}") from e

    if credentials is None:
        raise ConfigurationError(
            "Unable to locate AWS credentials. Set AWS_ACCESS_KEY_ID/"
            "AWS_SECRET_ACCESS_KEY, configure a shared profile, or attach a role."
        )
    if not session.region_name:
        raise ConfigurationError(
            "No AWS region configured. Set AWS_DEFAULT_REGION, COMPREHEND_REGION, "
            "or a region in the selected profile."
        )

    log.debug(
        "Resolved AWS session (region=%s, profile=%s, credentials=%s)",
        session.region_name,
        session.profile_name,
        credentials.method,
    )
    return session


def create_comprehend_client(
    config: FrozenConfig, session: boto3.Session | None = None
) -> BaseClient:
    """Build the boto3 ``comprehend`` client. No network traffic happens here.

    Raises:
        ConfigurationError: If the session cannot be built or botocore
            rejects ``config.endpoint_url``.
    """
    session = session or build_session(config)
    try:
        return session.client(
            SERVICE_NAME,
            endpoint_url=config.endpoint_url,
            config=BotoConfig(user_agent_extra=USER_AGENT_EXTRA),
        )
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid endpoint_url {config.endpoint_url!r}: {e}"
        ) from e


def create_adapter(config: FrozenConfig) -> ComprehendAdapter:
    """Return the adapter selected by ``config.use_real_api``.

    Raises:
        ConfigurationError: If the real API is requested and the AWS
            configuration cannot be resolved.
    """
    if not config.use_real_api:
        log.info("Using offline mock adapter")
        return MockComprehendAdapter(language_code=config.language_code)
    return BotoComprehendAdapter(create_comprehend_client(config))
