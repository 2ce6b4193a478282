"""Command line entry point.

Examples:
- comprehend-demo
- comprehend-demo --text "I love this!" --concurrent
- comprehend-demo --mock --file samples.txt
- comprehend-demo --show-config --profile staging
- comprehend-demo --list-profiles
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import TYPE_CHECKING, Any

from comprehend_demo.analysis import AnalysisDispatcher
from comprehend_demo.client import create_adapter
from comprehend_demo.config import (
    ConfigFileError,
    list_available_profiles,
    resolve_config,
)
from comprehend_demo.config.schema import LOG_LEVELS
from comprehend_demo.corpus import load_corpus
from comprehend_demo.exceptions import ConfigurationError
from comprehend_demo.telemetry import SimpleReporter, TelemetryContext, telemetry_enabled

if TYPE_CHECKING:
    from collections.abc import Sequence

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="comprehend-demo",
        description="Run AWS Comprehend text analyses over sample texts",
    )
    parser.add_argument(
        "--text",
        action="append",
        default=[],
        help="Text to analyze (repeatable); defaults to the built-in samples",
    )
    parser.add_argument(
        "--file",
        action="append",
        default=[],
        help="File with one text per line (repeatable)",
    )
    parser.add_argument("--profile", help="Configuration profile to load")
    parser.add_argument("--env-file", help="Optional .env file to load first")
    parser.add_argument("--region", help="AWS region override")
    parser.add_argument("--aws-profile", help="Named AWS credentials profile")
    parser.add_argument("--endpoint-url", help="Comprehend endpoint override")
    parser.add_argument(
        "--language-code", help="Language code for the language-bound operations"
    )
    parser.add_argument(
        "--follow-detected-language",
        action="store_true",
        default=None,
        help="Use the detected dominant language for the other operations",
    )
    parser.add_argument(
        "--concurrent",
        action="store_true",
        default=None,
        help="Issue the calls for each text concurrently",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use the offline mock adapter instead of AWS",
    )
    parser.add_argument("--log-level", help="Logging level (default WARNING)")
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the effective configuration and its sources, then exit",
    )
    parser.add_argument(
        "--list-profiles",
        action="store_true",
        help="List the profiles defined in the project and home files, then exit",
    )
    return parser


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Programmatic overrides for the flags the user actually passed."""
    candidates = {
        "region": args.region,
        "aws_profile": args.aws_profile,
        "endpoint_url": args.endpoint_url,
        "language_code": args.language_code,
        "follow_detected_language": args.follow_detected_language,
        "concurrent": args.concurrent,
        "log_level": args.log_level,
        "use_real_api": False if args.mock else None,
    }
    return {k: v for k, v in candidates.items() if v is not None}


def _early_log_level(args: argparse.Namespace) -> str:
    """Log level in effect while the configuration is being resolved."""
    for candidate in (args.log_level, os.getenv("COMPREHEND_LOG_LEVEL")):
        if candidate and candidate.upper() in LOG_LEVELS:
            return candidate.upper()
    return "WARNING"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo. Returns the process exit status.

    Raises:
        SystemExit: If the configuration, the AWS session or the input
            cannot be resolved.
    """
    args = build_parser().parse_args(argv)

    # Configured before resolution: the config loaders log warnings
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    root_logger = logging.getLogger()
    root_logger.setLevel(_early_log_level(args))

    if args.list_profiles:
        for source, names in list_available_profiles().items():
            print(f"{source}: {', '.join(names) or '-'}")  # noqa: T201
        return 0

    try:
        resolved = resolve_config(
            _overrides(args), profile=args.profile, use_env_file=args.env_file
        )
    except (ValueError, ConfigFileError) as e:
        raise SystemExit(f"Failed to load configuration: {e}") from e

    root_logger.setLevel(resolved.log_level)

    if args.show_config:
        print(resolved.audit())  # noqa: T201
        return 0

    config = resolved.to_frozen()
    try:
        adapter = create_adapter(config)
    except ConfigurationError as e:
        raise SystemExit(f"Failed to load AWS config: {e}") from e

    try:
        corpus = load_corpus(args.text, args.file)
    except (OSError, ValueError) as e:
        raise SystemExit(f"Failed to read input: {e}") from e

    reporter = SimpleReporter() if telemetry_enabled() else None
    telemetry = TelemetryContext(reporter) if reporter else None
    AnalysisDispatcher(adapter, config, telemetry=telemetry).run(corpus)

    if reporter is not None:
        print(reporter.get_report(), file=sys.stderr)  # noqa: T201
    return 0
