"""AWS Comprehend text-analysis demo.

Resolves configuration, builds one Comprehend client and runs language,
sentiment, entity, key-phrase, PII and syntax analysis over a small corpus.
"""

import importlib.metadata
import logging

from comprehend_demo.adapters import (
    BotoComprehendAdapter,
    ComprehendAdapter,
    MockComprehendAdapter,
)
from comprehend_demo.analysis import (
    OPERATIONS,
    AnalysisDispatcher,
    AnalysisOperation,
    OperationKind,
)
from comprehend_demo.client import build_session, create_adapter
from comprehend_demo.config import FrozenConfig, ResolvedConfig, resolve_config
from comprehend_demo.core.types import (
    Failure,
    OperationOutcome,
    Result,
    Success,
    TextReport,
)
from comprehend_demo.corpus import SAMPLE_TEXTS, load_corpus
from comprehend_demo.exceptions import (
    AnalysisError,
    ComprehendDemoError,
    ConfigurationError,
    MalformedResponseError,
)

try:
    __version__ = importlib.metadata.version("comprehend-demo")
except importlib.metadata.PackageNotFoundError:
    __version__ = "development"

# Prevent 'No handler found' warnings when the host app configures no logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Dispatcher
    "AnalysisDispatcher",
    "AnalysisOperation",
    "OperationKind",
    "OPERATIONS",
    # Client handle
    "ComprehendAdapter",
    "BotoComprehendAdapter",
    "MockComprehendAdapter",
    "build_session",
    "create_adapter",
    # Configuration
    "resolve_config",
    "ResolvedConfig",
    "FrozenConfig",
    # Corpus
    "SAMPLE_TEXTS",
    "load_corpus",
    # Results
    "Result",
    "Success",
    "Failure",
    "OperationOutcome",
    "TextReport",
    # Exceptions
    "ComprehendDemoError",
    "ConfigurationError",
    "AnalysisError",
    "MalformedResponseError",
]
